"""CLI entrypoints for the ClockFace desktop app, snapshots, and saved state."""

from __future__ import annotations

import argparse
import json
import re
from dataclasses import asdict
from pathlib import Path

from clockface_core import ClockWidget, load_config, resolve_style, save_config
from clockface_core.logging_setup import configure_logging, get_logger
from clockface_renderer import TimeSample, format_color, get_theme, list_themes

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

logger = get_logger("cli")


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def parse_time(value: str) -> TimeSample:
    match = _TIME_RE.match(value.strip())
    if not match:
        raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {value!r}")
    hour, minute, second = int(match.group(1)), int(match.group(2)), int(match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        raise argparse.ArgumentTypeError(f"time out of range: {value!r}")
    return TimeSample(hour=hour, minute=minute, second=second)


def _build_widget(args: argparse.Namespace, metrics=None) -> ClockWidget:
    cfg = load_config()
    style = resolve_style(cfg) if args.theme is None else get_theme(args.theme)
    widget = ClockWidget(style=style, metrics=metrics)
    if cfg.state.saved and args.theme is None:
        widget.request_restore(cfg.state.saved)
    widget.set_size(args.size, args.size)
    return widget


def cmd_run(_args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui()


def cmd_render(args: argparse.Namespace) -> int:
    from clockface_renderer.raster import ClockRasterizer

    rasterizer = ClockRasterizer()
    widget = _build_widget(args, metrics=rasterizer.metrics)
    sample = args.time or TimeSample.now()
    primitives = widget.request_render(sample)
    image = rasterizer.rasterize(primitives, widget.viewport.width, widget.viewport.height)

    out = Path(args.out).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    image.save(out, format="PNG")
    logger.info(f"rendered {out}", extra={"event": "snapshot_rendered"})

    _print_json(
        {
            "path": str(out),
            "size": [widget.viewport.width, widget.viewport.height],
            "radius": widget.viewport.radius,
            "time": f"{sample.hour:02d}:{sample.minute:02d}:{sample.second:02d}",
            "primitives": len(primitives),
        }
    )
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    widget = _build_widget(args)
    primitives = widget.request_render(args.time or TimeSample.now())
    _print_json([p.to_dict() for p in primitives])
    return 0


def cmd_themes(_args: argparse.Namespace) -> int:
    _print_json(
        {name: {k: format_color(v) for k, v in asdict(get_theme(name)).items()} for name in list_themes()}
    )
    return 0


def cmd_state_show(_args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json({"saved": cfg.state.saved})
    return 0


def cmd_state_clear(_args: argparse.Namespace) -> int:
    cfg = load_config()
    cfg.state.saved = None
    path = save_config(cfg)
    _print_json({"cleared": True, "config": str(path)})
    return 0


def _add_face_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--size", type=int, default=240, help="Square canvas size in pixels")
    cmd.add_argument("--time", type=parse_time, default=None, help="Fixed wall-clock time HH:MM[:SS]")
    cmd.add_argument("--theme", default=None, help="Theme name (defaults to the configured style)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clockface", description="Analog clock widget and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run desktop app")
    run_cmd.set_defaults(func=cmd_run)

    render_cmd = sub.add_parser("render", help="Render a clock face snapshot to PNG")
    render_cmd.add_argument("--out", required=True, help="Output PNG path")
    _add_face_args(render_cmd)
    render_cmd.set_defaults(func=cmd_render)

    dump_cmd = sub.add_parser("dump", help="Print the draw primitives of one render pass")
    _add_face_args(dump_cmd)
    dump_cmd.set_defaults(func=cmd_dump)

    themes_cmd = sub.add_parser("themes", help="List built-in themes")
    themes_cmd.set_defaults(func=cmd_themes)

    state_cmd = sub.add_parser("state", help="Inspect saved widget state")
    state_sub = state_cmd.add_subparsers(dest="state_cmd", required=True)
    show_cmd = state_sub.add_parser("show", help="Print the saved widget state")
    show_cmd.set_defaults(func=cmd_state_show)
    clear_cmd = state_sub.add_parser("clear", help="Drop the saved widget state")
    clear_cmd.set_defaults(func=cmd_state_clear)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.logging.keep_log_files, console=False, level=cfg.logging.level)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
