"""Desktop host: tabbed window that drives the clock widget with Qt."""

from __future__ import annotations

import logging
import sys
from importlib import metadata

from PySide6.QtCore import QPointF, QSize, Qt, QtMsgType, QTimer, qInstallMessageHandler
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPen
from PySide6.QtWidgets import QApplication, QComboBox, QFormLayout, QMainWindow, QTabWidget, QWidget

from clockface_core import AppConfig, ClockWidget, load_config, resolve_style, save_config
from clockface_core.logging_setup import configure_logging, get_logger, install_crash_hooks, remove_crash_hooks
from clockface_renderer import Circle, Line, PaintStyle, Text, get_theme, list_themes

logger = get_logger("app")
qt_logger = get_logger("qt")


def _app_version() -> str:
    try:
        return metadata.version("clockface")
    except Exception:
        return "0.1.0"


class ClockView(QWidget):
    """Qt adapter around ClockWidget: Qt events in, QPainter calls out."""

    def __init__(self, config: AppConfig, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.config = config
        self.clock = ClockWidget(
            style=resolve_style(config),
            post_delayed=lambda delay_ms, callback: QTimer.singleShot(delay_ms, callback),
            invalidate=self.update,
            metrics=self._metrics,
            refresh_ms=config.clock.refresh_ms,
        )

    def _font(self, size: float) -> QFont:
        font = QFont(self.font())
        font.setPixelSize(max(1, int(round(size))))
        return font

    def _metrics(self, size: float) -> tuple[float, float]:
        fm = QFontMetricsF(self._font(size))
        return fm.ascent(), fm.descent()

    def sizeHint(self) -> QSize:
        width, height = self.clock.measure(density=self.config.window.density)
        return QSize(width, height)

    def resizeEvent(self, event) -> None:
        self.clock.set_size(self.width(), self.height())
        super().resizeEvent(event)

    def showEvent(self, event) -> None:
        self.clock.attach()
        super().showEvent(event)

    def hideEvent(self, event) -> None:
        self.clock.detach()
        super().hideEvent(event)

    def paintEvent(self, _event) -> None:
        primitives = self.clock.request_render()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            for p in primitives:
                if isinstance(p, Circle):
                    self._paint_circle(painter, p)
                elif isinstance(p, Line):
                    self._paint_line(painter, p)
                elif isinstance(p, Text):
                    self._paint_text(painter, p)
        finally:
            painter.end()

    @staticmethod
    def _paint_circle(painter: QPainter, c: Circle) -> None:
        color = QColor.fromRgba(c.color)
        if c.paint == PaintStyle.FILL:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(color)
        else:
            pen = QPen(color)
            pen.setWidthF(c.stroke_width)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QPointF(c.center.x, c.center.y), c.radius, c.radius)

    @staticmethod
    def _paint_line(painter: QPainter, line: Line) -> None:
        pen = QPen(QColor.fromRgba(line.color))
        pen.setWidthF(line.stroke_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(pen)
        painter.drawLine(QPointF(line.start.x, line.start.y), QPointF(line.end.x, line.end.y))

    def _paint_text(self, painter: QPainter, text: Text) -> None:
        font = self._font(text.size)
        font.setStretch(max(1, round(text.scale_x * 100)))
        font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, text.letter_spacing * text.size)
        advance = QFontMetricsF(font).horizontalAdvance(text.text)
        painter.setFont(font)
        painter.setPen(QColor.fromRgba(text.color))
        painter.drawText(QPointF(text.position.x - advance / 2, text.position.y), text.text)
        painter.setFont(font)
        painter.setPen(QColor.fromRgba(text.color))
        painter.drawText(QPointF(text.position.x - advance / 2, text.position.y), text.text)


class StylePanel(QWidget):
    def __init__(self, view: ClockView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.view = view
        self.themes = QComboBox(self)
        self.themes.addItems(list_themes())
        self.themes.setCurrentText(view.config.clock.theme)
        self.themes.currentTextChanged.connect(self._apply_theme)
        layout = QFormLayout(self)
        layout.addRow("Theme", self.themes)

    def _apply_theme(self, name: str) -> None:
        self.view.config.clock.theme = name
        self.view.clock.apply_style(get_theme(name))
        logger.info(f"theme changed to {name}", extra={"event": "theme_changed"})


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        self.config = config
        self.setWindowTitle(f"ClockFace {_app_version()}")

        self.clock_view = ClockView(config)
        self.tabs = QTabWidget(self)
        self.tabs.addTab(self.clock_view, "Clock")
        self.tabs.addTab(StylePanel(self.clock_view), "Style")
        self.setCentralWidget(self.tabs)
        self.resize(config.window.width, config.window.height)

        base_state = self.clock_view.clock.request_restore(config.state.saved)
        tab = base_state.get("tab") if isinstance(base_state, dict) else config.ui.last_tab
        if isinstance(tab, int) and 0 <= tab < self.tabs.count():
            self.tabs.setCurrentIndex(tab)

    def closeEvent(self, event) -> None:
        saved = self.clock_view.clock.request_save({"tab": self.tabs.currentIndex()})
        self.config.state.saved = saved.to_dict()
        self.config.ui.last_tab = self.tabs.currentIndex()
        self.config.window.width = self.width()
        self.config.window.height = self.height()
        try:
            save_config(self.config)
        except OSError as exc:
            logger.error(f"could not save settings: {exc}", extra={"event": "config_save_failed"})
        super().closeEvent(event)


_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def _qt_message(mode: QtMsgType, _context, message: str) -> None:
    qt_logger.log(_QT_LEVELS.get(mode, logging.WARNING), message, extra={"event": "qt_message"})


def run_gui() -> int:
    config = load_config()
    configure_logging(keep_files=config.logging.keep_log_files, level=config.logging.level)
    install_crash_hooks()
    qInstallMessageHandler(_qt_message)
    try:
        app = QApplication(sys.argv)
        app.setApplicationName("ClockFace")
        window = MainWindow(config)
        window.show()
        logger.info("window shown", extra={"event": "gui_started"})
        return int(app.exec())
    finally:
        qInstallMessageHandler(None)
        remove_crash_hooks()
