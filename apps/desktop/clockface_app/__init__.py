"""ClockFace desktop host and command-line tools."""
