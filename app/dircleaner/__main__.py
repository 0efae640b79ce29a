"""Allow running dircleaner as ``python -m dircleaner``."""

from dircleaner.cli.main import app

app(prog_name="dircleaner")
