"""Allow running dequarantine as ``python -m dequarantine``."""

from dequarantine.cli.main import app

app(prog_name="dequarantine")
