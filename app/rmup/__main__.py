"""Allow running rmup as ``python -m rmup``."""

from rmup.cli.main import app

app()
