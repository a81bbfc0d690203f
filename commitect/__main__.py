"""Allow running as ``python -m commitect``."""

from commitect.cli import app

app()
