"""Allow ``python -m accesshtml``."""

from accesshtml.cli import app

app()
