"""Allow ``python -m openiban``."""

from openiban.cli.main import app

app()
