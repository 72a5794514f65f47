"""Allow ``python -m release_helper``."""

from release_helper.cli import app

app()
