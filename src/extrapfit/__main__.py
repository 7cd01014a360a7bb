"""Allow ``python -m extrapfit``."""

from extrapfit.cli.app import app

app()
