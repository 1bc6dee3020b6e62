"""Allow ``python -m table2dsv``."""

from .cli import app

app(prog_name="table2dsv")
