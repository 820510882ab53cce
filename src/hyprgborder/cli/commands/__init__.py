"""CLI commands for hyprgborder."""

from .border import border_group
from .env import env
from .run import run

__all__ = ["border_group", "env", "run"]
