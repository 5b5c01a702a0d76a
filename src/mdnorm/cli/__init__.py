"""Command line entry points for mdnorm."""
from .main import app

__all__ = ["app"]
