"""Package version for mdnorm."""

__version__ = "0.1.0"
