"""A tiny package that says hello."""

from greeter.main import GREETING, greet, main

__version__ = "0.1.0"

__all__ = ["GREETING", "greet", "main", "__version__"]
