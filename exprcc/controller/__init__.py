"""Controller package: command-line driver"""

from .driver import main

__all__ = ["main"]
