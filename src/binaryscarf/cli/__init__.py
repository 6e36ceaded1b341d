"""Command line interface for binaryscarf."""

from binaryscarf.cli.app import create_app
from binaryscarf.cli.main import main

__all__ = ["create_app", "main"]
