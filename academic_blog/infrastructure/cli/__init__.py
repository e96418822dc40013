"""Command line entry point for the academic blog."""

from .blog_cli import main

__all__ = ["main"]
