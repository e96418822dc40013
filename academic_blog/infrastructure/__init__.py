"""Infrastructure layer for the academic blog.

This package contains implementations of domain interfaces
that interact with external systems (PyTorch, file system, Jinja2, CLI).
"""
