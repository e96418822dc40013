"""Domain layer for the academic blog.

This package contains the core logic for the site content and the
weight-decay tutorial, following Domain-Driven Design (DDD) principles.

The domain layer is pure Python (plus numpy) with no dependencies on
PyTorch, Jinja2, YAML parsing or any other infrastructure concern.
"""
