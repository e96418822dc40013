"""Domain interfaces for the blog.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .content_repository import IContentRepository
from .regularized_trainer import IRegularizedTrainer
from .site_renderer import ISiteRenderer

__all__ = [
    "IContentRepository",
    "IRegularizedTrainer",
    "ISiteRenderer",
]
