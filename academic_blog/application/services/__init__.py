"""Application services for the blog.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .blog_application_service import BlogApplicationService, BuildReport

__all__ = [
    "BlogApplicationService",
    "BuildReport",
]
