"""Pytest fixtures for integration tests.

This module wires the application service with the real adapters.
"""

from pathlib import Path

import pytest

from academic_blog.application.services import BlogApplicationService
from academic_blog.domain.services import TutorialService
from academic_blog.infrastructure.adapters import (
    FileContentRepository,
    JinjaSiteRenderer,
    TorchWeightDecayTrainer,
)


@pytest.fixture
def printed() -> list[str]:
    """Lines printed by the tutorial."""
    return []


@pytest.fixture
def blog_service(content_dir: Path, printed: list[str]) -> BlogApplicationService:
    """Application service over the bundled content."""
    return BlogApplicationService(
        content_repository=FileContentRepository(content_dir),
        renderer=JinjaSiteRenderer(),
        tutorial_service=TutorialService(TorchWeightDecayTrainer(), output=printed.append),
    )
