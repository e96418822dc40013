"""Domain services for the blog.

Services contain pure logic and operate on value objects.
"""

from .loss_trend_analyzer import LossTrendAnalyzer
from .synthetic_data_generator import SyntheticDataGenerator
from .tutorial_service import TutorialService

__all__ = [
    "LossTrendAnalyzer",
    "SyntheticDataGenerator",
    "TutorialService",
]
