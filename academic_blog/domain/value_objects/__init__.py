"""Value objects for the blog domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .document import INDEX_SLUG, Document, DocumentKind
from .front_matter import VALID_LAYOUTS, FrontMatter, parse_categories, parse_date
from .site_config import AuthorProfile, SiteConfig, SocialLink
from .synthetic_dataset import SyntheticDataset
from .training_config import TrainingConfig
from .training_result import LossRecord, TrainingResult, format_loss_line

__all__ = [
    "AuthorProfile",
    "Document",
    "DocumentKind",
    "FrontMatter",
    "INDEX_SLUG",
    "LossRecord",
    "SiteConfig",
    "SocialLink",
    "SyntheticDataset",
    "TrainingConfig",
    "TrainingResult",
    "VALID_LAYOUTS",
    "format_loss_line",
    "parse_categories",
    "parse_date",
]
