"""Infrastructure adapters for the blog.

These adapters implement domain interfaces using external libraries
like PyTorch, PyYAML, Jinja2 and Python-Markdown.
"""

from .file_content_repository import (
    ContentNotFoundError,
    FileContentRepository,
    FrontMatterError,
)
from .jinja_site_renderer import JinjaSiteRenderer, RenderError
from .torch_weight_decay_trainer import (
    TorchWeightDecayTrainer,
    TrainingError,
    TwoLayerPerceptron,
)

__all__ = [
    "ContentNotFoundError",
    "FileContentRepository",
    "FrontMatterError",
    "JinjaSiteRenderer",
    "RenderError",
    "TorchWeightDecayTrainer",
    "TrainingError",
    "TwoLayerPerceptron",
]
