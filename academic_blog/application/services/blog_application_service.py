"""Blog Application Service.

Main application service that coordinates domain and infrastructure
for the tutorial run and the static site build.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from academic_blog.domain.interfaces import IContentRepository, ISiteRenderer
from academic_blog.domain.services import LossTrendAnalyzer, TutorialService
from academic_blog.domain.value_objects import (
    Document,
    DocumentKind,
    TrainingConfig,
    TrainingResult,
)

_LOGGER = logging.getLogger(__name__)

TRAINING_SECTION = "training"
COMPARISON_SECTION = "compare_weight_decay"


@dataclass(frozen=True)
class BuildReport:
    """Outcome of a site build.

    Attributes:
        output_dir: Site root that was written
        pages: Written HTML files, relative to output_dir
        assets: Copied asset files, relative to output_dir
        training_results: Training result per notebook slug
    """

    output_dir: Path
    pages: tuple[Path, ...]
    assets: tuple[Path, ...]
    training_results: dict[str, TrainingResult] = field(default_factory=dict)


class BlogApplicationService:
    """Application service for the blog.

    This service is the main entry point for all use cases.
    It orchestrates domain services and infrastructure adapters.
    """

    def __init__(
        self,
        content_repository: IContentRepository,
        renderer: ISiteRenderer,
        tutorial_service: TutorialService,
        trend_analyzer: LossTrendAnalyzer | None = None,
    ) -> None:
        """Initialize the blog application service.

        Args:
            content_repository: Content repository implementation
            renderer: Site renderer implementation
            tutorial_service: Service running the weight-decay tutorial
            trend_analyzer: Loss trend analyzer (optional)
        """
        self._content = content_repository
        self._renderer = renderer
        self._tutorial = tutorial_service
        self._trend_analyzer = trend_analyzer or LossTrendAnalyzer()

    async def run_tutorial(self, config: TrainingConfig | None = None) -> TrainingResult:
        """Run the tutorial training once.

        Args:
            config: Hyper-parameters, tutorial defaults when omitted

        Returns:
            The training result
        """
        result = await self._tutorial.run(config)
        if not self._trend_analyzer.is_decreasing(result.loss_history):
            _LOGGER.warning(
                "Loss did not decrease steadily (%d logged values, weight_decay=%g)",
                len(result.loss_history),
                result.weight_decay,
            )
        return result

    async def compare_weight_decay(
        self,
        weight_decays: Iterable[float],
        config: TrainingConfig | None = None,
    ) -> list[TrainingResult]:
        """Train once per weight decay value with the same seed.

        Args:
            weight_decays: Values to compare
            config: Base hyper-parameters

        Returns:
            One result per distinct value
        """
        results = await self._tutorial.compare(config or TrainingConfig(), weight_decays)
        for result in results:
            _LOGGER.info(
                "weight_decay=%g: train_mse=%.6f, validation_mse=%s, parameter_norm=%.4f",
                result.weight_decay,
                result.metrics.get("train_mse", result.final_loss),
                _format_optional(result.metrics.get("validation_mse")),
                result.parameter_norm,
            )
        return results

    async def build_site(
        self,
        output_dir: str | Path,
        include_drafts: bool = False,
    ) -> BuildReport:
        """Render every document and copy assets into output_dir.

        Notebook documents are executed first: the ``training`` section of
        their front matter overrides the default hyper-parameters, and the
        result is available to the body as ``training``.

        Args:
            output_dir: Directory to write the site to
            include_drafts: Whether to publish drafts

        Returns:
            BuildReport listing the written files
        """
        output_dir = Path(output_dir)
        site = self._content.load_site_config()
        documents = self._content.list_documents(include_drafts=include_drafts)

        _LOGGER.info("Building %d documents into %s", len(documents), output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        pages: list[Path] = []
        training_results: dict[str, TrainingResult] = {}

        for document in documents:
            context = {}
            if document.kind is DocumentKind.NOTEBOOK:
                context = await self._execute_notebook(document)
                training_results[document.slug] = context["training"]

            html = self._renderer.render_document(document, site, context)
            pages.append(self._write(output_dir, document.output_path, html))

        if not any(document.output_path == Path("index.html") for document in documents):
            posts = sorted(
                (document for document in documents if document.is_post),
                key=lambda document: (document.front_matter.date, document.slug),
                reverse=True,
            )
            html = self._renderer.render_index(posts, site)
            pages.append(self._write(output_dir, Path("index.html"), html))

        assets = []
        for source, relative in self._content.asset_paths():
            target = output_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            assets.append(relative)

        _LOGGER.info("Site built: %d pages, %d assets", len(pages), len(assets))
        return BuildReport(
            output_dir=output_dir,
            pages=tuple(pages),
            assets=tuple(assets),
            training_results=training_results,
        )

    async def _execute_notebook(self, document: Document) -> dict:
        """Run the training described by a notebook's front matter."""
        extra = document.front_matter.extra
        config = TrainingConfig.from_mapping(extra.get(TRAINING_SECTION))

        _LOGGER.info("Executing notebook %s", document.slug)
        context: dict = {"training": await self.run_tutorial(config)}

        weight_decays = extra.get(COMPARISON_SECTION)
        if weight_decays:
            context["comparison"] = await self.compare_weight_decay(weight_decays, config)

        return context

    @staticmethod
    def _write(output_dir: Path, relative: Path, html: str) -> Path:
        target = output_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        _LOGGER.debug("Wrote %s", target)
        return relative


def _format_optional(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.6f}"
