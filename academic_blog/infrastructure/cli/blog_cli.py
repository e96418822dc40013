"""Command line interface.

Runs the weight-decay tutorial and builds the static site.

Usage:

    academic-blog train --weight-decay 1e-4 --iterations 1000
    academic-blog compare --weight-decay 0 --weight-decay 1e-3 --weight-decay 1e-2
    academic-blog build --output _site
"""

import argparse
import asyncio
import logging
import os
import sys
from importlib import resources
from pathlib import Path
from typing import Callable, Sequence

from academic_blog.application.services import BlogApplicationService
from academic_blog.domain.services import TutorialService
from academic_blog.domain.value_objects import TrainingConfig, TrainingResult
from academic_blog.infrastructure.adapters import (
    ContentNotFoundError,
    FileContentRepository,
    FrontMatterError,
    JinjaSiteRenderer,
    RenderError,
    TorchWeightDecayTrainer,
    TrainingError,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONTENT_PATH = Path(str(resources.files("academic_blog") / "content"))


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable."""
    log_level = os.getenv("LOG_LEVEL", "info").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_service(
    content_path: str | Path,
    output: Callable[[str], None] | None = print,
) -> BlogApplicationService:
    """Wire the application service with its adapters."""
    tutorial = TutorialService(TorchWeightDecayTrainer(), output=output)
    return BlogApplicationService(
        content_repository=FileContentRepository(content_path),
        renderer=JinjaSiteRenderer(),
        tutorial_service=tutorial,
    )


def _add_training_arguments(parser: argparse.ArgumentParser) -> None:
    defaults = TrainingConfig()
    parser.add_argument("--input-dim", type=int, default=defaults.input_dim)
    parser.add_argument("--hidden-dim", type=int, default=defaults.hidden_dim)
    parser.add_argument("--output-dim", type=int, default=defaults.output_dim)
    parser.add_argument(
        "--num-samples",
        type=int,
        default=defaults.num_samples,
        help="Number of random training samples.",
    )
    parser.add_argument("--learning-rate", type=float, default=defaults.learning_rate)
    parser.add_argument("--iterations", type=int, default=defaults.iterations)
    parser.add_argument(
        "--log-every",
        type=int,
        default=defaults.log_every,
        help="Print the loss every N iterations.",
    )
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument(
        "--coupled",
        action="store_true",
        help="Add the decay to the gradient (Adam + L2) instead of decoupling it (AdamW).",
    )
    parser.add_argument(
        "--validation-fraction",
        type=float,
        default=defaults.validation_fraction,
        help="Fraction of samples held out for validation.",
    )


def _config_from_args(args: argparse.Namespace, weight_decay: float) -> TrainingConfig:
    return TrainingConfig(
        input_dim=args.input_dim,
        hidden_dim=args.hidden_dim,
        output_dim=args.output_dim,
        num_samples=args.num_samples,
        learning_rate=args.learning_rate,
        weight_decay=weight_decay,
        iterations=args.iterations,
        log_every=args.log_every,
        seed=args.seed,
        decoupled_weight_decay=not args.coupled,
        validation_fraction=args.validation_fraction,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="academic-blog",
        description="Weight-decay tutorial and static site builder.",
    )
    parser.add_argument(
        "--content",
        type=str,
        default=os.getenv("BLOG_CONTENT_PATH", str(DEFAULT_CONTENT_PATH)),
        help="Content directory (site.yaml, pages/, posts/, assets/).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    train = subparsers.add_parser("train", help="Run the tutorial training and print the loss.")
    _add_training_arguments(train)
    train.add_argument(
        "--weight-decay",
        type=float,
        default=TrainingConfig().weight_decay,
        help="Weight decay coefficient.",
    )

    compare = subparsers.add_parser("compare", help="Compare several weight decay values.")
    _add_training_arguments(compare)
    compare.add_argument(
        "--weight-decay",
        type=float,
        action="append",
        dest="weight_decays",
        help="Weight decay value to compare (repeatable).",
    )

    build = subparsers.add_parser("build", help="Render the static site.")
    build.add_argument(
        "--output",
        type=str,
        default=os.getenv("BLOG_OUTPUT_PATH", "_site"),
        help="Output directory.",
    )
    build.add_argument("--drafts", action="store_true", help="Include draft documents.")

    return parser


def format_comparison(results: Sequence[TrainingResult]) -> str:
    """Format a comparison table of training results."""
    header = f"{'weight_decay':>12}  {'train_mse':>10}  {'val_mse':>10}  {'param_norm':>10}"
    lines = [header, "-" * len(header)]
    for result in results:
        validation = result.metrics.get("validation_mse")
        lines.append(
            f"{result.weight_decay:>12g}  {result.final_loss:>10.6f}  "
            f"{'n/a' if validation is None else f'{validation:.6f}':>10}  "
            f"{result.parameter_norm:>10.4f}"
        )
    return "\n".join(lines)


async def _run(args: argparse.Namespace) -> int:
    if args.command == "train":
        service = create_service(args.content)
        result = await service.run_tutorial(_config_from_args(args, args.weight_decay))
        print(f"Final loss: {result.final_loss:.6f}")
        return 0

    if args.command == "compare":
        weight_decays = args.weight_decays or [0.0, 1e-3, 1e-2, 1e-1]
        service = create_service(args.content)
        results = await service.compare_weight_decay(
            weight_decays, _config_from_args(args, weight_decays[0])
        )
        print(format_comparison(results))
        return 0

    service = create_service(args.content, output=None)
    report = await service.build_site(args.output, include_drafts=args.drafts)
    print(f"Wrote {len(report.pages)} pages and {len(report.assets)} assets to {report.output_dir}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the command line."""
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        return asyncio.run(_run(args))
    except (ContentNotFoundError, FrontMatterError, RenderError) as e:
        _LOGGER.error("Site build failed: %s", e)
        return 1
    except TrainingError as e:
        _LOGGER.error("Training failed: %s", e)
        return 1
    except ValueError as e:
        _LOGGER.error("Invalid configuration: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
