"""Integration tests for the command line interface."""

from pathlib import Path

import pytest

import academic_blog
from academic_blog.infrastructure.cli import main
from academic_blog.infrastructure.cli.blog_cli import build_parser


class TestParser:
    """Tests for argument parsing."""

    def test_train_defaults(self) -> None:
        """The train command defaults to the tutorial settings."""
        args = build_parser().parse_args(["train"])
        assert args.seed == 42
        assert args.log_every == 100
        assert args.weight_decay == 1e-4
        assert args.coupled is False

    def test_compare_collects_weight_decays(self) -> None:
        """--weight-decay can be repeated."""
        args = build_parser().parse_args(
            ["compare", "--weight-decay", "0", "--weight-decay", "0.01"]
        )
        assert args.weight_decays == [0.0, 0.01]

    def test_default_content_is_bundled_with_the_package(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without BLOG_CONTENT_PATH the content shipped inside the package is used."""
        monkeypatch.delenv("BLOG_CONTENT_PATH", raising=False)
        content = Path(build_parser().parse_args(["build"]).content)

        assert content.resolve() == (Path(academic_blog.__file__).parent / "content").resolve()
        assert (content / "site.yaml").is_file()
        assert (content / "posts" / "2024-03-15-weight-decay-regularization.md").is_file()

    def test_command_is_required(self) -> None:
        """Running without a command is a usage error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    """Tests for the main entry point."""

    def test_train_prints_loss_lines(self, content_dir: Path, capsys: pytest.CaptureFixture) -> None:
        """train prints the loss every log interval."""
        code = main(["--content", str(content_dir), "train", "--iterations", "300"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Iteration 100: loss = " in out
        assert "Iteration 300: loss = " in out
        assert "Final loss: " in out

    def test_compare_prints_table(self, content_dir: Path, capsys: pytest.CaptureFixture) -> None:
        """compare prints one row per weight decay."""
        code = main(
            [
                "--content", str(content_dir),
                "compare", "--iterations", "100",
                "--weight-decay", "0", "--weight-decay", "0.1",
            ]
        )

        out = capsys.readouterr().out
        assert code == 0
        assert "weight_decay" in out
        assert "# weight_decay = 0.1" in out

    @pytest.mark.slow
    def test_build_writes_site(self, content_dir: Path, tmp_path: Path) -> None:
        """build renders the bundled content."""
        code = main(["--content", str(content_dir), "build", "--output", str(tmp_path)])

        assert code == 0
        assert (tmp_path / "index.html").exists()
        assert (tmp_path / "about" / "index.html").exists()

    def test_build_with_missing_content_fails(self, tmp_path: Path) -> None:
        """A missing site.yaml returns a non-zero exit code."""
        code = main(["--content", str(tmp_path / "nowhere"), "build", "--output", str(tmp_path)])
        assert code == 1

    def test_invalid_hyper_parameters_fail(self, content_dir: Path) -> None:
        """Invalid values are reported, not raised."""
        code = main(["--content", str(content_dir), "train", "--learning-rate", "-1"])
        assert code == 1
