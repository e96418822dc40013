"""Tests for the Jinja2 site renderer."""

from datetime import date
from pathlib import Path

import pytest
from academic_blog.domain.value_objects import (
    AuthorProfile,
    Document,
    FrontMatter,
    LossRecord,
    SiteConfig,
    SocialLink,
    TrainingConfig,
    TrainingResult,
)
from academic_blog.infrastructure.adapters import JinjaSiteRenderer, RenderError


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(
        title="Test Site",
        base_url="https://example.org",
        author=AuthorProfile(
            name="Test Author",
            image="/assets/img/profile.svg",
            links=(SocialLink(label="GitHub", url="https://github.com/test"),),
        ),
    )


@pytest.fixture
def renderer() -> JinjaSiteRenderer:
    return JinjaSiteRenderer()


def _document(slug: str, body: str, layout: str = "page", **extra) -> Document:
    return Document(
        slug=slug,
        front_matter=FrontMatter(
            title=slug.title(),
            date=date(2024, 3, 15),
            categories=("ml",),
            layout=layout,
            extra=extra,
        ),
        body=body,
    )


class TestJinjaSiteRenderer:
    """Tests for JinjaSiteRenderer."""

    def test_render_markdown_expands_context(self, renderer: JinjaSiteRenderer) -> None:
        """Template expressions in the body are expanded before Markdown."""
        html = renderer.render_markdown("# Hi {{ name }}\n\n*text*", {"name": "there"})
        assert '<h1 id="hi-there">Hi there</h1>' in html
        assert "<em>text</em>" in html

    def test_expand_body_keeps_markdown(self, renderer: JinjaSiteRenderer) -> None:
        """expand_body fills in expressions and leaves the Markdown alone."""
        source = "```python\n{% if coupled %}\nAdam\n{% else %}\nAdamW\n{% endif %}\n```\n"
        assert renderer.expand_body(source, {"coupled": False}) == "```python\nAdamW\n```"

    def test_expand_body_with_missing_variable_raises_error(
        self, renderer: JinjaSiteRenderer
    ) -> None:
        """Undefined variables are reported as render errors."""
        with pytest.raises(RenderError, match="validation_mse"):
            renderer.expand_body("{{ metrics.validation_mse }}", {"metrics": {}})

    def test_render_markdown_fenced_code(self, renderer: JinjaSiteRenderer) -> None:
        """Fenced code blocks are kept and escaped."""
        html = renderer.render_markdown("```python\nx = 1 < 2\n```\n")
        assert "<code" in html
        assert "x = 1 &lt; 2" in html

    def test_undefined_variable_raises_error(self, renderer: JinjaSiteRenderer) -> None:
        """Typos in template expressions fail loudly."""
        with pytest.raises(RenderError, match="body"):
            renderer.render_markdown("{{ missing.value }}")

    def test_about_page_shows_author_card(
        self, renderer: JinjaSiteRenderer, site: SiteConfig
    ) -> None:
        """The about page shows profile image and social links."""
        html = renderer.render_document(_document("about", "Bio text.", show_author=True), site)
        assert 'class="profile-image" src="/assets/img/profile.svg"' in html
        assert 'href="https://github.com/test"' in html
        assert "<p>Bio text.</p>" in html
        assert "<title>About | Test Site</title>" in html

    def test_post_shows_date_and_categories(
        self, renderer: JinjaSiteRenderer, site: SiteConfig
    ) -> None:
        """Posts carry their metadata."""
        html = renderer.render_document(_document("first", "Body", layout="post"), site)
        assert 'datetime="2024-03-15"' in html
        assert "March 15, 2024" in html
        assert '<span class="category">ml</span>' in html

    def test_notebook_embeds_training_result(
        self, renderer: JinjaSiteRenderer, site: SiteConfig
    ) -> None:
        """Notebook bodies and summaries can use the training result."""
        result = TrainingResult(
            config=TrainingConfig(iterations=200),
            loss_history=(LossRecord(100, 1.0), LossRecord(200, 0.5)),
            final_loss=0.5,
            parameter_norm=2.0,
        )
        body = '```text\n{{ training.log_lines | join("\\n") }}\n```\n'
        html = renderer.render_document(
            _document("wd", body, layout="notebook"), site, {"training": result}
        )
        assert "Iteration 100: loss = 1.000000\nIteration 200: loss = 0.500000" in html
        assert "<td>0.500000</td>" in html
        assert "<td>2.0000</td>" in html

    def test_render_index_lists_posts(self, renderer: JinjaSiteRenderer, site: SiteConfig) -> None:
        """The index links to every post."""
        html = renderer.render_index([_document("first", "", layout="post")], site)
        assert 'href="/first/"' in html

    def test_render_index_without_posts(self, renderer: JinjaSiteRenderer, site: SiteConfig) -> None:
        """An empty blog says so."""
        assert "No posts yet." in renderer.render_index([], site)

    def test_missing_layout_raises_error(self, site: SiteConfig, tmp_path: Path) -> None:
        """A templates directory without the layout is an error."""
        renderer = JinjaSiteRenderer(templates_path=tmp_path)
        with pytest.raises(RenderError, match="page.html"):
            renderer.render_document(_document("about", "x"), site)
