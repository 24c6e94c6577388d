"""Shared test fixtures."""

import pytest
from blogstage.config import Config, ServerConfig, SiteConfig
from blogstage.core.catalog import Catalog, Post
from blogstage.core.types import Slug


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration with default site settings."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(title="Test Blog"),
    )


@pytest.fixture
def catalog() -> Catalog:
    """Create a small catalog independent of the bundled posts."""
    return Catalog(
        [
            Post(
                slug=Slug("hello"),
                title="Hello World",
                body="# Hello\n\nFirst *post*.",
                date="January 1, 2025",
            ),
            Post(
                slug=Slug("undated"),
                title="No Date",
                body="Just text.",
            ),
        ],
    )
