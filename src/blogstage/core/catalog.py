"""Post catalog and content resolution.

The catalog is the single authoritative table of known posts. It is built
once per process from the post sources shipped with the package and is
read by the resolver, the home listing and the JSON API alike.
"""

from dataclasses import dataclass
from functools import cache
from importlib.resources import files
from typing import Iterator

from blogstage.core.types import Slug

UNKNOWN_TITLE = "Unknown Post"
UNKNOWN_BODY = "Post not found."


class CatalogError(ValueError):
    """Raised when the post catalog is malformed."""


@dataclass(frozen=True)
class Post:
    """Blog post data."""

    slug: Slug
    title: str
    body: str
    date: str = ""


@dataclass(frozen=True)
class PostSource:
    """Build-time description of a post whose body is package data."""

    slug: str
    title: str
    filename: str
    date: str = ""


@dataclass(frozen=True)
class ResolvedPost:
    """Content resolved for a slug, known or not."""

    title: str
    body: str
    date: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "body": self.body, "date": self.date}


UNKNOWN_POST = ResolvedPost(title=UNKNOWN_TITLE, body=UNKNOWN_BODY, date="")

POST_SOURCES: tuple[PostSource, ...] = (
    PostSource(
        slug="post1",
        title="First Blog Post",
        filename="post1.md",
        date="March 27, 2025",
    ),
)


class Catalog:
    """Immutable slug-keyed table of posts.

    Preserves insertion order for listing and provides O(1) lookups.
    """

    __slots__ = ("_index", "_posts")

    def __init__(self, posts: list[Post]) -> None:
        """Initialize catalog.

        Args:
            posts: Posts in listing order

        Raises:
            CatalogError: If a slug is duplicated or a title is empty
        """
        index: dict[str, Post] = {}
        for post in posts:
            if not post.title:
                raise CatalogError(f"Post has an empty title: {post.slug!r}")
            if post.slug in index:
                raise CatalogError(f"Duplicate post slug: {post.slug!r}")
            index[post.slug] = post
        self._posts = tuple(posts)
        self._index = index

    def __contains__(self, slug: object) -> bool:
        return slug in self._index

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def get(self, slug: str) -> Post | None:
        """Get post by slug.

        Args:
            slug: Post slug (exact match)

        Returns:
            Post if found, None otherwise
        """
        return self._index.get(slug)

    def posts(self) -> list[Post]:
        """Get all posts in listing order."""
        return list(self._posts)

    def resolve(self, slug: str) -> ResolvedPost:
        """Resolve a slug to displayable content.

        Unknown slugs are not an error: they resolve to the fixed
        "Unknown Post" / "Post not found." / empty date triple.

        Args:
            slug: Arbitrary slug, possibly absent from the catalog

        Returns:
            ResolvedPost with title, markdown body and date
        """
        post = self._index.get(slug)
        if post is None:
            return UNKNOWN_POST
        return ResolvedPost(title=post.title, body=post.body, date=post.date)


def read_post_source(filename: str) -> str:
    """Read a bundled markdown post.

    Args:
        filename: File name inside the package ``posts`` directory

    Returns:
        Markdown text

    Raises:
        FileNotFoundError: If the post is not bundled
    """
    source = files("blogstage").joinpath("posts", filename)
    if not source.is_file():
        raise FileNotFoundError(f"Bundled post not found: {filename}")
    return source.read_text(encoding="utf-8")


def build_catalog(sources: tuple[PostSource, ...] = POST_SOURCES) -> Catalog:
    """Build a catalog from post sources.

    Args:
        sources: Post sources in listing order

    Returns:
        Catalog with bodies read from package data
    """
    return Catalog(
        [
            Post(
                slug=Slug(source.slug),
                title=source.title,
                body=read_post_source(source.filename),
                date=source.date,
            )
            for source in sources
        ],
    )


@cache
def default_catalog() -> Catalog:
    """Get the built-in catalog, built on first use."""
    return build_catalog()


def resolve(slug: str) -> ResolvedPost:
    """Resolve a slug against the built-in catalog."""
    return default_catalog().resolve(slug)
