"""Page routing.

Maps a navigational path to one of the two page variants. Any single path
segment is a post route; the slug does not have to exist in the catalog.
"""

from dataclasses import dataclass
from urllib.parse import quote, unquote

from blogstage.core.types import Slug, URLPath


@dataclass(frozen=True)
class Home:
    """Home page listing all posts."""

    @property
    def path(self) -> URLPath:
        return URLPath("/")


@dataclass(frozen=True)
class PostRoute:
    """Post detail page."""

    slug: Slug

    @property
    def path(self) -> URLPath:
        return URLPath(f"/{quote(self.slug, safe='')}")


Route = Home | PostRoute


def resolve_route(path: str) -> Route | None:
    """Resolve a raw URL path to a route.

    Args:
        path: Percent-encoded URL path without query string (e.g., "/post1")

    Returns:
        Home for "/", PostRoute for a single segment (trailing slash
        ignored), None for paths with more than one segment
    """
    relative = path.removeprefix("/").removesuffix("/")
    if not relative:
        return Home()
    if "/" in relative:
        return None
    return PostRoute(slug=Slug(unquote(relative)))
