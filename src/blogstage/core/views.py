"""Page views.

Composes the catalog, the safe rendering pipeline and the routes into
page fragments. Templates are autoescaped; the post body is the only
markup embedded as-is and it always comes from render_safe().
"""

from dataclasses import dataclass
from functools import cache

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from blogstage.core.catalog import Catalog, ResolvedPost
from blogstage.core.renderer import render_safe
from blogstage.core.routing import Home, PostRoute, Route
from blogstage.core.types import URLPath


@dataclass(frozen=True)
class PostLink:
    """Home listing entry."""

    title: str
    path: URLPath


@dataclass(frozen=True)
class RenderedPage:
    """Page fragment with the title shown in its heading."""

    title: str
    fragment: Markup


@cache
def _environment() -> Environment:
    """Get the template environment, created on first use."""
    return Environment(
        loader=PackageLoader("blogstage", "templates"),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _render_template(name: str, **context: object) -> Markup:
    """Render a template; the autoescaped result is safe to embed."""
    return Markup(_environment().get_template(name).render(**context))


def post_links(catalog: Catalog) -> list[PostLink]:
    """Build listing links for every post in catalog order."""
    return [
        PostLink(title=post.title, path=PostRoute(slug=post.slug).path)
        for post in catalog
    ]


def render_home(catalog: Catalog, site_title: str) -> Markup:
    """Render the home listing.

    Args:
        catalog: Post catalog
        site_title: Text of the site header

    Returns:
        Home page fragment
    """
    return _render_template(
        "home.html",
        site_title=site_title,
        links=post_links(catalog),
    )


def render_post(catalog: Catalog, slug: str) -> Markup:
    """Render a post page.

    Renders, in order: back link to home, title heading, date (omitted
    when empty) and the sanitized markdown body. Unknown slugs render the
    fallback post.

    Args:
        catalog: Post catalog
        slug: Post slug, possibly unknown

    Returns:
        Post page fragment
    """
    return _render_post_fragment(catalog.resolve(slug))


def _render_post_fragment(post: ResolvedPost) -> Markup:
    """Render the post template for already resolved content."""
    return _render_template(
        "post.html",
        post=post,
        home_path=Home().path,
        content=render_safe(post.body),
    )


def render_page(route: Route, catalog: Catalog, site_title: str) -> RenderedPage:
    """Render the page variant selected by a route."""
    if isinstance(route, PostRoute):
        post = catalog.resolve(route.slug)
        return RenderedPage(title=post.title, fragment=_render_post_fragment(post))
    return RenderedPage(title=site_title, fragment=render_home(catalog, site_title))


def render_document(
    page: RenderedPage,
    site_title: str,
    *,
    stylesheet_url: str | None = None,
) -> str:
    """Wrap a page fragment in the HTML document shell.

    Args:
        page: Rendered page
        site_title: Site title used in the document title
        stylesheet_url: Stylesheet to link, or None for no stylesheet

    Returns:
        Complete HTML document
    """
    return _render_template(
        "document.html",
        title=page.title,
        site_title=site_title,
        stylesheet_url=stylesheet_url,
        fragment=page.fragment,
    )
