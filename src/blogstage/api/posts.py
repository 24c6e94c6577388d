"""Posts API endpoints.

Provides the post listing and single posts as JSON with sanitized HTML content.
"""

import logging
from hashlib import md5

from aiohttp import web

from blogstage.app_keys import catalog_key
from blogstage.core.renderer import render_safe
from blogstage.core.routing import PostRoute
from blogstage.core.types import Slug

logger = logging.getLogger(__name__)


def create_posts_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/posts", get_posts),
        web.get("/api/posts/{slug}", get_post),
    ]


async def get_posts(request: web.Request) -> web.Response:
    catalog = request.app[catalog_key]
    items = [
        {
            "slug": post.slug,
            "title": post.title,
            "date": post.date,
            "path": PostRoute(slug=post.slug).path,
        }
        for post in catalog
    ]
    return web.json_response({"items": items})


async def get_post(request: web.Request) -> web.Response:
    slug = Slug(request.match_info["slug"])
    catalog = request.app[catalog_key]

    found = slug in catalog
    if not found:
        logger.info(f"Unknown post requested: {slug!r}")

    post = catalog.resolve(slug)
    content = str(render_safe(post.body))

    etag = _compute_etag(content)

    if_none_match = request.headers.get("If-None-Match")
    if if_none_match == etag:
        return web.Response(status=304)

    response_data = {
        "meta": {
            "slug": slug,
            "title": post.title,
            "date": post.date,
            "path": PostRoute(slug=slug).path,
            "found": found,
        },
        "content": content,
    }

    return web.json_response(
        response_data,
        headers={
            "ETag": etag,
            "Cache-Control": "private, max-age=60",
        },
    )


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough to tell rendered versions apart
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
