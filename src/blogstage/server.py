"""aiohttp server for Blogstage.

Application factory and route registration.
"""

import logging

from aiohttp import web

from blogstage.api.posts import create_posts_routes
from blogstage.app_keys import catalog_key, site_key
from blogstage.assets import STYLESHEET_URL, get_static_dir
from blogstage.config import Config
from blogstage.core.catalog import Catalog, default_catalog
from blogstage.core.routing import resolve_route
from blogstage.core.views import render_document, render_page

logger = logging.getLogger(__name__)


async def page_handler(request: web.Request) -> web.Response:
    """Serve the home listing or a post page.

    Single-segment paths are post pages, including unknown slugs which
    render the fallback post. Deeper paths are not blog pages.
    """
    route = resolve_route(request.rel_url.raw_path)
    if route is None:
        raise web.HTTPNotFound()

    site = request.app[site_key]
    page = render_page(route, request.app[catalog_key], site.title)
    document = render_document(
        page,
        site.title,
        stylesheet_url=STYLESHEET_URL if site.stylesheet else None,
    )
    return web.Response(text=document, content_type="text/html")


def create_app(config: Config, catalog: Catalog | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        catalog: Post catalog (default: built-in catalog)

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[catalog_key] = catalog if catalog is not None else default_catalog()
    app[site_key] = config.site

    # API routes (must be registered first to take precedence over page routes)
    app.router.add_routes(create_posts_routes())

    app.router.add_static("/assets", get_static_dir())

    # Page routes - must be last to catch all remaining paths
    app.router.add_get("/{path:.*}", page_handler)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Launching blog on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
