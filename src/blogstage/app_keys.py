"""Application keys for type-safe app configuration access."""

from aiohttp import web

from blogstage.config import SiteConfig
from blogstage.core.catalog import Catalog

catalog_key = web.AppKey("catalog", Catalog)
site_key = web.AppKey("site", SiteConfig)
