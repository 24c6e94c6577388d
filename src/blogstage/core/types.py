"""Core type definitions."""

from typing import NewType

# Opaque post identifier taken from the navigational path (e.g., "post1")
# Not guaranteed to exist in the catalog
Slug = NewType("Slug", str)

# URL path for routing (e.g., "/", "/post1")
URLPath = NewType("URLPath", str)
