"""Asset discovery for bundled static files.

Locates the stylesheet shipped inside the blogstage package.
"""

from importlib.resources import files
from pathlib import Path

STYLESHEET_URL = "/assets/styles/main.css"


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing the stylesheet.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    static = files("blogstage").joinpath("static")
    if not static.is_dir():
        raise FileNotFoundError("Bundled static assets not found")
    return Path(str(static))
