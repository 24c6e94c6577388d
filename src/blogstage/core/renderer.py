"""Safe markdown rendering pipeline.

The only way page views obtain markup: markdown is converted and then
sanitized unconditionally.
"""

from markupsafe import Markup

from blogstage.core.markdown import to_html
from blogstage.core.sanitizer import sanitize


def render_safe(markdown_text: str) -> Markup:
    """Render markdown to sanitized HTML.

    The result is marked safe so templates embed it without escaping;
    nothing else reaching a template is marked safe.

    Args:
        markdown_text: Markdown source text

    Returns:
        Sanitized HTML fragment
    """
    return Markup(sanitize(to_html(markdown_text)))
