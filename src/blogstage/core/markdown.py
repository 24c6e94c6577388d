"""Markdown to HTML conversion.

Converts post bodies to HTML fragments with mistune. Raw HTML embedded in
markdown is never trusted: blocks are sanitized one at a time so that an
unterminated element cannot take over the rest of the post, and inline
raw-text tags (``script``, ``textarea``, ...) are shown as literal text.
The whole output must still go through the sanitizer before display.
"""

import logging
import re

import mistune
from mistune.util import escape

from blogstage.core.sanitizer import sanitize

logger = logging.getLogger(__name__)

PLUGINS = ["strikethrough", "table"]

# Elements whose content an HTML parser reads as text up to the end tag
RAW_TEXT_TAGS = (
    "iframe",
    "noembed",
    "noframes",
    "noscript",
    "plaintext",
    "script",
    "style",
    "textarea",
    "title",
    "xmp",
)
_RAW_TEXT_TAG_RE = re.compile(rf"</?({'|'.join(RAW_TEXT_TAGS)})\b", re.IGNORECASE)


class PostHTMLRenderer(mistune.HTMLRenderer):
    """HTML renderer for post bodies."""

    def __init__(self) -> None:
        super().__init__(escape=False)

    def inline_html(self, html: str) -> str:
        # A lone raw-text tag has its end tag in another token, if anywhere
        if _RAW_TEXT_TAG_RE.match(html):
            return escape(html)
        return html

    def block_html(self, html: str) -> str:
        match = _RAW_TEXT_TAG_RE.match(html)
        if match and f"</{match.group(1).lower()}" not in html.lower():
            return "<p>" + escape(html.strip()) + "</p>\n"
        return sanitize(html) + "\n"


class MarkdownRenderer:
    """Convert markdown to HTML fragments."""

    def __init__(self) -> None:
        """Initialize the mistune parser with the post HTML renderer."""
        self.markdown = mistune.create_markdown(renderer=PostHTMLRenderer(), plugins=PLUGINS)

    def to_html(self, markdown_text: str) -> str:
        """Convert markdown text to an HTML fragment.

        Unmatched emphasis markers and other malformed constructs are kept
        as literal text rather than rejected.

        Args:
            markdown_text: Markdown source text

        Returns:
            HTML fragment (not a full document)
        """
        logger.debug(f"Converting {len(markdown_text)} characters of markdown")
        html = self.markdown(markdown_text)
        logger.debug(f"Converted to {len(html)} characters of HTML")
        return html


_renderer = MarkdownRenderer()


def to_html(markdown_text: str) -> str:
    """Convert markdown text to an HTML fragment."""
    return _renderer.to_html(markdown_text)
