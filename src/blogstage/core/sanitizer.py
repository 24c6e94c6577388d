"""HTML sanitization.

Allow-list filtering of rendered markdown with bleach. Tags outside the
allow-list are stripped while their text is kept, except for raw-content
elements such as ``script`` and ``style`` which are dropped together with
everything inside them.
"""

import re
from typing import Any, Iterator

from bleach import html5lib_shim
from bleach.sanitizer import Cleaner

ALLOWED_TAGS = frozenset(
    {
        "a",
        "blockquote",
        "br",
        "code",
        "del",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "strong",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "ul",
    },
)

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Elements whose content is code or embedded markup, never displayable text
RAW_CONTENT_TAGS = frozenset(
    {
        "iframe",
        "noembed",
        "noframes",
        "noscript",
        "object",
        "script",
        "style",
        "template",
        "xmp",
    },
)

_LANGUAGE_CLASS_RE = re.compile(r"language-[\w+#.-]+")


def _allow_code_attribute(tag: str, name: str, value: str) -> bool:
    """Allow only ``language-*`` classes on code elements."""
    return name == "class" and _LANGUAGE_CLASS_RE.fullmatch(value) is not None


ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "code": _allow_code_attribute,
    "img": ["src", "alt", "title"],
    "ol": ["start"],
}


class RawContentFilter(html5lib_shim.Filter):
    """Drop raw-content elements and every token inside them.

    Runs on the tree walker's token stream, so tag names inside attribute
    values or text are never mistaken for elements.
    """

    def __iter__(self) -> Iterator[dict[str, Any]]:
        depth = 0
        for token in super().__iter__():
            kind = token["type"]
            if kind in ("StartTag", "EndTag", "EmptyTag") and token["name"] in RAW_CONTENT_TAGS:
                if kind == "StartTag":
                    depth += 1
                elif kind == "EndTag":
                    depth = max(depth - 1, 0)
                continue
            if not depth:
                yield token


class RawContentCleaner(Cleaner):
    """Cleaner that removes raw-content elements before allow-list filtering.

    Filters passed to ``Cleaner(filters=...)`` run after the sanitizer has
    already stripped disallowed tags, so the content filter wraps the tree
    walker instead.
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        tree_walker = self.walker
        self.walker = lambda dom: RawContentFilter(tree_walker(dom))


_cleaner = RawContentCleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=True,
    strip_comments=True,
)


def sanitize(html: str) -> str:
    """Filter an HTML fragment down to the safe subset.

    Idempotent: sanitizing already sanitized output returns it unchanged.

    Args:
        html: Untrusted HTML fragment

    Returns:
        HTML fragment without script-capable elements, event handler
        attributes or links with unsafe schemes
    """
    return _cleaner.clean(html)
