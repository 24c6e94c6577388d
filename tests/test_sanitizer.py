"""Tests for HTML sanitization."""

import pytest
from blogstage.core.markdown import to_html
from blogstage.core.sanitizer import sanitize


class TestSanitize:
    """Tests for sanitize()."""

    def test__safe_fragment__is_unchanged(self) -> None:
        """Keep allowed tags and attributes as they are."""
        html = '<h1>Title</h1><p><em>a</em> <a href="https://example.com">b</a></p>'

        assert sanitize(html) == html

    def test__event_handler__is_removed(self) -> None:
        """Drop event handler attributes."""
        assert sanitize('<p onclick="steal()">Hi</p>') == "<p>Hi</p>"

    def test__script_element__is_removed_with_content(self) -> None:
        """Drop script elements together with their code."""
        result = sanitize("<script>alert(1)</script><p>ok</p>")

        assert result == "<p>ok</p>"

    def test__unclosed_script__is_removed(self) -> None:
        """Drop unterminated script elements."""
        result = sanitize("<p>ok</p><script>alert(1)")

        assert "alert" not in result
        assert "<p>ok</p>" in result

    def test__style_element__is_removed_with_content(self) -> None:
        """Drop embedded style blocks."""
        result = sanitize("<style>body { display: none }</style><p>ok</p>")

        assert result == "<p>ok</p>"

    def test__javascript_link__loses_href(self) -> None:
        """Drop links with the javascript: scheme."""
        result = sanitize('<a href="javascript:alert(1)">x</a>')

        assert "javascript" not in result
        assert "x" in result

    def test__mailto_link__is_kept(self) -> None:
        """Keep mailto links."""
        html = '<a href="mailto:me@example.com">me</a>'

        assert sanitize(html) == html

    def test__unknown_tag__is_stripped_keeping_text(self) -> None:
        """Strip tags outside the allow-list but keep their text."""
        assert sanitize("<div><p>text</p></div>") == "<p>text</p>"

    def test__comment__is_removed(self) -> None:
        """Remove HTML comments."""
        assert sanitize("<p>a</p><!-- hidden -->") == "<p>a</p>"

    def test__image_event_handler__is_removed(self) -> None:
        """Keep images but drop their event handlers."""
        result = sanitize('<img src="/cat.png" alt="cat" onerror="alert(1)">')

        assert "onerror" not in result
        assert 'src="/cat.png"' in result

    def test__iframe__is_removed(self) -> None:
        """Drop embedded frames."""
        result = sanitize('<iframe src="https://evil.example"></iframe><p>ok</p>')

        assert "iframe" not in result
        assert result == "<p>ok</p>"

    def test__language_class__is_kept_on_code(self) -> None:
        """Keep language classes on code elements."""
        html = '<pre><code class="language-python">x</code></pre>'

        assert sanitize(html) == html

    def test__other_class__is_removed_from_code(self) -> None:
        """Drop arbitrary classes on code elements."""
        assert sanitize('<code class="evil">x</code>') == "<code>x</code>"

    def test__style_attribute__is_removed(self) -> None:
        """Drop inline style attributes."""
        assert sanitize('<p style="color: red">x</p>') == "<p>x</p>"

    @pytest.mark.parametrize(
        "html",
        ["", "<", "<<<>>>", "</p>", "<p", '<a href="', "&", "&bogus;", "\x00"],
    )
    def test__malformed_input__does_not_raise(self, html: str) -> None:
        """Sanitize arbitrary input without failing."""
        assert isinstance(sanitize(html), str)

    @pytest.mark.parametrize(
        "html",
        [
            "<p>Post not found.</p>\n",
            "<p>a &amp; b &lt; c</p>",
            '<script>x</script><p onclick="y()">z</p>',
            '<div><a href="javascript:void(0)" title="t">link</a></div>',
            "<p>x</p><!-- c --><style>p{}</style>",
            '<img src="x" onerror="alert(1)"><br/><hr/>',
            "<code>&lt;script&gt;alert(1)&lt;/script&gt;</code>",
        ],
    )
    def test__sanitized_output__is_stable(self, html: str) -> None:
        """Sanitizing twice equals sanitizing once."""
        once = sanitize(html)

        assert sanitize(once) == once


class TestSanitizeRenderedMarkdown:
    """Tests for sanitize() applied to rendered markdown."""

    @pytest.mark.parametrize(
        ("markdown_text", "forbidden"),
        [
            ("<script>alert('x')</script>", "<script"),
            ("<script>alert('x')</script>", "alert"),
            ('Click <a href="#" onclick="steal()">here</a>', "onclick"),
            ("[bad](javascript:alert(1))", "javascript:"),
            ('<img src="x" onerror="alert(1)">', "onerror"),
            ("<style>body { display: none }</style>", "<style"),
            ('<iframe src="https://evil.example"></iframe>', "<iframe"),
            ("<div onmouseover=\"x()\">hover</div>", "onmouseover"),
        ],
    )
    def test__active_content__leaves_no_trace(
        self,
        markdown_text: str,
        forbidden: str,
    ) -> None:
        """Remove active content that markdown passes through."""
        assert forbidden not in sanitize(to_html(markdown_text))

    def test__rendered_markdown__is_stable(self) -> None:
        """Sanitizing rendered markdown is idempotent."""
        source = (
            "# Title\n\n*a* **b** `c`\n\n- x\n- y\n\n> quote\n\n"
            "```js\nalert(1)\n```\n\n<script>evil()</script>\n\n[l](http://e.com)"
        )
        once = sanitize(to_html(source))

        assert sanitize(once) == once


class TestSanitizeKeepsFollowingContent:
    """Tests that dropping an element never drops what follows it."""

    def test__tag_name_in_attribute__keeps_following_paragraph(self) -> None:
        """A raw-content tag name inside an attribute value is just text."""
        result = sanitize('<p title="<style>">hi</p><p>rest of the post survives</p>')

        assert result == "<p>hi</p><p>rest of the post survives</p>"

    def test__split_script_name__does_not_form_script(self) -> None:
        """Removing an element never joins surrounding text into a new tag."""
        result = sanitize("<scr<script>x</script>ipt>alert(1)</script>")

        assert "script" not in result

    def test__closed_script_mid_document__keeps_following_paragraph(self) -> None:
        result = sanitize("<p>a</p><script>alert(1)</script><p>b</p>")

        assert result == "<p>a</p><p>b</p>"

    def test__tag_name_in_attribute__markdown_keeps_rest(self) -> None:
        """Rendered markdown keeps the paragraphs after the block."""
        result = sanitize(to_html('<p title="<style>">hi</p>\n\nrest of the post survives'))

        assert "<p>hi</p>" in result
        assert "<p>rest of the post survives</p>" in result

    def test__tag_name_in_prose__markdown_keeps_rest(self) -> None:
        """A raw-text tag mentioned in prose is shown as text."""
        result = sanitize(
            to_html("Forms use a <textarea> element.\n\n## Next section\n\nMore text."),
        )

        assert "<p>Forms use a &lt;textarea&gt; element.</p>" in result
        assert "<h2>Next section</h2>" in result
        assert "<p>More text.</p>" in result

    def test__split_script_name__markdown_shows_literal_text(self) -> None:
        """Markdown with a split script name renders inert text only."""
        result = sanitize(to_html("<scr<script>x</script>ipt>alert(1)</script>"))

        assert "<script" not in result
        assert "&lt;scr&lt;script&gt;x&lt;/script&gt;" in result
        assert sanitize(result) == result

    def test__unclosed_inline_script__markdown_keeps_rest(self) -> None:
        """An unterminated inline script does not swallow later paragraphs."""
        result = sanitize(to_html("Intro <script>alert(1)\n\nSecond paragraph."))

        assert "<script" not in result
        assert "<p>Second paragraph.</p>" in result

    def test__unclosed_style_block__markdown_keeps_rest(self) -> None:
        """An unterminated style block is rendered as text, not dropped."""
        result = sanitize(to_html("First.\n\n<style>\nbody { display: none }\n\nLast paragraph."))

        assert "<style" not in result
        assert "<p>First.</p>" in result
        assert "Last paragraph." in result

    def test__unclosed_textarea_block__markdown_keeps_rest(self) -> None:
        result = sanitize(to_html("<textarea>\n\n## After\n\nTail."))

        assert "<textarea" not in result
        assert "After" in result
        assert "Tail." in result
