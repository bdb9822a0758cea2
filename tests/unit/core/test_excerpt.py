"""Unit tests for core/excerpt.py"""

from mdmatter.core.excerpt import extract_excerpt
from mdmatter.core.models import Document, MatterOptions


def _excerpt(content, data=None, **options):
    doc = Document(content=content, data=data or {})
    return extract_excerpt(doc, MatterOptions(**options)).excerpt


def test_excerpt_disabled_by_default():
    assert _excerpt("excerpt\n---\ncontent") == ""


def test_excerpt_true_uses_open_delimiter():
    assert _excerpt("excerpt\n---\ncontent", excerpt=True) == "excerpt\n"


def test_excerpt_string_is_the_separator():
    assert _excerpt("intro\n<!-- more -->\nrest", excerpt="<!-- more -->") == "intro\n"


def test_configured_separator_beats_excerpt_string():
    assert _excerpt("a\n<!-- end -->\nb\n<!-- more -->\nc",
                    excerpt="<!-- more -->", excerpt_separator="<!-- end -->") == "a\n"


def test_configured_separator_enables_extraction():
    """A configured separator extracts even when excerpt is False."""
    assert _excerpt("intro\n<!-- more -->\nrest", excerpt_separator="<!-- more -->") == "intro\n"


def test_data_separator_beats_configured_separator():
    """excerpt_separator in front matter overrides the option."""
    content = "a\n<!-- more -->\nb\n<!-- cut -->\nc"
    assert _excerpt(content, {"excerpt_separator": "<!-- cut -->"},
                    excerpt=True, excerpt_separator="<!-- more -->") == "a\n<!-- more -->\nb\n"


def test_separator_not_found_leaves_excerpt_empty():
    assert _excerpt("no separator here", excerpt=True) == ""


def test_excerpt_is_not_trimmed():
    assert _excerpt("  lead  \n\n---\nrest", excerpt=True) == "  lead  \n\n"


def test_callable_excerpt_is_responsible():
    """A callable receives the document and options and sets the excerpt itself."""
    calls = []

    def first_line(doc, options):
        calls.append(options)
        doc.excerpt = doc.content.splitlines()[0]

    assert _excerpt("line one\nline two\n---\nrest", excerpt=first_line) == "line one"
    assert isinstance(calls[0], MatterOptions)


def test_strategy_object_excerpt():
    class Truncate:
        def apply(self, doc, options):
            doc.excerpt = doc.content[:5]

    assert _excerpt("abcdefgh", excerpt=Truncate()) == "abcde"
