"""Tests for read_from() and the Page metadata accessor."""

import io

import pytest
from pydantic import ValidationError

from page_frontmatter import (
    EmptyInput,
    MalformedFrontMatter,
    Page,
    StreamError,
    read_bytes,
    read_from,
)
from page_frontmatter.core.delimiters import DelimiterKind

CONTENT_NO_FRONTMATTER = "a page with no front matter"
CONTENT_WITH_FRONTMATTER = "---\ntitle: front matter\n---\nContent with front matter"
CONTENT_HTML_NODOCTYPE = "<html>\n\t<body>\n\t</body>\n</html>"
CONTENT_HTML_WITHDOCTYPE = "<!doctype html><html><body></body></html>"
CONTENT_HTML_WITH_FRONTMATTER = "---\ntitle: front matter\n---\n<!doctype><html><body></body></html>"
CONTENT_LWS_HTML = "    <html><body></body></html>"
CONTENT_LWS_LF_HTML = "\n<html><body></body></html>"
CONTENT_INCOMPLETE_BEG_FM_DELIM = "--\ntitle: incomplete beg fm delim\n---\nincomplete frontmatter delim"
CONTENT_INCOMPLETE_END_FM_DELIM = "---\ntitle: incomplete end fm delim\n--\nincomplete frontmatter delim"
CONTENT_MISSING_END_FM_DELIM = "---\ntitle: incomplete end fm delim\nincomplete frontmatter delim"
CONTENT_FM_NO_DOC = "---\ntitle: no doc\n---"


@pytest.mark.parametrize("content,renderable,front_matter,body", [
    (CONTENT_NO_FRONTMATTER, True, None, "a page with no front matter"),
    (CONTENT_WITH_FRONTMATTER, True, "title: front matter\n",
     "Content with front matter"),
    (CONTENT_HTML_NODOCTYPE, False, None, CONTENT_HTML_NODOCTYPE),
    (CONTENT_HTML_WITHDOCTYPE, False, None, CONTENT_HTML_WITHDOCTYPE),
    (CONTENT_HTML_WITH_FRONTMATTER, True, "title: front matter\n",
     "<!doctype><html><body></body></html>"),
    (CONTENT_LWS_HTML, False, None, "<html><body></body></html>"),
    (CONTENT_LWS_LF_HTML, False, None, "<html><body></body></html>"),
    (CONTENT_INCOMPLETE_BEG_FM_DELIM, True, None,
     CONTENT_INCOMPLETE_BEG_FM_DELIM),
    ("---\ntitle: x\n---\n", True, "title: x\n", ""),
    ("\n\n  ---\ntitle: x\n---\nbody", True, "title: x\n", "body"),
    ("+++\ntitle = \"x\"\n+++\nbody", True, "title = \"x\"\n", "body"),
    ("<p>\n---\ntitle: x\n---\n</p>", False, None,
     "<p>\n---\ntitle: x\n---\n</p>"),
])
def test_standalone_read_from(content, renderable, front_matter, body,
                              endings):
	page = read_bytes(endings(content))
	assert page.renderable is renderable
	if front_matter is None:
		assert page.front_matter is None
		assert not page.has_front_matter
	else:
		assert page.front_matter == endings(front_matter)
	assert page.body == endings(body)


@pytest.mark.parametrize("content", [
    CONTENT_MISSING_END_FM_DELIM,
    CONTENT_INCOMPLETE_END_FM_DELIM,
    CONTENT_FM_NO_DOC,
    "---\ntitle: test\n",
    "---\n",
    "+++\ntitle = 1\n",
    '{"title": "t"\n',
])
def test_degenerate_read_from(content, endings):
	with pytest.raises(MalformedFrontMatter):
		read_bytes(endings(content))


@pytest.mark.parametrize("content", ["", " ", "\n\r\n\t"])
def test_empty_input(content):
	with pytest.raises(EmptyInput):
		read_bytes(content.encode())


def test_empty_input_is_stream_error():
	with pytest.raises(StreamError):
		read_bytes(b"")


def test_yaml_property(endings):
	page = read_bytes(endings("---\ntitle: test\n---\nBody text"))
	assert page.kind is DelimiterKind.YAML
	assert page.front_matter == endings("title: test\n")
	assert page.body == b"Body text"
	assert page.property("title") == ("test", True)


def test_parse_front_matter_properties():
	page = read_bytes(b"---\ntitle: test\nauthor: me\n---\n")
	assert page.property("title") == ("test", True)
	assert page.property("author") == ("me", True)
	assert page.property("missing") == ("", False)


def test_toml_property(endings):
	page = read_bytes(
	    endings('+++\ntitle = "test"\ntags = ["a", "b"]\n+++\nBody'))
	assert page.kind is DelimiterKind.TOML
	assert page.property("title") == ("test", True)
	assert page.get("tags") == ["a", "b"]
	assert page.body == b"Body"


def test_brace_page(endings):
	page = read_bytes(endings('{\n"title": "t"\n}\nBody'))
	assert page.renderable
	assert page.kind is DelimiterKind.BRACE
	assert page.front_matter == endings('\n"title": "t"\n')
	assert page.body == b"Body"
	assert page.property("title") == ("t", True)


def test_brace_page_nested():
	page = read_bytes(b'{"title": "t", "params": {"x": {"y": 1}}}\nBody')
	assert page.get("params") == {"x": {"y": 1}}
	assert page.body == b"Body"


def test_brace_inside_json_string_fails_to_decode():
	"""Brace counting ignores quoting, so the block closes early."""
	with pytest.raises(MalformedFrontMatter):
		read_bytes(b'{"title": "a } b"}\nBody')


def test_html_page_never_extracts_front_matter():
	page = read_bytes(b"<html>{\"a\": 1}</html>")
	assert page.renderable is False
	assert page.kind is None
	assert page.front_matter is None
	assert page.metadata == {}
	assert page.property("a") == ("", False)


def test_no_front_matter_has_no_properties():
	page = read_bytes(b"just text")
	assert page.metadata == {}
	assert page.property("title") == ("", False)
	assert page.get("title", "dflt") == "dflt"


def test_whitespace_only_front_matter_is_present_but_empty(endings):
	page = read_bytes(endings("---\n\n---\nbody"))
	assert page.has_front_matter
	assert page.front_matter == endings("\n")
	assert page.metadata == {}
	assert page.body == b"body"


def test_empty_front_matter_block():
	page = read_bytes(b"---\n---\nbody")
	assert page.front_matter == b""
	assert page.metadata == {}


def test_non_string_properties():
	page = read_bytes(b"---\ncount: 3\ndraft: true\nempty:\n---\n")
	assert page.property("count") == ("3", True)
	assert page.property("draft") == ("True", True)
	assert page.property("empty") == ("", True)
	assert page.get("count") == 3
	assert page.get("draft") is True


def test_bad_front_matter_fails_eagerly():
	bad = b"---\nfoobar: [fiz}bazz</html>\n---\ncontent\n"
	with pytest.raises(MalformedFrontMatter):
		read_bytes(bad)


def test_bad_front_matter_lazy_fails_on_access():
	bad = b"---\nfoobar: [fiz}bazz</html>\n---\ncontent\n"
	page = read_bytes(bad, eager_decode=False)
	assert page.body == b"content\n"
	with pytest.raises(MalformedFrontMatter):
		page.property("foobar")
	with pytest.raises(MalformedFrontMatter):
		page.property("foobar")


def test_non_mapping_front_matter_rejected():
	with pytest.raises(MalformedFrontMatter):
		read_bytes(b"---\n- a\n- b\n---\nbody")


def test_decode_is_memoized():
	page = read_bytes(b"---\ntitle: test\n---\nbody")
	first = page.decode()
	assert page.decode() is first
	assert page.property("title") == page.property("title")


def test_metadata_is_a_copy():
	page = read_bytes(b"---\ntitle: test\n---\n")
	page.metadata["title"] = "changed"
	assert page.property("title") == ("test", True)


def test_page_is_frozen():
	page = read_bytes(b"body")
	with pytest.raises(ValidationError):
		page.body = b"other"


def test_pages_do_not_share_cache():
	a = read_bytes(b"---\ntitle: a\n---\n")
	b = read_bytes(b"---\ntitle: b\n---\n")
	assert a.property("title") == ("a", True)
	assert b.property("title") == ("b", True)


def test_read_from_does_not_close_stream():
	stream = io.BytesIO(b"---\ntitle: x\n---\nbody")
	read_from(stream)
	assert not stream.closed


def test_read_bytes_rejects_str():
	with pytest.raises(TypeError):
		read_bytes("---\ntitle: x\n---\n")


def test_page_constructed_directly():
	page = Page(renderable=True,
	            kind=DelimiterKind.YAML,
	            front_matter=b"a: 1\n",
	            body=b"")
	assert page.get("a") == 1


@pytest.mark.parametrize("space", ["\u3000", "\u00a0"])
def test_unicode_whitespace_before_front_matter(space, endings):
	page = read_bytes(
	    space.encode("utf-8") + endings("---\ntitle: x\n---\nbody"))
	assert page.front_matter == endings("title: x\n")
	assert page.property("title") == ("x", True)
	assert page.body == b"body"


def test_unicode_whitespace_before_markup():
	page = read_bytes("\u00a0\n<html></html>".encode("utf-8"))
	assert page.renderable is False
	assert page.body == b"<html></html>"
