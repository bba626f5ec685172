"""Tests for the markup parser."""

import pytest

from leafdom.model import (
    AttrMap,
    Comment,
    Document,
    Element,
    Implicit,
    Keyword,
    Length,
    SimpleSelector,
    Text,
    TextValue,
    Unit,
)
from leafdom.parser import ErrorKind, ParseError, parse_html, parse_nodes


def _root(source: str):
    return parse_html(source).root


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


class TestElements:
    def test_empty_element(self) -> None:
        root = _root("<div></div>")
        assert root == Element("div", AttrMap(), [])

    def test_text_child(self) -> None:
        root = _root("<p>hi</p>")
        assert isinstance(root, Element)
        assert root.tag_name == "p"
        assert root.children == [Text("hi")]

    def test_nested_elements_keep_document_order(self) -> None:
        root = _root("<ul><li>one</li><li>two</li><li>three</li></ul>")
        assert [child.tag_name for child in root.children] == ["li", "li", "li"]
        assert [child.children[0].text for child in root.children] == ["one", "two", "three"]

    def test_deep_nesting(self) -> None:
        root = _root("<a><b><c><d></d></c></b></a>")
        depth = 0
        node = root
        while node.children:
            node = node.children[0]
            depth += 1
        assert depth == 3
        assert node.tag_name == "d"

    def test_self_closing_element(self) -> None:
        root = _root("<div><br/><img src='x.png'/></div>")
        br, img = root.children
        assert br == Element("br", AttrMap(), [])
        assert img.attributes == {"src": TextValue("x.png")}
        assert img.children == []

    def test_whitespace_between_children_is_skipped(self) -> None:
        root = _root("<div>\n  <p>a</p>\n  <p>b</p>\n</div>")
        assert len(root.children) == 2

    def test_trailing_text_whitespace_is_kept(self) -> None:
        root = _root("<p>hello </p>")
        assert root.children == [Text("hello ")]

    def test_mixed_text_and_elements(self) -> None:
        root = _root("<p>hello <b>bold</b> world</p>")
        assert root.children[0] == Text("hello ")
        assert root.children[1].tag_name == "b"
        assert root.children[2] == Text("world")


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class TestAttributes:
    def test_double_quoted_value(self) -> None:
        root = _root('<a href="/home"></a>')
        assert root.attributes == {"href": TextValue("/home")}

    def test_single_quoted_value_may_contain_double_quote(self) -> None:
        root = _root("<a title='say \"hi\"'></a>")
        assert root.attributes["title"] == TextValue('say "hi"')

    def test_bare_attribute_is_implicit(self) -> None:
        root = _root("<input disabled>x</input>")
        assert root.attributes == {"disabled": Implicit()}

    def test_explicit_empty_value_is_text(self) -> None:
        root = _root('<input value=""/>')
        assert root.attributes == {"value": TextValue("")}

    def test_multiple_attributes(self) -> None:
        root = _root('<div id="main" class="a b" hidden></div>')
        assert root.attributes == {
            "id": TextValue("main"),
            "class": TextValue("a b"),
            "hidden": Implicit(),
        }

    def test_duplicate_attribute_overwrites(self) -> None:
        root = _root('<div id="a" id="b"></div>')
        assert root.attributes == {"id": TextValue("b")}

    def test_hyphenated_attribute_name(self) -> None:
        root = _root('<div data-id="7"></div>')
        assert root.attributes == {"data-id": TextValue("7")}

    def test_underscored_attribute_name(self) -> None:
        root = _root("<div my_attr></div>")
        assert root.attributes == {"my_attr": Implicit()}

    def test_unquoted_value_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<a href=x></a>")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_CHARACTER

    def test_unterminated_quote_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html('<a href="x></a>')
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_EOF


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestComments:
    def test_comment_text_excludes_delimiters(self) -> None:
        root = _root("<!-- note -->")
        assert root == Comment("note")

    def test_empty_comment(self) -> None:
        assert _root("<!---->") == Comment("")

    def test_comment_may_contain_markup_and_dashes(self) -> None:
        root = _root("<!-- <b>a - b</b> -->")
        assert root == Comment("<b>a - b</b>")

    def test_comment_ends_at_first_terminator(self) -> None:
        root = _root("<div><!-- a -->b --></div>")
        assert root.children == [Comment("a"), Text("b -->")]

    def test_unterminated_comment_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<!-- never closed")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_EOF


# ---------------------------------------------------------------------------
# Top-level wrapping
# ---------------------------------------------------------------------------


class TestTopLevel:
    def test_single_node_is_not_wrapped(self) -> None:
        root = _root("<body><p>x</p></body>")
        assert root.tag_name == "body"

    def test_siblings_are_wrapped_in_html(self) -> None:
        root = _root("<p>a</p><p>b</p>")
        assert root.tag_name == "html"
        assert root.attributes == {}
        assert [c.tag_name for c in root.children] == ["p", "p"]

    def test_text_and_element_are_wrapped(self) -> None:
        root = _root("hello <b>x</b>")
        assert root.tag_name == "html"
        assert root.children[0] == Text("hello ")

    def test_empty_input_gives_empty_html(self) -> None:
        assert _root("") == Element("html", AttrMap(), [])

    def test_bare_text_is_not_wrapped(self) -> None:
        assert _root("just text") == Text("just text")

    def test_stray_closing_tag_fails(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<p>a</p></div>")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_CHARACTER


# ---------------------------------------------------------------------------
# Closing tags
# ---------------------------------------------------------------------------


class TestClosingTags:
    def test_mismatched_closing_tag(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<div></span>")
        assert exc_info.value.kind is ErrorKind.MISMATCHED_CLOSING_TAG
        assert exc_info.value.position == 5

    def test_closing_tag_name_is_case_sensitive(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<div></DIV>")
        assert exc_info.value.kind is ErrorKind.MISMATCHED_CLOSING_TAG

    def test_missing_closing_tag(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<div><p>x</p>")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_EOF

    def test_unclosed_opening_tag(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<div")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_EOF

    def test_self_closing_requires_gt(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<br/ >")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_CHARACTER

    def test_missing_tag_name(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<>x</>")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_CHARACTER


# ---------------------------------------------------------------------------
# Style blocks
# ---------------------------------------------------------------------------


class TestStyleBlocks:
    def test_style_block_is_loaded(self) -> None:
        doc = parse_html("<style>h1{font-size:14px;}</style>")
        assert len(doc.stylesheets) == 1
        rules = doc.stylesheets[0].rules
        assert len(rules) == 1
        assert rules[0].selectors == [SimpleSelector(tag_name="h1")]
        assert rules[0].declarations[0].value == Length(14.0, Unit.PX)

    def test_style_element_stays_in_tree(self) -> None:
        doc = parse_html("<style>h1{font-size:14px;}</style>")
        assert doc.root.tag_name == "style"
        assert doc.root.children == [Text("h1{font-size:14px;}")]

    def test_nested_style_block_is_loaded(self) -> None:
        source = (
            "<html><head><title>t</title></head>"
            "<body><div><style>p { color: red; }</style></div></body></html>"
        )
        doc = parse_html(source)
        assert len(doc.stylesheets) == 1
        assert doc.stylesheets[0].rules[0].declarations[0].value == Keyword("red")

    def test_style_blocks_load_in_document_order(self) -> None:
        doc = parse_html("<style>a { x: one; }</style><style>b { x: two; }</style>")
        assert [s.rules[0].selectors[0].tag_name for s in doc.stylesheets] == ["a", "b"]

    def test_empty_style_block_loads_nothing(self) -> None:
        doc = parse_html("<style></style>")
        assert doc.stylesheets == []

    def test_bad_style_block_fails_whole_parse(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_html("<div><style>h1 { width: 3em; }</style></div>")
        assert exc_info.value.kind is ErrorKind.UNRECOGNIZED_UNIT

    def test_parse_nodes_uses_given_context(self) -> None:
        context = Document()
        root = parse_nodes("<style>a { b: c; }</style>", context)
        assert root.tag_name == "style"
        assert len(context.stylesheets) == 1
        # parse_nodes leaves root assignment to the caller
        assert context.root is None
