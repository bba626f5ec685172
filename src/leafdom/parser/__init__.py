from leafdom.parser.css import CssParser, parse_css
from leafdom.parser.errors import ErrorKind, ParseError
from leafdom.parser.html import HtmlParser, parse_html, parse_nodes

__all__ = [
    "CssParser",
    "ErrorKind",
    "HtmlParser",
    "ParseError",
    "parse_css",
    "parse_html",
    "parse_nodes",
]
