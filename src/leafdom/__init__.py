"""leafdom - markup and style-sheet parsing into a small document model."""

__version__ = "0.1.0"

from leafdom.model import Document, Node, Stylesheet  # noqa: E402
from leafdom.parser import ErrorKind, ParseError, parse_css, parse_html  # noqa: E402
from leafdom.render import pretty, pretty_stylesheet, to_dict  # noqa: E402

__all__ = [
    "__version__",
    "Document",
    "Node",
    "Stylesheet",
    "ErrorKind",
    "ParseError",
    "parse_css",
    "parse_html",
    "pretty",
    "pretty_stylesheet",
    "to_dict",
]
