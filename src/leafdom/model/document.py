"""Document node: the parse result and the shared parsing context."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from leafdom.model.node import Node
from leafdom.model.stylesheet import Stylesheet

logger = logging.getLogger(__name__)


@dataclass
class Document(Node):
    """Root of a parsed page.

    While markup is being parsed the document doubles as the parser's
    context: every ``<style>`` block found is handed to ``load_css`` and the
    resulting stylesheet is appended to ``stylesheets``. ``root`` is set once,
    when ``load_html`` finishes.
    """

    root: Node | None = None
    stylesheets: list[Stylesheet] = field(default_factory=list)

    def load_css(self, source: str) -> Stylesheet:
        """Parse ``source`` as a style sheet and append it to ``stylesheets``."""
        from leafdom.parser.css import parse_css

        stylesheet = parse_css(source)
        self.stylesheets.append(stylesheet)
        logger.debug(
            "Loaded stylesheet #%d with %d rule(s)",
            len(self.stylesheets),
            len(stylesheet.rules),
        )
        return stylesheet

    def load_html(self, source: str) -> Node:
        """Parse ``source`` as markup and make the result this document's root.

        On a ``ParseError`` the stylesheets collected during this call are
        discarded again and ``root`` is left unset.
        """
        from leafdom.parser.html import parse_nodes

        if self.root is not None:
            raise ValueError("Document root has already been loaded")

        mark = len(self.stylesheets)
        try:
            root = parse_nodes(source, self)
        except Exception:
            del self.stylesheets[mark:]
            raise
        self.root = root
        logger.debug("Document root set to %s", type(root).__name__)
        return root
