"""Local configuration for doc2md."""

from __future__ import annotations

import os


DEFAULT_MAX_DIRECTIVE_DEPTH = 64
DEFAULT_MAX_MARKUP_DEPTH = 256
DEFAULT_MAX_TREE_DEPTH = 64
DEFAULT_HTML_PARSER = "lxml"
DEFAULT_LOG_LEVEL = "WARNING"

# Recursion caps for adversarial comment text.
DOC2MD_MAX_DIRECTIVE_DEPTH = int(os.getenv("DOC2MD_MAX_DIRECTIVE_DEPTH", str(DEFAULT_MAX_DIRECTIVE_DEPTH)))
DOC2MD_MAX_MARKUP_DEPTH = int(os.getenv("DOC2MD_MAX_MARKUP_DEPTH", str(DEFAULT_MAX_MARKUP_DEPTH)))
DOC2MD_MAX_TREE_DEPTH = int(os.getenv("DOC2MD_MAX_TREE_DEPTH", str(DEFAULT_MAX_TREE_DEPTH)))
# BeautifulSoup tree builder used for HTML-like comment text.
DOC2MD_HTML_PARSER = os.getenv("DOC2MD_HTML_PARSER", DEFAULT_HTML_PARSER)
DOC2MD_LOG_LEVEL = os.getenv("DOC2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL)
