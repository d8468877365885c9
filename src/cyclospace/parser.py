"""Tree-sitter parser wrapper.

Loads whichever grammar wheels are installed and parses source bytes into
syntax trees. Missing grammars are skipped rather than failing import.

Usage:
    parser = TreeSitterParser()
    if parser.is_grammar_available("python"):
        tree = parser.parse(code_bytes, "python")
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Optional

from .logging_config import get_logger

logger = get_logger(__name__)

TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_grammar_modules: dict[str, Any] = {}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    try:
        import tree_sitter_python

        _grammar_modules["python"] = tree_sitter_python
    except ImportError:
        pass

    try:
        import tree_sitter_javascript

        _grammar_modules["javascript"] = tree_sitter_javascript
    except ImportError:
        pass

    try:
        import tree_sitter_typescript

        _grammar_modules["typescript"] = tree_sitter_typescript
        # TSX is bundled with tree-sitter-typescript
        _grammar_modules["tsx"] = tree_sitter_typescript
    except ImportError:
        pass

    try:
        import tree_sitter_java

        _grammar_modules["java"] = tree_sitter_java
    except ImportError:
        pass

    try:
        import tree_sitter_c

        _grammar_modules["c"] = tree_sitter_c
    except ImportError:
        pass

    try:
        import tree_sitter_cpp

        _grammar_modules["cpp"] = tree_sitter_cpp
    except ImportError:
        pass

    try:
        import tree_sitter_rust

        _grammar_modules["rust"] = tree_sitter_rust
    except ImportError:
        pass

    try:
        import tree_sitter_go

        _grammar_modules["go"] = tree_sitter_go
    except ImportError:
        pass

    try:
        import tree_sitter_ruby

        _grammar_modules["ruby"] = tree_sitter_ruby
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    from tree_sitter import Tree


def get_available_grammars() -> list[str]:
    """Grammar names with an installed wheel."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return sorted(_grammar_modules)


class TreeSitterParser:
    """Multi-grammar tree-sitter front end.

    ``Language`` objects are built once and shared; ``Parser`` objects are
    created lazily per thread since a parser carries mutable state.
    """

    def __init__(self) -> None:
        self._languages: dict[str, Any] = {}
        self._local = threading.local()

        if not TREE_SITTER_AVAILABLE:
            return

        for grammar, module in _grammar_modules.items():
            try:
                # tree-sitter-typescript exposes language_typescript()/language_tsx()
                lang_fn = getattr(module, f"language_{grammar}", None)
                if lang_fn is None:
                    lang_fn = getattr(module, "language", None)
                if lang_fn is None:
                    continue
                # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
                self._languages[grammar] = _tree_sitter_module.Language(lang_fn())
            except Exception as e:
                logger.warning(f"Skipping {grammar} grammar: {e}")

    def is_grammar_available(self, grammar: str) -> bool:
        return grammar in self._languages

    @property
    def grammars(self) -> list[str]:
        return sorted(self._languages)

    def parse(self, code: bytes, grammar: str) -> Optional[Tree]:
        """Parse code with the named grammar.

        Returns:
            Tree, or None when the grammar is not available
        """
        parser = self._parser_for(grammar)
        if parser is None:
            return None
        return parser.parse(code)

    def _parser_for(self, grammar: str) -> Any:
        language = self._languages.get(grammar)
        if language is None:
            return None
        parsers = getattr(self._local, "parsers", None)
        if parsers is None:
            parsers = self._local.parsers = {}
        parser = parsers.get(grammar)
        if parser is None:
            parser = parsers[grammar] = _tree_sitter_module.Parser(language)
        return parser
