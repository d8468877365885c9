"""Shared test fixtures for cyclospace."""

import textwrap

import pytest

from cyclospace.analyzer import SpaceAnalyzer
from cyclospace.config import AnalysisConfig
from cyclospace.grammars import get_rules
from cyclospace.parser import get_available_grammars


class FakeNode:
    """Hand-built stand-in for a tree-sitter node."""

    def __init__(self, type, children=(), named=True, fields=None, line=0, end_line=None, text=None):
        self.type = type
        self.is_named = named
        self.children = list(children)
        self.parent = None
        for child in self.children:
            child.parent = self
        self._fields = dict(fields or {})
        for child in self._fields.values():
            if child.parent is None:
                child.parent = self
        self.start_point = (line, 0)
        self.end_point = (line if end_line is None else end_line, 0)
        self.text = text.encode("utf-8") if text is not None else None

    def child_by_field_name(self, name):
        return self._fields.get(name)

    def __repr__(self):
        return f"FakeNode({self.type!r})"


@pytest.fixture
def make_node():
    """Factory for FakeNode trees."""
    return FakeNode


@pytest.fixture
def analyzer():
    """Analyzer with default configuration."""
    return SpaceAnalyzer(AnalysisConfig(workers=1))


def requires_language(language):
    """Skip unless the grammar behind ``language`` is installed."""
    grammar = get_rules(language).grammar
    return pytest.mark.skipif(
        grammar not in get_available_grammars(),
        reason=f"tree-sitter grammar for {language} not installed",
    )


def source(text):
    """Dedent an inline source snippet."""
    return textwrap.dedent(text).lstrip("\n")
