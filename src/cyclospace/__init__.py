"""
cyclospace - per-scope cyclomatic complexity from tree-sitter syntax trees.

Builds a tree of spaces (file, functions, classes, closures) for each source
file, attributes every decision point to its innermost space, and merges the
per-space values into sum/average/min/max summaries.
"""

__version__ = "0.3.0"

from .analyzer import SpaceAnalyzer
from .api import analyze
from .config import AnalysisConfig, load_config
from .metrics import CyclomaticStats, CyclomaticSummary
from .models import FuncSpace, ProjectReport, SpaceKind
from .spaces import build_space_tree

__all__ = [
    "analyze",  # Main entry point
    "SpaceAnalyzer",
    "AnalysisConfig",
    "load_config",
    "build_space_tree",
    "CyclomaticStats",
    "CyclomaticSummary",
    "FuncSpace",
    "ProjectReport",
    "SpaceKind",
]
