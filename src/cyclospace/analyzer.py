"""SpaceAnalyzer: parses sources and builds their space trees.

Usage:
    analyzer = SpaceAnalyzer()
    unit = analyzer.analyze_source("def f(): pass", "python", name="f.py")
    report = analyzer.analyze_paths([Path("src")])

Files are independent: each one is parsed and walked on its own thread and
yields one unit space. The project statistic is the merge of the per-file
summaries, which does not depend on completion order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import AnalysisConfig, default_config
from .discovery import discover_files
from .exceptions import (
    AnalysisError,
    FileAccessError,
    ParsingError,
    UnsupportedLanguageError,
)
from .grammars import LANGUAGE_RULES, detect_language, get_rules
from .logging_config import get_logger
from .models import FuncSpace, ProjectReport
from .parser import TreeSitterParser
from .spaces import build_space_tree

logger = get_logger(__name__)

# Below this many files, thread start-up costs more than it saves
_PARALLEL_THRESHOLD = 10


class SpaceAnalyzer:
    """Computes space trees for sources, files and directories."""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        parser: Optional[TreeSitterParser] = None,
    ) -> None:
        self.config = config or default_config
        self._parser = parser or TreeSitterParser()

    def available_languages(self) -> list[str]:
        """Languages whose grammar is installed."""
        return sorted(
            name
            for name, rules in LANGUAGE_RULES.items()
            if self._parser.is_grammar_available(rules.grammar)
        )

    def analyze_source(
        self, code: Union[str, bytes], language: str, name: Optional[str] = None
    ) -> FuncSpace:
        """Build the space tree of one source text.

        Raises:
            UnsupportedLanguageError: If the language has no rules or grammar
            ParsingError: If strict parsing is on and the tree has errors
        """
        rules = get_rules(language)
        if isinstance(code, str):
            code = code.encode("utf-8")

        tree = self._parser.parse(code, rules.grammar)
        if tree is None:
            raise UnsupportedLanguageError(language, self.available_languages())

        root = tree.root_node
        if root.has_error:
            if self.config.strict_parsing:
                raise ParsingError(name or "<source>", language, "syntax tree contains errors")
            logger.debug(f"{name or '<source>'}: syntax errors, analyzing recovered tree")

        return build_space_tree(root, rules, name=name)

    def analyze_file(self, path: Path, language: Optional[str] = None) -> FuncSpace:
        """Build the space tree of one file, detecting its language by extension.

        Raises:
            FileAccessError: If the file cannot be read
            UnsupportedLanguageError: If the language is unknown or unavailable
        """
        path = Path(path)
        language = language or detect_language(path)
        try:
            code = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, str(e))
        return self.analyze_source(code, language, name=str(path))

    def analyze_paths(self, paths: Iterable[Path]) -> ProjectReport:
        """Analyze every source under ``paths``.

        Per-file failures are recorded in ``ProjectReport.errors`` and do
        not stop the run.
        """
        files = discover_files(paths, self.config)
        report = ProjectReport()
        workers = self.config.effective_workers

        if workers == 1 or len(files) < _PARALLEL_THRESHOLD:
            for path in files:
                self._collect(report, path, self.analyze_file, path)
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {executor.submit(self.analyze_file, fp): fp for fp in files}
                for future in as_completed(futures):
                    self._collect(report, futures[future], future.result)

        logger.info(
            f"Analyzed {len(report.files)} of {len(files)} files"
            + (f", {len(report.errors)} failed" if report.errors else "")
        )
        return report

    @staticmethod
    def _collect(report: ProjectReport, path: Path, produce, *args) -> None:
        try:
            report.files[str(path)] = produce(*args)
        except AnalysisError as e:
            logger.warning(f"Skipping {path}: {e}")
            report.errors[str(path)] = str(e)
