import argparse
import csv
import logging
from pathlib import Path
from typing import List, Optional

from src.main.config import (
    CHEPIN_CSV,
    JS_GLOB,
    MAX_TREE_NODES,
    OPERANDS_CSV,
    OPERATORS_CSV,
    PROPERTIES_CSV,
)
from src.main.engine.analyzer import AnalysisResult, analyze
from src.main.engine.errors import MetricsError, SourceEncodingError, TreeTooLargeError
from src.main.utils.js_parser import count_nodes, parse
from src.main.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

_CHEPIN_LABELS = ("P", "M", "C", "T")


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceEncodingError(str(path), e.reason) from e


class MetricsCollector:
    """
    Parses JavaScript sources and runs the metrics engine on them.
    """

    def __init__(self, max_tree_nodes: int = MAX_TREE_NODES) -> None:
        """
        Initialize the metrics collector.

        Args:
            max_tree_nodes (int): Largest syntax tree handed to the engine.
        """
        self.max_tree_nodes: int = max_tree_nodes

    @staticmethod
    def read_js(path: Path) -> str:
        """
        Read JavaScript source code from a file or recursively from a directory.

        Args:
            path (Path): Path to the file or directory.

        Returns:
            str: Concatenated JavaScript source code.

        Raises:
            SourceEncodingError: If a file is not valid UTF-8.
        """
        files = [path] if path.is_file() else sorted(path.rglob(JS_GLOB))
        return "\n".join(_read_source(p) for p in files)

    def structural(self, src: str) -> AnalysisResult:
        """
        Compute all metrics of one program.

        Args:
            src (str): Source code.

        Returns:
            AnalysisResult: Result record of the engine.

        Raises:
            MetricsError: If the source cannot be measured.
        """
        tree = parse(src)
        nodes = count_nodes(tree)
        if nodes > self.max_tree_nodes:
            raise TreeTooLargeError(nodes, self.max_tree_nodes)
        return analyze(tree)

    @staticmethod
    def save_csv(result: AnalysisResult, out_dir: Path) -> List[Path]:
        """
        Write tallies, properties and Chepin groups as CSV files.

        Args:
            result (AnalysisResult): Engine output.
            out_dir (Path): Target directory, created if missing.

        Returns:
            list: Paths of the written files.
        """
        out_dir.mkdir(parents=True, exist_ok=True)
        tables = {
            OPERATORS_CSV: (["operator", "count"], sorted(result.operators.items())),
            OPERANDS_CSV: (["operand", "count"], sorted(result.operands.items())),
            PROPERTIES_CSV: (["property", "value"], result.properties),
            CHEPIN_CSV: (
                ["group", "identifier"],
                [
                    (label, name)
                    for label, names in zip(_CHEPIN_LABELS, result.chepin.groups)
                    for name in names
                ],
            ),
        }
        written: List[Path] = []
        for file_name, (header, rows) in tables.items():
            path = out_dir / file_name
            with path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow(header)
                writer.writerows(rows)
            written.append(path)
        return written


def print_result(result: AnalysisResult) -> None:
    width = max((len(label) for label, _ in result.properties), default=0)
    for label, value in result.properties:
        print(f"{label:<{width}}  {value}")
    print()
    for label, names in zip(_CHEPIN_LABELS, result.chepin.groups):
        print(f"{label}: {', '.join(names) if names else '-'}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for measuring a single JavaScript program.
    """
    parser = argparse.ArgumentParser(
        description="Halstead, Gilb and Chepin metrics of a JavaScript program"
    )
    parser.add_argument("path", type=Path, help="JavaScript file or directory of .js files")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for operators/operands/properties/chepin CSV files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log the walker trace")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    collector = MetricsCollector()
    try:
        result = collector.structural(collector.read_js(args.path))
    except MetricsError as e:
        logger.error("Cannot measure %s: %s", args.path, e)
        return 1

    print_result(result)
    if args.output_dir is not None:
        for path in collector.save_csv(result, args.output_dir):
            print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
