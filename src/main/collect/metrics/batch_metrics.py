import argparse
import csv
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from src.main.collect.metrics.metrics_collector import MetricsCollector
from src.main.config import DEFAULT_WORKERS, JS_GLOB
from src.main.engine.errors import MetricsError
from src.main.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class BatchMetricsCalculator:
    """
    Computes the summary properties of every JavaScript file under a directory
    and saves them to a CSV, one row per file.
    """

    def __init__(self, workers: Optional[int] = None) -> None:
        """
        Initialize the batch processor.

        Args:
            workers (Optional[int]): Number of parallel worker processes.
                                      Defaults to DEFAULT_WORKERS.
        """
        self.workers: int = workers if workers is not None else DEFAULT_WORKERS

    @staticmethod
    def compute_row(js_path: Path) -> Tuple[List[str], List[str]]:
        """
        Compute metrics for a single file. Runs in a worker process with its
        own collector, so no analysis state crosses files.

        Args:
            js_path (Path): JavaScript file.

        Returns:
            tuple: (property labels, row of path followed by property values).
        """
        collector = MetricsCollector()
        result = collector.structural(collector.read_js(js_path))
        labels = [label for label, _ in result.properties]
        return labels, [str(js_path)] + [value for _, value in result.properties]

    @staticmethod
    def find_sources(root: Path) -> List[Path]:
        return sorted(p for p in root.rglob(JS_GLOB) if p.is_file())

    def process_metrics(self, root: Path, output_csv: Path) -> int:
        """
        Compute metrics in parallel and write them to a CSV file.

        Args:
            root (Path): Directory searched recursively for .js files.
            output_csv (Path): Path to save the CSV output.

        Returns:
            int: Number of rows written.
        """
        tasks = self.find_sources(root)
        print(f"Total files to process: {len(tasks)}")

        rows: List[List[str]] = []
        header: Optional[List[str]] = None
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            futures = {executor.submit(self.compute_row, task): task for task in tasks}
            for future in tqdm(as_completed(futures), total=len(futures), desc="js metrics"):
                try:
                    labels, row = future.result()
                except MetricsError as e:
                    logger.warning("Skipped %s: %s", futures[future], e)
                    continue
                header = header or ["path"] + labels
                rows.append(row)

        rows.sort(key=lambda r: r[0])
        with output_csv.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header or ["path"])
            writer.writerows(rows)

        print(f"Metrics processing complete. Results saved to {output_csv}.")
        return len(rows)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for running batch metrics processing.
    """
    parser = argparse.ArgumentParser(description="Summary metrics for every .js file under a directory")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .js files")
    parser.add_argument("output_csv", type=Path, help="Path to output CSV")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)
    BatchMetricsCalculator(workers=args.workers).process_metrics(args.root, args.output_csv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
