"""Metrics logging utilities."""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence
import csv
import os
from datetime import datetime


class MetricsLogger:
    """CSV logger for per-game match metrics."""

    def __init__(self, log_dir: str = "data/logs", prefix: str = "metrics"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
            prefix: File name prefix, a timestamp is appended
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics = defaultdict(list)
        self.current_step = 0

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer: Optional[csv.DictWriter] = None
        self.csv_fieldnames: List[str] = ["step"]

    def log_dict(self, metrics_dict: Dict[str, Any], step: Optional[int] = None) -> None:
        """
        Log one row of metrics.

        The header is fixed by the first row; later rows may only use keys
        from it.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step/game number (uses current_step if None)
        """
        if step is None:
            step = self.current_step

        if self.csv_writer is None:
            self.csv_fieldnames.extend(k for k in metrics_dict if k != "step")
            self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
            self.csv_writer.writeheader()
        else:
            unknown = [k for k in metrics_dict if k not in self.csv_fieldnames]
            if unknown:
                raise ValueError(f"Unknown metric columns: {unknown}")

        row = {field: None for field in self.csv_fieldnames}
        row.update(metrics_dict)
        row["step"] = step
        self.csv_writer.writerow(row)
        self.csv_file.flush()

        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))
        self.current_step = step + 1

    def get_metric(self, key: str) -> List[tuple]:
        """
        Get all logged values for a metric.

        Args:
            key: Metric name

        Returns:
            List of (step, value) tuples
        """
        return self.metrics.get(key, [])

    def summary(self, key: str, values: Sequence[Any]) -> Dict[Any, int]:
        """Count how often each of ``values`` was logged for ``key``."""
        logged = [v for _, v in self.get_metric(key)]
        return {value: logged.count(value) for value in values}

    def close(self) -> None:
        """Close the logger and CSV file."""
        if self.csv_file:
            self.csv_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
