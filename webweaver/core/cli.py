#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and run statistics for WebWeaver commands.

Functions:
    setup_logger: Initialize a WeaverLogger for a CLI command

Classes:
    OperationStats: Base statistics (files, elapsed time)
    BuildStats: Statistics for a full build run

Usage:
    from webweaver.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "build")
    stats = BuildStats()
    stats.units_materialized += 1
    logger.log_info(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from webweaver.core.logging_manager import WeaverLogger


def setup_logger(log_dir: Path, component_name: str) -> WeaverLogger:
    """
    Create the operations log directory and a logger for the component.

    Args:
        log_dir: Base log directory (typically paths.DEFAULT_LOG_DIR)
        component_name: Component identifier (e.g. 'build', 'index')

    Returns:
        Configured WeaverLogger writing to <log_dir>/operations
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return WeaverLogger(operations_log_dir, component_name=component_name)


@dataclass
class OperationStats:
    """
    Metrics common to every command: files seen and elapsed time.

    Attributes:
        files_discovered: Content files found in the input directory
        errors: Failures that aborted the run
        start_time: Run start timestamp
    """
    files_discovered: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        for name in ("files_discovered", "errors"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def duration(self) -> float:
        """Seconds since start_time (frozen after the first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return (
            f"{self.files_discovered} files discovered, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_discovered": self.files_discovered,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class BuildStats(OperationStats):
    """
    Statistics for a build run.

    Attributes:
        units_materialized: Content files written to the output tree
        index_entries: Entries listed in the rendered index
        feed_items: Items in the assembled channel
    """
    units_materialized: int = 0
    index_entries: int = 0
    feed_items: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("units_materialized", "index_entries", "feed_items"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def summary(self) -> str:
        """Get formatted summary with build metrics."""
        return ", ".join(
            [
                f"{self.files_discovered} files discovered",
                f"{self.units_materialized} materialized",
                f"{self.index_entries} indexed",
                f"{self.feed_items} feed items",
                f"{self.errors} errors",
                f"{self.duration():.2f}s",
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update(
            {
                "units_materialized": self.units_materialized,
                "index_entries": self.index_entries,
                "feed_items": self.feed_items,
            }
        )
        return d
