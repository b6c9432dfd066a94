#!/usr/bin/env python3
"""
discover.py
-------------------
Find content files and parse their metadata.

Listing failures are collected for the whole directory and raised
together as one DiscoveryError. Metadata parsing stops at the first file
whose name breaks the grammar.

Programmatic API:
    from webweaver.pipeline.discover import list_content_files, collect_metadata
    paths = list_content_files(config.input_root, logger)
    metadata = collect_metadata(paths, config.categories, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

# --- Local imports ---
from webweaver.core.exceptions import DiscoveryError, DuplicateContentError, MetadataParseError
from webweaver.core.logging_manager import WeaverLogger, safe_logger
from webweaver.dataclasses.content_unit import ContentMetaUnit


def list_content_files(
    input_dir: Path, logger: Optional[WeaverLogger] = None
) -> List[Path]:
    """
    List the non-directory entries of the content directory.

    Subdirectories are skipped, not descended into. Every entry is
    examined before failing, so all listing errors are reported at once.

    Args:
        input_dir: Content directory
        logger: Optional logger

    Returns:
        Entry paths sorted by path

    Raises:
        DiscoveryError: If the directory or any of its entries cannot be read
    """
    errors: List[OSError] = []
    files: List[Path] = []

    try:
        with os.scandir(input_dir) as entries:
            for entry in entries:
                try:
                    if entry.is_dir():
                        safe_logger(logger).log_debug(f"Skipping directory {entry.name}")
                        continue
                except OSError as e:
                    errors.append(e)
                    continue
                files.append(Path(entry.path))
    except OSError as e:
        errors.append(e)

    if errors:
        error = DiscoveryError(f"Cannot list content directory {input_dir}", errors)
        safe_logger(logger).log_error(error, {"operation": "list_content_files"})
        raise error

    files.sort()
    safe_logger(logger).log_operation(
        "content_files_listed", {"input": str(input_dir), "count": len(files)}
    )
    return files


def collect_metadata(
    paths: Iterable[Path],
    categories: Sequence[str],
    logger: Optional[WeaverLogger] = None,
) -> Dict[Path, ContentMetaUnit]:
    """
    Parse every content file name into a ContentMetaUnit.

    Args:
        paths: Content file paths
        categories: Category lineage of the run
        logger: Optional logger

    Returns:
        Mapping of resolved source path to metadata, in source path order

    Raises:
        MetadataParseError: On the first file name that cannot be parsed
        DuplicateContentError: If two paths resolve to the same file
    """
    metadata: Dict[Path, ContentMetaUnit] = {}

    for path in sorted(Path(p) for p in paths):
        key = path.resolve()
        if key in metadata:
            error = DuplicateContentError(key)
            safe_logger(logger).log_error(error, {"operation": "collect_metadata"})
            raise error

        try:
            metadata[key] = ContentMetaUnit.from_path(path, categories)
        except MetadataParseError as e:
            safe_logger(logger).log_error(
                e, {"operation": "collect_metadata", "file": str(path)}
            )
            raise

    safe_logger(logger).log_operation("metadata_collected", {"count": len(metadata)})
    return metadata
