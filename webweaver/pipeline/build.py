#!/usr/bin/env python3
"""
build.py
-------------------
Run the complete publishing pipeline for one content directory.

    discover → parse metadata → materialize output tree
                              ├→ assemble feed (from materialized units)
                              └→ group by year → render index

Every run re-derives all outputs; nothing is cached between runs.

Programmatic API:
    from webweaver.pipeline.build import run_build, run_index
    result = run_build(config, settings, feed_path=None, logger=logger)
    print(result.index)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# --- Local imports ---
from webweaver.core.cli import BuildStats
from webweaver.core.exceptions import (
    DiscoveryError,
    DuplicateContentError,
    FeedWriteError,
    MaterializationError,
    MetadataParseError,
)
from webweaver.core.logging_manager import WeaverLogger, safe_logger
from webweaver.dataclasses.content_unit import ContentMetaUnit, ContentUnit
from webweaver.dataclasses.feed import Channel
from webweaver.pipeline.discover import collect_metadata, list_content_files
from webweaver.pipeline.feed import ChannelSettings, assemble_channel, write_feed
from webweaver.pipeline.index import group_by_year, render_index
from webweaver.pipeline.layout import Configuration
from webweaver.pipeline.materialize import materialize_all

BUILD_ERRORS = (
    DiscoveryError,
    MetadataParseError,
    DuplicateContentError,
    MaterializationError,
    FeedWriteError,
)


@dataclass
class BuildResult:
    """
    Artifacts of a build run.

    Attributes:
        index: Rendered index document
        channel: Assembled RSS channel (None for index-only runs)
        units: Materialized content units
        by_year: Index entries grouped by year
        stats: Run statistics
    """
    index: str
    by_year: Dict[int, List[ContentMetaUnit]] = field(default_factory=dict)
    channel: Optional[Channel] = None
    units: List[ContentUnit] = field(default_factory=list)
    stats: BuildStats = field(default_factory=BuildStats)


def _discover(
    config: Configuration, stats: BuildStats, logger: Optional[WeaverLogger]
) -> Dict[Path, ContentMetaUnit]:
    paths = list_content_files(config.input_root, logger)
    stats.files_discovered = len(paths)
    return collect_metadata(paths, config.categories, logger)


def _index(
    config: Configuration, metadata: Dict[Path, ContentMetaUnit], stats: BuildStats
) -> Tuple[Dict[int, List[ContentMetaUnit]], str]:
    by_year = group_by_year(meta.copy() for meta in metadata.values())
    stats.index_entries = sum(len(entries) for entries in by_year.values())
    return by_year, render_index(config.category, by_year)


def run_index(
    config: Configuration, logger: Optional[WeaverLogger] = None
) -> BuildResult:
    """
    Parse the content directory and render the index without writing anything.

    Raises:
        DiscoveryError, MetadataParseError, DuplicateContentError
    """
    stats = BuildStats()
    metadata = _discover(config, stats, logger)
    by_year, index = _index(config, metadata, stats)
    safe_logger(logger).log_operation("index_complete", stats.to_dict())
    return BuildResult(index=index, by_year=by_year, stats=stats)


def run_build(
    config: Configuration,
    settings: Optional[ChannelSettings] = None,
    feed_path: Optional[Path] = None,
    logger: Optional[WeaverLogger] = None,
    now: Optional[datetime] = None,
) -> BuildResult:
    """
    Run discovery, materialization, feed assembly and index rendering.

    Args:
        config: Run configuration
        settings: Channel settings (defaults derived from the category)
        feed_path: Where to write the RSS XML; not written when None
        logger: Optional logger
        now: Feed build timestamp (defaults to the current time)

    Returns:
        BuildResult with the index text, channel, units and statistics

    Raises:
        DiscoveryError, MetadataParseError, DuplicateContentError,
        MaterializationError, FeedWriteError: The run stops at the first
        failure, which is counted and logged as 'build_failed'; files
        already written are left in place.
    """
    stats = BuildStats()
    settings = settings or ChannelSettings.defaults(config.category)

    safe_logger(logger).log_operation(
        "build_start",
        {
            "input": str(config.input_root),
            "output": str(config.output_root),
            "category": config.category,
            "author": config.author,
        },
    )

    try:
        metadata = _discover(config, stats, logger)
        units = materialize_all(metadata, config.output_root, logger)
        stats.units_materialized = len(units)

        channel = assemble_channel(settings, units, now=now)
        stats.feed_items = len(channel.items)
        if feed_path is not None:
            write_feed(channel, feed_path, logger)

        by_year, index = _index(config, metadata, stats)
    except BUILD_ERRORS:
        stats.errors += 1
        safe_logger(logger).log_operation("build_failed", stats.to_dict())
        raise

    safe_logger(logger).log_info(f"Built {config.category or 'content'}: {stats.summary()}")
    safe_logger(logger).log_operation("build_complete", stats.to_dict())
    return BuildResult(
        index=index, by_year=by_year, channel=channel, units=units, stats=stats
    )
