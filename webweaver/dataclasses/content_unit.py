#!/usr/bin/env python3
"""
content_unit.py
-------------------

Dataclasses for parsed and materialized content files.

- ContentMetaUnit: metadata recovered from one content file's name plus
  the run's category lineage. Its output `path` is always computed from
  `categories` and `date`.
- ContentUnit: a ContentMetaUnit that has been written to the output
  tree, together with the rendered body that was written.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import List, Sequence

# ---- Local imports ----
from webweaver.pipeline.layout import derive_content_path
from webweaver.utils.fs import parse_content_filename
from webweaver.utils.slugify import friendly_filename


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Dataclasses -----
@dataclass
class ContentMetaUnit:
    """
    Metadata for a single content file.

    Attributes:
        date (date): Publication date from the filename prefix.
        name (str): Display name from the filename, verbatim.
        filesystem_friendly_name (str): Slug used for the output filename.
        file_ext (str): Original extension, verbatim.
        categories (List[str]): Category lineage of the run.
    """

    date: date
    name: str
    filesystem_friendly_name: str
    file_ext: str
    categories: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.categories = list(self.categories)

    # ---- Public constructors ----
    @classmethod
    def from_path(cls, path: Path, categories: Sequence[str]) -> ContentMetaUnit:
        """
        Parse a content file path into its metadata.

        Only the file name is inspected; the lineage comes from the run
        configuration.

        Raises:
            MetadataParseError: If the file name breaks the
                '<YYYY-MM-DD>_<name>.<ext>' grammar
        """
        parsed = parse_content_filename(Path(path).name)
        unit = cls(
            date=parsed.date,
            name=parsed.name,
            filesystem_friendly_name=friendly_filename(parsed.name),
            file_ext=parsed.file_ext,
            categories=list(categories),
        )
        logger.debug(f"Parsed {Path(path).name} -> {unit.output_file}")
        return unit

    # ---- Derived values ----
    @property
    def path(self) -> str:
        """Output directory '<categories>/<YYYY>/<MM>/<DD>'."""
        return derive_content_path(self.categories, self.date)

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def output_file(self) -> str:
        """Output file path relative to the output root."""
        return f"{self.path}/{self.filesystem_friendly_name}.{self.file_ext}"

    def copy(self) -> ContentMetaUnit:
        """Independent copy (the categories list is not shared)."""
        return replace(self, categories=list(self.categories))


@dataclass(frozen=True)
class ContentUnit:
    """
    A content file written to the output tree.

    Attributes:
        meta (ContentMetaUnit): Metadata copy owned by this unit.
        contents (str): Full rendered body, header included.
    """

    meta: ContentMetaUnit
    contents: str
