#!/usr/bin/env python3
"""
layout.py
-------------------
Category lineage, output paths and run configuration.

The category lineage of a run is read once from the input directory's
position below the anchor directory:

    /srv/site/.content/.alice/blog/rust
              └──┬───┘ └─┬──┘ └───┬───┘
              anchor   author   lineage = ['blog', 'rust']

Every content unit of the run is then placed at

    <lineage>/<YYYY>/<MM>/<DD>

relative to the output root. The lineage is carried explicitly in the
Configuration and passed to every call that needs it.

Programmatic API:
    from webweaver.pipeline.layout import Configuration, derive_content_path

    config = Configuration.from_input_path(Path("site/.content/blog"))
    derive_content_path(config.categories, date(2023, 7, 4))  # 'blog/2023/07/04'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

# --- Local imports ---
from webweaver.core.exceptions import ConfigurationError, MissingAnchorDirectory
from webweaver.core.paths import AUTHOR_MARKER_PREFIX, CONTENT_ANCHOR, DEFAULT_OUTPUT_DIR
from webweaver.utils.fs import date_segments


def derive_lineage(
    input_path: Path, anchor: str = CONTENT_ANCHOR
) -> Tuple[List[str], Optional[str]]:
    """
    Read the category lineage and author marker from an input path.

    Components after the last occurrence of `anchor` form the lineage,
    except a leading dot-prefixed component, which names the author and
    is not a category.

    Args:
        input_path: Content directory given to the run
        anchor: Anchor directory name (default '.content')

    Returns:
        (categories, author) where author is None without a marker

    Raises:
        MissingAnchorDirectory: If no component equals `anchor`

    Examples:
        >>> derive_lineage(Path("site/.content/blog/rust"))
        (['blog', 'rust'], None)
        >>> derive_lineage(Path("site/.content/.alice/blog"))
        (['blog'], 'alice')
    """
    parts = Path(input_path).parts
    positions = [i for i, part in enumerate(parts) if part == anchor]
    if not positions:
        raise MissingAnchorDirectory(
            f"No {anchor!r} directory in input path {str(input_path)!r}"
        )

    after_anchor = list(parts[positions[-1] + 1:])
    author: Optional[str] = None
    if after_anchor and after_anchor[0].startswith(AUTHOR_MARKER_PREFIX):
        author = after_anchor.pop(0)[len(AUTHOR_MARKER_PREFIX):]

    return after_anchor, author


def derive_content_path(categories: Sequence[str], value: date) -> str:
    """
    Build the output directory of a content unit.

    Args:
        categories: Category lineage of the run
        value: Publication date of the unit

    Returns:
        '<categories>/<YYYY>/<MM>/<DD>' with '/' separators
    """
    return "/".join([*categories, *date_segments(value)])


@dataclass(frozen=True)
class Configuration:
    """
    Run configuration, resolved once at startup and read-only afterwards.

    Attributes:
        input_root: Directory holding the content files
        output_root: Root of the generated output tree
        categories: Category lineage shared by every unit of the run
        author: Author name from a dot-prefixed marker, if any
        anchor: Anchor directory name the lineage was read from
    """

    input_root: Path
    output_root: Path
    categories: Tuple[str, ...]
    author: Optional[str] = None
    anchor: str = CONTENT_ANCHOR

    @property
    def category(self) -> str:
        """Lineage joined as a display string (e.g. 'blog/rust')."""
        return "/".join(self.categories)

    @classmethod
    def from_input_path(
        cls,
        input_path: Path,
        output_root: Path = DEFAULT_OUTPUT_DIR,
        anchor: str = CONTENT_ANCHOR,
    ) -> Configuration:
        """
        Validate the input directory and derive the run configuration.

        The path is made absolute and normalized first, so relative inputs
        such as '.' and components such as 'sub/..' never reach the lineage.

        Raises:
            MissingAnchorDirectory: If the anchor is not in the path
            ConfigurationError: If the path does not exist or is not a directory
        """
        input_path = Path(os.path.abspath(input_path))
        categories, author = derive_lineage(input_path, anchor)

        if not input_path.exists():
            raise ConfigurationError(f"Input content path does not exist: {input_path}")
        if not input_path.is_dir():
            raise ConfigurationError(f"Input content path is not a directory: {input_path}")

        return cls(
            input_root=input_path,
            output_root=Path(output_root),
            categories=tuple(categories),
            author=author,
            anchor=anchor,
        )
