#!/usr/bin/env python3
"""
materialize.py
-------------------
Write content files into the date-partitioned output tree.

Each source body is prefixed with an AsciiDoc header that includes the
shared head file (relative to the output root) and renders the display
name as the page title:

    :base-path: ../../../..

    include::{base-path}/head.adoc[]

    == Hello World

    <original body>

and written to `<output_root>/<categories>/<YYYY>/<MM>/<DD>/<slug>.<ext>`.

    <output_root>/
    ├── head.adoc                  (not generated)
    └── blog/
        └── 2023/
            └── 07/
                └── 04/
                    └── hello_world.adoc

Programmatic API:
    from webweaver.pipeline.materialize import materialize_all
    units = materialize_all(metadata, output_root, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, List, Mapping, Optional

# --- Local imports ---
from webweaver.core.exceptions import (
    DirectoryCreateError,
    MaterializationError,
    SourceReadError,
    WriteError,
)
from webweaver.core.logging_manager import WeaverLogger, safe_logger
from webweaver.core.paths import HEAD_INCLUDE
from webweaver.dataclasses.content_unit import ContentMetaUnit, ContentUnit


def base_path(meta: ContentMetaUnit) -> str:
    """Relative path from the unit's directory back to the output root."""
    depth = len(meta.path.split("/"))
    return "/".join([".."] * depth)


def render_contents(meta: ContentMetaUnit, body: str) -> str:
    """Prefix a content body with the head include and the title heading."""
    header = (
        f":base-path: {base_path(meta)}\n"
        "\n"
        f"include::{{base-path}}/{HEAD_INCLUDE}[]\n"
        "\n"
        f"== {meta.name}\n"
        "\n"
    )
    return header + body


def materialize_unit(
    source: Path,
    meta: ContentMetaUnit,
    output_root: Path,
    logger: Optional[WeaverLogger] = None,
) -> ContentUnit:
    """
    Render one content file and write it to its output location.

    Implementation Logic:
    ---------------------
    1. Read the source body (UTF-8)
    2. Prepend the header (render_contents)
    3. Create <output_root>/<meta.path> and its parents (existing is fine)
    4. Write <slug>.<ext>, replacing any previous file

    Args:
        source: Source content file
        meta: Parsed metadata of the source
        output_root: Root of the output tree
        logger: Optional logger

    Returns:
        ContentUnit holding a copy of `meta` and the written contents

    Raises:
        SourceReadError: If the source cannot be read or decoded
        DirectoryCreateError: If the output directory cannot be created
        WriteError: If the output file cannot be written
    """
    try:
        with open(source, encoding="utf-8", newline="") as f:
            body = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read content file {source}: {e}", source) from e

    contents = render_contents(meta, body)

    out_dir = Path(output_root) / meta.path
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(f"Cannot create directory {out_dir}: {e}", out_dir) from e

    out_file = Path(output_root) / meta.output_file
    try:
        with open(out_file, "w", encoding="utf-8", newline="") as f:
            f.write(contents)
    except OSError as e:
        raise WriteError(f"Cannot write {out_file}: {e}", out_file) from e

    safe_logger(logger).log_debug(f"Wrote {out_file}", {"source": str(source)})
    return ContentUnit(meta=meta.copy(), contents=contents)


def materialize_all(
    metadata: Mapping[Path, ContentMetaUnit],
    output_root: Path,
    logger: Optional[WeaverLogger] = None,
) -> List[ContentUnit]:
    """
    Materialize every parsed content file, in source path order.

    The first failure aborts the run; files already written stay on disk.
    Sources whose slugs collide on the same output file are reported as
    a warning and the later one overwrites the earlier.

    Returns:
        ContentUnits in source path order

    Raises:
        MaterializationError: On the first read, mkdir or write failure
    """
    units: List[ContentUnit] = []
    claimed: Dict[str, Path] = {}

    safe_logger(logger).log_operation(
        "materialize_start", {"output": str(output_root), "count": len(metadata)}
    )

    for source in sorted(metadata):
        meta = metadata[source]

        previous = claimed.get(meta.output_file)
        if previous is not None:
            safe_logger(logger).log_warning(
                f"{source.name} overwrites {previous.name}",
                {"output_file": meta.output_file},
            )
        claimed[meta.output_file] = source

        try:
            units.append(materialize_unit(source, meta, output_root, logger))
        except MaterializationError as e:
            safe_logger(logger).log_error(e, {"operation": "materialize", "file": str(source)})
            raise

    safe_logger(logger).log_operation("materialize_complete", {"count": len(units)})
    return units
