#!/usr/bin/env python3
"""
index.py
-------------------
Chronological index of a content directory.

The index groups content by year (newest year first, newest entry first
within a year) and renders an AsciiDoc page of cross references:

    == 📓 Blog Index

    === 2023

    ==== xref:blog/2023/07/04/hello_world.adoc[Hello World] — July 04, 2023

Programmatic API:
    from webweaver.pipeline.index import group_by_year, render_index
    text = render_index(config.category, group_by_year(metadata.values()))
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from webweaver.dataclasses.content_unit import ContentMetaUnit
from webweaver.utils.text import display_date, title_case

INDEX_ICON = "\U0001F4D3"


def group_by_year(units: Iterable[ContentMetaUnit]) -> Dict[int, List[ContentMetaUnit]]:
    """
    Group content metadata by year, newest date first within each year.

    Entries sharing a date keep their input order.

    Returns:
        Mapping of year to entries, years in ascending order
    """
    grouped: Dict[int, List[ContentMetaUnit]] = {}
    for unit in units:
        grouped.setdefault(unit.year, []).append(unit)

    for entries in grouped.values():
        entries.sort(key=lambda u: u.date, reverse=True)

    return {year: grouped[year] for year in sorted(grouped)}


def render_index(category: str, by_year: Dict[int, List[ContentMetaUnit]]) -> str:
    """
    Render the year-grouped index as an AsciiDoc document.

    Args:
        category: Category display string (e.g. 'blog/rust')
        by_year: Output of group_by_year

    Returns:
        Index document text; years are listed newest first
    """
    lines = [f"== {INDEX_ICON} {title_case(category)} Index", ""]

    for year in sorted(by_year, reverse=True):
        lines.extend([f"=== {year}", ""])
        for unit in by_year[year]:
            lines.append(
                f"==== xref:{unit.output_file}[{unit.name}] — {display_date(unit.date)}"
            )
            lines.append("")

    return "\n".join(lines) + "\n"
