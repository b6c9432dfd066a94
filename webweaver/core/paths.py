#!/usr/bin/env python3
"""
paths.py
-------------------
Path and naming constants shared by the WebWeaver pipeline.

The input layout the pipeline expects:

    <anywhere>/
    └── .content/              # anchor directory
        └── [.author/]         # optional author marker
            └── <category>/    # one or more lineage segments
                └── <YYYY-MM-DD>_<Display Name>.<ext>

And the tree it produces under the output root:

    <output_root>/
    └── <category>/.../<YYYY>/<MM>/<DD>/<slug>.<ext>

Relative defaults resolve against the working directory of the run.
"""
from __future__ import annotations

from pathlib import Path

# ----- Input layout -----
CONTENT_ANCHOR = ".content"
AUTHOR_MARKER_PREFIX = "."

# ----- Output layout -----
DEFAULT_OUTPUT_DIR = Path("content")
HEAD_INCLUDE = "head.adoc"

# ----- Logs -----
DEFAULT_LOG_DIR = Path("logs")

# ----- Feed -----
GENERATOR = "WebWeaver"
DEFAULT_FEED_LINK = "/"
DEFAULT_FEED_LANGUAGE = "en-us"
