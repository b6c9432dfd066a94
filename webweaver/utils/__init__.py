"""
Utilities for the WebWeaver pipeline.

Modules:
    - fs: Content filename grammar and date path segments
    - slugify: Filesystem-friendly names
    - text: Display text (title case, dates)
"""
