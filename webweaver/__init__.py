"""
WebWeaver
=========

A content-publishing pipeline for date-prefixed AsciiDoc (or any text)
content files.

Given a content directory below a `.content` anchor directory, WebWeaver:
    - parses `<YYYY-MM-DD>_<Display Name>.<ext>` file names
    - writes each file to `<categories>/<YYYY>/<MM>/<DD>/<slug>.<ext>`
      with a head include and a title heading prepended
    - renders a chronological, category-scoped index
    - assembles an RSS 2.0 channel of the written files

Main Components:
    - core: Exceptions, logging, paths, CLI statistics
    - dataclasses: Content and feed data structures
    - utils: Filename grammar, slugs, display text
    - pipeline: Layout, discovery, materialization, index, feed, CLI

Primary Interfaces:
    - webweaver.pipeline.cli: `weave` command-line interface
    - webweaver.pipeline.build.run_build: programmatic entry point
"""

__version__ = "0.3.0"
