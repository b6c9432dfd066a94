#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the WebWeaver project.

Each pipeline stage raises its own family of exceptions so that callers
(and the CLI) can tell a bad input path from a bad filename or a failed
write.

Exception Hierarchy:
    Exception (built-in)
    ├── ConfigurationError - Input path / settings problems
    │   └── MissingAnchorDirectory - No `.content` anchor in the input path
    ├── DiscoveryError - Directory listing failures (aggregated)
    ├── MetadataParseError - Content filename grammar violations
    │   ├── MalformedFilename - Missing or repeated '_' separator, no stem
    │   ├── InvalidDate - Date prefix is not YYYY-MM-DD
    │   └── MissingExtension - No extension after the last '.'
    ├── DuplicateContentError - Two inputs resolve to the same source key
    ├── MaterializationError - Output tree generation failures
    │   ├── SourceReadError - Content body could not be read
    │   ├── DirectoryCreateError - Output directory could not be created
    │   └── WriteError - Output file could not be written
    └── FeedWriteError - Serialized feed could not be written

Usage:
    from webweaver.core.exceptions import MetadataParseError

    try:
        parsed = parse_content_filename(name)
    except MetadataParseError as e:
        logger.log_error(e, {"file": name})
        raise
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional


class ConfigurationError(Exception):
    """
    Exception for run configuration failures.

    Raised while resolving the run configuration, before any content is
    touched:
    - Input path does not exist or is not a directory
    - Channel settings file unreadable or malformed

    Examples:
        >>> raise ConfigurationError("Input content path does not exist: /tmp/x")
        >>> raise ConfigurationError("Channel settings must be a mapping")
    """

    pass


class MissingAnchorDirectory(ConfigurationError):
    """
    Exception for input paths without the anchor directory.

    The category lineage and the author marker are read from the path
    components following the anchor directory (`.content` by default).
    Without it there is nothing to derive them from.

    Examples:
        >>> raise MissingAnchorDirectory("No '.content' directory in /srv/blog")
    """

    pass


class DiscoveryError(Exception):
    """
    Exception for content directory listing failures.

    Unlike the other pipeline errors, listing failures are collected for
    the whole directory and reported together.

    Attributes:
        errors: Every OSError met while listing the directory
    """

    def __init__(self, message: str, errors: Optional[List[OSError]] = None) -> None:
        self.errors: List[OSError] = list(errors or [])
        if self.errors:
            details = "; ".join(str(e) for e in self.errors)
            message = f"{message} ({len(self.errors)} errors: {details})"
        super().__init__(message)


class MetadataParseError(Exception):
    """
    Base exception for content filename parsing failures.

    Content files must be named `<YYYY-MM-DD>_<display name>.<ext>`.

    Examples:
        >>> raise MetadataParseError("Cannot parse content filename: notes.txt")
    """

    pass


class MalformedFilename(MetadataParseError):
    """
    Exception for filenames that do not split into date and name.

    Raised when the stem has no '_', more than one '_', no stem at all,
    or an empty date or name part.

    Examples:
        >>> raise MalformedFilename("Expected exactly one '_' in stem: 'hello'")
    """

    pass


class InvalidDate(MetadataParseError):
    """
    Exception for date prefixes that are not a YYYY-MM-DD calendar date.

    Examples:
        >>> raise InvalidDate("Invalid date prefix '2023-13-01' in 2023-13-01_Post.adoc")
    """

    pass


class MissingExtension(MetadataParseError):
    """
    Exception for filenames without an extension.

    Examples:
        >>> raise MissingExtension("No extension in filename: 2023-07-04_Post")
    """

    pass


class DuplicateContentError(Exception):
    """
    Exception for two inputs resolving to the same source key.

    Raised instead of letting the second file silently replace the
    metadata of the first.

    Attributes:
        path: The resolved path seen twice
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Duplicate content file: {path}")


class MaterializationError(Exception):
    """
    Base exception for output tree generation failures.

    Pipeline Stage: metadata → output tree

    Attributes:
        path: File or directory the failed operation targeted
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class SourceReadError(MaterializationError):
    """
    Exception for unreadable content source files.

    Examples:
        >>> raise SourceReadError("Cannot read 2023-07-04_Post.adoc: permission denied")
    """

    pass


class DirectoryCreateError(MaterializationError):
    """
    Exception for output directories that cannot be created.

    Examples:
        >>> raise DirectoryCreateError("Cannot create content/blog/2023/07/04")
    """

    pass


class WriteError(MaterializationError):
    """
    Exception for output files that cannot be written.

    Examples:
        >>> raise WriteError("Cannot write content/blog/2023/07/04/post.adoc: disk full")
    """

    pass


class FeedWriteError(Exception):
    """
    Exception for failures writing the serialized RSS channel.

    Examples:
        >>> raise FeedWriteError("Cannot write feed to public/rss.xml")
    """

    pass
