"""
test_build.py
-------------
Integration tests for the full build run.

Runs discovery, materialization, feed assembly and index rendering
against real temporary directories.
"""
import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
from xml.etree import ElementTree

from webweaver.core.exceptions import (
    DiscoveryError,
    DirectoryCreateError,
    MalformedFilename,
)
from webweaver.core.logging_manager import WeaverLogger
from webweaver.pipeline.build import run_build, run_index
from webweaver.pipeline.feed import ChannelSettings
from webweaver.pipeline.layout import Configuration

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

EXPECTED_INDEX = (
    "== \U0001F4D3 Blog Index\n"
    "\n"
    "=== 2023\n"
    "\n"
    "==== xref:blog/2023/05/01/spring_notes.adoc[Spring Notes] — May 01, 2023\n"
    "\n"
    "==== xref:blog/2023/01/10/new_year_new_plans.adoc"
    "[New Year, New Plans!] — January 10, 2023\n"
    "\n"
    "=== 2022\n"
    "\n"
    "==== xref:blog/2022/12/31/year_in_review.adoc[Year in Review] — December 31, 2022\n"
    "\n"
)


@pytest.fixture
def config(content_dir, output_dir):
    """Configuration for the blog content directory."""
    return Configuration.from_input_path(content_dir, output_dir)


class TestRunBuild:
    """Test run_build end to end."""

    def test_writes_output_tree(self, config, sample_content, output_dir):
        """Test every content file is materialized under its date path."""
        run_build(config, now=NOW)

        spring = output_dir / "blog" / "2023" / "05" / "01" / "spring_notes.adoc"
        assert spring.read_text(encoding="utf-8") == (
            ":base-path: ../../../..\n"
            "\n"
            "include::{base-path}/head.adoc[]\n"
            "\n"
            "== Spring Notes\n"
            "\n"
            "Spring body.\n"
        )
        assert (output_dir / "blog/2023/01/10/new_year_new_plans.adoc").exists()
        assert (output_dir / "blog/2022/12/31/year_in_review.adoc").exists()

    def test_hello_world_end_to_end(self, config, write_content, output_dir):
        """Test one dated file becomes blog/2023/07/04/hello_world.adoc with its header."""
        write_content("2023-07-04_Hello World.adoc", "Welcome to the blog.\n")

        result = run_build(config, now=NOW)

        target = output_dir / "blog" / "2023" / "07" / "04" / "hello_world.adoc"
        assert target.read_text(encoding="utf-8") == (
            ":base-path: ../../../..\n"
            "\n"
            "include::{base-path}/head.adoc[]\n"
            "\n"
            "== Hello World\n"
            "\n"
            "Welcome to the blog.\n"
        )
        assert [u.meta.output_file for u in result.units] == [
            "blog/2023/07/04/hello_world.adoc"
        ]
        assert result.index == (
            "== \U0001F4D3 Blog Index\n"
            "\n"
            "=== 2023\n"
            "\n"
            "==== xref:blog/2023/07/04/hello_world.adoc[Hello World] — July 04, 2023\n"
            "\n"
        )

    def test_index(self, config, sample_content):
        """Test the rendered index groups by year, newest first."""
        result = run_build(config, now=NOW)
        assert result.index == EXPECTED_INDEX
        assert list(result.by_year) == [2022, 2023]

    def test_channel(self, config, sample_content):
        """Test one feed item per materialized unit."""
        result = run_build(config, now=NOW)

        assert result.channel.title == "Blog"
        assert result.channel.last_build_date == "Tue, 02 Jan 2024 03:04:05 +0000"
        assert sorted(item.title for item in result.channel.items) == [
            "New Year, New Plans!",
            "Spring Notes",
            "Year in Review",
        ]
        contents = {unit.contents for unit in result.units}
        assert {item.content for item in result.channel.items} == contents

    def test_stats(self, config, sample_content):
        """Test run statistics match the content directory."""
        stats = run_build(config, now=NOW).stats
        assert stats.files_discovered == 3
        assert stats.units_materialized == 3
        assert stats.index_entries == 3
        assert stats.feed_items == 3

    def test_feed_file(self, config, sample_content, tmp_dir):
        """Test the feed is written when a path is given."""
        feed_path = tmp_dir / "public" / "rss.xml"
        settings = ChannelSettings(title="Field Notes", link="https://example.org/")
        run_build(config, settings, feed_path=feed_path, now=NOW)

        rss = ElementTree.fromstring(feed_path.read_bytes())
        assert rss.findtext("channel/title") == "Field Notes"
        assert len(rss.findall("channel/item")) == 3

    def test_no_feed_file_by_default(self, config, sample_content, tmp_dir):
        """Test nothing but the content tree is written without a feed path."""
        run_build(config, now=NOW)
        assert not list(tmp_dir.glob("**/*.xml"))

    def test_rebuild_is_stable(self, config, sample_content):
        """Test a second run yields the same index and contents."""
        first = run_build(config, now=NOW)
        second = run_build(config, now=NOW)
        assert first.index == second.index
        assert [u.contents for u in first.units] == [u.contents for u in second.units]

    def test_empty_directory(self, config, output_dir):
        """Test an empty directory builds an empty index."""
        result = run_build(config, now=NOW)
        assert result.index == "== \U0001F4D3 Blog Index\n\n"
        assert result.channel.items == []
        assert not output_dir.exists()

    def test_subdirectories_ignored(self, config, sample_content, content_dir):
        """Test subdirectories of the content directory are not built."""
        nested = content_dir / "drafts"
        nested.mkdir()
        (nested / "2023-08-01_Draft.adoc").write_text("Draft.\n")
        assert run_build(config, now=NOW).stats.files_discovered == 3

    def test_malformed_name_aborts(self, config, sample_content, write_content, output_dir):
        """Test a badly named file stops the build before anything is written."""
        write_content("README.adoc")
        with pytest.raises(MalformedFilename):
            run_build(config, now=NOW)
        assert not output_dir.exists()

    def test_output_blocked(self, config, sample_content, output_dir):
        """Test a write failure propagates as a MaterializationError subclass."""
        output_dir.mkdir()
        (output_dir / "blog").write_text("in the way")
        with pytest.raises(DirectoryCreateError):
            run_build(config, now=NOW)

    def test_content_dir_removed(self, config):
        """Test a vanished content directory is a DiscoveryError."""
        config.input_root.rmdir()
        with pytest.raises(DiscoveryError):
            run_build(config, now=NOW)

    def test_logs_run(self, config, sample_content, log_dir):
        """Test build start and completion are logged."""
        logger = WeaverLogger(log_dir, component_name="build")
        try:
            run_build(config, logger=logger, now=NOW)
        finally:
            logger.close()

        log_text = (log_dir / "build.log").read_text(encoding="utf-8")
        assert "build_start" in log_text
        assert "build_complete" in log_text
        assert '"units_materialized": 3' in log_text
        assert "INFO - Built blog: 3 files discovered" in log_text

    def test_failure_counted_and_logged(self, config, sample_content, output_dir):
        """Test a failed run logs its statistics with the error counted."""
        output_dir.mkdir()
        (output_dir / "blog").write_text("in the way")
        logger = MagicMock(spec=WeaverLogger)

        with pytest.raises(DirectoryCreateError):
            run_build(config, logger=logger, now=NOW)

        operations = {c.args[0]: c.args[1] for c in logger.log_operation.call_args_list}
        assert "build_complete" not in operations
        assert operations["build_failed"]["errors"] == 1
        assert operations["build_failed"]["files_discovered"] == 3


class TestRunIndex:
    """Test run_index."""

    def test_index_without_writing(self, config, sample_content, output_dir):
        """Test the index matches a full build and nothing is written."""
        result = run_index(config)
        assert result.index == EXPECTED_INDEX
        assert result.channel is None
        assert result.units == []
        assert not output_dir.exists()
