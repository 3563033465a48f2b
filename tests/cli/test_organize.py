"""Tests for organize CLI command."""

import os
import sys
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dirsort import __version__
from dirsort.cli.organize import organize


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


class TestOrganizeCLI:
    """Test organize CLI command."""

    def test_organize_dry_run(self, cli_runner, source_dir):
        """Dry run reports destinations and moves nothing."""
        result = cli_runner.invoke(organize, ["-s", str(source_dir), "--dry-run"])

        assert result.exit_code == 0
        assert "Moving a.jpg to" in result.output
        assert "Moving notes to" in result.output
        assert "Dry run completed - no files were actually moved" in result.output

        assert (source_dir / "a.jpg").is_file()
        assert not (source_dir / "Images").exists()
        assert not (source_dir / "Other").exists()

    def test_organize_by_type(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir)])

        assert result.exit_code == 0
        assert (source_dir / "Images" / "a.jpg").is_file()
        assert (source_dir / "Other" / "notes").is_file()
        assert (source_dir / "Documents" / "README.MD").is_file()
        assert (source_dir / "sub" / "nested.txt").is_file()

        # Quiet unless asked
        assert "Moving" not in result.output
        assert "completed" not in result.output

    def test_organize_by_extension(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir), "-m", "extension"])

        assert result.exit_code == 0
        assert (source_dir / "md" / "README.MD").is_file()
        assert (source_dir / "jpg" / "a.jpg").is_file()
        assert (source_dir / "Unknown" / "notes").is_file()

    def test_mode_is_case_insensitive(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir), "-m", "EXTENSION"])

        assert result.exit_code == 0
        assert (source_dir / "py" / "script.py").is_file()

    def test_verbose(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir), "-v"])

        assert result.exit_code == 0
        assert "Organizing files in:" in result.output
        assert "Mode: type" in result.output
        assert "Dry run: False" in result.output
        assert "Found 4 files to organize" in result.output
        assert "Moving script.py to" in result.output
        assert "Organization completed successfully" in result.output

    def test_short_flags(self, cli_runner, source_dir):
        result = cli_runner.invoke(
            organize, ["-s", str(source_dir), "-m", "type", "-d", "-v", "-j", "2"]
        )

        assert result.exit_code == 0
        assert "Dry run: True" in result.output
        assert "Dry run completed" in result.output
        assert not (source_dir / "Images").exists()

    def test_default_source_is_cwd(self, cli_runner, source_dir, monkeypatch):
        monkeypatch.chdir(source_dir)

        result = cli_runner.invoke(organize, [])

        assert result.exit_code == 0
        assert (source_dir / "Code" / "script.py").is_file()

    def test_empty_directory(self, cli_runner, empty_dir):
        result = cli_runner.invoke(organize, ["-s", str(empty_dir), "-v"])

        assert result.exit_code == 0
        assert "Found 0 files to organize" in result.output

    @pytest.mark.skipif(
        not sys.platform.startswith("linux"),
        reason="needs a filesystem that accepts non-UTF-8 names",
    )
    @pytest.mark.parametrize("flag", ["-d", "-v"])
    def test_undecodable_file_name(self, cli_runner, empty_dir, flag):
        """Names with invalid UTF-8 bytes are printed with a replacement char."""
        (empty_dir / os.fsdecode(b"bad\xff.jpg")).write_text("x")
        (empty_dir / "ok.png").write_text("y")

        result = cli_runner.invoke(organize, ["-s", str(empty_dir), flag])

        assert result.exit_code == 0, result.output
        assert "Moving bad\ufffd.jpg to" in result.output
        assert "Moving ok.png to" in result.output
        assert "Traceback" not in result.output

        images = os.fsencode(empty_dir / "Images")
        if flag == "-d":
            assert not os.path.exists(images)
            assert b"bad\xff.jpg" in os.listdir(os.fsencode(empty_dir))
        else:
            assert sorted(os.listdir(images)) == [b"bad\xff.jpg", b"ok.png"]

    def test_version(self, cli_runner):
        result = cli_runner.invoke(organize, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestOrganizeCLIErrors:
    """Test organize CLI error handling."""

    def test_missing_source(self, cli_runner, tmp_path):
        """A missing source exits non-zero before enumeration."""
        with patch(
            "dirsort.organization.file_organizer.collect_files"
        ) as mock_collect:
            result = cli_runner.invoke(organize, ["-s", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "doesn't exist" in result.output
        mock_collect.assert_not_called()

    def test_source_is_a_file(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir / "notes")])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_move_failure(self, cli_runner, source_dir):
        with patch(
            "dirsort.organization.file_organizer.os.rename",
            side_effect=PermissionError("denied"),
        ):
            result = cli_runner.invoke(organize, ["-s", str(source_dir)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "denied" in result.output

    def test_invalid_mode(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir), "-m", "date"])

        assert result.exit_code == 2
        assert (source_dir / "a.jpg").is_file()

    def test_invalid_workers(self, cli_runner, source_dir):
        result = cli_runner.invoke(organize, ["-s", str(source_dir), "-j", "0"])

        assert result.exit_code == 2

    @pytest.mark.skipif(
        not sys.platform.startswith("linux"),
        reason="needs a filesystem that accepts non-UTF-8 names",
    )
    def test_move_failure_undecodable_name(self, cli_runner, empty_dir):
        """The error line survives a file name with invalid UTF-8 bytes."""
        (empty_dir / os.fsdecode(b"bad\xff.jpg")).write_text("x")

        with patch(
            "dirsort.organization.file_organizer.os.rename",
            side_effect=PermissionError("denied"),
        ):
            result = cli_runner.invoke(organize, ["-s", str(empty_dir)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "bad\ufffd.jpg" in result.output
        assert "Traceback" not in result.output
