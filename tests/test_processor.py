"""Tests for record validation and single-file processing."""

import errno
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from file_sorter.core.exceptions import MoveError, ValidationError
from file_sorter.core.models import FOLDER_CATEGORY, FileRecord
from file_sorter.core.processor import FileProcessor, process_file
from file_sorter.core.scanner import scan_dir
from file_sorter.core.validator import validate_record


def make_record(name="a.pdf", size=10, is_dir=False, category="Docs", parent="/nowhere"):
    return FileRecord(
        name=name,
        path=os.path.join(parent, name),
        size=size,
        modified_date=datetime.now(),
        is_dir=is_dir,
        extension=os.path.splitext(name)[1].lower(),
        category=category,
    )


def snapshot(directory: Path):
    return sorted(str(p.relative_to(directory)) for p in directory.rglob("*"))


class TestValidateRecord:
    """Test validate_record."""

    def test_valid_file_passes(self):
        validate_record(make_record())

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_name_is_rejected(self, name):
        with pytest.raises(ValidationError, match="filename cannot be empty"):
            validate_record(make_record(name=name))

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_is_rejected(self, size):
        with pytest.raises(ValidationError, match="file size must be positive"):
            validate_record(make_record(size=size))

    def test_directories_always_pass(self):
        validate_record(make_record(name="", size=0, is_dir=True, category=FOLDER_CATEGORY))
        validate_record(make_record(name="empty", size=-5, is_dir=True, category=FOLDER_CATEGORY))


class TestFileProcessor:
    """Test FileProcessor.process in both modes."""

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.processor = FileProcessor()

    def teardown_method(self):
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)

    def _record_for(self, name, content=b"x" * 10):
        (self.temp_dir / name).write_bytes(content)
        return next(r for r in scan_dir(self.temp_dir) if r.name == name)

    def test_directory_is_a_no_op(self):
        (self.temp_dir / "sub").mkdir()
        record = scan_dir(self.temp_dir)[0]
        before = snapshot(self.temp_dir)

        assert self.processor.process(record) is None
        assert snapshot(self.temp_dir) == before

    def test_preview_never_touches_the_filesystem(self):
        record = self._record_for("a.pdf")
        before = snapshot(self.temp_dir)

        action = self.processor.process(record, dry_run=True)

        assert action.applied is False
        assert action.destination == self.temp_dir / "Docs" / "a.pdf"
        assert action.describe() == "Would move 'a.pdf' to Docs"
        assert snapshot(self.temp_dir) == before

    def test_apply_moves_into_sibling_category_folder(self):
        record = self._record_for("b.jpg")

        action = self.processor.process(record)

        assert action.applied is True
        assert not (self.temp_dir / "b.jpg").exists()
        assert (self.temp_dir / "Images" / "b.jpg").read_bytes() == b"x" * 10

    def test_apply_reuses_existing_category_folder(self):
        (self.temp_dir / "Docs").mkdir()
        (self.temp_dir / "Docs" / "old.txt").write_bytes(b"old")
        record = self._record_for("a.pdf")

        self.processor.process(record)

        assert sorted(p.name for p in (self.temp_dir / "Docs").iterdir()) == ["a.pdf", "old.txt"]

    def test_unknown_extension_goes_to_fallback_folder(self):
        record = self._record_for("blob.xyz")

        self.processor.process(record)

        assert (self.temp_dir / "Other" / "blob.xyz").exists()

    def test_invalid_record_is_rejected_before_any_mutation(self):
        record = self._record_for("empty.pdf", content=b"")
        before = snapshot(self.temp_dir)

        with pytest.raises(ValidationError):
            self.processor.process(record)

        assert snapshot(self.temp_dir) == before

    def test_directory_creation_failure(self):
        record = self._record_for("a.pdf")
        failure = OSError(errno.EROFS, "Read-only file system")

        with patch("pathlib.Path.mkdir", side_effect=failure):
            with pytest.raises(MoveError, match="failed to create directory") as excinfo:
                self.processor.process(record)

        assert excinfo.value.file_name == "a.pdf"
        assert (self.temp_dir / "a.pdf").exists()

    def test_move_failure_names_the_cause(self):
        record = self._record_for("a.pdf")
        failure = OSError(errno.EXDEV, "Invalid cross-device link")

        with patch("file_sorter.core.processor.os.rename", side_effect=failure):
            with pytest.raises(MoveError, match="failed to move file") as excinfo:
                self.processor.process(record)

        assert excinfo.value.__cause__ is failure
        assert (self.temp_dir / "a.pdf").exists()
        # The destination folder may be left behind
        assert (self.temp_dir / "Docs").is_dir()

    def test_source_vanished_before_move(self):
        record = self._record_for("a.pdf")
        (self.temp_dir / "a.pdf").unlink()

        with pytest.raises(MoveError, match="failed to move file"):
            self.processor.process(record)

    def test_timing_is_logged_for_every_outcome(self, caplog):
        record = self._record_for("a.pdf")
        invalid = self._record_for("zero.pdf", content=b"")

        with caplog.at_level(logging.INFO, logger="file_sorter.core.processor"):
            self.processor.process(record, dry_run=True)
            with pytest.raises(ValidationError):
                self.processor.process(invalid, dry_run=True)

        timings = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Processed ")]
        assert len(timings) == 2
        assert any("'zero.pdf'" in message for message in timings)

    def test_process_file_helper(self):
        record = self._record_for("song.mp3")

        action = process_file(record, dry_run=False)

        assert action.destination == self.temp_dir / "Audio" / "song.mp3"
        assert action.destination.exists()
