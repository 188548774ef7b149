"""Tests for paged directory reads."""

import pytest

from hdfs_tools.core.exceptions import PathError, RemoteIOError
from hdfs_tools.listing.pager import DEFAULT_BATCH_SIZE, DirectoryPager

from conftest import FakeFileSystem


def filled_directory(count, path="/big"):
    fs = FakeFileSystem()
    fs.add_dir(path)
    for i in range(count):
        fs.add_file(f"{path}/file{i:03d}")
    return fs


class TestDirectoryPager:
    """Test batch iteration over remote directories."""

    def test_default_batch_size(self):
        assert DirectoryPager(FakeFileSystem()).batch_size == DEFAULT_BATCH_SIZE == 100

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            DirectoryPager(FakeFileSystem(), batch_size=0)

    def test_batches_are_bounded(self):
        """Test 250 entries arrive as 100, 100 and 50."""
        fs = filled_directory(250)
        pager = DirectoryPager(fs)

        batches = list(pager.iter_batches("/big"))

        assert [len(b) for b in batches] == [100, 100, 50]
        names = [e.name for b in batches for e in b]
        assert names == [f"file{i:03d}" for i in range(250)]

    def test_batch_size_does_not_change_content(self):
        """Test content is identical for any batch size."""
        fs = filled_directory(250)

        by_hundred = [e for b in DirectoryPager(fs, 100).iter_batches("/big") for e in b]
        by_one = [e for b in DirectoryPager(fs, 1).iter_batches("/big") for e in b]

        assert by_hundred == by_one
        assert fs.streams[0].reads == 3
        assert fs.streams[1].reads == 250

    def test_empty_directory_yields_no_batches(self):
        fs = FakeFileSystem()
        fs.add_dir("/empty")

        assert list(DirectoryPager(fs).iter_batches("/empty")) == []

    def test_next_batch_reports_done(self):
        """Test the done flag on the last batch."""
        fs = filled_directory(3)
        pager = DirectoryPager(fs, batch_size=2)
        stream = pager.open("/big")

        first, done = pager.next_batch(stream)
        assert (len(first), done) == (2, False)
        second, done = pager.next_batch(stream)
        assert (len(second), done) == (1, True)

    def test_open_file_fails(self):
        """Test opening a file as a directory raises PathError."""
        fs = FakeFileSystem()
        fs.add_file("/file.txt")

        with pytest.raises(PathError):
            list(DirectoryPager(fs).iter_batches("/file.txt"))

    def test_mid_stream_failure_propagates(self):
        """Test a failing read aborts iteration after the batches already read."""
        fs = filled_directory(250)
        fs.failing_streams["/big"] = 1
        batches = []

        with pytest.raises(RemoteIOError):
            for batch in DirectoryPager(fs).iter_batches("/big"):
                batches.append(batch)

        assert len(batches) == 1
