"""Test configuration and fixtures for hdfs-tools."""

import io
import posixpath
from datetime import datetime, timezone

import pytest

from hdfs_tools.core.exceptions import PathError, RemoteIOError
from hdfs_tools.schemas import EntryRecord

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
THIS_YEAR = datetime(2026, 3, 5, 9, 7, tzinfo=timezone.utc)
LAST_YEAR = datetime(2024, 12, 31, 23, 59, tzinfo=timezone.utc)


def make_entry(
    name,
    is_directory=False,
    size=0,
    modified_at=THIS_YEAR,
    owner="alice",
    group="staff",
):
    mode = "drwxr-xr-x" if is_directory else "-rw-r--r--"
    return EntryRecord(
        name=name,
        is_directory=is_directory,
        permission_mode=mode,
        owner=owner,
        group=group,
        size_bytes=size,
        modified_at=modified_at,
    )


class FakeStream:
    """Directory stream over a fixed list of entries."""

    def __init__(self, entries, fail_after=None):
        self._entries = list(entries)
        self.fail_after = fail_after
        self.reads = 0

    def read_next(self, max_count):
        if self.fail_after is not None and self.reads >= self.fail_after:
            raise RemoteIOError("readdir: connection reset")
        self.reads += 1
        batch = self._entries[:max_count]
        self._entries = self._entries[max_count:]
        return batch, not self._entries


class FakeFileSystem:
    """In-memory remote filesystem implementing the client protocol."""

    def __init__(self, home="/user/alice"):
        self.home = home
        self.entries = {}
        self.children = {}
        self.stat_calls = []
        self.streams = []
        self.failing_streams = {}
        self.add_dir("/")

    def add_dir(self, path, **kwargs):
        self._add(path, make_entry(posixpath.basename(path) or "/", True, **kwargs))
        self.children.setdefault(path, [])
        return self

    def add_file(self, path, size=0, **kwargs):
        self._add(path, make_entry(posixpath.basename(path), False, size, **kwargs))
        return self

    def _add(self, path, entry):
        parent = posixpath.dirname(path)
        if path != "/":
            if parent not in self.children:
                self.add_dir(parent)
            self.children[parent].append(entry)
        self.entries[path] = entry

    def stat(self, path):
        self.stat_calls.append(path)
        if path not in self.entries:
            raise PathError(f"stat {path}: no such file or directory")
        return self.entries[path]

    def open_directory(self, path):
        entry = self.entries.get(path)
        if entry is None:
            raise PathError(f"open {path}: no such file or directory")
        if not entry.is_directory:
            raise PathError(f"open {path}: not a directory")
        stream = FakeStream(self.children[path], self.failing_streams.get(path))
        self.streams.append(stream)
        return stream

    def home_directory(self):
        return self.home


@pytest.fixture(autouse=True)
def clean_hadoop_env(monkeypatch):
    """Keep the developer's Hadoop environment out of the tests."""
    for name in (
        "HADOOP_NAMENODE",
        "HADOOP_CONF_DIR",
        "HADOOP_KEYTAB",
        "HADOOP_KRB_CONF",
        "HADOOP_SNAME",
        "HADOOP_USER_NAME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_fs():
    """A filesystem with a home directory holding one visible and one hidden file."""
    fs = FakeFileSystem()
    fs.add_dir("/user/alice")
    fs.add_file("/user/alice/a.txt", size=10)
    fs.add_file("/user/alice/.hidden", size=20)
    return fs


@pytest.fixture
def output():
    return io.StringIO()
