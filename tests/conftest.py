# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - FakeStoreHandle       → In-memory stand-in for LevelDBHandle
# - scenario_entries      → The alice store used across test modules
# - fake_store            → FakeStoreHandle over scenario_entries
# - leveldb_path          → Real LevelDB on disk (plyvel) with the same entries
# ==============================================

import plyvel
import pytest


class FakeStoreHandle:
    """Sorted in-memory store honoring the iterate()/get() contract."""

    def __init__(self, entries):
        self.entries = dict(entries)
        self.iterations = 0
        self.closed = False

    def iterate(self):
        self.iterations += 1
        for key in sorted(self.entries):
            yield key, self.entries[key]

    def get(self, key):
        return self.entries.get(key)

    def close(self):
        self.closed = True


SCENARIO_ENTRIES = [
    (b"mx_user_id", "\u0001@alice:example.org".encode("utf-8")),
    (b"theme", b"dark"),
    (b"room_1_id", b"!abc:example.org"),
    (b"encrypted_room_1", b"true"),
    (b"binarykey", bytes([0xFF, 0x00])),
]


@pytest.fixture
def scenario_entries():
    return list(SCENARIO_ENTRIES)


@pytest.fixture
def fake_store(scenario_entries):
    return FakeStoreHandle(scenario_entries)


def write_leveldb(path, entries):
    db = plyvel.DB(str(path), create_if_missing=True)
    try:
        for key, value in entries:
            db.put(key, value)
    finally:
        db.close()
    return path


@pytest.fixture
def leveldb_path(tmp_path, scenario_entries):
    """A closed, on-disk LevelDB directory holding the scenario entries."""
    return write_leveldb(tmp_path / "leveldb", scenario_entries)
