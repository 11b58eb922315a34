# ==============================================
# LevelDBHandle
# ==============================================
#
# PURPOSE:
#   Owns the open connection to Element's Local Storage LevelDB.
#   Read-only: exposes a fresh forward iterator over every entry and
#   a single-key lookup. Nothing in this package writes to the store.
#
# CLASS: LevelDBHandle
# --------------------
#   Stateful — holds the plyvel.DB object.
#
#   Constructor:
#   ------------
#   - open(location) -> LevelDBHandle   (classmethod)
#       Open an existing store. Never creates one.
#       Raises OpenFailure for a missing path, a directory that is not a
#       LevelDB store, a permission problem, or a store locked by a
#       running Element instance.
#
#   Methods:
#   --------
#   - iterate() -> Iterator[tuple[bytes, bytes]]
#       Lazy (key, value) pairs in LevelDB key order, starting from
#       the first key on every call.
#
#   - get(key: bytes) -> bytes | None
#
#   - close() -> None
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with LevelDBHandle.open(path) as handle:`
#
# ==============================================

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

import plyvel

from element_ldb.errors import OpenFailure, StoreReadError

logger = logging.getLogger(__name__)


class LevelDBHandle:
    """Read-only wrapper around a plyvel database."""

    def __init__(self, db: "plyvel.DB", location: Path):
        self._db = db
        self.location = location

    @classmethod
    def open(cls, location: Union[str, Path]) -> "LevelDBHandle":
        """
        Open an existing LevelDB directory.

        Args:
            location: Path to the store directory

        Returns:
            An open LevelDBHandle

        Raises:
            OpenFailure: If the store cannot be opened
        """
        path = Path(location).expanduser()
        if not path.exists():
            raise OpenFailure(path, "path does not exist")
        if not path.is_dir():
            raise OpenFailure(path, "not a directory")

        try:
            db = plyvel.DB(str(path), create_if_missing=False)
        except plyvel.IOError as e:
            # LevelDB reports a held LOCK file as an IO error
            raise OpenFailure(path, f"store is locked or unreadable ({e})") from e
        except plyvel.Error as e:
            raise OpenFailure(path, str(e)) from e
        except OSError as e:
            raise OpenFailure(path, e.strerror or str(e)) from e

        logger.info("Opened LevelDB store at %s", path)
        return cls(db, path)

    @property
    def closed(self) -> bool:
        return self._db.closed

    def iterate(self) -> Iterator[Tuple[bytes, bytes]]:
        """Yield every (key, value) pair from the first key onwards."""
        try:
            with self._db.iterator() as entries:
                for key, value in entries:
                    yield key, value
        except (plyvel.Error, RuntimeError) as e:
            raise StoreReadError(f"Failed to iterate {self.location}: {e}") from e

    def get(self, key: bytes) -> Optional[bytes]:
        try:
            return self._db.get(key)
        except (plyvel.Error, RuntimeError) as e:
            raise StoreReadError(f"Failed to read key {key!r} from {self.location}: {e}") from e

    def close(self) -> None:
        if not self._db.closed:
            self._db.close()
            logger.info("Closed LevelDB store at %s", self.location)

    def __enter__(self) -> "LevelDBHandle":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
