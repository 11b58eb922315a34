# ==============================================
# MetadataExtractor — Main entry point
# ==============================================
#
# PURPOSE:
#   Walks an Element Desktop LevelDB store front-to-back and builds one
#   ElementMetadata record. Users interact with this class only.
#
# FLOW (per extract_all() call):
#
#   ExclusiveAccess.hold()
#        │
#        ▼
#   handle.iterate()  ── (key bytes, value bytes) ──┐
#                                                   ▼
#   key not UTF-8?      → drop entry (not even in raw_entries)
#   value not UTF-8?    → raw_entries[key] = "0x<hex>", no classification
#   otherwise           → KeyClassifier.classify(key, value minus U+0001)
#                         raw_entries[key] = original value
#        │
#        ▼
#   fresh ElementMetadata returned to the caller
#
# CLASS: MetadataExtractor
# ------------------------
#
#   Constructor:
#   ------------
#   - __init__(handle, classifier=None)
#       `handle` is anything with iterate() and get(); normally a LevelDBHandle.
#   - open(path) -> MetadataExtractor  (classmethod)
#
#   Public Methods:
#   ---------------
#   - extract_all() -> ElementMetadata
#   - export_json(indent=2) -> str
#   - get_value(key: str) -> str | None
#   - close() -> None
#
# ==============================================

import json
import logging
from pathlib import Path
from typing import Optional, Union

from element_ldb.errors import SerializationFailure
from element_ldb.store.guard import ExclusiveAccess
from element_ldb.store.leveldb_handle import LevelDBHandle

from .decoding import decode_lossy, decode_text, hex_marker, strip_marker
from .record import ElementMetadata
from .rules import KeyClassifier

logger = logging.getLogger(__name__)


class MetadataExtractor:
    """
    Extracts Element Desktop metadata from a LevelDB store.

    Safe to share between threads: every store access goes through an
    ExclusiveAccess guard, so iterations and lookups never interleave.
    """

    def __init__(self, handle, classifier: Optional[KeyClassifier] = None):
        """
        Args:
            handle: Open store handle (iterate() / get())
            classifier: Rule table to use. Defaults to KeyClassifier().
        """
        self._handle = handle
        self._guard = ExclusiveAccess(handle)
        self._classifier = classifier or KeyClassifier()

    @classmethod
    def open(cls, path: Union[str, Path]) -> "MetadataExtractor":
        """
        Open Element's LevelDB database.

        Raises:
            OpenFailure: If the store cannot be opened
        """
        return cls(LevelDBHandle.open(path))

    def extract_all(self) -> ElementMetadata:
        """
        Extract metadata from every entry in the store.

        Returns:
            A new, fully populated ElementMetadata

        Raises:
            LockUnavailable: If the store guard has been poisoned
            StoreReadError: If LevelDB fails while iterating
        """
        metadata = ElementMetadata()
        dropped = 0
        binary = 0

        with self._guard.hold() as handle:
            for raw_key, raw_value in handle.iterate():
                key = decode_text(raw_key)
                if key is None:
                    dropped += 1
                    logger.debug("Dropping entry with non-UTF-8 key %s", hex_marker(raw_key))
                    continue

                value = decode_text(raw_value)
                if value is None:
                    # Binary data is archived as hex and never classified
                    binary += 1
                    metadata.raw_entries[key] = hex_marker(raw_value)
                    continue

                self._classifier.classify(key, strip_marker(value), metadata)
                metadata.raw_entries[key] = value

        logger.info(
            "Extracted %d entries (%d binary, %d dropped), %d rooms",
            len(metadata.raw_entries), binary, dropped, len(metadata.room_ids)
        )
        return metadata

    def export_json(self, indent: Optional[int] = 2) -> str:
        """
        Export metadata as JSON, keys in ElementMetadata field order.

        Raises:
            SerializationFailure: If the record cannot be encoded
        """
        metadata = self.extract_all()
        try:
            return json.dumps(metadata.to_dict(), indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationFailure(f"Failed to encode metadata as JSON: {e}") from e

    def get_value(self, key: str) -> Optional[str]:
        """
        Get a single value by key.

        Malformed UTF-8 in the value is replaced, not rejected.

        Returns:
            The decoded value, or None if the key is absent

        Raises:
            UnicodeEncodeError: If `key` can't be encoded as UTF-8
        """
        # Encoded before locking so a bad argument can't poison the guard
        raw_key = key.encode("utf-8")
        with self._guard.hold() as handle:
            data = handle.get(raw_key)
        if data is None:
            return None
        return decode_lossy(data)

    def close(self) -> None:
        close = getattr(self._handle, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "MetadataExtractor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
