# ==============================================
# Element Desktop LevelDB Metadata Extractor
# ==============================================
#
# Package Structure:
#
# element_ldb/
# ├── store/         # LevelDB handle, exclusive-access guard, store locator
# ├── extraction/    # Decoding, classification rules, record, extractor
# ├── persistence/   # Save / load exported metadata JSON
# ├── config.py      # Configuration management (.env)
# ├── errors.py      # Exception hierarchy
# └── cli.py         # Command line entry point
#
# ==============================================

__version__ = "0.1.0"

from .errors import (
    ElementLdbError,
    OpenFailure,
    StoreReadError,
    LockUnavailable,
    SerializationFailure,
    ConfigurationError,
)
from .extraction import ElementMetadata, MetadataExtractor

__all__ = [
    "ElementLdbError",
    "OpenFailure",
    "StoreReadError",
    "LockUnavailable",
    "SerializationFailure",
    "ConfigurationError",
    "ElementMetadata",
    "MetadataExtractor",
]
