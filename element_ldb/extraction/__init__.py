# ==============================================
# EXTRACTION (Decode + Classify + Assemble)
# ==============================================
#
# Modules:
# --------
# - decoding.py    → Strict / lossy UTF-8, hex fallback, marker stripping
# - rules.py       → KeyClassifier: ordered substring rule table
# - record.py      → ElementMetadata data class
# - extractor.py   → MetadataExtractor: drives iteration over the store
#
# ==============================================

from .record import ElementMetadata
from .rules import KeyClassifier, KeyRule
from .extractor import MetadataExtractor

__all__ = [
    "ElementMetadata",
    "KeyClassifier",
    "KeyRule",
    "MetadataExtractor",
]
