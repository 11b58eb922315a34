# ==============================================
# PERSISTENCE (Exported metadata on disk)
# ==============================================
#
# This package saves extracted metadata as JSON and reads it back.
#
# Modules:
# --------
# - metadata_store.py  → Save/load ElementMetadata JSON files
#
# ==============================================

from .metadata_store import MetadataStore

__all__ = ["MetadataStore"]
