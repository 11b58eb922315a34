# ==============================================
# STORE (LevelDB access)
# ==============================================
#
# This package owns everything that touches the LevelDB files.
#
# Modules:
# --------
# - leveldb_handle.py  → Read-only plyvel wrapper: iterate + get
# - guard.py           → Exclusive-access guard with poisoning
# - locator.py         → Element store paths per OS, snapshot copy
#
# ==============================================

from .leveldb_handle import LevelDBHandle
from .guard import ExclusiveAccess
from .locator import default_store_path, snapshot_store

__all__ = [
    "LevelDBHandle",
    "ExclusiveAccess",
    "default_store_path",
    "snapshot_store",
]
