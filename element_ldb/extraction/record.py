# ==============================================
# ElementMetadata (Data Class)
# ==============================================
#
# PURPOSE:
#   The single output of an extraction run. Flat on purpose: the field
#   order below IS the order of keys in the exported JSON.
#
#   Absence means "not observed in this store", never "known empty":
#   scalars default to None, collections to empty.
#
# ATTRIBUTES:
# -----------
#   Identity:     user_id, display_name, avatar_url
#   Settings:     theme, language, notifications_enabled (None / True / False)
#   Rooms:        room_ids, encrypted_rooms   (insertion order, duplicates kept)
#   Device/keys:  device_id, device_name, curve25519_key, ed25519_key
#   Raw archive:  raw_entries  (decoded key → decoded value or "0x..." hex)
#
# METHODS:
# --------
# - to_dict() -> dict                      → Serialize in export order
# - from_dict(data) -> ElementMetadata     (classmethod) → Deserialize
# - summary() -> dict                      → Counts for the CLI
#
# ==============================================

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


@dataclass
class ElementMetadata:
    """Metadata recovered from one Element Desktop LevelDB store."""

    # --- User ID and profile ---
    user_id: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None

    # --- Account settings ---
    theme: Optional[str] = None
    language: Optional[str] = None
    notifications_enabled: Optional[bool] = None

    # --- Rooms ---
    room_ids: List[str] = field(default_factory=list)
    encrypted_rooms: List[str] = field(default_factory=list)

    # --- Device and encryption ---
    device_id: Optional[str] = None
    device_name: Optional[str] = None
    curve25519_key: Optional[str] = None
    ed25519_key: Optional[str] = None

    # --- Raw metadata entries ---
    raw_entries: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the record to a dictionary for JSON export.

        Collections are copied so the caller can't mutate the record through it.
        """
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                value = list(value)
            elif isinstance(value, dict):
                value = dict(value)
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElementMetadata":
        """
        Reconstruct a record from exported JSON.

        Unknown keys are ignored; missing ones fall back to the defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {name: value for name, value in data.items() if name in known}
        for name in ("room_ids", "encrypted_rooms"):
            if kwargs.get(name) is None:
                kwargs.pop(name, None)
            else:
                kwargs[name] = list(kwargs[name])
        if kwargs.get("raw_entries") is None:
            kwargs.pop("raw_entries", None)
        else:
            kwargs["raw_entries"] = dict(kwargs["raw_entries"])
        return cls(**kwargs)

    def summary(self) -> Dict[str, Any]:
        """Short overview: counts plus which identity/device fields were found."""
        return {
            "raw_entries": len(self.raw_entries),
            "room_ids": len(self.room_ids),
            "encrypted_rooms": len(self.encrypted_rooms),
            "found": [
                name for name in (
                    "user_id", "display_name", "avatar_url",
                    "theme", "language", "notifications_enabled",
                    "device_id", "device_name", "curve25519_key", "ed25519_key",
                )
                if getattr(self, name) is not None
            ],
        }
