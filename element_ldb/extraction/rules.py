# ==============================================
# KeyClassifier
# ==============================================
#
# PURPOSE:
#   Decides which ElementMetadata field a LevelDB entry feeds, based
#   only on case-sensitive substrings of its key. The table follows
#   Element Web / matrix-js-sdk Local Storage key naming.
#
# CLASS: KeyClassifier
# --------------------
#   Stateless — the rule table is fixed, the record is passed in.
#
#   Methods:
#   --------
#   - classify(key: str, value: str, record: ElementMetadata) -> str | None
#       Apply the FIRST matching rule to `record` and return its name,
#       or None when nothing matched. Later rules are never consulted
#       once one has fired. Rules in order:
#
#       RULE 1:  user_id        user_id | userId | mx_user_id        → user_id
#       RULE 2:  display_name   display_name | displayName | displayname → display_name
#       RULE 3:  avatar_url     avatar | avatarUrl | avatar_url      → avatar_url
#       RULE 4:  theme          theme                                → theme
#       RULE 5:  language       language | locale                    → language
#       RULE 6:  notifications  notification   → notifications_enabled = value.lower() == "true"
#       RULE 7:  device_id      device_id | deviceId | mx_device_id  → device_id
#       RULE 8:  device_name    device_name | deviceName             → device_name
#       RULE 9:  curve25519     curve25519                           → curve25519_key
#       RULE 10: ed25519        ed25519                              → ed25519_key
#       RULE 11: room_id        "room" AND "id"                      → room_ids.append(value)
#       RULE 12: encrypted      encrypted      → encrypted_rooms.append(KEY) if value is "true"
#
#   RULE 12 records the key, not a room id. Reference outputs depend on it.
#
# ==============================================

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .record import ElementMetadata

logger = logging.getLogger(__name__)

Effect = Callable[[ElementMetadata, str, str], None]


def _is_true(value: str) -> bool:
    return value.lower() == "true"


def _set(field_name: str) -> Effect:
    def effect(record: ElementMetadata, key: str, value: str) -> None:
        setattr(record, field_name, value)
    return effect


def _set_flag(field_name: str) -> Effect:
    def effect(record: ElementMetadata, key: str, value: str) -> None:
        setattr(record, field_name, _is_true(value))
    return effect


def _append_value(field_name: str) -> Effect:
    def effect(record: ElementMetadata, key: str, value: str) -> None:
        getattr(record, field_name).append(value)
    return effect


def _append_key_if_true(field_name: str) -> Effect:
    def effect(record: ElementMetadata, key: str, value: str) -> None:
        if _is_true(value):
            getattr(record, field_name).append(key)
    return effect


@dataclass(frozen=True)
class KeyRule:
    """
    One row of the classification table.

    A key matches when it contains at least one of `any_of` (if given)
    and every substring in `all_of` (if given).
    """
    name: str
    effect: Effect
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()

    def matches(self, key: str) -> bool:
        if not self.any_of and not self.all_of:
            return False
        if self.any_of and not any(part in key for part in self.any_of):
            return False
        return all(part in key for part in self.all_of)


class KeyClassifier:
    """Ordered, first-match-wins rule table for Element Local Storage keys."""

    RULES: Tuple[KeyRule, ...] = (
        # User information
        KeyRule("user_id", _set("user_id"),
                any_of=("user_id", "userId", "mx_user_id")),
        KeyRule("display_name", _set("display_name"),
                any_of=("display_name", "displayName", "displayname")),
        KeyRule("avatar_url", _set("avatar_url"),
                any_of=("avatar", "avatarUrl", "avatar_url")),

        # Settings
        KeyRule("theme", _set("theme"), any_of=("theme",)),
        KeyRule("language", _set("language"), any_of=("language", "locale")),
        KeyRule("notifications", _set_flag("notifications_enabled"),
                any_of=("notification",)),

        # Device and encryption keys
        KeyRule("device_id", _set("device_id"),
                any_of=("device_id", "deviceId", "mx_device_id")),
        KeyRule("device_name", _set("device_name"),
                any_of=("device_name", "deviceName")),
        KeyRule("curve25519", _set("curve25519_key"), any_of=("curve25519",)),
        KeyRule("ed25519", _set("ed25519_key"), any_of=("ed25519",)),

        # Rooms
        KeyRule("room_id", _append_value("room_ids"), all_of=("room", "id")),
        KeyRule("encrypted", _append_key_if_true("encrypted_rooms"),
                any_of=("encrypted",)),
    )

    def __init__(self, rules: Optional[Tuple[KeyRule, ...]] = None):
        self.rules = rules if rules is not None else self.RULES

    def match(self, key: str) -> Optional[KeyRule]:
        """Return the highest-priority rule matching `key`, if any."""
        for rule in self.rules:
            if rule.matches(key):
                return rule
        return None

    def classify(self, key: str, value: str, record: ElementMetadata) -> Optional[str]:
        """
        Apply the first matching rule to `record`.

        Args:
            key: Decoded LevelDB key
            value: Decoded value with the Local Storage marker already stripped
            record: Record being accumulated

        Returns:
            Name of the rule that fired, or None
        """
        rule = self.match(key)
        if rule is None:
            return None
        rule.effect(record, key, value)
        logger.debug("Key %r classified by rule %s", key, rule.name)
        return rule.name
