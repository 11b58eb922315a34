# ==============================================
# Tests for KeyClassifier
# ==============================================

import pytest

from element_ldb.extraction.record import ElementMetadata
from element_ldb.extraction.rules import KeyClassifier, KeyRule


@pytest.fixture
def classifier():
    return KeyClassifier()


@pytest.fixture
def record():
    return ElementMetadata()


class TestScalarRules:
    @pytest.mark.parametrize("key, field_name", [
        ("mx_user_id", "user_id"),
        ("userId", "user_id"),
        ("mx_profile_displayname", "display_name"),
        ("displayName", "display_name"),
        ("avatarUrl", "avatar_url"),
        ("mx_theme", "theme"),
        ("mx_local_settings_locale", "language"),
        ("language", "language"),
        ("mx_device_id", "device_id"),
        ("deviceName", "device_name"),
        ("olm_curve25519", "curve25519_key"),
        ("olm_ed25519", "ed25519_key"),
    ])
    def test_sets_field(self, classifier, record, key, field_name):
        classifier.classify(key, "value", record)
        assert getattr(record, field_name) == "value"

    def test_matching_is_case_sensitive(self, classifier, record):
        assert classifier.classify("THEME", "dark", record) is None
        assert record.theme is None

    def test_later_value_overwrites(self, classifier, record):
        classifier.classify("mx_user_id", "@first:example.org", record)
        classifier.classify("userId", "@second:example.org", record)
        assert record.user_id == "@second:example.org"


class TestNotificationRule:
    @pytest.mark.parametrize("value, expected", [
        ("true", True),
        ("TRUE", True),
        ("True", True),
        ("false", False),
        ("yes", False),
        ("", False),
    ])
    def test_flag(self, classifier, record, value, expected):
        assert classifier.classify("notifications_enabled", value, record) == "notifications"
        assert record.notifications_enabled is expected


class TestRoomRules:
    def test_room_and_id_appends_value(self, classifier, record):
        classifier.classify("room_1_id", "!abc:example.org", record)
        classifier.classify("room_2_id", "!abc:example.org", record)
        assert record.room_ids == ["!abc:example.org", "!abc:example.org"]

    def test_room_and_id_never_sets_scalar(self, classifier, record):
        # "encrypted" appears too but room/id comes first
        assert classifier.classify("encrypted_room_id", "!x:example.org", record) == "room_id"
        assert record.room_ids == ["!x:example.org"]
        assert record.encrypted_rooms == []

    def test_encrypted_appends_key_when_true(self, classifier, record):
        classifier.classify("encrypted_room_1", "TRUE", record)
        assert record.encrypted_rooms == ["encrypted_room_1"]

    def test_encrypted_ignores_false(self, classifier, record):
        assert classifier.classify("encrypted_room_1", "false", record) == "encrypted"
        assert record.encrypted_rooms == []


class TestPriority:
    def test_first_match_wins(self, classifier, record):
        # user_id (rule 1) outranks theme (rule 4)
        assert classifier.classify("user_id_theme", "x", record) == "user_id"
        assert record.user_id == "x"
        assert record.theme is None

    def test_user_id_beats_room_id(self, classifier, record):
        assert classifier.classify("room_user_id", "@bob:example.org", record) == "user_id"
        assert record.room_ids == []

    def test_device_id_before_room(self, classifier, record):
        assert classifier.classify("room_device_id", "DEV", record) == "device_id"

    def test_unmatched_key(self, classifier, record):
        assert classifier.classify("something_else", "v", record) is None
        assert record == ElementMetadata()

    def test_match_returns_rule(self, classifier):
        assert classifier.match("mx_theme").name == "theme"
        assert classifier.match("nothing") is None

    def test_rule_order(self, classifier):
        assert [rule.name for rule in classifier.rules] == [
            "user_id", "display_name", "avatar_url", "theme", "language",
            "notifications", "device_id", "device_name", "curve25519",
            "ed25519", "room_id", "encrypted",
        ]


class TestKeyRule:
    def test_empty_rule_matches_nothing(self):
        rule = KeyRule("empty", lambda record, key, value: None)
        assert not rule.matches("anything")

    def test_all_of_requires_every_part(self):
        rule = KeyRule("room", lambda record, key, value: None, all_of=("room", "id"))
        assert rule.matches("my_room_id")
        assert not rule.matches("my_room")

    def test_custom_rule_table(self, record):
        seen = []
        rule = KeyRule("any", lambda r, key, value: seen.append((key, value)), any_of=("k",))
        assert KeyClassifier(rules=(rule,)).classify("key", "v", record) == "any"
        assert seen == [("key", "v")]
