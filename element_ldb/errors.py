# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   One small exception hierarchy for everything that can stop an
#   extraction. Library exceptions (plyvel.Error, OSError, TypeError
#   from the JSON encoder) are re-raised as one of these with
#   `raise ... from exc` so the original cause stays attached.
#
# HIERARCHY:
# ----------
#   ElementLdbError
#   ├── OpenFailure           → store missing / not LevelDB / locked / no permission
#   ├── StoreReadError        → I/O or corruption while iterating or looking up
#   ├── LockUnavailable       → exclusive-access guard poisoned by an earlier failure
#   ├── SerializationFailure  → record could not be encoded as JSON
#   └── ConfigurationError    → malformed setting in the environment / .env
#
# NOTE:
#   Undecodable keys and values are NOT errors. The extractor drops
#   the entry or hex-escapes the value and keeps going.
#
# ==============================================


class ElementLdbError(Exception):
    """Base class for every error raised by element_ldb."""


class OpenFailure(ElementLdbError):
    """The LevelDB store could not be opened."""

    def __init__(self, location, reason: str = ""):
        self.location = str(location)
        self.reason = reason
        message = f"Could not open LevelDB store at '{self.location}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class StoreReadError(ElementLdbError):
    """Reading from an already opened store failed."""


class LockUnavailable(ElementLdbError):
    """The store guard was poisoned by a failure in a previous holder."""


class SerializationFailure(ElementLdbError):
    """The metadata record could not be encoded to text."""


class ConfigurationError(ElementLdbError):
    """A configuration value from the environment could not be parsed."""
