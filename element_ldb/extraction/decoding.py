# ==============================================
# Decoding helpers
# ==============================================
#
# PURPOSE:
#   Turn raw LevelDB bytes into text without ever raising on bad input.
#
#   - decode_text(raw)   → str, or None if raw is not valid UTF-8
#   - hex_marker(raw)    → "0x" + lowercase hex, used for binary values
#   - strip_marker(text) → drop ONE leading U+0001 (Chromium's
#                          Local Storage prefix byte for Latin-1 values)
#   - decode_lossy(raw)  → str with U+FFFD for malformed sequences
#
# ==============================================

from typing import Optional

LOCAL_STORAGE_MARKER = "\u0001"
HEX_PREFIX = "0x"


def decode_text(raw: bytes) -> Optional[str]:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None


def hex_marker(raw: bytes) -> str:
    return HEX_PREFIX + raw.hex()


def strip_marker(text: str) -> str:
    if text.startswith(LOCAL_STORAGE_MARKER):
        return text[len(LOCAL_STORAGE_MARKER):]
    return text


def decode_lossy(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")
