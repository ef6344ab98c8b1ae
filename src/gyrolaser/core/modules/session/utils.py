"""Room code helpers and the millisecond clock used for session timestamps."""

import re
import secrets
import time

# I, O, 0 and 1 are left out so codes can be read off a screen and typed on a phone
ROOM_ID_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_ID_LENGTH = 6

ROOM_ID_RE = re.compile(rf"^[A-Z0-9]{{{ROOM_ID_LENGTH}}}$")


def generate_room_id() -> str:
    """Generate a random room code, e.g. "A3X9K2".

    Each position is an independent uniform draw from ROOM_ID_ALPHABET.
    Previously issued codes are not consulted, so collisions are possible.
    """
    return "".join(secrets.choice(ROOM_ID_ALPHABET) for _ in range(ROOM_ID_LENGTH))


def is_valid_room_id(value: object) -> bool:
    """Check room code format (6 alphanumeric chars, case-insensitive, surrounding whitespace ignored)."""
    if not isinstance(value, str) or not value:
        return False
    return bool(ROOM_ID_RE.fullmatch(value.strip().upper()))


def normalize_room_id(value: object) -> str | None:
    """Return the trimmed, upper-cased room code, or None if it is not a valid code."""
    if not is_valid_room_id(value):
        return None
    return str(value).strip().upper()


def now_ms() -> int:
    return time.time_ns() // 1_000_000
