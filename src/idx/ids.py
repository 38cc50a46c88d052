import uuid
from typing import Optional

from . import ulid as _ulid


def ulid(time: Optional[float] = None) -> str:
    """Generate a 26-char ULID from the process-wide generator.

    Format: 48-bit timestamp (ms) + 16 random Base32 characters, Crockford
    alphabet. Sortable by timestamp across milliseconds.
    """
    return _ulid.generate(time)


def uuid4() -> str:
    """Random RFC 4122 version 4 UUID in canonical hyphenated form."""
    return str(uuid.uuid4())
