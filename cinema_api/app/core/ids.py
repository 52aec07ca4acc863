"""Short random identifiers for stored records."""

import secrets
import string
from typing import Optional

from .config import settings


# 64 URL-safe symbols, so every character carries six bits.
ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_id(length: Optional[int] = None) -> str:
    """Return a random identifier of ``length`` URL-safe characters.

    Collisions are not checked against any collection; with the default
    length of 8 the space holds 2**48 values.
    """
    size = settings.id_length if length is None else length
    if size < 1:
        raise ValueError("Identifier length must be positive")
    return "".join(secrets.choice(ALPHABET) for _ in range(size))
