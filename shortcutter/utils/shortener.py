"""Shortcut generation utility

This module derives short paths from submitted URLs. The URL is perturbed with
a random draw and hashed with CRC-32 (IEEE polynomial), giving a fixed-length,
URL-safe path of '/' followed by 8 lowercase hex digits.

Functions:
    checksum_shortcut(url, draw) -> str:
        Deterministic part: hash `url` suffixed with `draw`.

    generate_shortcut(url, rng=None) -> str:
        Draw a random number in [0, MAX_RANDOM_NUMBER) and hash it with the URL.

Example:
    >>> from shortcutter.utils import checksum_shortcut
    >>> checksum_shortcut('example.com', 0)
    '/46d02e47'

NOTE:
    - Repeated calls for the same URL give different shortcuts with high probability.
    - No collision detection is done. Two draws landing on the same checksum map to
      the same key and the later write wins.
"""

import random
import zlib

from shortcutter.constants import MAX_RANDOM_NUMBER


def checksum_shortcut(url: str, draw: int) -> str:
    """Hash `url` + decimal `draw` with CRC-32 and format it as a short path

    Args:
        url (str):
            Submitted URL (validated by the caller).
        draw (int):
            Random perturbation appended to the URL before hashing.

    Returns:
        str: '/' followed by the 8-hex-digit lowercase checksum.
    """
    if not isinstance(url, str):
        raise TypeError(f'URL must be of type string (given type: {type(url)}).')

    return f'/{zlib.crc32(f"{url}{draw}".encode("utf-8")):08x}'


def generate_shortcut(url: str, rng: random.Random | None = None) -> str:
    """Generate a random shortcut for `url`

    Args:
        url (str):
            Submitted URL (validated by the caller).
        rng (random.Random | None):
            Random source for the perturbation. Module-level `random` if None.

    Returns:
        str: shortcut matching '/[0-9a-f]{8}'.
    """
    draw = (rng or random).randrange(MAX_RANDOM_NUMBER)
    return checksum_shortcut(url, draw)
