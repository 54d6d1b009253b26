"""
MISTY1 Key Schedule Implementation

This module implements the nonlinear FI function and the key schedule
that expands a 128-bit master key into the 32 sixteen-bit subkeys used by
the block transform.

Subkey layout (EK):
    EK[0..7]   - the key itself as eight big-endian 16-bit words (K)
    EK[8..15]  - FI(K[i], K[i+1 mod 8]) (K')
    EK[16..23] - low 9 bits of K' (used as the 9-bit half of FI keys)
    EK[24..31] - high 7 bits of K' (used as the 7-bit half of FI keys)
"""

import logging
import secrets
from typing import Tuple

from ..errors import InvalidKeySize
from ..sbox.tables import S7, S9, S7_MASK, S9_MASK

logger = logging.getLogger(__name__)

KEY_SIZE = 16      # bytes
NUM_SUBKEYS = 32   # 16-bit words


def fi(fin: int, fkey: int) -> int:
    """
    The FI function: a keyed 16-bit bijection built from S7 and S9.

    Args:
        fin: 16-bit input
        fkey: 16-bit subkey (top 7 bits and low 9 bits are used separately)

    Returns:
        16-bit output
    """
    d9 = (fin >> 7) & S9_MASK
    d7 = fin & S7_MASK
    d9 = S9[d9] ^ d7
    d7 = (S7[d7] ^ d9) & S7_MASK
    d7 ^= (fkey >> 9) & S7_MASK
    d9 ^= fkey & S9_MASK
    d9 = S9[d9] ^ d7
    return (d7 << 9) | d9


def generate_key() -> bytes:
    """
    Generate a cryptographically secure random MISTY1 key.

    Returns:
        16 random bytes
    """
    return secrets.token_bytes(KEY_SIZE)


def expand_key(key: bytes) -> Tuple[int, ...]:
    """
    Expand a 16-byte master key into the 32 MISTY1 subkeys.

    Args:
        key: The master key (16 bytes)

    Returns:
        A tuple of 32 sixteen-bit subkeys

    Raises:
        InvalidKeySize: If the key is not exactly 16 bytes
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeySize(len(key))

    ek = [0] * NUM_SUBKEYS

    for i in range(8):
        ek[i] = int.from_bytes(key[i * 2:i * 2 + 2], byteorder='big')

    # K' needs every word of K, including the wraparound to K[0]
    for i in range(8):
        ek[i + 8] = fi(ek[i], ek[(i + 1) % 8])
        ek[i + 16] = ek[i + 8] & S9_MASK
        ek[i + 24] = ek[i + 8] >> 9

    logger.debug("Expanded %d-byte key into %d subkeys", KEY_SIZE, NUM_SUBKEYS)
    return tuple(ek)


if __name__ == "__main__":
    subkeys = expand_key(bytes.fromhex('00112233445566778899aabbccddeeff'))
    for i in range(0, NUM_SUBKEYS, 8):
        print(' '.join(f"{k:04x}" for k in subkeys[i:i + 8]))
