"""
S-box Property Analysis

This module measures the cryptographic properties of the MISTY1 S-boxes
(differential uniformity and linear bias) and verifies that the constant
tables were not corrupted.
"""

import logging
from typing import Dict, Sequence

import numpy as np

from .tables import S7, S9, S7_BITS, S9_BITS

logger = logging.getLogger(__name__)


def _table_bits(sbox: Sequence[int]) -> int:
    """Return the bit width n of an S-box with 2**n entries."""
    size = len(sbox)
    bits = size.bit_length() - 1
    if size == 0 or (1 << bits) != size:
        raise ValueError(f"S-box size must be a power of two, got {size}")
    return bits


def _parity_matrix(masks: np.ndarray, values: np.ndarray, bits: int) -> np.ndarray:
    """
    Build the matrix of (-1) ** popcount(mask & value).

    Args:
        masks: 1-D array of bit masks (rows)
        values: 1-D array of values (columns)
        bits: Bit width of masks and values

    Returns:
        A (len(masks), len(values)) matrix of +1/-1 entries
    """
    anded = np.bitwise_and(masks[:, None], values[None, :])
    parity = np.zeros_like(anded)
    for i in range(bits):
        parity ^= (anded >> i) & 1
    return 1 - 2 * parity


def is_bijective(sbox: Sequence[int]) -> bool:
    """Check that the S-box is a permutation of range(len(sbox))."""
    return sorted(sbox) == list(range(len(sbox)))


def calculate_differential_uniformity(sbox: Sequence[int]) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.
    For a bijective S-box the lowest achievable value is 2.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The maximum entry of the difference distribution table over
        non-zero input differences
    """
    size = 1 << _table_bits(sbox)
    table = np.asarray(sbox, dtype=np.int64)
    xs = np.arange(size, dtype=np.int64)
    dxs = np.arange(1, size, dtype=np.int64)

    # Output difference for every (dx, x) pair
    dys = table[xs[None, :] ^ dxs[:, None]] ^ table[xs][None, :]

    ddt = np.zeros((size - 1, size), dtype=np.int64)
    rows = np.broadcast_to(np.arange(size - 1)[:, None], dys.shape)
    np.add.at(ddt, (rows, dys), 1)

    return int(ddt.max())


def calculate_linear_bias(sbox: Sequence[int]) -> float:
    """
    Calculate the linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The maximum absolute entry of the linear approximation table over
        non-zero masks, normalised to [0, 1]
    """
    bits = _table_bits(sbox)
    size = 1 << bits
    table = np.asarray(sbox, dtype=np.int64)
    xs = np.arange(size, dtype=np.int64)

    input_signs = _parity_matrix(xs, xs, bits)
    output_signs = _parity_matrix(xs, table, bits)

    # Walsh spectrum: walsh[a, b] = sum_x (-1) ** (a.x ^ b.S(x))
    walsh = input_signs @ output_signs.T

    # LAT entries are count - size / 2 == walsh / 2
    max_bias = int(np.abs(walsh[1:, 1:]).max()) // 2
    return max_bias / (size / 2)


def evaluate_sbox(sbox: Sequence[int]) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    return {
        'size': len(sbox),
        'bijective': is_bijective(sbox),
        'differential': calculate_differential_uniformity(sbox),
        'linear': calculate_linear_bias(sbox),
    }


def verify_tables() -> None:
    """
    Verify the shape and value ranges of the MISTY1 tables.

    Raises:
        ValueError: If either table has the wrong size, an out-of-range
            entry, or is not a permutation
    """
    for name, sbox, bits in (('S7', S7, S7_BITS), ('S9', S9, S9_BITS)):
        if len(sbox) != 1 << bits:
            raise ValueError(f"{name} must have {1 << bits} entries, got {len(sbox)}")
        out_of_range = [v for v in sbox if not 0 <= v < (1 << bits)]
        if out_of_range:
            raise ValueError(f"{name} has entries outside {bits} bits: {out_of_range[:4]}")
        if not is_bijective(sbox):
            raise ValueError(f"{name} is not a permutation")
        logger.debug("%s verified: %d entries, %d-bit values", name, len(sbox), bits)


if __name__ == "__main__":
    verify_tables()
    for name, sbox in (('S7', S7), ('S9', S9)):
        metrics = evaluate_sbox(sbox)
        print(f"{name} differential uniformity: {metrics['differential']}")
        print(f"{name} linear bias: {metrics['linear']}")
