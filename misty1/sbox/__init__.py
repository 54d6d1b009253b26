"""
S-box Package

This package holds the two fixed MISTY1 substitution tables (S7 and S9)
and the tooling used to check their cryptographic properties.
"""

from .tables import S7, S9, S7_MASK, S9_MASK
from .analysis import evaluate_sbox, verify_tables

__all__ = ['S7', 'S9', 'S7_MASK', 'S9_MASK', 'evaluate_sbox', 'verify_tables']
