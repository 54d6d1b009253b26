"""
Key Schedule Package

This package implements the MISTY1 key expansion, which turns a 128-bit
master key into the 32 subkeys used by the block transform, together with
the FI function it is built on.
"""

from .misty_key_schedule import fi, expand_key, generate_key, KEY_SIZE, NUM_SUBKEYS

__all__ = ['fi', 'expand_key', 'generate_key', 'KEY_SIZE', 'NUM_SUBKEYS']
