"""
MISTY1 - 64-bit Block Cipher Library

This library implements the MISTY1 symmetric block cipher (RFC 2994)
as a reusable single-block primitive for higher-level constructions
such as modes of operation.

Key Features:
- 64-bit block size, 128-bit key
- Eight-round Feistel structure with FO round function and FL layers
- Fixed S7/S9 substitution tables with property checks
- Immutable, thread-safe cipher instances
"""

from .errors import InvalidKeySize
from .cipher_core import MISTY1, encrypt_block, decrypt_block, BLOCK_SIZE
from .key_schedule import expand_key, generate_key, KEY_SIZE

__version__ = '0.1.0'
__author__ = 'MISTY1 Team'

__all__ = [
    'MISTY1', 'InvalidKeySize', 'encrypt_block', 'decrypt_block',
    'expand_key', 'generate_key', 'BLOCK_SIZE', 'KEY_SIZE',
]
