"""
Cipher Core Package

This package implements the MISTY1 block transform: the FO round
function, the FL/FLINV key-mixing layers and the eight-round
encryption/decryption drivers.
"""

from .block_cipher import MISTY1, encrypt_block, decrypt_block, BLOCK_SIZE

__all__ = ['MISTY1', 'encrypt_block', 'decrypt_block', 'BLOCK_SIZE']
