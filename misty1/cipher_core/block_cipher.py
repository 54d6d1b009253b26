"""
Block Cipher Implementation

This module provides the core implementation of MISTY1 (RFC 2994), a
64-bit Feistel block cipher with a 128-bit key: eight rounds of the FO
function interleaved with the key-dependent linear FL layers.
"""

from typing import Sequence, Union

from ..key_schedule.misty_key_schedule import fi, expand_key, KEY_SIZE

BLOCK_SIZE = 8    # bytes
NUM_ROUNDS = 8

Buffer = Union[bytes, bytearray, memoryview]


def fo(fin: int, ek: Sequence[int], k: int) -> int:
    """
    The FO round function applied to a 32-bit half block.

    Args:
        fin: 32-bit input
        ek: The 32 expanded subkeys
        k: Round index (0..7)

    Returns:
        32-bit output
    """
    t0 = fin >> 16
    t1 = fin & 0xFFFF
    t0 ^= ek[k]
    t0 = fi(t0, ek[(k + 5) % 8 + 8])
    t0 ^= t1
    t1 ^= ek[(k + 2) % 8]
    t1 = fi(t1, ek[(k + 1) % 8 + 8])
    t1 ^= t0
    t0 ^= ek[(k + 7) % 8]
    t0 = fi(t0, ek[(k + 3) % 8 + 8])
    t0 ^= t1
    t1 ^= ek[(k + 4) % 8]
    return (t1 << 16) | t0


def fl(fin: int, ek: Sequence[int], k: int) -> int:
    """
    The FL key-mixing function applied to a 32-bit half block.

    Args:
        fin: 32-bit input
        ek: The 32 expanded subkeys
        k: FL index (0..9); even and odd indices select different subkeys

    Returns:
        32-bit output
    """
    d0 = fin >> 16
    d1 = fin & 0xFFFF
    if k % 2 == 0:
        d1 ^= d0 & ek[k // 2]
        d0 ^= d1 | ek[(k // 2 + 6) % 8 + 8]
    else:
        d1 ^= d0 & ek[((k - 1) // 2 + 2) % 8 + 8]
        d0 ^= d1 | ek[((k - 1) // 2 + 4) % 8]
    return (d0 << 16) | d1


def flinv(fin: int, ek: Sequence[int], k: int) -> int:
    """
    Inverse of fl: replays the two updates in reverse order.

    Args:
        fin: 32-bit input
        ek: The 32 expanded subkeys
        k: FL index (0..9)

    Returns:
        32-bit output such that flinv(fl(x, ek, k), ek, k) == x
    """
    d0 = fin >> 16
    d1 = fin & 0xFFFF
    if k % 2 == 0:
        d0 ^= d1 | ek[(k // 2 + 6) % 8 + 8]
        d1 ^= d0 & ek[k // 2]
    else:
        d0 ^= d1 | ek[((k - 1) // 2 + 4) % 8]
        d1 ^= d0 & ek[((k - 1) // 2 + 2) % 8 + 8]
    return (d0 << 16) | d1


def _check_block(block: Buffer, what: str) -> None:
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"{what} must be exactly {BLOCK_SIZE} bytes, got {len(block)}")


def _check_buffers(dst: Buffer, src: Buffer) -> None:
    if len(src) < BLOCK_SIZE:
        raise ValueError(f"src must hold at least {BLOCK_SIZE} bytes, got {len(src)}")
    if len(dst) < BLOCK_SIZE:
        raise ValueError(f"dst must hold at least {BLOCK_SIZE} bytes, got {len(dst)}")


class MISTY1:
    """
    MISTY1 block cipher with a 64-bit block and a 128-bit key.

    The key schedule runs once in the constructor; the resulting subkeys
    are never modified, so one instance may be shared between threads.
    """

    block_size = BLOCK_SIZE
    key_size = KEY_SIZE
    num_rounds = NUM_ROUNDS

    def __init__(self, key: bytes):
        """
        Initialize the cipher with a key.

        Args:
            key: The secret key (16 bytes)

        Raises:
            InvalidKeySize: If the key is not exactly 16 bytes
        """
        self._ek = expand_key(key)

    @property
    def subkeys(self) -> tuple:
        """The 32 expanded 16-bit subkeys."""
        return self._ek

    def encrypt_block(self, plaintext: Buffer) -> bytes:
        """
        Encrypt a single 8-byte block.

        Args:
            plaintext: The plaintext block to encrypt

        Returns:
            The encrypted ciphertext block
        """
        _check_block(plaintext, "Plaintext")
        ek = self._ek

        d0 = int.from_bytes(plaintext[:4], byteorder='big')
        d1 = int.from_bytes(plaintext[4:], byteorder='big')

        # Rounds 0 and 1
        d0 = fl(d0, ek, 0)
        d1 = fl(d1, ek, 1)
        d1 ^= fo(d0, ek, 0)
        d0 ^= fo(d1, ek, 1)

        # Rounds 2 and 3
        d0 = fl(d0, ek, 2)
        d1 = fl(d1, ek, 3)
        d1 ^= fo(d0, ek, 2)
        d0 ^= fo(d1, ek, 3)

        # Rounds 4 and 5
        d0 = fl(d0, ek, 4)
        d1 = fl(d1, ek, 5)
        d1 ^= fo(d0, ek, 4)
        d0 ^= fo(d1, ek, 5)

        # Rounds 6 and 7
        d0 = fl(d0, ek, 6)
        d1 = fl(d1, ek, 7)
        d1 ^= fo(d0, ek, 6)
        d0 ^= fo(d1, ek, 7)

        # Final FL layer
        d0 = fl(d0, ek, 8)
        d1 = fl(d1, ek, 9)

        return d1.to_bytes(4, byteorder='big') + d0.to_bytes(4, byteorder='big')

    def decrypt_block(self, ciphertext: Buffer) -> bytes:
        """
        Decrypt a single 8-byte block.

        Args:
            ciphertext: The ciphertext block to decrypt

        Returns:
            The decrypted plaintext block
        """
        _check_block(ciphertext, "Ciphertext")
        ek = self._ek

        d1 = int.from_bytes(ciphertext[:4], byteorder='big')
        d0 = int.from_bytes(ciphertext[4:], byteorder='big')

        d0 = flinv(d0, ek, 8)
        d1 = flinv(d1, ek, 9)

        # Rounds 7 and 6
        d0 ^= fo(d1, ek, 7)
        d1 ^= fo(d0, ek, 6)
        d0 = flinv(d0, ek, 6)
        d1 = flinv(d1, ek, 7)

        # Rounds 5 and 4
        d0 ^= fo(d1, ek, 5)
        d1 ^= fo(d0, ek, 4)
        d0 = flinv(d0, ek, 4)
        d1 = flinv(d1, ek, 5)

        # Rounds 3 and 2
        d0 ^= fo(d1, ek, 3)
        d1 ^= fo(d0, ek, 2)
        d0 = flinv(d0, ek, 2)
        d1 = flinv(d1, ek, 3)

        # Rounds 1 and 0
        d0 ^= fo(d1, ek, 1)
        d1 ^= fo(d0, ek, 0)
        d0 = flinv(d0, ek, 0)
        d1 = flinv(d1, ek, 1)

        return d0.to_bytes(4, byteorder='big') + d1.to_bytes(4, byteorder='big')

    def encrypt(self, dst: Union[bytearray, memoryview], src: Buffer) -> None:
        """
        Encrypt the first block of src into the first block of dst.

        Only the first 8 bytes of src are read and only the first 8 bytes
        of dst are written; bytes beyond them are left untouched. The whole
        input block is read before any output is written, so dst and src
        may be the same buffer.

        Raises:
            ValueError: If src or dst is shorter than 8 bytes
        """
        _check_buffers(dst, src)
        dst[:BLOCK_SIZE] = self.encrypt_block(src[:BLOCK_SIZE])

    def decrypt(self, dst: Union[bytearray, memoryview], src: Buffer) -> None:
        """
        Decrypt the first block of src into the first block of dst.

        Same buffer rules as encrypt; dst and src may be the same buffer.
        """
        _check_buffers(dst, src)
        dst[:BLOCK_SIZE] = self.decrypt_block(src[:BLOCK_SIZE])


def encrypt_block(plaintext: bytes, key: bytes) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt (8 bytes)
        key: The master key (16 bytes)

    Returns:
        The encrypted ciphertext block
    """
    cipher = MISTY1(key)
    return cipher.encrypt_block(plaintext)


def decrypt_block(ciphertext: bytes, key: bytes) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt (8 bytes)
        key: The master key (16 bytes)

    Returns:
        The decrypted plaintext block
    """
    cipher = MISTY1(key)
    return cipher.decrypt_block(ciphertext)


if __name__ == "__main__":
    # RFC 2994 test data
    key = bytes.fromhex('00112233445566778899aabbccddeeff')
    plaintext = bytes.fromhex('0123456789abcdef')

    ciphertext = encrypt_block(plaintext, key)
    print(f"Key: {key.hex()}")
    print(f"Plaintext: {plaintext.hex()}")
    print(f"Ciphertext: {ciphertext.hex()}")

    assert ciphertext == bytes.fromhex('8b1da5f56ab3d07c')
    assert decrypt_block(ciphertext, key) == plaintext
    print("MISTY1 test vector passed!")
