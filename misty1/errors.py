"""
Errors raised by the MISTY1 cipher.
"""


class InvalidKeySize(ValueError):
    """
    Raised when a MISTY1 key is not exactly 16 bytes long.

    Attributes:
        length: The length of the rejected key in bytes
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"misty1: invalid key size {length}")
