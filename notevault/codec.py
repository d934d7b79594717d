"""
Reversible obfuscation for stored passwords.

SECURITY NOTE:
This module shifts every character by a fixed number of code points. It is
NOT encryption and must not be treated as a security boundary. It only keeps
passwords from sitting in memory in their literal form.
"""

from . import config


class ObfuscationCodec:
    """Shifts text by a fixed number of code points in either direction."""

    def __init__(self, shift: int = config.SHIFT_KEY):
        """
        Initialize the codec.

        Args:
            shift: Number of code points each character is moved by
        """
        self.shift = shift

    def encode(self, text: str) -> str:
        """
        Obfuscate text by shifting every code point up.

        Args:
            text: Plain text to obfuscate

        Returns:
            Obfuscated text of the same length
        """
        return self._shift_text(text, self.shift)

    def decode(self, text: str) -> str:
        """
        Reverse encode() by shifting every code point down.

        Args:
            text: Text produced by encode()

        Returns:
            The original plain text
        """
        return self._shift_text(text, -self.shift)

    @staticmethod
    def _shift_text(text: str, offset: int) -> str:
        # Wraps at the end of the code point space so chr() never overflows
        return ''.join(
            chr((ord(character) + offset) % config.CODE_POINT_LIMIT)
            for character in text
        )
