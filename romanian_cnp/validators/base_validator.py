"""
Validator base class

[Role]
- Common input normalisation (any value -> stripped string)
- Common interface definition
"""
import re
from abc import ABC, abstractmethod


class BaseValidator(ABC):
    """Validator base class"""

    # ASCII digits only (str.isdigit() also accepts other Unicode digits)
    DIGITS_PATTERN = re.compile(r'[0-9]+', re.ASCII)

    @staticmethod
    def normalize(value) -> str:
        """
        Convert a candidate value to a stripped string

        Args:
            value: candidate (str, int, bytes, ...)

        Returns:
            str: normalised value, '' when the value can never be a code
        """
        if value is None or isinstance(value, bool):
            return ''

        if isinstance(value, (bytes, bytearray)):
            try:
                value = value.decode('ascii')
            except UnicodeDecodeError:
                return ''

        if not isinstance(value, str):
            value = str(value)

        return value.strip()

    def is_digits(self, value: str, length: int) -> bool:
        """Exactly `length` ASCII digits"""
        if len(value) != length:
            return False
        return self.DIGITS_PATTERN.fullmatch(value) is not None

    @abstractmethod
    def validate(self, value, context: str = "") -> bool:
        """
        Basic validation

        Args:
            value: value to validate
            context: surrounding context (informational)

        Returns:
            bool: True when the value is valid
        """
        pass
