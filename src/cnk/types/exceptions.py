"""Exception hierarchy for the ID set codecs."""

from __future__ import annotations


class CompressionError(Exception):
    """
    Base exception for all codec errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidInputError(CompressionError):
    """
    Raised when caller-supplied data violates a compression precondition.

    Examples:
        - IDs not strictly increasing (unsorted or duplicated).
        - An ID greater than or equal to the universe size.
        - A value that does not fit in an unsigned 32-bit integer.

    Always raised before any output is produced.
    """


class DecompressionFailedError(CompressionError):
    """
    Raised when a byte buffer is not a valid encoding.

    Examples:
        - A truncated varint.
        - A varint whose shift exceeds the 64-bit bound.
        - A reconstructed ID greater than or equal to the universe size.
        - Bytes left over after the declared element count.
    """


class UnsupportedMethodError(CompressionError):
    """
    Raised when a reserved compression method is requested.

    Attributes:
        method: Name of the method that has no implementation.
    """

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Compression method {method} is not implemented")
