"""
Fixed-width conversion between byte strings and field elements.

A secret is cut into CHUNK_SIZE byte chunks and each chunk is read as a
big-endian unsigned integer. Elements are always written back as exactly
ELEMENT_SIZE bytes, left-padded with zeros, so the codec is lossless only
for inputs whose length is a multiple of CHUNK_SIZE. Callers guarantee
that; a short final chunk is converted but comes back padded.
"""

from dataclasses import dataclass


# Bytes of secret carried by one field element.
CHUNK_SIZE = 32

# Serialized width of one field element.
ELEMENT_SIZE = 32

# Serialized width of one (x, y) share point.
POINT_SIZE = 2 * ELEMENT_SIZE


def element_to_bytes(value: int) -> bytes:
    """Serialize a field element to ELEMENT_SIZE big-endian bytes."""
    return value.to_bytes(ELEMENT_SIZE, byteorder="big")


def element_from_bytes(data: bytes) -> int:
    """Read a big-endian unsigned integer."""
    return int.from_bytes(data, byteorder="big")


def bytes_to_elements(data: bytes) -> list[int]:
    """
    Split data into CHUNK_SIZE chunks and convert each to an integer.

    Args:
        data: Bytes to convert; the last chunk may be shorter than CHUNK_SIZE

    Returns:
        One integer per chunk, in order
    """
    return [
        element_from_bytes(data[start : start + CHUNK_SIZE])
        for start in range(0, len(data), CHUNK_SIZE)
    ]


def elements_to_bytes(elements: list[int]) -> bytes:
    """Concatenate the fixed-width serialization of each element."""
    return b"".join(element_to_bytes(e) for e in elements)


@dataclass(frozen=True)
class SharePoint:
    """
    One point of one chunk's polynomial.

    Attributes:
        x: The x-coordinate (random evaluation point).
        y: The y-coordinate (polynomial evaluation at x).
    """

    x: int
    y: int

    def to_bytes(self) -> bytes:
        """
        Serialize point to binary format.

        Format: 32 bytes (x, big-endian) + 32 bytes (y, big-endian)
        Total: 64 bytes per point
        """
        return element_to_bytes(self.x) + element_to_bytes(self.y)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SharePoint":
        """
        Deserialize point from binary format.

        Args:
            data: 64-byte binary representation

        Returns:
            SharePoint instance

        Raises:
            ValueError: If data is not exactly 64 bytes
        """
        if len(data) != POINT_SIZE:
            raise ValueError(
                f"Share point data must be {POINT_SIZE} bytes, got {len(data)}"
            )
        x = element_from_bytes(data[:ELEMENT_SIZE])
        y = element_from_bytes(data[ELEMENT_SIZE:])
        return cls(x=x, y=y)
