"""Approximate set of everyone who has voted on a comment.

Each comment carries a small Bloom filter of voter IP addresses instead of an
ever-growing list. Membership tests can return false positives (a first-time
voter is occasionally told they already voted) but never false negatives, and
the stored size stays fixed no matter how many votes arrive.

The filter is stored on the comment row as the JSON encoding of
:class:`VotersBlob`.
"""

import math
import secrets
from base64 import b64decode, b64encode
from hashlib import blake2b

from pydantic import BaseModel, ValidationError, field_validator

from murmur.domain.error import SerializationError

# Capacity and accuracy of a filter created on the first vote for a comment
DEFAULT_EXPECTED_VOTERS = 150
DEFAULT_FP_RATE = 0.05

_KEY_SIZE = 16


class VotersBlob(BaseModel):
    """Serialized form of a VoterFilter."""

    bitmap: str  # base64
    bits: int
    hashes: int
    keys: tuple[str, str]  # hex-encoded BLAKE2b keys

    @field_validator("bits", "hashes")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject empty filters."""
        if v < 1:
            raise ValueError("must be positive")
        return v


class VoterFilter:
    """Bloom filter over voter addresses.

    Bit positions come from double hashing: two keyed BLAKE2b digests h1, h2
    give positions ``(h1 + i * h2) mod m`` for ``i`` in ``range(k)``. The keys
    are random per filter and stored alongside the bitmap.
    """

    def __init__(
        self,
        bitmap: bytearray,
        bits: int,
        hashes: int,
        keys: tuple[bytes, bytes],
    ) -> None:
        if len(bitmap) != (bits + 7) // 8:
            raise ValueError("bitmap length does not match bit count")
        self._bitmap = bitmap
        self.bits = bits
        self.hashes = hashes
        self._keys = keys

    @classmethod
    def for_capacity(
        cls,
        expected_items: int = DEFAULT_EXPECTED_VOTERS,
        fp_rate: float = DEFAULT_FP_RATE,
    ) -> "VoterFilter":
        """Create an empty filter sized for a target false-positive rate.

        Args:
            expected_items: Number of distinct voters the filter should hold
            fp_rate: Acceptable false-positive probability at that load

        Returns:
            Empty filter with fresh random keys
        """
        if expected_items < 1:
            raise ValueError("expected_items must be positive")
        if not 0.0 < fp_rate < 1.0:
            raise ValueError("fp_rate must be between 0 and 1")

        bits = math.ceil(-expected_items * math.log(fp_rate) / math.log(2) ** 2)
        hashes = max(1, round(bits / expected_items * math.log(2)))
        return cls(
            bitmap=bytearray((bits + 7) // 8),
            bits=bits,
            hashes=hashes,
            keys=(secrets.token_bytes(_KEY_SIZE), secrets.token_bytes(_KEY_SIZE)),
        )

    def _positions(self, item: str) -> list[int]:
        data = item.encode("utf-8")
        h1 = int.from_bytes(
            blake2b(data, key=self._keys[0], digest_size=8).digest(), "big"
        )
        h2 = int.from_bytes(
            blake2b(data, key=self._keys[1], digest_size=8).digest(), "big"
        )
        return [(h1 + i * h2) % self.bits for i in range(self.hashes)]

    def contains(self, item: str) -> bool:
        """Test whether an item may have been added."""
        return all(
            self._bitmap[pos // 8] & (1 << (pos % 8)) for pos in self._positions(item)
        )

    def add(self, item: str) -> None:
        """Add an item to the filter."""
        for pos in self._positions(item):
            self._bitmap[pos // 8] |= 1 << (pos % 8)

    def check_and_add(self, item: str) -> bool:
        """Add an item, reporting whether it was already present.

        Returns:
            True if the item tested as present before the call
        """
        present = self.contains(item)
        if not present:
            self.add(item)
        return present

    def to_bytes(self) -> bytes:
        """Serialize the filter for storage."""
        blob = VotersBlob(
            bitmap=b64encode(bytes(self._bitmap)).decode("ascii"),
            bits=self.bits,
            hashes=self.hashes,
            keys=(self._keys[0].hex(), self._keys[1].hex()),
        )
        return blob.model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "VoterFilter":
        """Deserialize a stored filter.

        Raises:
            SerializationError: If the stored blob is malformed
        """
        try:
            blob = VotersBlob.model_validate_json(data)
            return cls(
                bitmap=bytearray(b64decode(blob.bitmap, validate=True)),
                bits=blob.bits,
                hashes=blob.hashes,
                keys=(bytes.fromhex(blob.keys[0]), bytes.fromhex(blob.keys[1])),
            )
        except (ValidationError, ValueError) as e:
            raise SerializationError("decode voters", str(e)) from e
