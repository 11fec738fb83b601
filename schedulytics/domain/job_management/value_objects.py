"""
Job Management Value Objects

Immutable value objects for job identity.
"""

import re
from dataclasses import dataclass

from bson import ObjectId

from ..errors import InvalidJobIdError

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


@dataclass(frozen=True)
class JobId:
    """
    Value object representing a job identifier.

    Clients see the 24-character hex string; the store sees an ObjectId.
    Parsing a string is fallible, formatting is total.
    """
    value: ObjectId

    def __post_init__(self):
        if not isinstance(self.value, ObjectId):
            raise InvalidJobIdError(
                f"JobId requires an ObjectId, got {type(self.value).__name__}"
            )

    @classmethod
    def parse(cls, text: str) -> "JobId":
        """
        Parse the wire form of an identifier.

        Args:
            text: 24-character hex string

        Returns:
            JobId wrapping the decoded ObjectId

        Raises:
            InvalidJobIdError: If text is not a valid ObjectId encoding
        """
        if not isinstance(text, str):
            raise InvalidJobIdError(
                f"expected str, got {type(text).__name__}"
            )
        # ObjectId() alone lets whitespace through bytes.fromhex
        if not OBJECT_ID_PATTERN.fullmatch(text):
            raise InvalidJobIdError(
                f"{text!r} is not a valid ObjectId, it must be a 24-character hex string"
            )
        return cls(ObjectId(text))

    @classmethod
    def from_object_id(cls, oid: ObjectId) -> "JobId":
        """Wrap a store-native identifier."""
        return cls(oid)

    @property
    def hex(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.hex
