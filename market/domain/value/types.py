"""Domain value objects for the marketplace.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from market.domain.value.common import RootValueObject, ValueObject


class SubjectKind(str, Enum):
    """Kind of entity a comment can be attached to."""

    FILE = "file"


class CommentSubject(ValueObject):
    """The entity a comment thread hangs off.

    Comments are polymorphic over their subject; a lookup always has to match
    both the kind and the id, otherwise a comment from one file could be
    reached through another.
    """

    kind: SubjectKind
    id: int

    @classmethod
    def file(cls, file_id: int) -> "CommentSubject":
        """Subject for a comment thread on a file."""
        return cls(kind=SubjectKind.FILE, id=file_id)


class Handle(RootValueObject[str]):
    """Display handle of a user, as issued by the identity provider."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
