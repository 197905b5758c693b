"""
OpenAntrag response models.

The remote API owns these shapes. Field names are kept as aliases so that
dumping a model with ``by_alias=True`` yields the payload that was decoded,
and unknown fields are carried along untouched.

Responsibility: Typed views over OpenAntrag JSON payloads
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# Process steps are opaque stage descriptors, returned verbatim
ProcessStep = Any


class ErrorPolicy(str, Enum):
    """
    What a lookup does when the underlying request fails.

    FALLBACK substitutes the lookup's default value, RAISE propagates
    the RequestError to the caller.
    """
    FALLBACK = "fallback"
    RAISE = "raise"


class ParliamentDescriptor(BaseModel):
    """Parliament (representation) record returned by GetByKey."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name2: Optional[str] = Field(default=None, alias="Name2", description="Display name")


class Proposal(BaseModel):
    """Legislative proposal returned by GetTop."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: Any = Field(default=None, alias="Title")
    full_url: Any = Field(default=None, alias="FullUrl")
    status: Any = Field(default=None, alias="status")

    def to_payload(self) -> dict[str, Any]:
        """Return the proposal in the remote API's field naming."""
        return self.model_dump(by_alias=True, exclude_unset=True)
