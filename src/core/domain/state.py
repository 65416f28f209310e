"""Presentation states for a conversion.

The four states form a tagged union discriminated by ``kind``. Renderers match
on the concrete class and finish with ``assert_never`` so a new variant fails
type checking until every renderer handles it.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict


class Empty(BaseModel):
    """Nothing submitted yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"


class Loading(BaseModel):
    """A conversion is in flight."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Success(BaseModel):
    """The last conversion finished; ``celsius_text`` is the verbatim payload."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    celsius_text: str


class Error(BaseModel):
    """The last conversion failed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str = Field(..., min_length=1)


PresentationState = Annotated[
    Union[Empty, Loading, Success, Error],
    Field(discriminator="kind"),
]

# Parses a state back from its JSON form (`convert --json` output).
PRESENTATION_STATE_ADAPTER: TypeAdapter[PresentationState] = TypeAdapter(PresentationState)
