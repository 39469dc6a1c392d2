"""Typed request models for recipe steps and argument values."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class ToggleValue(BaseModel):
    """Argument for toggleString-typed operation args (value + interpretation)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    string: str = Field(description="Argument value")
    option: str = Field(description="How to interpret the value (e.g. Hex, UTF8, Base64)")


# bool precedes int so JSON true/false never coerces to 1/0.
# Every textual arg kind (string, shortString, binaryString, text, byteArray,
# option, editableOption, argSelector, populateOption) is a plain str here.
ArgValue = Union[bool, int, float, str, ToggleValue]


class RecipeStep(BaseModel):
    """One user-submitted recipe step."""

    model_config = ConfigDict(extra="forbid")

    op: str = Field(description="Operation name (any case/punctuation variant)")
    args: list[ArgValue] = Field(default_factory=list, description="Positional operation args")
