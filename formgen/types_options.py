"""Option type definitions."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Sequence, TypedDict, Union

GROUP_MARKER = "optgroup"
GROUP_END = "__end__"


class NormalizedOption(TypedDict, total=False):
    value: Any
    label: Any
    option_before: str
    option_after: str


class GroupMarker(TypedDict, total=False):
    type: Literal["optgroup"]
    label: str


OptionEntry = Union[NormalizedOption, GroupMarker, Mapping[str, Any]]

RawOptions = Union[Sequence[Any], Mapping[Any, Any]]

AttributeValue = Union[str, bool, int, float, None]

Attributes = Mapping[str, AttributeValue]
