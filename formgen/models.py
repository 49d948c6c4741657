"""Pydantic models for form rendering documents."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class RenderKind(str, Enum):
    """Rendering flavor of an options element."""

    SELECT = "select"
    MULTISELECT = "multiselect"
    RADIO = "radio"
    CHECKBOX_LIST = "checkboxList"


Scalar = Union[str, int, float, bool]


class RenderRequest(BaseModel):
    """A single options element to render."""

    kind: RenderKind = Field(..., description="Markup flavor to produce.")
    default: Optional[Union[Scalar, List[Scalar]]] = Field(
        None,
        description="Selected or checked value, or a list of them.",
    )
    attributes: Dict[str, Optional[Scalar]] = Field(
        default_factory=dict,
        description=(
            "Top-level HTML attributes. The engine-only keys label, "
            "option_before and option_after are not rendered on the element."
        ),
    )
    options: Union[List[Any], Dict[Any, Any]] = Field(
        default_factory=list,
        description="Indexed labels, a value => label mapping, or prebuilt option mappings.",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def _accept_snake_case_kind(cls, value: Any) -> Any:
        if value == "checkbox_list":
            return RenderKind.CHECKBOX_LIST
        return value


class FormSpec(BaseModel):
    """A wrapping tag holding several rendered fields."""

    tag: str = Field("form", description="Tag wrapping the rendered fields.")
    attributes: Dict[str, Optional[Scalar]] = Field(
        default_factory=dict, description="Attributes of the wrapping tag."
    )
    fields: List[RenderRequest] = Field(
        default_factory=list, description="Options elements rendered in order."
    )


__all__ = [
    "FormSpec",
    "RenderKind",
    "RenderRequest",
]
