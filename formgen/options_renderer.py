"""Rendering of select, multiselect, radio and checkbox list elements.

Every render walks the normalized option list once. Group markers
(``{"type": "optgroup", "label": ...}``) open a group, a marker labelled
``__end__`` closes it, and any group still open when the next one starts or
the list ends is closed automatically. Per-call state lives in an immutable
:class:`RenderState` that each step returns.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple

from .attributes import add_keys, refined_attributes, remove_keys, render_label, stringify_attributes
from .models import RenderKind, RenderRequest
from .normalize import normalize_options
from .selection import selection_attribute
from .types_options import GROUP_END, GROUP_MARKER, Attributes, RawOptions

# Kinds whose items are <input> elements and inherit the top-level attributes.
_INPUT_KINDS = (RenderKind.RADIO, RenderKind.CHECKBOX_LIST)


@dataclass(frozen=True)
class RenderState:
    option_count: int = 0
    in_group: bool = False

    def next_option(self) -> "RenderState":
        return replace(self, option_count=self.option_count + 1)


def derive_option_attributes(
    option: Mapping[str, Any],
    state: RenderState,
    kind: RenderKind,
    default: Any = None,
    attributes: Optional[Attributes] = None,
) -> Tuple[Dict[str, Any], RenderState]:
    """Build the generic attributes of one leaf option.

    Radio and checkbox items start from the top-level attributes; the
    option's own keys and then the selection attribute override them.
    Checkbox names get a ``[]`` suffix and input ids get the option counter
    appended so each item stays unique.
    """
    state = state.next_option()

    derived: Dict[str, Any] = {}
    if kind in _INPUT_KINDS:
        derived.update(refined_attributes(attributes or {}))
    derived.update(option)
    derived.update(selection_attribute(option, kind, default))

    if kind == RenderKind.CHECKBOX_LIST and derived.get("name"):
        derived["name"] = f"{derived['name']}[]"
    if kind in _INPUT_KINDS and derived.get("id"):
        derived["id"] = f"{derived['id']}_{state.option_count}"

    return remove_keys(derived, ("value", "label")), state


def group_attributes(option: Mapping[str, Any]) -> str:
    return stringify_attributes(remove_keys(option, ("type", "label")))


def _option_single(option: Mapping[str, Any], attrs: str) -> str:
    return f'<option value="{option["value"]}"{attrs}>{option["label"]}</option>'


def _radio_single(option: Mapping[str, Any], attrs: str) -> str:
    return f'<label><input type="radio" value="{option["value"]}"{attrs}/> {option["label"]}</label>'


def _checkbox_single(option: Mapping[str, Any], attrs: str) -> str:
    return f'<label><input type="checkbox" value="{option["value"]}"{attrs}/> {option["label"]}</label>'


def _optgroup_start(option: Mapping[str, Any]) -> str:
    return f'<optgroup label="{option["label"]}"{group_attributes(option)}>'


def _optgroup_end() -> str:
    return "</optgroup>"


def _div_group_start(option: Mapping[str, Any]) -> str:
    return f'<div><label{group_attributes(option)}>{option["label"]}</label><br/>'


def _div_group_end() -> str:
    return "</div>"


class KindHandlers(NamedTuple):
    single: Callable[[Mapping[str, Any], str], str]
    group_start: Callable[[Mapping[str, Any]], str]
    group_end: Callable[[], str]


HANDLERS: Dict[RenderKind, KindHandlers] = {
    RenderKind.SELECT: KindHandlers(_option_single, _optgroup_start, _optgroup_end),
    RenderKind.MULTISELECT: KindHandlers(_option_single, _optgroup_start, _optgroup_end),
    RenderKind.RADIO: KindHandlers(_radio_single, _div_group_start, _div_group_end),
    RenderKind.CHECKBOX_LIST: KindHandlers(_checkbox_single, _div_group_start, _div_group_end),
}


class HandlerSlot(IntEnum):
    SINGLE = 0
    GROUP_START = 1
    GROUP_END = 2


def handler(kind: RenderKind, slot: HandlerSlot) -> Callable[..., str]:
    if not isinstance(slot, HandlerSlot):
        raise ValueError(f"unknown handler slot {slot!r}")
    handlers = HANDLERS.get(kind)
    if handlers is None:
        raise ValueError(f"no {slot.name.lower()} handler registered for render kind {kind!r}")
    return handlers[slot]


def _enclose(option: Mapping[str, Any], attributes: Attributes, side: str) -> str:
    key = f"option_{side}"
    if option.get(key) is not None:
        return str(option[key])
    if attributes.get(key) is not None:
        return str(attributes[key])
    return ""


def _is_group_marker(option: Mapping[str, Any]) -> bool:
    return option.get("type") == GROUP_MARKER


def render_single_option(
    option: Mapping[str, Any], state: RenderState, request: RenderRequest
) -> Tuple[str, RenderState]:
    option = add_keys(option, ("value", "label"))
    refined = remove_keys(option, ("option_before", "option_after"))
    attrs, state = derive_option_attributes(
        refined, state, request.kind, request.default, request.attributes
    )
    markup = handler(request.kind, HandlerSlot.SINGLE)(refined, stringify_attributes(attrs))
    before = _enclose(option, request.attributes, "before")
    after = _enclose(option, request.attributes, "after")
    return before + markup + after, state


def render_step(
    option: Mapping[str, Any], state: RenderState, request: RenderRequest
) -> Tuple[str, RenderState]:
    """Render one normalized option and return the markup with the next state."""
    if not _is_group_marker(option):
        return render_single_option(option, state, request)

    if option.get("label") == GROUP_END:
        return handler(request.kind, HandlerSlot.GROUP_END)(), replace(state, in_group=False)

    markup = ""
    if state.in_group:
        markup += handler(request.kind, HandlerSlot.GROUP_END)()
    markup += handler(request.kind, HandlerSlot.GROUP_START)(add_keys(option, ("label",)))
    return markup, replace(state, in_group=True)


def finish(state: RenderState, kind: RenderKind) -> str:
    """Close a group left open at the end of the list."""
    if state.in_group:
        return handler(kind, HandlerSlot.GROUP_END)()
    return ""


def build_options(request: RenderRequest) -> str:
    parts = []
    state = RenderState()
    for option in normalize_options(request.options):
        markup, state = render_step(option, state, request)
        parts.append(markup)
    parts.append(finish(state, request.kind))
    return "".join(parts)


def _wrap(request: RenderRequest, body: str) -> str:
    attrs = refined_attributes(request.attributes)
    if request.kind == RenderKind.SELECT:
        return f"<select{stringify_attributes(attrs)}>{body}</select>"
    if request.kind == RenderKind.MULTISELECT:
        attrs = remove_keys(attrs, ("multiple",))
        return f'<select{stringify_attributes(attrs)} multiple="multiple">{body}</select>'
    return body


def render(request: RenderRequest) -> str:
    """Render a full options element, preceded by its label if one is set."""
    return render_label(request.attributes) + _wrap(request, build_options(request))


def _request(
    kind: RenderKind,
    default: Any,
    attributes: Optional[Attributes],
    options: Optional[RawOptions],
) -> RenderRequest:
    return RenderRequest(
        kind=kind,
        default=default,
        attributes=dict(attributes or {}),
        options=options if options is not None else [],
    )


def select(default: Any = None, attributes: Optional[Attributes] = None, options: Optional[RawOptions] = None) -> str:
    return render(_request(RenderKind.SELECT, default, attributes, options))


def dropdown(default: Any = None, attributes: Optional[Attributes] = None, options: Optional[RawOptions] = None) -> str:
    """Alias of :func:`select`."""
    return select(default, attributes, options)


def multiselect(default: Any = None, attributes: Optional[Attributes] = None, options: Optional[RawOptions] = None) -> str:
    return render(_request(RenderKind.MULTISELECT, default, attributes, options))


def radio(default: Any = None, attributes: Optional[Attributes] = None, options: Optional[RawOptions] = None) -> str:
    return render(_request(RenderKind.RADIO, default, attributes, options))


def checkbox_list(default: Any = None, attributes: Optional[Attributes] = None, options: Optional[RawOptions] = None) -> str:
    return render(_request(RenderKind.CHECKBOX_LIST, default, attributes, options))


__all__ = [
    "HANDLERS",
    "HandlerSlot",
    "KindHandlers",
    "RenderState",
    "build_options",
    "checkbox_list",
    "derive_option_attributes",
    "dropdown",
    "finish",
    "group_attributes",
    "handler",
    "multiselect",
    "radio",
    "render",
    "render_single_option",
    "render_step",
    "select",
]
