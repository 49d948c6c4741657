"""Selected/checked attribute matching."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .models import RenderKind

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def selection_key(kind: RenderKind) -> str:
    if kind in (RenderKind.SELECT, RenderKind.MULTISELECT):
        return "selected"
    if kind in (RenderKind.RADIO, RenderKind.CHECKBOX_LIST):
        return "checked"
    raise ValueError(f"selected or checked attribute is not available for {kind!r}")


def _is_unset(value: Any) -> bool:
    if isinstance(value, _COLLECTION_TYPES):
        return len(value) == 0
    return value is None or value is False or value == ""


def selection_attribute(option: Mapping[str, Any], kind: RenderKind, default: Any) -> Dict[str, str]:
    """Return ``{"selected": "selected"}`` / ``{"checked": "checked"}`` on a match.

    Values are compared by their string form, so ``1`` matches ``"1"``.
    """
    key = selection_key(kind)
    value = option.get("value")
    if not value or _is_unset(default):
        return {}

    if isinstance(default, _COLLECTION_TYPES):
        matched = str(value) in {str(item) for item in default}
    else:
        matched = str(value) == str(default)
    return {key: key} if matched else {}


__all__ = ["selection_attribute", "selection_key"]
