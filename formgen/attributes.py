"""Attribute helpers shared by the option renderers."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

# Keys of the top-level attribute bag consumed by the engine itself.
ENGINE_KEYS = ("label", "option_before", "option_after")


def stringify_attributes(attrs: Mapping[str, Any]) -> str:
    """Render attributes as ``' key="value"'`` pairs in insertion order.

    ``True`` renders as ``key="key"``; ``False``, ``None`` and empty strings
    are dropped. Values are not escaped.
    """
    parts = []
    for name, value in attrs.items():
        if value is True:
            value = name
        elif value is False or value is None or value == "":
            continue
        parts.append(f' {name}="{value}"')
    return "".join(parts)


def add_keys(data: Mapping[str, Any], keys: Iterable[str], default: Any = "") -> Dict[str, Any]:
    """Return a copy of ``data`` with each missing key set to ``default``."""
    result = dict(data)
    for key in keys:
        if result.get(key) is None:
            result[key] = default
    return result


def remove_keys(data: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    dropped = set(keys)
    return {key: value for key, value in data.items() if key not in dropped}


def refined_attributes(attrs: Mapping[str, Any]) -> Dict[str, Any]:
    """Top-level attributes without the engine-only keys."""
    return remove_keys(attrs, ENGINE_KEYS)


def render_label(attrs: Mapping[str, Any]) -> str:
    label = attrs.get("label")
    if label is None or label == "" or label is False:
        return ""
    for_attrs = {"for": attrs.get("id")}
    return f"<label{stringify_attributes(for_attrs)}>{label}</label>"


__all__ = [
    "ENGINE_KEYS",
    "add_keys",
    "refined_attributes",
    "remove_keys",
    "render_label",
    "stringify_attributes",
]
