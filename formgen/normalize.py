"""Option list normalization."""

from __future__ import annotations

from typing import Any, List, Mapping

from .types_options import OptionEntry, RawOptions


def _position(key: Any) -> Any:
    # JSON and YAML documents spell positional keys as "0", "1", ...
    if isinstance(key, str) and key.isdigit() and str(int(key)) == key:
        return int(key)
    return key


def _is_indexed(options: RawOptions) -> bool:
    if isinstance(options, Mapping):
        positions = {_position(key) for key in options}
        return 0 in positions and (len(options) - 1) in positions
    return True


def _first_value(options: RawOptions) -> Any:
    if isinstance(options, Mapping):
        return next(iter(options.values()))
    return options[0]


def normalize_options(options: RawOptions | None) -> List[OptionEntry]:
    """Convert indexed or associative option input into value/label mappings.

    ``["a", "b"]`` becomes ``[{"value": "a", "label": "a"}, ...]`` and
    ``{"a": "A"}`` becomes ``[{"value": "a", "label": "A"}]``. When the first
    entry is already a mapping the input is returned as a list untouched, so
    group markers can be built by hand.
    """
    if not options:
        return []

    if isinstance(_first_value(options), Mapping):
        if isinstance(options, Mapping):
            return list(options.values())
        return list(options)

    indexed = _is_indexed(options)
    items = options.items() if isinstance(options, Mapping) else enumerate(options)
    return [
        {"value": value if indexed else key, "label": value}
        for key, value in items
    ]


__all__ = ["normalize_options"]
