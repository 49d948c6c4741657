"""Utility helpers for document IO and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_document(path: Path) -> Any:
    """Load a JSON or YAML document, chosen by file suffix."""
    if path.suffix.lower() == ".json":
        return read_json(path)
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
