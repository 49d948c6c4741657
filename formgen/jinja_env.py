"""Jinja integration exposing the option renderers to templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from . import options_renderer


def _as_markup(render: Callable[..., str]) -> Callable[..., Markup]:
    def wrapper(default: Any = None, attributes: Any = None, options: Any = None) -> Markup:
        return Markup(render(default, attributes, options))

    wrapper.__name__ = render.__name__
    wrapper.__doc__ = render.__doc__
    return wrapper


def form_globals() -> Dict[str, Callable[..., Markup]]:
    """Template globals rendering each options element as safe markup."""

    return {
        "select": _as_markup(options_renderer.select),
        "dropdown": _as_markup(options_renderer.dropdown),
        "multiselect": _as_markup(options_renderer.multiselect),
        "radio": _as_markup(options_renderer.radio),
        "checkbox_list": _as_markup(options_renderer.checkbox_list),
    }


def template_env(template_dirs: Iterable[Path]) -> Environment:
    """Create a Jinja environment with the form globals registered."""

    env = Environment(
        loader=FileSystemLoader([str(path) for path in template_dirs]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals.update(form_globals())
    return env


__all__ = ["form_globals", "template_env"]
