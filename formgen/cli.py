"""Command-line interface for formgen."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Type, Union

import yaml
from jinja2 import TemplateError
from pydantic import ValidationError

from .dom_model import DomNode, dom_to_html
from .io_utils import read_document, stable_json_dumps, warn
from .jinja_env import template_env
from .models import FormSpec, RenderRequest
from .normalize import normalize_options
from .options_renderer import render
from .util_fs import write_text


def _load_payload(path: Path) -> Any:
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    try:
        return read_document(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc


def _document_model(payload: Dict[str, Any]) -> Type[Union[RenderRequest, FormSpec]]:
    return FormSpec if "fields" in payload else RenderRequest


def _load_spec(path: Path) -> Union[RenderRequest, FormSpec]:
    payload = _load_payload(path)
    if not isinstance(payload, dict):
        raise SystemExit(f"{path} must contain a mapping.")
    try:
        return _document_model(payload).model_validate(payload)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render document in {path}: {exc}") from exc


def render_form(spec: FormSpec) -> str:
    node = DomNode(tag=spec.tag, attrs=dict(spec.attributes))
    for field in spec.fields:
        node.add_raw(render(field))
    return dom_to_html([node])


def render_document(spec: Union[RenderRequest, FormSpec]) -> str:
    if isinstance(spec, FormSpec):
        return render_form(spec)
    return render(spec)


def _emit(output: str, out: Optional[str]) -> None:
    if out:
        write_text(out, output)
    else:
        sys.stdout.write(output)


def _handle_render(args: argparse.Namespace) -> None:
    spec = _load_spec(Path(args.input))
    try:
        output = render_document(spec)
    except ValueError as exc:
        raise SystemExit(f"Failed to render {args.input}: {exc}") from exc
    _emit(output + "\n", args.output)


def _handle_validate(args: argparse.Namespace) -> None:
    path = Path(args.input)
    payload = _load_payload(path)
    if not isinstance(payload, dict):
        warn(f"{path} must contain a mapping.")
        raise SystemExit(1)

    try:
        spec = _document_model(payload).model_validate(payload)
    except ValidationError as exc:
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            warn(f"{path}: {location}: {error['msg']}")
        raise SystemExit(1)

    requests = spec.fields if isinstance(spec, FormSpec) else [spec]
    if args.show:
        summary = [
            {
                "kind": request.kind.value,
                "options": normalize_options(request.options),
            }
            for request in requests
        ]
        sys.stdout.write(stable_json_dumps(summary))
    print(f"Validated {len(requests)} field(s) in {path}.")


def _handle_page(args: argparse.Namespace) -> None:
    data: Any = {}
    if args.data:
        data = _load_payload(Path(args.data)) or {}
        if not isinstance(data, dict):
            raise SystemExit(f"{args.data} must contain a mapping.")

    env = template_env([Path(args.templates)])
    try:
        output = env.get_template(args.template).render(**data)
    except (TemplateError, ValidationError, ValueError) as exc:
        raise SystemExit(f"Failed to render {args.template}: {exc}") from exc
    _emit(output, args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formgen",
        description="Render select, multiselect, radio and checkbox list markup.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a field or form document to HTML.",
        description="Render a YAML/JSON render request, or a form with several fields.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the YAML or JSON document.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        help="File to write the markup to (defaults to stdout).",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a render document.",
        description="Check a render request or form document against its schema.",
    )
    validate_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the YAML or JSON document.",
    )
    validate_parser.add_argument(
        "--show",
        action="store_true",
        help="Print the normalized options of each field as JSON.",
    )
    validate_parser.set_defaults(func=_handle_validate)

    page_parser = subparsers.add_parser(
        "page",
        help="Render a Jinja template with form helpers.",
        description=(
            "Render a template where select, dropdown, multiselect, radio and "
            "checkbox_list are available as globals."
        ),
    )
    page_parser.add_argument(
        "--template",
        required=True,
        help="Template name relative to --templates.",
    )
    page_parser.add_argument(
        "--templates",
        default="templates",
        help="Directory containing templates.",
    )
    page_parser.add_argument(
        "--data",
        help="Optional YAML or JSON file with template variables.",
    )
    page_parser.add_argument(
        "--out",
        dest="output",
        help="File to write the page to (defaults to stdout).",
    )
    page_parser.set_defaults(func=_handle_page)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main", "render_document", "render_form"]


if __name__ == "__main__":
    main()
