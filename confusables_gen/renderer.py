from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import black

from confusables_gen.errors import RenderError, WriteError
from confusables_gen.telemetry.logging import bind

log = bind(logging.getLogger(__name__), stage="renderer")

TABLE_NAME = "CONFUSABLES"

HEADER = '''# Code generated by confusables-gen; DO NOT EDIT.
"""Basic Latin confusables table for the {package} package."""

from typing import Dict

'''


def render_header(package: str) -> str:
    return HEADER.format(package=package)


def render_table(confusables: Mapping[str, str]) -> str:
    """Render the mapping as a dict literal, one quoted pair per line.

    Keys and values are written verbatim between double quotes since they
    already hold escaped literal text.
    """
    lines = [f"{TABLE_NAME}: Dict[str, str] = {{"]
    for confusable, target in confusables.items():
        lines.append(f'    "{confusable}": "{target}",')
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_source(source: str, filename: str = "<generated>") -> str:
    """Run black over ``source`` and make sure the result compiles."""
    try:
        formatted = black.format_str(source, mode=black.Mode())
    except Exception as exc:
        raise RenderError(f"cannot format {filename}: {exc}") from exc

    # black accepts malformed escapes such as \U00110000
    try:
        compile(formatted, filename, "exec")
    except (SyntaxError, ValueError) as exc:
        raise RenderError(f"generated {filename} does not compile: {exc}") from exc
    return formatted


def _write(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8") as fp:
            fp.write(text)
    except OSError as exc:
        raise WriteError(f"cannot write {path}: {exc}") from exc


def write_source_file(path: str | Path, package: str, body: str) -> None:
    """Write ``body`` under the generated-file header to ``path``.

    If formatting fails the unformatted module is written anyway, so the
    error can be inspected, and RenderError is raised.
    """
    target = Path(path)
    source = render_header(package) + body.lstrip("\r\n")

    try:
        formatted = format_source(source, filename=str(target))
    except RenderError:
        _write(target, source)
        raise

    _write(target, formatted)
    log.info("wrote confusables table", extra={"path": str(target), "chars": len(formatted)})
