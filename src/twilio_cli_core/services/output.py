"""Tabular output for command results.

Results are lists of flat dicts. They render as a ``rich`` table
(``columns``), a JSON document (``json``) or tab-separated lines (``tsv``).
"""
from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

OUTPUT_FORMATS: tuple[str, ...] = ("columns", "json", "tsv")

console = Console()

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_WORD_SEPARATOR = re.compile(r"[-_\s]+")


def _header(name: str) -> str:
    """``friendlyName`` -> ``Friendly Name``; ``accountSID`` -> ``Account SID``."""
    spaced = _CAMEL_BOUNDARY.sub(" ", name)
    words = [w for w in _WORD_SEPARATOR.split(spaced) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def select_columns(rows: Sequence[Mapping[str, Any]], properties: Iterable[str] | None = None) -> list[str]:
    """Return the column keys to display, in first-seen order."""
    if properties is not None:
        return list(properties)
    keys: list[str] = []
    for row in rows:
        for key in row:
            if key not in keys:
                keys.append(key)
    return keys


def render(
    rows: Sequence[Mapping[str, Any]],
    output_format: str = "columns",
    properties: Iterable[str] | None = None,
    target: Console | None = None,
) -> None:
    """Print *rows* in the requested format.

    Parameters
    ----------
    rows:
        Records to print. An empty sequence prints nothing for ``columns``
        and ``tsv`` and ``[]`` for ``json``.
    output_format:
        One of :data:`OUTPUT_FORMATS`.
    properties:
        Keys to show, in order. ``json`` ignores it and prints full records.
    target:
        Console to print on; defaults to stdout.

    Raises
    ------
    ValueError
        If *output_format* is unknown.
    """
    out = target or console
    if output_format == "json":
        out.print_json(json.dumps([dict(r) for r in rows], default=str))
        return
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format {output_format!r}")
    if not rows:
        return

    columns = select_columns(rows, properties)
    if output_format == "tsv":
        lines = ["\t".join(columns)]
        lines.extend("\t".join(_cell(row.get(c)) for c in columns) for row in rows)
        # rich expands tabs, so tsv bypasses the renderer
        click.echo("\n".join(lines), file=out.file)
        return

    table = Table(box=None, show_edge=False, pad_edge=False)
    for column in columns:
        table.add_column(escape(_header(column)), style="bold" if column == "sid" else None)
    for row in rows:
        table.add_row(*(escape(_cell(row.get(c))) for c in columns))
    out.print(table)
