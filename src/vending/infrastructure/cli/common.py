"""Helpers shared by the line-oriented commands."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

import click

input_option = click.option(
    "--input",
    "source",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="File to read lines from.",
)


def read_lines(source: TextIO) -> Iterator[str]:
    """Yield non-blank, stripped lines."""
    for raw in source:
        line = raw.strip()
        if line:
            yield line
