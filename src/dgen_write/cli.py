"""dgen - Pattern file writer."""
from __future__ import annotations

import math
from pathlib import Path

import click

from dgen_core.errors import PatternFileError
from dgen_core.protocol import DEFAULT_BLOCK_SIZE
from dgen_write.writer import create_file, overwrite_file

_MULTIPLIERS = {"K": 1024, "M": 1024**2, "G": 1024**3, "T": 1024**4}


def parse_size(text: str) -> int:
    """Parse '4096', '64K', '10MB', '1GiB' into a byte count (1024-based)."""
    s = text.strip().upper()
    for suffix in ("IB", "B"):
        if s.endswith(suffix) and len(s) > len(suffix) and s[-len(suffix) - 1] in _MULTIPLIERS:
            s = s[:-len(suffix)]
            break
    if s and s[-1] in _MULTIPLIERS:
        value = float(s[:-1]) * _MULTIPLIERS[s[-1]]
        if not math.isfinite(value):
            raise ValueError(f"size must be finite, got {text!r}")
        return int(value)
    return int(s)


class SizeParam(click.ParamType):
    name = "size"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_size(value)
        except ValueError:
            self.fail(f"{value!r} is not a size (examples: 4096, 64K, 10MB)", param, ctx)


block_size_option = click.option(
    "--block-size",
    type=click.IntRange(min=1),
    default=DEFAULT_BLOCK_SIZE,
    show_default=True,
    envvar="DGEN_BLOCK_SIZE",
    help="I/O chunk size in bytes",
)


@click.group()
def main() -> None:
    """Generate files filled with the dgen integrity pattern."""


@main.command("create")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("size", type=SizeParam())
@block_size_option
def create_cmd(path: Path, size: int, block_size: int) -> None:
    """Create PATH holding SIZE bytes of pattern (header included)."""
    click.echo(f"Generating: {path} ({size} bytes)")
    try:
        create_file(path, size, block_size)
    except PatternFileError as e:
        # Fail closed, with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)
    click.echo(f"PASS: {path} written")


@main.command("overwrite")
@click.argument("path", type=click.Path(path_type=Path))
@block_size_option
def overwrite_cmd(path: Path, block_size: int) -> None:
    """Re-stamp an existing PATH in place without changing its length."""
    click.echo(f"Overwriting: {path}")
    try:
        size = overwrite_file(path, block_size)
    except PatternFileError as e:
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)
    click.echo(f"PASS: {path} rewritten ({size} bytes)")


if __name__ == "__main__":
    main()
