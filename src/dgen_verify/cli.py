import json
from pathlib import Path
import click
from dgen_core.protocol import DEFAULT_BLOCK_SIZE
from .logic import verify_file

@click.group()
def main():
    pass

@main.command("file")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--block-size", type=click.IntRange(min=1), default=DEFAULT_BLOCK_SIZE, show_default=True,
              envvar="DGEN_BLOCK_SIZE", help="I/O chunk size in bytes")
def file_cmd(path: Path, block_size: int):
    result = verify_file(path, block_size)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
