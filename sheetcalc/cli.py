import typer

from .config import Settings, configure_logging
from .dependencies import dependents, find_cycles
from .driver import process_csv
from .exceptions import GridError
from .grid import Grid, build_grid, split_rows
from .loader import load_source

cli = typer.Typer(help="Evaluate CSV grids of integers and cell references.")

_cfg = Settings()


def _fail(err: GridError):
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def _load_grid(csv_file: str) -> Grid:
    data = load_source(csv_file, encoding=_cfg.ENCODING)
    return build_grid(split_rows(data, _cfg.ROW_DELIMITER), _cfg.FIELD_DELIMITER)


@cli.callback()
def main(log_level: str = typer.Option(_cfg.LOG_LEVEL, help="Diagnostics level (stderr).")):
    configure_logging(log_level)


@cli.command()
def evaluate(csv_file: str):
    """Print CSV_FILE with every cell resolved to an integer or the error marker."""
    try:
        data = load_source(csv_file, encoding=_cfg.ENCODING)
        out = process_csv(data, _cfg)
    except GridError as err:
        _fail(err)
    typer.echo(out)


@cli.command()
def impact(csv_file: str, cell: str):
    """Print every cell that depends on CELL, one per line."""
    try:
        grid = _load_grid(csv_file)
        deps = dependents(grid, cell)
    except GridError as err:
        _fail(err)
    except KeyError:
        typer.echo(f"Error: {cell} is not a cell of {csv_file}", err=True)
        raise typer.Exit(code=1)
    for ref in deps:
        typer.echo(ref)


@cli.command()
def cycles(csv_file: str):
    """Print each circular reference chain in CSV_FILE."""
    try:
        found = find_cycles(_load_grid(csv_file))
    except GridError as err:
        _fail(err)
    if not found:
        typer.echo("No circular references")
    for cycle in found:
        typer.echo(" -> ".join(cycle))


if __name__ == "__main__":
    cli()
