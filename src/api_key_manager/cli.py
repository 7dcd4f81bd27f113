import asyncio
import json
import logging
import typer
from typing import Annotated
from pathlib import Path

from .backends import JsonFileKeyRepository
from .config import resolve_store_path
from .dto import KeyInfo
from .errors import KeyManagerError
from .list_keys import ListKeysOptions, ListKeysUseCase

app = typer.Typer(help="Manage API keys for LLM providers")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def format_key_line(info: KeyInfo) -> str:
    marker = "*" if info.is_default else " "
    shown = info.full_key if info.full_key is not None else info.masked_key
    line = f"{marker} {info.name}  {shown}"
    if info.base_url:
        line += f"  {info.base_url}"
    if info.note:
        line += f"  ({info.note})"
    return line


@app.command("list")
def list_keys(
    show_full: Annotated[
        bool, typer.Option("--show-full", help="Show full API keys")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    store: Annotated[Path | None, typer.Option(help="Path to key store file")] = None,
):
    """List all stored API keys, marking the default with *."""
    repository = JsonFileKeyRepository(resolve_store_path(store))
    use_case = ListKeysUseCase(repository)

    try:
        keys = asyncio.run(use_case.execute(ListKeysOptions(show_full=show_full)))
    except KeyManagerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([info.to_dict() for info in keys], indent=2))
        return

    if not keys:
        typer.echo("No keys found.")
        return

    for info in keys:
        typer.echo(format_key_line(info))


if __name__ == "__main__":
    app()
