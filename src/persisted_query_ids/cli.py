"""Command line host: parse .graphql files and emit the persisted query mapping."""
import logging
from pathlib import Path
from typing import List, Optional

import graphql
import typer
import yaml
from rich.console import Console
from rich.markup import escape

from ._pipeline.config import Config, load_config
from ._pipeline.generate import plugin
from .errors import PersistedQueryError

app = typer.Typer(help="Generate persisted query ids for GraphQL operations")

console = Console(stderr=True)


@app.command()
def generate(
    files: List[Path] = typer.Argument(..., help="GraphQL documents"),
    output_mode: Optional[str] = typer.Option(None, "--output-mode", help="Mapping to emit (client|server)"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML file with the plugin config"),
    out: Optional[Path] = typer.Option(None, help="Write JSON here instead of stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Hash every named operation together with the fragments it uses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        config = build_config(output_mode, config_file)
        documents = [graphql.parse(path.read_text(encoding="utf-8")) for path in files]
        result = plugin(documents, config)
        if out is None:
            typer.echo(result)
        else:
            out.write_text(result + "\n", encoding="utf-8")
    except (PersistedQueryError, graphql.GraphQLError, yaml.YAMLError, UnicodeDecodeError, OSError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)


def build_config(output_mode: Optional[str], config_file: Optional[Path]) -> Config:
    """Command line mode takes precedence over the config file."""
    if output_mode is not None:
        return Config(output=output_mode)
    if config_file is not None:
        return load_config(str(config_file))
    return Config(output=None)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
