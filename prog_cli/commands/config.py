"""Configuration commands."""

from __future__ import annotations

import typer

from prog_cli.commands.common import get_state, print_json_payload
from prog_cli.core.config import DEFAULT_CONFIG, config_to_toml, save_config

app = typer.Typer(help="Show or initialize configuration")


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    state = get_state(ctx)
    if state.json_output:
        print_json_payload(state, state.config)
        return
    if not state.plain_output:
        state.console.print(f"# {state.config_path}", style="dim")
    typer.echo(config_to_toml(state.config), nl=False)


@app.command("init")
def init_command(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write the default configuration to the config path."""
    state = get_state(ctx)
    if state.config_path.exists() and not force:
        typer.echo(f"Config already exists at {state.config_path} (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)

    path = save_config(DEFAULT_CONFIG, state.config_path)
    state.console.print(f"Wrote config: {path}")
