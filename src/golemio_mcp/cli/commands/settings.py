"""Settings management CLI commands."""

import json
import os

import click

from golemio_mcp.core.settings import TOKEN_ENV_VAR, SettingsManager


@click.group()
def settings() -> None:
    """Manage golemio-mcp settings."""
    pass


@settings.command()
def show() -> None:
    """Show current settings.

    The API token is masked for security.
    """
    manager = SettingsManager()
    current = manager.load()

    click.echo(f"Settings file: {manager.settings_path}")
    click.echo("\nCurrent settings:")

    settings_dict = current.model_dump()
    settings_dict["api_token"] = SettingsManager.mask_value(settings_dict["api_token"])
    click.echo(json.dumps(settings_dict, indent=2))

    # Show if environment variable is overriding
    if os.getenv(TOKEN_ENV_VAR):
        click.echo(f"\n⚠️  {TOKEN_ENV_VAR} environment variable is set and overrides the stored token")
    elif not current.api_token:
        click.echo(f"\n⚠️  No API token configured. Set {TOKEN_ENV_VAR} or run 'golemio-mcp settings set-token'.")


@settings.command(name="set-token")
@click.argument("token")
def set_token(token: str) -> None:
    """Store the Golemio API token in the settings file."""
    token = token.strip()
    if not token:
        raise click.BadParameter("Token cannot be empty", param_hint="TOKEN")

    manager = SettingsManager()
    manager.set_api_token(token)
    click.echo(f"✓ Stored API token {SettingsManager.mask_value(token)} in {manager.settings_path}")


@settings.command(name="unset-token")
def unset_token() -> None:
    """Remove the Golemio API token from the settings file."""
    manager = SettingsManager()
    if manager.unset_api_token():
        click.echo("✓ Removed API token from settings")
    else:
        click.echo("No API token stored in settings")
