import logging
import typer
from typing import Optional
from pathlib import Path
from .config import PreflightConfig
from .connectors.factory import get_connector
from .connectors.supabase import ClientFactory
from .domain.interfaces import BackendConnector
from .domain.models import CheckStatus
from .exceptions import ConfigurationError
from .inspector import InspectorFacade
from .logger import setup_logger

app = typer.Typer(help="Supabase connectivity preflight check")

EXIT_OK = 0
EXIT_FAILURE = 1

def run(
    config: PreflightConfig,
    connector: Optional[BackendConnector] = None,
    client_factory: Optional[ClientFactory] = None,
    verbose: bool = False,
) -> int:
    """
    Validate config, probe the backend once, report, and return the exit code.
    Every failure kind maps to EXIT_FAILURE; nothing is retried.
    """
    try:
        config.validate_required()
    except ConfigurationError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        return EXIT_FAILURE

    typer.secho("✅ Environment variables loaded successfully", fg=typer.colors.GREEN)
    typer.echo(f"Supabase URL: {config.supabase_url}")
    typer.echo(f"Service Key: {config.redacted_key}")

    if connector is None:
        connector = get_connector(config, client_factory=client_factory)

    report = InspectorFacade(connector).run_diagnostics()
    health = report.health

    if health.ok:
        typer.secho("✅ Successfully connected to Supabase!", fg=typer.colors.GREEN)
        if verbose:
            typer.echo(f"   {health.resource}: {health.row_count} rows ({health.latency_ms}ms)")
        typer.echo("\n🎉 All environment variables are working correctly!")
        return EXIT_OK

    if health.status == CheckStatus.REPORTED_FAILURE:
        typer.secho(f"❌ Connection failed: {health.message}", fg=typer.colors.RED, err=True)
    else:
        typer.secho(f"❌ Unexpected error: {health.message}", fg=typer.colors.RED, err=True)
    if verbose:
        typer.echo(f"   {health.error_type} after {health.latency_ms}ms", err=True)
    return EXIT_FAILURE

def _load_config(env_file: Optional[Path]) -> PreflightConfig:
    try:
        return PreflightConfig.from_env(env_file)
    except ConfigurationError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_FAILURE)

@app.callback()
def main():
    """
    Confirm the Supabase URL and service key work before anything else runs.
    """

@app.command()
def check_conn(
    env_file: Optional[Path] = typer.Option(None, "--env-file", "-e", help="Path to .env file (default: ./.env)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Load SUPABASE_URL / SUPABASE_SERVICE_KEY, run one head-only count query
    against the Week table, and exit 0 on success or 1 on any failure.
    """
    setup_logger(logging.DEBUG if verbose else logging.WARNING)
    config = _load_config(env_file)
    raise typer.Exit(code=run(config, verbose=verbose))

@app.command()
def show_config(
    env_file: Optional[Path] = typer.Option(None, "--env-file", "-e", help="Path to .env file (default: ./.env)"),
):
    """Print the resolved configuration without contacting the backend."""
    config = _load_config(env_file)
    missing = config.missing_keys()
    typer.echo(f"Supabase URL: {config.supabase_url or '<unset>'}")
    typer.echo(f"Service Key: {config.redacted_key if config.supabase_service_key else '<unset>'}")
    if missing:
        typer.secho(f"❌ {ConfigurationError.for_missing(missing)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_FAILURE)

if __name__ == "__main__":
    app()
