"""Main CLI entrypoint for applogs."""

import json
import logging
import sys
from typing import Any, Dict, Optional

import click

from .client import Client, ClientOption
from .config import load_settings
from .errors import AppLogsError, NotFoundError
from .formatter import format_json_lines, format_lines
from .log import Process, Selector, Source


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def main(ctx, verbose):
    """applogs - Build and deployment logs of an application."""
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _json_output(data: Dict[str, Any]) -> None:
    """Output data as JSON."""
    click.echo(json.dumps(data, indent=None))


@main.command()
@click.argument('app_name')
@click.option('--source', '-s', default='', help=f'Log source filter ({Source.APP.value})')
@click.option('--process', '-p', default='',
              help=f'Process filter ({Process.BUILDER.value} or {Process.DEPLOYER.value})')
@click.option('--region', '-r', default=None, help='AWS region')
@click.option('--parallel', is_flag=True, help='Query CodeBuild and ECS concurrently')
@click.option('--json', 'output_json', is_flag=True, help='Output machine-readable JSON lines')
@click.pass_context
def logs(ctx, app_name: str, source: str, process: str, region: Optional[str], parallel: bool, output_json: bool):
    """Show build and deployment logs of APP_NAME, oldest first."""
    try:
        settings = load_settings()
    except ValueError as e:
        raise click.ClickException(str(e))
    if parallel:
        settings.parallel = True

    client = ctx.obj.get('client') or Client(ClientOption(region=region), settings=settings)

    try:
        records = client.describe_logs(app_name, Selector(source=source, process=process))
    except NotFoundError as e:
        if output_json:
            _json_output({'error': str(e)})
        else:
            click.echo(f"Application {app_name} not found: {e}", err=True)
        sys.exit(2)
    except AppLogsError as e:
        if output_json:
            _json_output({'error': str(e)})
        else:
            click.echo(f"Failed to get logs: {e}", err=True)
        sys.exit(1)

    lines = format_json_lines(records) if output_json else format_lines(records)
    for line in lines:
        click.echo(line)


@main.command()
@click.option('--host', default='0.0.0.0', help='Host to bind to')
@click.option('--port', default=8000, type=int, help='Port to bind to')
def serve(host: str, port: int):
    """Start the REST API server."""
    from .api import run

    click.echo(f"Starting applogs API server on {host}:{port}")
    run(host=host, port=port)


if __name__ == "__main__":
    main()
