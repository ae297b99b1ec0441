# streamctl/cli.py

import logging
import sys

import click

from streamctl.config import Config
from streamctl.errors import StreamClientError
from streamctl.services import StreamClient

logger = logging.getLogger(__name__)


def _fail(error: StreamClientError):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.option('--url', default=None, help='Admin server URL (defaults to ADMIN_SERVER_URL)')
@click.option('--timeout', default=None, type=float, help='Request timeout in seconds')
@click.pass_context
def cli(ctx, url, timeout):
    """Manage streams on an admin server."""
    ctx.ensure_object(dict)
    ctx.obj['url'] = url or Config.ADMIN_SERVER_URL
    ctx.obj['timeout'] = timeout if timeout is not None else Config.REQUEST_TIMEOUT


def _client(ctx) -> StreamClient:
    return StreamClient(
        base_url=ctx.obj['url'],
        timeout=ctx.obj['timeout'],
        read_retry_attempts=Config.READ_RETRY_ATTEMPTS,
        read_retry_delay=Config.READ_RETRY_DELAY
    )


@cli.command()
@click.argument('name')
@click.argument('definition')
@click.option('--deploy/--no-deploy', default=True, help='Deploy the stream after creating it')
@click.pass_context
def create(ctx, name, definition, deploy):
    """Create a stream NAME from DEFINITION."""
    try:
        with _client(ctx) as client:
            stream = client.create_stream(name, definition, deploy)
    except StreamClientError as e:
        _fail(e)
    click.echo(f"Created stream '{stream.name}' ({stream.status or 'unknown'})")


@cli.command(name='list')
@click.option('--page', default=None, type=int, help='Zero-based page index')
@click.option('--size', default=None, type=int, help='Page size')
@click.pass_context
def list_streams(ctx, page, size):
    """List streams."""
    try:
        with _client(ctx) as client:
            result = client.list(page=page, size=size)
    except StreamClientError as e:
        _fail(e)

    for stream in result:
        click.echo(f"{stream.name}\t{stream.status or ''}\t{stream.definition}")
    click.echo(f"Page {result.number + 1} of {max(result.total_pages, 1)} "
               f"({result.total_elements} streams)")


@cli.command()
@click.argument('name')
@click.pass_context
def destroy(ctx, name):
    """Destroy stream NAME."""
    try:
        with _client(ctx) as client:
            client.destroy(name)
    except StreamClientError as e:
        _fail(e)
    click.echo(f"Destroyed stream '{name}'")


@cli.command()
@click.argument('name')
@click.option('--property', 'properties', multiple=True, help='Deployment property key=value')
@click.pass_context
def deploy(ctx, name, properties):
    """Deploy stream NAME."""
    parsed = {}
    for item in properties:
        key, sep, value = item.partition('=')
        if not sep:
            raise click.BadParameter(f"Expected key=value, got '{item}'", param_hint='--property')
        parsed[key] = value
    try:
        with _client(ctx) as client:
            client.deploy(name, parsed)
    except StreamClientError as e:
        _fail(e)
    click.echo(f"Deployed stream '{name}'")


@cli.command()
@click.argument('name')
@click.pass_context
def undeploy(ctx, name):
    """Undeploy stream NAME."""
    try:
        with _client(ctx) as client:
            client.undeploy(name)
    except StreamClientError as e:
        _fail(e)
    click.echo(f"Undeployed stream '{name}'")


@cli.command()
@click.option('--host', default=Config.STUB_HOST, help='Interface to bind')
@click.option('--port', default=Config.STUB_PORT, type=int, help='Port to listen on')
def stub(host, port):
    """Run the in-memory admin server stub."""
    from streamctl.testing import create_admin_app

    app = create_admin_app(Config)
    logger.info(f"Starting admin server stub on {host}:{port}")
    app.run(host=host, port=port)
