#!/usr/bin/env python3
"""
FiveStar Support SDK v1.1.0 Python CLI
Offline customer ID tooling
"""

import json
import sys

import click

from fivestar_support.client import FiveStarClient
from fivestar_support.customer_id import (
    decode_customer_id,
    generate_customer_id,
    is_valid_customer_id_format,
    unmask_customer_id,
)
from fivestar_support.errors import EntropyUnavailableError


@click.group()
@click.option('--client-id', '-c', envvar='FIVESTAR_CLIENT_ID', help='Client identifier')
@click.pass_context
def cli(ctx, client_id):
    """FiveStar Support customer ID CLI v1.1.0"""
    ctx.ensure_object(dict)
    ctx.obj['client_id'] = client_id


def _require_client_id(ctx) -> str:
    client_id = ctx.obj.get('client_id')
    if client_id is None:
        raise click.UsageError("--client-id (or FIVESTAR_CLIENT_ID) is required")
    return client_id


@cli.command()
@click.option('--count', '-n', default=1, show_default=True, type=click.IntRange(min=1),
              help='Number of IDs to generate')
@click.pass_context
def generate(ctx, count):
    """Generate customer IDs bound to the client"""
    client_id = _require_client_id(ctx)
    try:
        for _ in range(count):
            click.echo(generate_customer_id(client_id))
    except EntropyUnavailableError as e:
        click.echo(f"❌ Generation failed: {e}", err=True)
        sys.exit(3)


@cli.command()
@click.argument('token')
@click.pass_context
def verify(ctx, token):
    """Verify a customer ID against the client"""
    client_id = _require_client_id(ctx)
    payload = unmask_customer_id(token, client_id)
    result = {'valid': payload is not None, 'customer_id': token}
    if payload is not None:
        result['timestamp_ms'] = payload.timestamp_ms
    click.echo(json.dumps(result, indent=2))
    if payload is None:
        sys.exit(1)


@cli.command()
@click.argument('token')
@click.pass_context
def decode(ctx, token):
    """Show the unmasked form of a customer ID"""
    client_id = _require_client_id(ctx)
    decoded = decode_customer_id(token, client_id)
    click.echo(json.dumps({'customer_id': token, 'decoded': decoded}, indent=2))
    if decoded is None:
        sys.exit(1)


@cli.command()
@click.argument('token')
def validate(token):
    """Check customer ID format only (no client needed)"""
    valid = is_valid_customer_id_format(token)
    click.echo(json.dumps({'customer_id': token, 'valid_format': valid}, indent=2))
    if not valid:
        sys.exit(1)


@cli.command('public-url')
@click.option('--locale', '-l', help='Locale prefix, e.g. fr')
@click.option('--api-url', default=None, help='API base URL')
@click.pass_context
def public_url(ctx, locale, api_url):
    """Print the public feedback page URL"""
    kwargs = {'client_id': _require_client_id(ctx)}
    if api_url:
        kwargs['api_url'] = api_url
    with FiveStarClient(**kwargs) as client:
        click.echo(client.get_public_url(locale))


if __name__ == '__main__':
    cli()
