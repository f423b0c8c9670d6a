"""Utility functions for CLI operations."""

import json

import click
from pydantic import ValidationError


def run_async(coro):
    """Run a coroutine from a Click command; caller mistakes become usage errors."""
    import asyncio
    try:
        return asyncio.run(coro)
    except ValidationError:
        raise
    except ValueError as e:
        raise click.UsageError(str(e))


def echo_models(models):
    """Print one model or a list of models as JSON, read-only fields included."""
    if isinstance(models, list):
        data = [m.model_dump(mode="json", by_alias=True, exclude_none=True) for m in models]
    else:
        data = models.model_dump(mode="json", by_alias=True, exclude_none=True)
    click.echo(json.dumps(data, indent=2))


async def collect(pager, limit=None):
    """Drain a pager, stopping after `limit` items when given."""
    items = []
    async for item in pager:
        items.append(item)
        if limit and len(items) >= limit:
            break
    return items
