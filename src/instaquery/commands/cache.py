"""Cache commands -- inspect and clear the on-disk response cache.

Only the ``disk`` backend persists anything between invocations, so these
commands always operate on the :class:`~instaquery.cache.DiskCache` under
:func:`~instaquery.config.get_cache_dir`.
"""

from __future__ import annotations

import typer

from instaquery.output import format_response, success


cache_app = typer.Typer(no_args_is_help=True)


@cache_app.command("stats")
def cache_stats() -> None:
    """Show the number of cached responses and where they live."""
    from instaquery.cache import DiskCache
    from instaquery.config import get_cache_dir, load_global_config

    ttl = load_global_config().cache.ttl_seconds
    with DiskCache(get_cache_dir(), ttl_seconds=ttl) as cache:
        format_response(cache.stats())


@cache_app.command("clear")
def cache_clear() -> None:
    """Remove every cached response."""
    from instaquery.cache import DiskCache
    from instaquery.config import get_cache_dir

    with DiskCache(get_cache_dir()) as cache:
        cache.clear()
    success("Cache cleared.")
