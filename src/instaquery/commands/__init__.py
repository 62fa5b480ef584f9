"""Built-in CLI sub-commands for instaquery.

* :mod:`~instaquery.commands.query` -- run a single API query.
* :mod:`~instaquery.commands.cache` -- inspect and clear the disk cache.
* :mod:`~instaquery.commands.config` -- view and modify global settings.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``cache`` and ``config``) or a plain callback
function registered directly on the root app (for ``query``).
"""
