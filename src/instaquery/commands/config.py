"""Config commands -- view and modify global configuration.

Provides the ``instaquery config`` sub-command group for reading and
updating the user's global configuration file
(:class:`~instaquery.models.GlobalConfig`).
"""

from __future__ import annotations

import typer

from instaquery.exceptions import InvalidUsageError
from instaquery.output import format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration.

    Example::

        instaquery config show
        instaquery --json config show
    """
    from instaquery.config import get_config_dir, load_global_config

    config = load_global_config()
    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Config key (dot notation, e.g., 'api.version')."),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. Booleans accept ``true``/``1``/``yes``;
    other values are validated against
    :class:`~instaquery.models.GlobalConfig` before saving.

    Raises:
        InvalidUsageError: If the key path is unknown or the value fails
            validation.

    Example::

        instaquery config set api.version v1
        instaquery config set cache.backend disk
        instaquery config set cache.ttl_seconds 600
    """
    from instaquery.config import load_global_config, save_global_config
    from instaquery.models import GlobalConfig

    data = load_global_config().model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            raise InvalidUsageError(f"Invalid config key: {key}")
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        raise InvalidUsageError(f"Unknown config key: {key}")

    if isinstance(target[final_key], bool):
        target[final_key] = value.lower() in ("true", "1", "yes")
    else:
        target[final_key] = value

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValueError as exc:
        raise InvalidUsageError(f"Invalid value for {key}: {exc}") from exc

    save_global_config(new_config)
    success(f"Set {key} = {target[final_key]}")
