import logging
from collections.abc import Callable
from sys import modules
from typing import Any, get_type_hints

from pydantic import create_model
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, SettingsConfigDict

# the library is imported into other applications, so only GEOLINK_<NAME> variables are read
SETTINGS_CONFIG = SettingsConfigDict(
    env_prefix='GEOLINK_',
    env_file='.env',
    extra='ignore',
)


def _is_setting_name(name: str) -> bool:
    return name[:1] != '_' and name.isupper()


def pydantic_settings_integration(
    caller_name: str,
    caller_globals: dict[str, Any],
    /,
    config: SettingsConfigDict = SETTINGS_CONFIG,
    name_filter: Callable[[str], bool] = _is_setting_name,
) -> None:
    """
    Turn the upper-case globals of the calling module into settings.

    A throwaway BaseSettings model is created from the globals (using their
    annotations, or the type of the default value), populated from the
    environment and .env file, and the validated values are written back
    into the module namespace.
    """
    defaults = {k: v for k, v in caller_globals.items() if name_filter(k)}
    if not defaults:
        logging.warning('No settings found in %s matching the filter', caller_name)
        return

    type_hints = get_type_hints(modules[caller_name], caller_globals)
    fields: dict[str, tuple[Any, Any]] = {}
    for name, value in defaults.items():
        annotation = type_hints.get(name)
        if annotation is None:
            annotation = Any if isinstance(value, FieldInfo) else type(value)
        fields[name] = (annotation, value)

    settings_base = type(f'{caller_name}_SettingsBase', (BaseSettings,), {'model_config': config})
    settings = create_model(f'{caller_name}_Settings', __base__=settings_base, **fields)()  # type: ignore

    for name in defaults:
        caller_globals[name] = getattr(settings, name)

    logging.debug('Loaded %d settings for %s', len(defaults), caller_name)
