"""yaml2json context for passing resolved settings to the CLI."""

import os
from typing import Mapping, Optional

from .models.options import ErrorStyle, Settings, Style

ENV_PRETTY = "YAML2JSON_PRETTY"
ENV_ERROR = "YAML2JSON_ERROR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    raw = environ.get(name)
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def resolve_settings(
    pretty: bool = False,
    error: Optional[str] = None,
    verbose: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Resolve output settings.

    Resolution order:
    1. Command line flags (--pretty, --error)
    2. $YAML2JSON_PRETTY / $YAML2JSON_ERROR environment variables
    3. Defaults (compact output, errors on stderr)

    Reads fresh from the environment each time.

    Args:
        pretty: Value of the --pretty flag
        error: Value of --error if provided
        verbose: Value of the --verbose flag
        environ: Environment to read (default: os.environ)

    Returns:
        Settings with style, error_style and verbose

    Raises:
        ValueError: If an environment variable holds an invalid value
    """
    env = os.environ if environ is None else environ

    if not pretty:
        pretty = _env_flag(env, ENV_PRETTY)

    if error is not None:
        error_style = ErrorStyle.parse(error)
    elif env.get(ENV_ERROR):
        try:
            error_style = ErrorStyle.parse(env[ENV_ERROR])
        except ValueError as e:
            raise ValueError(f"{ENV_ERROR}: {e}") from None
    else:
        error_style = ErrorStyle.STDERR

    return Settings(
        style=Style.PRETTY if pretty else Style.COMPACT,
        error_style=error_style,
        verbose=verbose,
    )


class Yaml2JsonContext:
    def __init__(self):
        self.settings = None
        self.converter = None
        self.printer = None
