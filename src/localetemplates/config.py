"""Environment-derived configuration.

The only setting read from the environment is the debug toggle. With debug
enabled, every load evicts the cached template first so edits on disk show
up on the next request.

Several variable names are supported for backward compatibility. They are
checked in order and the first non-empty value wins, so a deployment can set
the newer name without unsetting the legacy one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from localetemplates.constants import DEBUG_ENABLED_VALUE, DEBUG_ENV_VARS

__all__ = ["is_debug_enabled", "read_first_env"]


def read_first_env(
    names: Iterable[str],
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the value of the first variable that is set and non-empty.

    Args:
        names: Candidate variable names in priority order
        environ: Mapping to read from (default: os.environ)

    Returns:
        The first non-empty value, or None if none is set

    Example:
        >>> read_first_env(["NEW", "OLD"], {"OLD": "true"})
        'true'
        >>> read_first_env(["NEW", "OLD"], {"NEW": "", "OLD": "x"})
        'x'
    """
    env = os.environ if environ is None else environ
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def is_debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Check whether the debug (always-reparse) toggle is on.

    Evaluated on every load call, so flipping the variable at runtime takes
    effect on the next request.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        True if the first non-empty toggle equals "TRUE" (case-insensitive)
    """
    value = read_first_env(DEBUG_ENV_VARS, environ)
    return value is not None and value.upper() == DEBUG_ENABLED_VALUE
