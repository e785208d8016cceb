"""Where: src/fileparts/config/settings.py
What: Derived runtime settings sourced from configuration and environment.
Why: Resolve the separator and dotfile policy once at startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from fileparts.config.config import config as app_config
from fileparts.features.parts.domain import (
    DotfilePolicy,
    InvalidArgumentError,
    platform_separator,
    validate_separator,
)
from fileparts.platform.logging import logger

ENV_SEPARATOR: Final[str] = "FILEPARTS_SEPARATOR"
ENV_DOTFILE_POLICY: Final[str] = "FILEPARTS_DOTFILE_POLICY"


def resolve_separator(configured: str | None, env: Mapping[str, str] | None = None) -> str:
    """Resolve the separator: environment, then config, then platform default."""

    mapping = env if env is not None else os.environ
    candidate = mapping.get(ENV_SEPARATOR) or configured
    if not candidate:
        return platform_separator()
    try:
        return validate_separator(candidate)
    except InvalidArgumentError as e:
        logger.warning("%s; using platform separator", e)
        return platform_separator()


def resolve_dotfile_policy(
    configured: object, env: Mapping[str, str] | None = None
) -> DotfilePolicy:
    """Resolve the dotfile policy: environment, then config, then ``EXTENSION``."""

    mapping = env if env is not None else os.environ
    candidate = mapping.get(ENV_DOTFILE_POLICY) or configured
    if not candidate:
        return DotfilePolicy.EXTENSION
    try:
        return DotfilePolicy.from_user_input(candidate)
    except InvalidArgumentError as e:
        logger.warning("%s; using '%s'", e, DotfilePolicy.EXTENSION.value)
        return DotfilePolicy.EXTENSION


PATH_SEPARATOR: str = resolve_separator(app_config.separator)

DOTFILE_POLICY: DotfilePolicy = resolve_dotfile_policy(app_config.dotfile_policy)


__all__ = [
    "DOTFILE_POLICY",
    "ENV_DOTFILE_POLICY",
    "ENV_SEPARATOR",
    "PATH_SEPARATOR",
    "resolve_dotfile_policy",
    "resolve_separator",
]
