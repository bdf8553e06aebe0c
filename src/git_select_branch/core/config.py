"""User settings read from the select-branch.* git configuration namespace.

Example:
    git config --global select-branch.fuzzy false
    git config --global select-branch.show-remote-branches true
    git config --global select-branch.theme simple
    git config --global select-branch.limit none
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from git_select_branch.core.errors import ConfigurationError
from git_select_branch.gateway.git.config_ops.abc import GitConfigOps, GitConfigValueError
from git_select_branch.subprocess_utils import GitCommandError

logger = logging.getLogger(__name__)

FUZZY_KEY = "select-branch.fuzzy"
SHOW_REMOTE_BRANCHES_KEY = "select-branch.show-remote-branches"
THEME_KEY = "select-branch.theme"
LIMIT_KEY = "select-branch.limit"

UNLIMITED = "none"
DEFAULT_LIMIT = 20


class Theme(Enum):
    """Presentation theme for the picker."""

    COLORFUL = "colorful"
    SIMPLE = "simple"


@dataclass(frozen=True)
class Configuration:
    """Resolved settings for one session.

    Attributes:
        fuzzy: Show a filter input and fuzzy-match branch names
        show_remote_branches: Offer remote-tracking branches as well as local ones
        limit: Maximum number of branches to offer, None for no limit
        theme: Picker theme
    """

    fuzzy: bool = True
    show_remote_branches: bool = False
    limit: int | None = DEFAULT_LIMIT
    theme: Theme = Theme.COLORFUL


def _read_bool(config_ops: GitConfigOps, repo_root: Path, key: str) -> bool | None:
    try:
        return config_ops.get_bool(repo_root, key)
    except GitConfigValueError as e:
        raise ConfigurationError(
            key, f"Error parsing boolean value in {key}: '{e.value}' is not a boolean"
        ) from e
    except GitCommandError as e:
        raise ConfigurationError(key, str(e)) from e


def _read_str(config_ops: GitConfigOps, repo_root: Path, key: str) -> str | None:
    try:
        return config_ops.get_str(repo_root, key)
    except GitCommandError as e:
        raise ConfigurationError(key, str(e)) from e


def _parse_theme(value: str) -> Theme:
    for theme in Theme:
        if theme.value == value:
            return theme
    expected = ", ".join(f'"{theme.value}"' for theme in Theme)
    raise ConfigurationError(
        THEME_KEY,
        f'Could not parse theme configuration: "{value}" is not a valid '
        f'"{THEME_KEY}" value, expected one of {expected}',
    )


def _invalid_limit_message(value: object) -> str:
    return (
        f'"{value}" is not a valid "{LIMIT_KEY}" value.\n'
        f'The value must be either a positive integer, or "{UNLIMITED}". e.g.:\n'
        f"> git config --global {LIMIT_KEY} {UNLIMITED}\n"
        "or\n"
        f"> git config --global {LIMIT_KEY} {DEFAULT_LIMIT}"
    )


def _read_limit(config_ops: GitConfigOps, repo_root: Path) -> int | None:
    """Read the limit key; returns DEFAULT_LIMIT when it is not set."""
    raw = _read_str(config_ops, repo_root, LIMIT_KEY)
    if raw is None:
        return DEFAULT_LIMIT
    if raw == UNLIMITED:
        return None

    try:
        limit = config_ops.get_int(repo_root, LIMIT_KEY)
    except GitConfigValueError as e:
        raise ConfigurationError(LIMIT_KEY, _invalid_limit_message(e.value)) from e
    except GitCommandError as e:
        raise ConfigurationError(LIMIT_KEY, str(e)) from e
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ConfigurationError(LIMIT_KEY, _invalid_limit_message(limit))
    return limit


def resolve_configuration(config_ops: GitConfigOps, repo_root: Path) -> Configuration:
    """Read every select-branch.* key, applying defaults for keys that are not set.

    A key that is set but malformed is always an error; only absence falls
    back to the default.

    Args:
        config_ops: Configuration lookups for the repository
        repo_root: Repository whose merged configuration is read

    Returns:
        The resolved Configuration

    Raises:
        ConfigurationError: If any key holds a malformed value or git cannot read it
    """
    defaults = Configuration()

    fuzzy = _read_bool(config_ops, repo_root, FUZZY_KEY)
    if fuzzy is None:
        fuzzy = defaults.fuzzy

    show_remote = _read_bool(config_ops, repo_root, SHOW_REMOTE_BRANCHES_KEY)
    if show_remote is None:
        show_remote = defaults.show_remote_branches

    theme_name = _read_str(config_ops, repo_root, THEME_KEY)
    theme = _parse_theme(theme_name) if theme_name is not None else defaults.theme

    config = Configuration(
        fuzzy=fuzzy,
        show_remote_branches=show_remote,
        limit=_read_limit(config_ops, repo_root),
        theme=theme,
    )
    logger.debug("resolved configuration: %s", config)
    return config
