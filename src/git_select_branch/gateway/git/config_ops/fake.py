"""Fake implementation of git configuration lookups for testing."""

from pathlib import Path

from git_select_branch.gateway.git.config_ops.abc import GitConfigOps, GitConfigValueError
from git_select_branch.gateway.git.config_ops.parsing import parse_git_bool, parse_git_int
from git_select_branch.subprocess_utils import GitCommandError


class FakeGitConfigOps(GitConfigOps):
    """In-memory fake implementation for testing.

    Constructor Injection: raw values are passed via constructor, exactly as
    they would be written in a gitconfig file. Typed getters convert them with
    git's own rules, so malformed values fail the same way they do for real.
    """

    def __init__(
        self,
        *,
        config_values: dict[str, str | None] | None = None,
        read_failures: dict[str, str] | None = None,
    ) -> None:
        """Create FakeGitConfigOps with pre-configured values.

        Args:
            config_values: Mapping of key -> raw value. None stands for a key
                written without '=' (which git reads as boolean true).
            read_failures: Mapping of key -> git error message. Every getter
                raises GitCommandError for these keys.
        """
        self._config_values = config_values if config_values is not None else {}
        self._read_failures = read_failures if read_failures is not None else {}

    def _check_readable(self, key: str) -> None:
        if key in self._read_failures:
            raise GitCommandError(
                operation_context=f"read git config {key}",
                cmd=["git", "config", "--get", key],
                returncode=3,
                stderr=self._read_failures[key],
            )

    def get_bool(self, repo_root: Path, key: str) -> bool | None:
        """Read a boolean configuration value."""
        self._check_readable(key)
        if key not in self._config_values:
            return None
        raw = self._config_values[key]
        try:
            return parse_git_bool(raw)
        except ValueError:
            raise GitConfigValueError(key, raw or "", "boolean") from None

    def get_int(self, repo_root: Path, key: str) -> int | None:
        """Read an integer configuration value."""
        self._check_readable(key)
        if key not in self._config_values:
            return None
        raw = self._config_values[key]
        try:
            return parse_git_int(raw)
        except ValueError:
            raise GitConfigValueError(key, raw or "", "integer") from None

    def get_str(self, repo_root: Path, key: str) -> str | None:
        """Read a configuration value as text."""
        self._check_readable(key)
        if key not in self._config_values:
            return None
        raw = self._config_values[key]
        return raw if raw is not None else ""
