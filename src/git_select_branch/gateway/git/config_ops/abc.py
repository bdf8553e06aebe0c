"""Abstract interface for git configuration lookups."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitConfigValueError(ValueError):
    """A configuration key is set to a value that is not of the requested type.

    Attributes:
        key: Configuration key, e.g. "select-branch.fuzzy"
        value: The stored value as git reports it
        expected: Name of the requested type ("boolean", "integer")
    """

    def __init__(self, key: str, value: str, expected: str) -> None:
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"bad {expected} config value '{value}' for '{key}'")


class GitConfigOps(ABC):
    """Abstract interface for typed git configuration lookups.

    Each getter distinguishes three cases: the key is absent (None is
    returned), the key holds a well-typed value (the value is returned), or
    the key holds a malformed value (GitConfigValueError is raised).
    Lookups see the merged system, global and repository configuration.
    """

    @abstractmethod
    def get_bool(self, repo_root: Path, key: str) -> bool | None:
        """Read a boolean configuration value.

        Args:
            repo_root: Repository whose configuration is consulted
            key: Configuration key

        Returns:
            The value, or None if the key is not set

        Raises:
            GitConfigValueError: If the value is not a git boolean
        """
        ...

    @abstractmethod
    def get_int(self, repo_root: Path, key: str) -> int | None:
        """Read an integer configuration value (k/m/g suffixes allowed).

        Args:
            repo_root: Repository whose configuration is consulted
            key: Configuration key

        Returns:
            The value, or None if the key is not set

        Raises:
            GitConfigValueError: If the value is not a git integer
        """
        ...

    @abstractmethod
    def get_str(self, repo_root: Path, key: str) -> str | None:
        """Read a configuration value as text.

        Args:
            repo_root: Repository whose configuration is consulted
            key: Configuration key

        Returns:
            The value, or None if the key is not set

        Raises:
            GitCommandError: If git cannot read the configuration
        """
        ...
