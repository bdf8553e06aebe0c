"""Abstract interface for git repository operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepoOps(ABC):
    """Abstract interface for Git repository location operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def discover_repository_root(self, cwd: Path) -> Path | None:
        """Find the working tree root of the repository containing cwd.

        Searches cwd and its parents, the way git itself does.

        Args:
            cwd: Directory to start the search from

        Returns:
            Path to the repository root, or None if cwd is not inside a working tree

        Raises:
            GitCommandError: If git finds a repository but cannot open it
        """
        ...
