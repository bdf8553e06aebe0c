"""Real implementation of git configuration lookups."""

import subprocess
from pathlib import Path

from git_select_branch.gateway.git.config_ops.abc import GitConfigOps, GitConfigValueError
from git_select_branch.subprocess_utils import GitCommandError

# `git config --get` exits 1 when the key is not set.
_KEY_NOT_FOUND = 1


class RealGitConfigOps(GitConfigOps):
    """Real implementation of Git configuration lookups using subprocess.

    Typed getters let git do the conversion (`--type=bool`, `--type=int`) so
    the accepted spellings match git's own.
    """

    def _get(self, repo_root: Path, key: str, type_flag: str | None) -> str | None:
        cmd = ["git", "config"]
        if type_flag is not None:
            cmd.append(f"--type={type_flag}")
        cmd.extend(["--get", key])

        result = subprocess.run(
            cmd,
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == _KEY_NOT_FOUND:
            return None
        if result.returncode != 0:
            if type_flag is not None:
                raw = self.get_str(repo_root, key)
                expected = "boolean" if type_flag == "bool" else "integer"
                raise GitConfigValueError(key, raw if raw is not None else "", expected)
            raise GitCommandError(
                operation_context=f"read git config {key}",
                cmd=cmd,
                returncode=result.returncode,
                stderr=result.stderr.strip(),
            )
        return result.stdout.removesuffix("\n")

    def get_bool(self, repo_root: Path, key: str) -> bool | None:
        """Read a boolean with git config --type=bool."""
        value = self._get(repo_root, key, "bool")
        if value is None:
            return None
        return value == "true"

    def get_int(self, repo_root: Path, key: str) -> int | None:
        """Read an integer with git config --type=int."""
        value = self._get(repo_root, key, "int")
        if value is None:
            return None
        return int(value)

    def get_str(self, repo_root: Path, key: str) -> str | None:
        """Read the raw value with git config --get."""
        return self._get(repo_root, key, None)
