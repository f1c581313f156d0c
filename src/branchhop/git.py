"""Git repository operations."""

import subprocess
from pathlib import Path

from git import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

from branchhop.log import get_logger

logger = get_logger("git")


class GitError(Exception):
    """Git operation error."""


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository."""
        try:
            self.repo: Repo = Repo(path)
            if self.repo.bare:
                raise GitError("Cannot operate on bare repository")
        except (GitCommandError, ValueError, InvalidGitRepositoryError, NoSuchPathError) as err:
            raise GitError(f"Failed to open repository: {err}") from err
        logger.debug("Opened repository at %s", self.repo.working_tree_dir)

    def _run(self, *args: str) -> tuple[str, str]:
        """Run a git command and return its stdout and stderr.

        git's own diagnostics are kept verbatim, which GitCommandError's
        formatted message would not do.

        Raises:
            GitError: If git exits with a non-zero status
        """
        logger.debug("Running git %s", " ".join(args))
        try:
            status, stdout, stderr = self.repo.git.execute(
                ["git", *args],
                with_extended_output=True,
                with_exceptions=False,
            )
        except GitCommandNotFound as err:
            raise GitError(f"Failed to run git: {err}") from err
        if status != 0:
            raise GitError(stderr.strip() or f"git {args[0]} exited with status {status}")
        return stdout, stderr

    def list_branches(self) -> str:
        """Get the verbose branch listing, most recently committed first."""
        stdout, _ = self._run("branch", "-v", "--no-color", "--sort=-committerdate")
        return stdout

    def checkout(self, branch_name: str) -> None:
        """Check out a branch with git attached to the user's terminal.

        git prints its own progress, prompts and errors, so nothing is captured.

        Raises:
            GitError: If git cannot be started or the checkout fails
        """
        logger.debug("Running git checkout %s", branch_name)
        try:
            result = subprocess.run(["git", "checkout", branch_name], cwd=self.repo.working_tree_dir, check=False)
        except OSError as err:
            raise GitError(f"Failed to run git: {err}") from err
        if result.returncode != 0:
            raise GitError(f"git checkout {branch_name} failed with exit code {result.returncode}")
