import logging

import click

from git_select_branch.cli.output import user_output
from git_select_branch.core.catalog import build_catalog
from git_select_branch.core.checkout import checkout_branch
from git_select_branch.core.config import resolve_configuration
from git_select_branch.core.context import SelectBranchContext, create_context
from git_select_branch.core.errors import DiscoveryError, SelectBranchError
from git_select_branch.core.interrupt import InterruptFlag
from git_select_branch.core.options import assemble_options
from git_select_branch.core.ranking import rank_branches
from git_select_branch.core.session import run_selection
from git_select_branch.core.types import (
    BranchChoice,
    SelectionChosen,
    SelectionInterrupted,
    SelectionNoneChosen,
)
from git_select_branch.subprocess_utils import GitCommandError

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

EXIT_CHECKED_OUT = 0
EXIT_NOTHING_CHOSEN = 1
EXIT_INTERRUPTED = 2
EXIT_ERROR = 1


def select_branch(ctx: SelectBranchContext) -> int:
    """Run one selection session and return the process exit code.

    Raises:
        SelectBranchError: If any step of the session fails
    """
    try:
        repo_root = ctx.git.repo.discover_repository_root(ctx.cwd)
    except GitCommandError as e:
        raise DiscoveryError(str(e)) from e
    if repo_root is None:
        raise DiscoveryError(f"not a git repository (or any parent up to /): {ctx.cwd}")
    logger.debug("repository root: %s", repo_root)

    config = resolve_configuration(ctx.git.config, repo_root)
    current_branch = ctx.git.branch.get_current_branch(repo_root)

    records = build_catalog(ctx.git, repo_root, config)
    ranked = rank_branches(records, config.limit)
    options = assemble_options(ranked, current_branch)

    outcome = run_selection(
        options,
        ctx.picker_factory(config),
        terminal=ctx.terminal,
        interrupt=InterruptFlag(),
    )

    if isinstance(outcome, SelectionInterrupted):
        return EXIT_INTERRUPTED
    if isinstance(outcome, SelectionNoneChosen):
        return EXIT_NOTHING_CHOSEN

    assert isinstance(outcome, SelectionChosen)
    option = options[outcome.index]
    if not isinstance(option, BranchChoice):
        # Current branch picked: already checked out
        logger.debug("current branch picked; nothing to do")
        return EXIT_NOTHING_CHOSEN

    checkout_branch(ctx.git, repo_root, option)
    return EXIT_CHECKED_OUT


@click.command("git-select-branch", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-select-branch")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Interactively switch to one of the most recently committed branches."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    try:
        exit_code = select_branch(ctx.obj)
    except SelectBranchError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(EXIT_ERROR) from e

    if exit_code != EXIT_CHECKED_OUT:
        raise SystemExit(exit_code)


def main() -> None:
    """CLI entry point used by the `git-select-branch` console script."""
    cli()
