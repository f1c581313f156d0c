"""Command line interface for branchhop."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from branchhop import __version__
from branchhop.branches import format_choices, parse_branches
from branchhop.git import GitError, GitRepo
from branchhop.log import setup_logging
from branchhop.selector import PromptSelector, SelectionCancelled
from branchhop.session import run_session

DEFAULT_WIDTH = 100

app = typer.Typer(help="Switch git branches, most recently used first")
console = Console()


def get_repo(path: Path) -> GitRepo:
    """Get git repository instance."""
    try:
        return GitRepo(path)
    except GitError as err:
        print(f"[red]Error:[/red] {escape(str(err))}")
        raise typer.Exit(code=1) from err


def get_display_width(width: Optional[int]) -> int:
    """Use the explicit width, else the console width when attached to a terminal."""
    if width:
        return width
    if console.is_terminal:
        return console.width
    return DEFAULT_WIDTH


def version_callback(value: bool) -> None:
    if value:
        print(f"branchhop {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    page_size: int = typer.Option(20, "--page-size", min=1, envvar="BRANCHHOP_PAGE_SIZE", help="Rows shown at once"),
    width: Optional[int] = typer.Option(
        None, "--width", min=1, envvar="BRANCHHOP_WIDTH", help="Display width (default: terminal width)"
    ),
    list_only: bool = typer.Option(False, "--list", "-l", help="Print the branches and exit"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Pick a branch from a fuzzy-filtered list and check it out."""
    setup_logging("DEBUG" if verbose else "WARNING")
    repo = get_repo(path)
    display_width = get_display_width(width)

    if list_only:
        try:
            records = parse_branches(repo.list_branches())
        except GitError as err:
            print(f"[red]Error:[/red] {escape(str(err))}")
            raise typer.Exit(code=1) from err
        for choice in format_choices(records, display_width):
            console.print(choice.label, markup=False, highlight=False, soft_wrap=True)
        return

    selector = PromptSelector(console, page_size=page_size)
    try:
        selected = run_session(repo.list_branches, repo.checkout, selector, display_width)
    except SelectionCancelled as err:
        raise typer.Abort() from err
    except GitError as err:
        print(f"[red]Error:[/red] {escape(str(err))}")
        raise typer.Exit(code=1) from err

    if selected is None:
        print("[yellow]No branches found[/yellow]")


if __name__ == "__main__":
    app()
