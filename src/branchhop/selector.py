"""Interactive single-select list with live filtering."""

from typing import Callable, Optional, Protocol

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from branchhop.branches import CURRENT_MARKER, DisplayChoice
from branchhop.log import get_logger

logger = get_logger("selector")

FilterFunc = Callable[[list[DisplayChoice], str], list[DisplayChoice]]


class SelectionCancelled(Exception):
    """The user left the prompt without choosing a branch."""


class Selector(Protocol):
    """Anything that picks one value from a filterable list of choices."""

    def __call__(self, choices: list[DisplayChoice], filter_choices: FilterFunc) -> str: ...


class PromptSelector:
    """Numbered branch list driven by line input.

    Typing text narrows the list, typing a visible row number selects it. An empty
    line selects the only remaining row, or clears the filter otherwise.
    """

    def __init__(
        self,
        console: Console,
        page_size: int = 20,
        message: str = "Select a branch to checkout",
        read: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.console = console
        self.page_size = max(1, page_size)
        self.message = message
        self.read = read or console.input

    def __call__(self, choices: list[DisplayChoice], filter_choices: FilterFunc) -> str:
        query = ""
        while True:
            visible = filter_choices(choices, query)
            self._render(visible, query)

            try:
                answer = self.read(self._prompt(query)).strip()
            except (EOFError, KeyboardInterrupt) as err:
                raise SelectionCancelled() from err

            # Numbers outside the visible rows fall through to filtering
            if answer.isdigit() and 1 <= int(answer) <= min(len(visible), self.page_size):
                return visible[int(answer) - 1].value

            if not answer:
                if len(visible) == 1:
                    return visible[0].value
                query = ""
                continue

            query = answer
            logger.debug("Filter %r", query)

    def _prompt(self, query: str) -> str:
        if query:
            return f"{self.message} [dim](filter: {escape(query)})[/dim]: "
        return f"{self.message}: "

    def _render(self, visible: list[DisplayChoice], query: str) -> None:
        if not visible:
            self.console.print(f"[yellow]No matching branches for '{escape(query)}'[/yellow]")
            return

        table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
        table.add_column("#", style="dim", justify="right", no_wrap=True)
        table.add_column("Branch", no_wrap=True, overflow="ellipsis")
        for number, choice in enumerate(visible[: self.page_size], start=1):
            label = escape(choice.label)
            if choice.label.startswith(CURRENT_MARKER):
                label = f"[green]{label}[/green]"
            table.add_row(str(number), label)

        self.console.print(table)
        hidden = len(visible) - self.page_size
        if hidden > 0:
            self.console.print(f"[dim]... {hidden} more, type to narrow the list[/dim]")
