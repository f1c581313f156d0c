"""One branch switching session: list, format, select, check out."""

from typing import Callable, Optional

from branchhop.branches import format_choices, parse_branches
from branchhop.fuzzy import filter_choices
from branchhop.log import get_logger
from branchhop.selector import Selector

logger = get_logger("session")


def run_session(
    list_branches: Callable[[], str],
    checkout: Callable[[str], object],
    select: Selector,
    width: int,
) -> Optional[str]:
    """Run a session and return the checked-out branch name.

    Errors from list_branches abort before select is called; errors from
    select and checkout propagate unchanged.

    Returns:
        The branch that was checked out, or None if there are no branches
    """
    records = [record for record in parse_branches(list_branches()) if record.is_checkout_target]
    logger.debug("Parsed %d branches", len(records))
    if not records:
        return None

    choices = format_choices(records, width)
    selected = select(choices, filter_choices)
    logger.debug("Selected %s", selected)

    checkout(selected)
    return selected
