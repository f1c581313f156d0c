"""Branch listing parsing and row formatting."""

from dataclasses import dataclass
from typing import NamedTuple

CURRENT_MARKER = "*"
ELLIPSIS = "…"

NAME_WIDTH_MIN = 10
NAME_WIDTH_MAX = 40
HASH_WIDTH_MIN = 7
HASH_WIDTH_MAX = 12
MESSAGE_WIDTH_MIN = 20


@dataclass(frozen=True)
class BranchRecord:
    """One line of `git branch -v` output."""

    name: str
    short_hash: str
    message: str
    is_current: bool
    raw: str

    @property
    def is_checkout_target(self) -> bool:
        """False for pseudo-branches such as "(HEAD detached at 1a2b3c4)"."""
        return bool(self.name) and not self.name.startswith("(")


@dataclass(frozen=True)
class DisplayChoice:
    """A formatted row and the branch name it selects."""

    label: str
    value: str


class ColumnWidths(NamedTuple):
    name: int
    hash: int
    message: int


def parse_line(line: str) -> BranchRecord:
    """Parse a single non-empty branch line.

    Example lines:
        * main        1a2b3c4d Commit message here
          feature/foo a1b2c3d4 Another message
    """
    is_current = line.startswith(CURRENT_MARKER)
    rest = line[len(CURRENT_MARKER) :] if is_current else line
    parts = rest.split()
    return BranchRecord(
        name=parts[0] if parts else "",
        short_hash=parts[1] if len(parts) > 1 else "",
        message=" ".join(parts[2:]),
        is_current=is_current,
        raw=line,
    )


def parse_branches(raw: str) -> list[BranchRecord]:
    """Parse a branch listing into records, keeping the listing order."""
    lines = (line.rstrip() for line in raw.split("\n"))
    return [parse_line(line) for line in lines if line]


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def column_widths(records: list[BranchRecord], display_width: int) -> ColumnWidths:
    """Calculate column widths from the records and the display width."""
    name_width = _clamp(max((len(r.name) for r in records), default=0), NAME_WIDTH_MIN, NAME_WIDTH_MAX)
    hash_width = _clamp(max((len(r.short_hash) for r in records), default=0), HASH_WIDTH_MIN, HASH_WIDTH_MAX)
    # marker, space, name, two spaces, hash, space
    overhead = 1 + 1 + name_width + 2 + hash_width + 1
    message_width = max(MESSAGE_WIDTH_MIN, display_width - overhead)
    return ColumnWidths(name_width, hash_width, message_width)


def truncate(value: str, width: int) -> str:
    """Shorten value to width characters, ending with an ellipsis when cut."""
    if len(value) <= width:
        return value
    if width <= 1:
        return value[: max(width, 0)]
    return value[: width - 1] + ELLIPSIS


def format_row(record: BranchRecord, widths: ColumnWidths) -> str:
    marker = CURRENT_MARKER if record.is_current else " "
    name = truncate(record.name, widths.name).ljust(widths.name)
    short_hash = truncate(record.short_hash, widths.hash).ljust(widths.hash)
    message = truncate(record.message, widths.message)
    return f"{marker} {name}  {short_hash} {message}"


def format_choices(records: list[BranchRecord], display_width: int) -> list[DisplayChoice]:
    """Format records into selectable rows of bounded width."""
    widths = column_widths(records, display_width)
    return [DisplayChoice(label=format_row(record, widths), value=record.name) for record in records]
