"""Fuzzy matching for branch filtering."""

from branchhop.branches import DisplayChoice


def is_subsequence(query: str, candidate: str) -> bool:
    """Check if query chars appear in candidate in order, ignoring case.

    An empty query matches anything.
    """
    query = query.strip().casefold()
    candidate = candidate.strip().casefold()
    query_idx = 0
    for char in candidate:
        if query_idx < len(query) and char == query[query_idx]:
            query_idx += 1
    return query_idx == len(query)


def filter_choices(choices: list[DisplayChoice], query: str) -> list[DisplayChoice]:
    """Keep choices whose branch name matches query, in their original order."""
    if not query.strip():
        return list(choices)
    return [choice for choice in choices if is_subsequence(query, choice.value)]
