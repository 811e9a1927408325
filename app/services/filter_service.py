"""
Search & Filter Service

Narrows a snapshot of listings by a free-text query and a set of
discrete criteria. Pure functions: input order is preserved and the
input sequence is never modified.

Works on plain Internship lists and on scored MatchResult lists (pass
key=lambda r: r.internship), so search can run after ranking.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

from app.schemas.schemas import FilterCriteria, Internship

T = TypeVar("T")

# Listing attribute checked for each criterion
_CRITERIA_FIELDS = ("state", "type", "duration", "remote", "category")


def matches_query(internship: Internship, query: str) -> bool:
    """
    Case-insensitive substring search over title, company, location,
    category and skill tags. Query is expected trimmed and lowercased.
    """
    haystacks = [internship.title, internship.company, internship.location, internship.category]
    if any(query in text.lower() for text in haystacks):
        return True
    return any(query in skill.lower() for skill in internship.skills)


def matches_criteria(internship: Internship, criteria: FilterCriteria) -> bool:
    """Every SET criterion must equal the listing's value. None is unset."""
    for field in _CRITERIA_FIELDS:
        expected = getattr(criteria, field)
        # remote=False is a real criterion, so compare against None
        if expected is None:
            continue
        if getattr(internship, field) != expected:
            return False
    return True


def apply_filters(
    items: Sequence[T],
    query: str = "",
    criteria: Optional[FilterCriteria] = None,
    key: Optional[Callable[[T], Internship]] = None
) -> List[T]:
    """
    Keep items whose listing matches the query AND every set criterion.

    Args:
        items: Listings (or wrappers around listings) in display order
        query: Free-text search; blank means no text filter
        criteria: Discrete filters; None or all-unset means no filter
        key: Extracts the Internship from each item (identity by default)

    Returns:
        New list, same relative order as the input
    """
    needle = (query or "").strip().lower()
    active_criteria = criteria if criteria is not None and not criteria.is_empty() else None

    if not needle and active_criteria is None:
        return list(items)

    get_listing = key or (lambda item: item)
    filtered = []
    for item in items:
        internship = get_listing(item)
        if needle and not matches_query(internship, needle):
            continue
        if active_criteria is not None and not matches_criteria(internship, active_criteria):
            continue
        filtered.append(item)
    return filtered
