"""Exhaustive case-insensitive keyword scan over the reference text."""

from ..core.document import Occurrence


def find_occurrences(keywords: list[str], document: str) -> list[Occurrence]:
    """Find every match of every keyword.

    Matching is case-insensitive; after a hit the search resumes just past
    the end of that match, so matches of one keyword never overlap each
    other. Results are grouped by keyword (in keyword order) and sorted by
    offset within each keyword.

    Args:
        keywords: Lowercase keywords to look for.
        document: The full reference text.

    Returns:
        List of occurrences; keywords with no match contribute nothing.
    """
    document_lower = document.lower()
    # lower() can change the length of some code points (e.g. "İ"); offsets
    # are only reliable when it does not.
    if len(document_lower) != len(document):
        document_lower = "".join(ch.lower()[:1] for ch in document)

    occurrences: list[Occurrence] = []
    for keyword in keywords:
        if not keyword:
            continue
        search_start = 0
        while search_start < len(document_lower):
            idx = document_lower.find(keyword, search_start)
            if idx == -1:
                break
            occurrences.append(Occurrence(keyword=keyword, offset=idx))
            search_start = idx + len(keyword)
    return occurrences
