"""Expand keyword matches into windows and merge them into candidates."""

from ..core.document import Occurrence, PassageCandidate


def build_candidates(
    occurrences: list[Occurrence],
    document_length: int,
    window_radius: int,
) -> list[PassageCandidate]:
    """Turn occurrences into scored passage candidates.

    Each occurrence becomes the window
    ``[offset - radius, offset + len(keyword) + radius)`` clamped to the
    document. A window that touches an existing candidate is folded into
    the first such candidate (range union, score + 1); otherwise it starts
    a new candidate with score 1.

    Merging is single-pass and non-cascading: a window that bridges two
    existing candidates joins only the first, so the returned list can
    still contain overlapping ranges. The selector skips those.

    Args:
        occurrences: Matches in keyword order, then offset order.
        document_length: Length of the reference text.
        window_radius: Characters added on each side of a match.

    Returns:
        Candidates in creation order.
    """
    candidates: list[PassageCandidate] = []

    for occurrence in occurrences:
        start = max(0, occurrence.offset - window_radius)
        end = min(document_length, occurrence.offset + len(occurrence.keyword) + window_radius)
        if start >= end:
            continue

        for existing in candidates:
            if existing.touches(start, end):
                existing.absorb(start, end)
                break
        else:
            candidates.append(PassageCandidate(start=start, end=end))

    return candidates
