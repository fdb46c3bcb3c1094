"""Rank candidates and assemble the bounded context string."""

import logging

from ..core.document import PassageCandidate
from .constants import FALLBACK_MARKER, PASSAGE_SEPARATOR

logger = logging.getLogger(__name__)


def rank_candidates(candidates: list[PassageCandidate]) -> list[PassageCandidate]:
    """Sort by score descending, then by start offset ascending."""
    return sorted(candidates, key=lambda c: (-c.score, c.start))


def select_passages(
    candidates: list[PassageCandidate],
    document: str,
    max_budget: int,
    separator: str = PASSAGE_SEPARATOR,
) -> tuple[str, list[PassageCandidate]]:
    """Greedily pick non-overlapping passages under the character budget.

    Candidates overlapping an accepted range are skipped. The first
    candidate whose text does not fit ends selection; lower-ranked
    candidates are never tried, even if shorter. Passages are never
    truncated.

    Args:
        candidates: Merged candidates from the window builder.
        document: The full reference text.
        max_budget: Maximum total characters of the assembled context.
        separator: Inserted before every accepted passage.

    Returns:
        Tuple of (assembled text, accepted candidates). The text is
        empty when nothing was accepted.
    """
    result = ""
    accepted: list[PassageCandidate] = []

    for candidate in rank_candidates(candidates):
        if any(candidate.overlaps(used) for used in accepted):
            continue

        passage_text = document[candidate.start : candidate.end].strip()

        if len(result) + len(separator) + len(passage_text) > max_budget:
            logger.debug(
                f"Budget exhausted at candidate [{candidate.start}, {candidate.end}) "
                f"score={candidate.score} after {len(accepted)} passages"
            )
            break

        result += separator + passage_text
        accepted.append(candidate)

    return result, accepted


def fallback_excerpt(document: str, max_budget: int, marker: str = FALLBACK_MARKER) -> str:
    """Head and tail of the document when no passage was selected.

    Args:
        document: The full reference text.
        max_budget: Budget split evenly between head and tail.
        marker: Placed between the two halves.

    Returns:
        ``head + marker + tail``; slices clamp to the document bounds.
    """
    half = max_budget // 2
    beginning = document[:half]
    ending = document[max(0, len(document) - half) :]
    return beginning + marker + ending
