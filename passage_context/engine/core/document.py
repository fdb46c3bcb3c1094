"""Data structures for passage extraction.

Ranges are half-open character offsets ``[start, end)`` into the reference
document, measured in Python string indices (code points).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Occurrence:
    """A single case-insensitive keyword match.

    Attributes:
        keyword: The lowercase keyword that matched
        offset: Zero-based index where the match begins
    """

    keyword: str
    offset: int


@dataclass
class PassageCandidate:
    """A merged, scored character range considered for the context.

    Attributes:
        start: Inclusive start offset
        end: Exclusive end offset
        score: Number of keyword windows merged into this range
    """

    start: int
    end: int
    score: int = 1

    def touches(self, start: int, end: int) -> bool:
        """Inclusive overlap test used while merging windows."""
        return self.start <= end and self.end >= start

    def overlaps(self, other: "PassageCandidate") -> bool:
        """Strict overlap test used while selecting passages."""
        return self.start < other.end and self.end > other.start

    def absorb(self, start: int, end: int) -> None:
        self.start = min(self.start, start)
        self.end = max(self.end, end)
        self.score += 1


@dataclass
class ExtractionResult:
    """Outcome of a single extraction run.

    Attributes:
        context: Final context string handed to the model
        keywords: Keywords that drove the search, in search order
        candidates: Candidates after window merging (pre-selection)
        selected: Candidates whose text made it into the context
        fallback_used: True when head/tail excerpting replaced passages
    """

    context: str
    keywords: list[str] = field(default_factory=list)
    candidates: list[PassageCandidate] = field(default_factory=list)
    selected: list[PassageCandidate] = field(default_factory=list)
    fallback_used: bool = False
