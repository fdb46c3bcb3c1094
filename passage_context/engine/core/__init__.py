"""Engine core module.

Data structures shared by the extraction stages and token counting.
"""

from .document import ExtractionResult, Occurrence, PassageCandidate
from .tokens import count_tokens, get_encoder

__all__ = [
    # Extraction structures
    "Occurrence",
    "PassageCandidate",
    "ExtractionResult",
    # Token utilities
    "get_encoder",
    "count_tokens",
]
