"""Constants for passage extraction.

- Stop words for question keyword filtering
- Context budget and passage window sizes
- Separators used when assembling the final context
"""

# ---------------------------------------------------------------------------
# Stop words. Common question words plus a few narrative framing terms
# ("story", "novella", "narrating") that appear in nearly every question
# about the text and would otherwise match everywhere.
# ---------------------------------------------------------------------------
STOP_WORDS = frozenset(
    {
        # Articles, auxiliaries
        "the",
        "a",
        "an",
        "is",
        "are",
        "was",
        "were",
        "does",
        "do",
        "did",
        "has",
        "have",
        "had",
        # WH-words
        "what",
        "which",
        "who",
        "whom",
        "when",
        "where",
        "why",
        "how",
        # Prepositions
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "from",
        "about",
        "into",
        "during",
        "before",
        "after",
        # Pronouns and determiners
        "his",
        "her",
        "their",
        "its",
        "that",
        "this",
        "these",
        "those",
        # Connectives
        "and",
        "or",
        "but",
        "if",
        "then",
        "else",
        "just",
        # Corpus noise
        "upriver",
        "start",
        "begins",
        "narrating",
        "story",
        "novella",
    }
)

# Characters removed from the question before tokenizing.
STRIPPED_PUNCTUATION = "?.,!"

# Tokens of this length or shorter are dropped. Keeps 3-letter content
# words such as "fog", "mud" and "gun".
KEYWORD_LENGTH_THRESHOLD = 2

# ~25k chars is roughly 6k tokens: enough scattered passages for literary
# questions without overflowing the tool response.
MAX_CONTEXT_LENGTH = 25000

# Characters added on each side of a keyword match.
PASSAGE_WINDOW = 1500

PASSAGE_SEPARATOR = "\n\n---\n\n"
FALLBACK_MARKER = "\n\n[...]\n\n"
