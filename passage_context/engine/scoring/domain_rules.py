"""Domain keyword expansion rules.

A rule fires when any of its triggers appears (case-insensitive substring)
in the raw question; its keywords are then added to the search set. Rules
are plain data so other reference texts can ship their own table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordMappingRule:
    """Question triggers mapped to extra search keywords."""

    triggers: tuple[str, ...]
    keywords: tuple[str, ...]

    def matches(self, question: str) -> bool:
        question_lower = question.lower()
        return any(trigger.lower() in question_lower for trigger in self.triggers)


@dataclass(frozen=True)
class DomainKeywordMapping:
    """Collection of rules for one reference text.

    Attributes:
        domain: Identifier for the reference text
        rules: Rules evaluated independently against each question
    """

    domain: str
    rules: tuple[KeywordMappingRule, ...] = ()

    def expand(self, question: str) -> list[str]:
        """Return keywords contributed by every rule the question triggers.

        Order follows the rule table; duplicates across rules are kept once.
        """
        expanded: list[str] = []
        for rule in self.rules:
            if not rule.matches(question):
                continue
            for keyword in rule.keywords:
                keyword_lower = keyword.lower()
                if keyword_lower not in expanded:
                    expanded.append(keyword_lower)
        return expanded


# Example: "What river does the story start on?" fires the river rule and
# adds thames, congo, river and water to the base keywords.
HEART_OF_DARKNESS_MAPPINGS = DomainKeywordMapping(
    domain="heart-of-darkness",
    rules=(
        KeywordMappingRule(
            triggers=("river",),
            keywords=("thames", "congo", "river", "water"),
        ),
        KeywordMappingRule(
            triggers=("position", "hired"),
            keywords=("captain", "steamboat", "command", "skipper", "appointed"),
        ),
        KeywordMappingRule(
            triggers=("kurtz",),
            keywords=("kurtz", "ivory", "station", "agent"),
        ),
        KeywordMappingRule(
            triggers=("death", "words"),
            keywords=("horror", "died", "death", "last", "whispered"),
        ),
        KeywordMappingRule(
            triggers=("attack",),
            keywords=("arrows", "natives", "spears", "attack", "savages"),
        ),
        KeywordMappingRule(
            triggers=("repair", "steamboat"),
            keywords=("rivets", "repair", "boiler", "steam", "wreck"),
        ),
        KeywordMappingRule(
            triggers=("poles", "station"),
            keywords=("heads", "skulls", "poles", "ornamental"),
        ),
    ),
)
