"""
Built-in phrase rules for Phrase Validation Service

Each rule is plain data: a name plus pure functions over the phrase.
New rules are added by appending to the list, never by changing the evaluator.
"""

import logging
from collections import Counter
from typing import Iterable, List

from .models import Rule
from .config import (
    MAX_REPEATS,
    SENSITIVE_WORDS,
    REPETITION_RULE_NAME,
    SENSITIVE_LANGUAGE_RULE_NAME,
    WORD_DELIMITER,
)

logger = logging.getLogger(__name__)


def count_words(phrase: str) -> Counter:
    """
    Count exact (case-sensitive) tokens of a phrase

    Tokens are split on a single space, so consecutive spaces yield
    empty tokens that are counted like any other word.
    """
    return Counter(phrase.split(WORD_DELIMITER))


def make_repetition_rule(max_repeats: int = 2) -> Rule:
    """
    Build the repeating-words rule

    Args:
        max_repeats: Highest number of times any single word may appear

    Returns:
        Rule that fails when some word appears more than max_repeats times
    """
    if max_repeats < 1:
        raise ValueError(f"max_repeats must be at least 1, got: {max_repeats}")

    def predicate(phrase: str) -> bool:
        return all(count <= max_repeats for count in count_words(phrase).values())

    def offenders(phrase: str) -> List[str]:
        # Counter preserves first-appearance order
        return [word for word, count in count_words(phrase).items() if count > max_repeats]

    return Rule(
        name=REPETITION_RULE_NAME.format(max_repeats=max_repeats),
        predicate=predicate,
        offenders=offenders,
        description=f"A word may appear at most {max_repeats} times",
    )


def make_sensitive_language_rule(words: Iterable[str]) -> Rule:
    """
    Build the sensitive-language rule

    Matching is a substring search on the lower-cased phrase, so "badger"
    is caught by "bad".

    Args:
        words: Disallowed words

    Returns:
        Rule that fails when any disallowed word occurs in the phrase
    """
    disallowed = [word.lower() for word in words]
    if not disallowed:
        raise ValueError("At least one sensitive word is required")
    if any(not word.strip() for word in disallowed):
        raise ValueError("Sensitive words cannot be empty")

    def offenders(phrase: str) -> List[str]:
        lowered = phrase.lower()
        return [word for word in disallowed if word in lowered]

    def predicate(phrase: str) -> bool:
        lowered = phrase.lower()
        return not any(word in lowered for word in disallowed)

    return Rule(
        name=SENSITIVE_LANGUAGE_RULE_NAME,
        predicate=predicate,
        offenders=offenders,
        description=f"Phrase may not contain: {', '.join(disallowed)}",
    )


def default_rules() -> List[Rule]:
    """Default rule set, in evaluation order"""
    logger.debug(
        f"Building default rules (max_repeats={MAX_REPEATS}, sensitive_words={SENSITIVE_WORDS})"
    )
    return [
        make_repetition_rule(MAX_REPEATS),
        make_sensitive_language_rule(SENSITIVE_WORDS),
    ]
