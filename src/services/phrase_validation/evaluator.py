"""
Rule evaluator - runs every rule against a phrase and collects violations
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import EvaluationError
from .models import Rule, ValidationResult
from .rules import default_rules

logger = logging.getLogger(__name__)


class RuleEvaluator:
    """Evaluates phrases against an ordered, immutable rule set"""

    def __init__(self, rules: Optional[Sequence[Rule]] = None):
        """
        Initialize Rule Evaluator

        Args:
            rules: Ordered rules to apply (uses default rules if None)

        Raises:
            ValueError: If two rules share a name
        """
        rules = tuple(default_rules() if rules is None else rules)

        is_unique, duplicate_names = self.check_unique_names(rules)
        if not is_unique:
            raise ValueError(f"Duplicate rule names found: {duplicate_names}")

        self._rules: Tuple[Rule, ...] = rules
        logger.info(f"RuleEvaluator initialized with {len(rules)} rules")

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def validate(self, phrase: str) -> ValidationResult:
        """
        Validate a phrase against every rule

        Args:
            phrase: User-entered phrase

        Returns:
            ValidationResult with violated rule names in rule order

        Raises:
            EvaluationError: If a rule raises or does not return a boolean
        """
        violations: List[str] = []
        offending_words: Dict[str, List[str]] = {}

        for rule in self._rules:
            if self._evaluate(rule, phrase):
                continue

            violations.append(rule.name)
            logger.debug(f"Phrase violates rule: {rule.name}")

            if rule.offenders is not None:
                try:
                    offending_words[rule.name] = list(rule.offenders(phrase))
                except Exception as e:
                    logger.error(f"Rule '{rule.name}' failed to list offending words: {e}")
                    raise EvaluationError(rule.name, e) from e

        return ValidationResult(
            is_valid=not violations,
            violations=violations,
            offending_words=offending_words,
        )

    def with_rule(self, rule: Rule) -> "RuleEvaluator":
        """Return a new evaluator with the rule appended"""
        return RuleEvaluator(self._rules + (rule,))

    def without_rule(self, name: str) -> "RuleEvaluator":
        """
        Return a new evaluator without the named rule

        Raises:
            KeyError: If no rule has that name
        """
        if name not in self.rule_names:
            raise KeyError(f"Rule not found: {name}")
        return RuleEvaluator([rule for rule in self._rules if rule.name != name])

    @staticmethod
    def check_unique_names(rules: Sequence[Rule]) -> Tuple[bool, List[str]]:
        """
        Check all rule names are unique

        Returns:
            Tuple of (is_unique, duplicate_names)
        """
        duplicates = []
        seen = set()

        for rule in rules:
            if rule.name in seen:
                if rule.name not in duplicates:
                    duplicates.append(rule.name)
            else:
                seen.add(rule.name)

        return len(duplicates) == 0, duplicates

    @staticmethod
    def _evaluate(rule: Rule, phrase: str) -> bool:
        try:
            verdict = rule.predicate(phrase)
        except Exception as e:
            logger.error(f"Rule '{rule.name}' failed to evaluate: {e}")
            raise EvaluationError(rule.name, e) from e

        if not isinstance(verdict, bool):
            error = TypeError(f"predicate returned {type(verdict).__name__}, expected bool")
            logger.error(f"Rule '{rule.name}' failed to evaluate: {error}")
            raise EvaluationError(rule.name, error)

        return verdict


def validate_phrase(phrase: str) -> ValidationResult:
    """Validate a phrase with the shared default evaluator"""
    from ..common.service_factory import ServiceFactory

    return ServiceFactory.get_phrase_evaluator().validate(phrase)


def format_violations(result: ValidationResult) -> List[str]:
    """
    Build one user-facing message per violated rule

    Returns:
        Messages like "Rule 'No sensitive language' failed: bad"
    """
    messages = []
    for name in result.violations:
        message = f"Rule '{name}' failed"
        words = result.offending_words.get(name)
        if words:
            message += ": " + ", ".join(repr(word) if word == "" else word for word in words)
        messages.append(message)
    return messages


def format_result_text(result: ValidationResult) -> str:
    lines = ["Phrase Validation Report", "=" * 24]
    lines.append(f"Overall: {'VALID' if result.is_valid else 'INVALID'}")
    for message in format_violations(result):
        lines.append(f"  - {message}")
    return "\n".join(lines)
