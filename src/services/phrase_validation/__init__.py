"""
Phrase Validation Service
Validates user-entered phrases before they can activate LLM prompts
"""

from .errors import EvaluationError
from .models import Rule, ValidationResult
from .evaluator import (
    RuleEvaluator,
    validate_phrase,
    format_violations,
    format_result_text,
)
from .rules import default_rules, make_repetition_rule, make_sensitive_language_rule

__all__ = [
    "EvaluationError",
    "Rule",
    "ValidationResult",
    "RuleEvaluator",
    "validate_phrase",
    "format_violations",
    "format_result_text",
    "default_rules",
    "make_repetition_rule",
    "make_sensitive_language_rule",
]
