"""
Exceptions for Phrase Validation Service
"""


class EvaluationError(Exception):
    """Raised when a rule cannot produce a verdict for a phrase"""

    def __init__(self, rule_name: str, cause: Exception):
        self.rule_name = rule_name
        self.cause = cause
        super().__init__(f"Rule '{rule_name}' failed to evaluate: {cause}")
