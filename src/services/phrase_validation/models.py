"""
Pydantic models for Phrase Validation Service
"""

from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Rule(BaseModel):
    """Single named rule over a phrase (immutable)"""

    model_config = ConfigDict(frozen=True)

    name: str
    predicate: Callable[[str], bool]
    offenders: Optional[Callable[[str], List[str]]] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v or v.strip() == "":
            raise ValueError("Rule name cannot be empty")
        return v


class ValidationResult(BaseModel):
    """Outcome of running every rule against one phrase"""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    violations: List[str] = []
    offending_words: Dict[str, List[str]] = {}

    @model_validator(mode="after")
    def check_consistency(self) -> "ValidationResult":
        if self.is_valid != (len(self.violations) == 0):
            raise ValueError("is_valid must be True exactly when there are no violations")
        if len(set(self.violations)) != len(self.violations):
            raise ValueError(f"Duplicate violations: {self.violations}")
        unknown = [name for name in self.offending_words if name not in self.violations]
        if unknown:
            raise ValueError(f"offending_words refers to rules that did not fail: {unknown}")
        return self
