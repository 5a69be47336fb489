"""
Service Factory - Centralized service instance manager with caching

Provides singleton access to:
- Phrase Rule Evaluator

Features:
- Lazy initialization (Created only when needed)
- Thread-safe instance creation
- Clearable cache for testing
"""

import logging
import threading
from typing import Optional, Dict, Any, Sequence

from ..phrase_validation.evaluator import RuleEvaluator
from ..phrase_validation.models import Rule

logger = logging.getLogger(__name__)


class ServiceFactory:
    """
    Centralized service instance manager with caching

    The default evaluator is built once and shared. Evaluators are immutable,
    so sharing one across callers and threads is safe.
    """

    _instances: Dict[str, Any] = {}
    _lock: threading.Lock = threading.Lock()

    @classmethod
    def get_phrase_evaluator(
        cls, rules: Optional[Sequence[Rule]] = None
    ) -> RuleEvaluator:
        """
        Get or create RuleEvaluator instance

        Args:
            rules: Optional custom rule set (creates fresh instance if provided)

        Returns:
            RuleEvaluator instance (cached for default rules, fresh for custom rules)

        Usage:
            evaluator = ServiceFactory.get_phrase_evaluator()
            result = evaluator.validate("hello world")

        Notes:
            - Default rules: Returns cached singleton instance
            - Custom rules: Always creates fresh instance (not cached)
        """
        if rules is not None:
            logger.debug(
                "[ServiceFactory] Creating fresh RuleEvaluator with custom rules (not cached)"
            )
            return RuleEvaluator(rules)

        cache_key = "phrase_evaluator"

        if cache_key in cls._instances:
            logger.debug("[ServiceFactory] Returning cached RuleEvaluator instance")
            return cls._instances[cache_key]

        with cls._lock:
            if cache_key not in cls._instances:
                logger.info("[ServiceFactory] Creating new RuleEvaluator instance")
                cls._instances[cache_key] = RuleEvaluator()

        return cls._instances[cache_key]

    @classmethod
    def clear_cache(cls) -> None:
        """
        Clear all cached service instances

        Notes:
            - Useful for testing (clear between tests)
            - Thread-safe operation
        """
        with cls._lock:
            count = len(cls._instances)
            cls._instances.clear()
            logger.info(f"[ServiceFactory] Cleared {count} cached service instances")

    @classmethod
    def get_cache_stats(cls) -> Dict[str, Any]:
        """
        Get statistics about cached instances (for debugging)

        Returns:
            Dictionary with cache statistics
        """
        return {
            "total_instances": len(cls._instances),
            "instance_types": list(cls._instances.keys()),
            "has_phrase_evaluator": "phrase_evaluator" in cls._instances,
        }
