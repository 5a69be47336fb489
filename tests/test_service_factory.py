"""
Unit tests for ServiceFactory - Centralized service instance manager

Tests cover:
- Default evaluator caching
- Custom rule sets (never cached)
- Cache management operations
- Thread safety
"""

import threading

from src.services.common.service_factory import ServiceFactory
from src.services.phrase_validation import Rule, RuleEvaluator


class TestServiceFactoryEvaluator:
    """Test evaluator caching functionality"""

    def test_get_phrase_evaluator_returns_same_instance(self):
        evaluator1 = ServiceFactory.get_phrase_evaluator()
        evaluator2 = ServiceFactory.get_phrase_evaluator()

        assert evaluator1 is evaluator2
        assert isinstance(evaluator1, RuleEvaluator)

    def test_custom_rules_create_fresh_instance(self):
        rules = [Rule(name="Always", predicate=lambda p: True)]

        custom1 = ServiceFactory.get_phrase_evaluator(rules)
        custom2 = ServiceFactory.get_phrase_evaluator(rules)

        assert custom1 is not custom2
        assert custom1.rule_names == ["Always"]
        assert ServiceFactory.get_cache_stats()["has_phrase_evaluator"] is False

    def test_thread_safety(self):
        """Test concurrent access creates a single instance"""
        instances = []

        def get_evaluator():
            instances.append(ServiceFactory.get_phrase_evaluator())

        threads = [threading.Thread(target=get_evaluator) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(instances) == 10
        assert all(instance is instances[0] for instance in instances)


class TestServiceFactoryCacheManagement:
    """Test cache management operations"""

    def test_clear_cache(self):
        evaluator1 = ServiceFactory.get_phrase_evaluator()
        ServiceFactory.clear_cache()
        evaluator2 = ServiceFactory.get_phrase_evaluator()

        assert evaluator1 is not evaluator2

    def test_get_cache_stats(self):
        stats = ServiceFactory.get_cache_stats()
        assert stats["total_instances"] == 0
        assert stats["has_phrase_evaluator"] is False

        ServiceFactory.get_phrase_evaluator()

        stats = ServiceFactory.get_cache_stats()
        assert stats["total_instances"] == 1
        assert stats["instance_types"] == ["phrase_evaluator"]
        assert stats["has_phrase_evaluator"] is True
