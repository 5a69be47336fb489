import pytest
import sys
from pathlib import Path

# Add src to Path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clear_service_factory_cache():
    """
    Auto Clear ServiceFactory cache before and after each test

    Ensures a cached evaluator from one test never leaks into another.
    """

    from src.services.common.service_factory import ServiceFactory

    ServiceFactory.clear_cache()

    yield

    ServiceFactory.clear_cache()
