"""
Pytest configuration and shared fixtures for the mesostasks test suite.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


WEB_UUID_1 = "1a2b3c4d-0000-0000-0000-000000000001"
WEB_UUID_2 = "1a2b3c4d-0000-0000-0000-000000000002"
DB_UUID = "ABCDEF12-3456-7890-abcd-ef1234567890"


def make_instance(executor_id: str, **statistics: Any) -> Dict[str, Any]:
    """Build one element of the agent's statistics array."""
    return {
        "executor_id": executor_id,
        "executor_name": "Command Executor",
        "framework_id": "framework-0001",
        "source": executor_id,
        "statistics": dict(statistics, timestamp=1700000000.5),
    }


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for test files."""
    return tmp_path


@pytest.fixture
def sample_instances() -> List[Dict[str, Any]]:
    """A statistics document with two tasks and one unmatched executor."""
    return [
        make_instance(
            f"web.{WEB_UUID_1}",
            mem_rss_bytes=100,
            mem_limit_bytes=400,
            cpus_limit=1.5,
            disk_used_bytes=10,
            disk_limit_bytes=0,
        ),
        make_instance(
            f"web.{WEB_UUID_2}",
            mem_rss_bytes=300,
            mem_limit_bytes=400,
            disk_used_bytes=30,
            disk_limit_bytes=0,
        ),
        make_instance(
            f"db.{DB_UUID}",
            mem_rss_bytes=50,
            mem_limit_bytes=200,
            cpus_user_time_secs=12.25,
            mem_unknown_bytes=999,
        ),
        make_instance("thermos-ungrouped", mem_rss_bytes=1),
    ]


@pytest.fixture
def sample_document(sample_instances) -> str:
    """The sample instances serialized as the agent would return them."""
    return json.dumps(sample_instances)


@pytest.fixture
def instance_factory():
    """Factory for single statistics array elements."""
    return make_instance


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging.basicConfig calls made by the CLI under test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
