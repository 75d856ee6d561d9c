"""
Global test configuration and fixtures
"""

import time

import pytest

from wordgraph.graph import GraphBuilder, WordGraph

# Slow test thresholds (seconds)
SLOW_TEST_THRESHOLD = 5.0
WARNING_TEST_THRESHOLD = 2.0

CAT_TOKENS = ["the", "cat", "sat", "on", "the", "mat"]


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """Track every test's duration and flag slow ones"""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    test_name = request.node.nodeid

    if duration > SLOW_TEST_THRESHOLD:
        print(f"\n⚠️  SLOW TEST ({duration:.2f}s): {test_name}")
        print("   Consider marking with @pytest.mark.slow or optimizing")
    elif duration > WARNING_TEST_THRESHOLD:
        print(f"\n⏱️  Slow ({duration:.2f}s): {test_name}")


@pytest.fixture
def cat_graph() -> WordGraph:
    """the -> cat -> sat -> on -> the -> mat"""
    return GraphBuilder().build(CAT_TOKENS)


@pytest.fixture
def chain_graph() -> WordGraph:
    """a->b(1), b->c(1), a->c(5), c->d(1)"""
    return WordGraph({"a": {"b": 1, "c": 5}, "b": {"c": 1}, "c": {"d": 1}})


@pytest.fixture
def empty_graph() -> WordGraph:
    return WordGraph()


@pytest.fixture
def corpus_file(tmp_path):
    """Small corpus spread over two lines with punctuation."""
    path = tmp_path / "corpus.txt"
    path.write_text("The cat sat on\nthe mat. The cat ran!\n", encoding="utf-8")
    return path


# Pytest hooks
def pytest_configure(config):
    """pytest configuration"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (medium speed)")
    config.addinivalue_line("markers", "slow: Slow tests (>5s)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on the test path"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_report_header(config):
    return [
        f"Slow test threshold: {SLOW_TEST_THRESHOLD}s",
        f"Warning threshold: {WARNING_TEST_THRESHOLD}s",
    ]
