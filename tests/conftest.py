import datetime
import random

import pytest


# Get the result of each test
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    print(f"\n[START] {datetime.datetime.now():%H:%M:%S} - Running: {node_id}")

    yield

    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "UNKNOWN"
    print(f"\n[END] {datetime.datetime.now():%H:%M:%S} - Result: {status} - {node_id}")


@pytest.fixture(autouse=True)
def no_seed_env(monkeypatch):
    # a seed exported in the shell would make unseeded tests deterministic
    monkeypatch.delenv("SUDOKUGEN_SEED", raising=False)


@pytest.fixture
def rng():
    return random.Random(2024)
