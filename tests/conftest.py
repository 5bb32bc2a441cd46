import datetime

import pytest

from sudokit.utils.log import set_log_level


# Keep the report of each phase on the test item
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Print the start, end and outcome of every test
@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    print(f"\n[START] {datetime.datetime.now():%H:%M:%S} - Running: {node_id}")

    yield

    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "UNKNOWN"
    print(f"\n[END] {datetime.datetime.now():%H:%M:%S} - Result: {status} - {node_id}")


# Tests that raise the log level must not leak it into later tests
@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    set_log_level("INFO")
