import pytest


@pytest.fixture
def variables():
    return {'a': 2.0, 'b': 3.0, 'c': 4.0, 'x': 8.0}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # keep NOTATION_* settings and any .env file out of the tests
    for name in ('LOG_LEVEL', 'HISTORY_FILE', 'MAX_STACK_SIZE', 'PRECISION'):
        monkeypatch.delenv(f"NOTATION_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
