import pytest

from coral_calc.config import Settings
from coral_calc.session import Session


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def settings(tmp_path):
    return Settings(history_file=str(tmp_path / "history"), color=False)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env and CORAL_CALC_* variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for var in ("CORAL_CALC_HISTORY", "CORAL_CALC_PROMPT", "CORAL_CALC_COLOR", "CORAL_CALC_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
