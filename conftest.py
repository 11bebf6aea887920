import pytest

from circulation.activity_log import ActivityLog
from circulation.lending import LendingService
from circulation.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Each test starts in plain output mode regardless of the caller's environment
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "library_log.txt"


@pytest.fixture
def activity_log(log_path):
    return ActivityLog(log_path)


@pytest.fixture
def service(activity_log):
    return LendingService(activity_log=activity_log, currency_symbol="₹")
