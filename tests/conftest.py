"""Shared fixtures for the session report tests."""

import pytest

from sessionstats import common
from sessionstats.entities import Session

SAMPLE_INPUT = (
    "user,1,John,Smith,25\n"
    "session,1,1,Chrome,10,2016-10-01\n"
    "session,1,2,Internet Explorer,20,2016-09-01\n"
    "user,2,Jane,Doe,30\n"
    "session,2,3,Firefox,15,2016-10-02\n"
)

SAMPLE_REPORT_JSON = (
    '{"totalUsers":2,"uniqueBrowsersCount":3,"totalSessions":3,'
    '"allBrowsers":"CHROME,FIREFOX,INTERNET EXPLORER",'
    '"usersStats":{'
    '"John Smith":{"sessionsCount":2,"totalTime":"30 min.","longestSession":"20 min.",'
    '"browsers":"CHROME, INTERNET EXPLORER","usedIE":true,"alwaysUsedChrome":false,'
    '"dates":["2016-10-01","2016-09-01"]},'
    '"Jane Doe":{"sessionsCount":1,"totalTime":"15 min.","longestSession":"15 min.",'
    '"browsers":"FIREFOX","usedIE":false,"alwaysUsedChrome":false,'
    '"dates":["2016-10-02"]}}}\n'
)


def make_session(browser="Chrome", time="10", date="2016-10-01", user_id="1", session_id="1"):
    """Create a Session without going through the reader."""
    return Session(user_id, session_id, browser, time, date)


@pytest.fixture
def sample_lines():
    return SAMPLE_INPUT.splitlines()


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "result.json"


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep a config file in the real home directory out of the tests."""
    monkeypatch.setattr(common, "DEFAULT_CONFIG_FILE", str(tmp_path / "missing.ini"))
