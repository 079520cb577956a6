import time
from unittest.mock import Mock

import pytest
import requests

_NETWORK_BLOCK_MSG = (
    "Network access is blocked during tests. Mock requests.* or Session.request."
)


def _block_network(*_args, **_kwargs):
    """
    Prevent network calls in tests by raising a RuntimeError.

    Raises:
        RuntimeError: with `_NETWORK_BLOCK_MSG` indicating that network access is blocked during tests.
    """
    raise RuntimeError(_NETWORK_BLOCK_MSG)


def pytest_configure(config):
    """
    Register the markers used across the suite.
    """
    config.addinivalue_line("markers", "unit: fast isolated unit tests")
    config.addinivalue_line(
        "markers", "integration: tests wiring several components together"
    )


def pytest_runtest_setup():
    """
    Prevent real network requests during tests by replacing HTTP entry points with blocking callables.
    """
    requests.get = _block_network
    requests.post = _block_network
    requests.head = _block_network
    requests.Session.request = _block_network


@pytest.fixture(autouse=True)
def _isolate_working_directory(tmp_path, monkeypatch):
    """
    Run every test inside its own temporary working directory.

    Output files (currentTag.txt, update.json, module_template/, bin/) are written
    relative to the working directory, so this keeps tests from touching the repo.
    Identity environment variables are cleared so defaults apply unless a test sets them.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_REPOSITORY", "GITHUB_ACTOR", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _mock_time_sleep(monkeypatch):
    """
    Make time.sleep instant for all tests to prevent delays.
    """
    monkeypatch.setattr(time, "sleep", lambda *_args, **_kwargs: None)


@pytest.fixture
def make_response():
    """
    Provide a factory that creates mock requests.Response objects.

    Returns:
        factory (callable): `factory(status_code=200, json_data=None, content=b"", text=None, headers=None)`.
            When `json_data` is an Exception instance, calling `.json()` raises it.
    """

    def _create_response(
        status_code=200, json_data=None, content=b"", text=None, headers=None
    ):
        response = Mock()
        response.status_code = status_code
        response.headers = headers or {}
        response.content = content
        response.text = (
            text if text is not None else content.decode("utf-8", "replace")
        )
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response

    return _create_response


@pytest.fixture
def release_payload():
    """
    Provide a factory building raw GitHub release objects.

    Returns:
        factory (callable): `factory(tag, *asset_names)` returning a dict with `tag_name` and `assets`.
    """

    def _create_release(tag, *asset_names):
        return {
            "tag_name": tag,
            "prerelease": False,
            "assets": [
                {
                    "name": name,
                    "size": 1024,
                    "browser_download_url": f"https://example.com/{tag}/{name}",
                }
                for name in asset_names
            ],
        }

    return _create_release
