"""Shared fixtures for the file-manage tests."""

from unittest.mock import Mock

import pytest

from filemanage.controller import FileManageController
from filemanage.models import ListPage
from helpers import make_file


@pytest.fixture(autouse=True)
def no_http_log(monkeypatch):
    monkeypatch.setenv('FILEMANAGE_DISABLE_HTTP_LOG', '1')


@pytest.fixture
def mock_files():
    """Three files whose name and date orders differ.

    Returns:
        List of remote objects in server order.
    """
    return [
        make_file('apple.txt', '2023-01-10T10:00:00'),
        make_file('Banana.txt', '2023-01-15T12:00:00'),
        make_file('cherry.txt', '2023-01-05T08:00:00'),
    ]


@pytest.fixture
def list_files(mock_files):
    """Listing call returning a single final page by default."""
    return Mock(return_value=ListPage(objects=mock_files, is_truncated=False))


@pytest.fixture
def delete_file():
    return Mock(return_value=None)


@pytest.fixture
def notifier():
    return Mock()


@pytest.fixture
def credentials():
    return Mock()


@pytest.fixture
def navigator():
    return Mock()


@pytest.fixture
def localizer():
    """Localizer echoing keys so assertions can name them."""
    return Mock(translate=Mock(side_effect=lambda key: key))


@pytest.fixture
def make_controller(list_files, delete_file, notifier, credentials, navigator, localizer):
    def factory(**overrides):
        kwargs = {
            'list_files': list_files,
            'delete_file': delete_file,
            'notifier': notifier,
            'credentials': credentials,
            'navigator': navigator,
            'localizer': localizer,
        }
        kwargs.update(overrides)
        return FileManageController(**kwargs)

    return factory


@pytest.fixture
def controller(make_controller):
    """Controller that has already been mounted once."""
    instance = make_controller()
    instance.mount()
    return instance
