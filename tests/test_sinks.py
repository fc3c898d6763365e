"""Tests for the headless notifier and navigator."""

import logging

from filemanage.sinks import LogNotifier, RouteNavigator


def test_navigator_history_is_bounded():
    navigator = RouteNavigator(limit=3)

    for route in ['/a', '/b', '/c', '/login']:
        navigator.navigate_to(route)

    assert list(navigator.history) == ['/b', '/c', '/login']
    assert navigator.current == '/login'


def test_notifier_logs_at_requested_level(caplog):
    notifier = LogNotifier()

    with caplog.at_level(logging.INFO, logger='filemanage'):
        notifier.notify('Failed to delete file.', 'error')
        notifier.notify('Deleted', 'info')

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
        ('ERROR', 'Failed to delete file.'),
        ('INFO', 'Deleted'),
    ]
