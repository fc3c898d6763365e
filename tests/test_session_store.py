"""Tests for cookie session persistence."""

import json
import os
import stat

import httpx
import pytest

from filemanage.session_store import (
    CookieCredentialStore,
    load_cookies_from_json,
    load_session,
    save_session,
)


class TestSessionFile:
    """Tests for save_session / load_session."""

    def test_roundtrip_keeps_domain_and_path(self, tmp_path):
        cookies = httpx.Cookies()
        cookies.set('PASSWORD', 'secret', domain='files.test', path='/api')
        path = tmp_path / 'nested' / 'session.json'

        save_session(str(path), cookies)
        loaded = load_session(str(path))

        (cookie,) = list(loaded.jar)
        assert (cookie.name, cookie.value, cookie.domain, cookie.path) == ('PASSWORD', 'secret', 'files.test', '/api')

    def test_file_is_private(self, tmp_path):
        path = tmp_path / 'session.json'
        save_session(str(path), httpx.Cookies())
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / 'session.json'
        path.write_text('[]', encoding='utf-8')
        with pytest.raises(ValueError):
            load_session(str(path))


class TestBrowserExport:
    """Tests for load_cookies_from_json formats."""

    def test_list_format(self, tmp_path):
        path = tmp_path / 'cookies.json'
        path.write_text(json.dumps([
            {'name': 'PASSWORD', 'value': 'p', 'domain': 'files.test', 'path': '/'},
            {'name': 'empty', 'value': ''},
        ]), encoding='utf-8')

        cookies = load_cookies_from_json(str(path))

        assert [c.name for c in cookies.jar] == ['PASSWORD']

    def test_mapping_format(self, tmp_path):
        path = tmp_path / 'cookies.json'
        path.write_text(json.dumps({'PASSWORD': 'p', 'lang': {'value': 'zh'}}), encoding='utf-8')

        cookies = load_cookies_from_json(str(path))

        assert cookies.get('PASSWORD') == 'p'
        assert cookies.get('lang') == 'zh'

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / 'cookies.json'
        path.write_text('"nope"', encoding='utf-8')
        with pytest.raises(ValueError, match='Unsupported'):
            load_cookies_from_json(str(path))


class TestCookieCredentialStore:
    """Tests for the credential store used by the logout flow."""

    def test_set_and_remove_persist(self, tmp_path):
        path = str(tmp_path / 'session.json')
        store = CookieCredentialStore.open(path)

        store.set_credential('secret')
        assert CookieCredentialStore.open(path).get_credential() == 'secret'

        store.remove_credential('PASSWORD')
        assert store.get_credential() is None
        assert CookieCredentialStore.open(path).get_credential() is None

    def test_remove_missing_is_noop(self):
        store = CookieCredentialStore(httpx.Cookies())
        store.remove_credential('PASSWORD')
        assert store.get_credential() is None

    def test_remove_leaves_other_cookies(self):
        cookies = httpx.Cookies()
        cookies.set('PASSWORD', 'x')
        cookies.set('lang', 'en')
        store = CookieCredentialStore(cookies)

        store.remove_credential()

        assert [c.name for c in cookies.jar] == ['lang']
