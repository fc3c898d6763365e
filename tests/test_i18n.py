from filemanage.i18n import Localizer


def test_unknown_language_falls_back_to_english():
    assert Localizer('fr').language == 'en'


def test_language_from_environment(monkeypatch):
    monkeypatch.setenv('FILEMANAGE_LANG', 'zh')
    assert Localizer().translate('error.delete_failed') == '删除文件失败，请稍后再试。'


def test_unknown_key_is_echoed():
    assert Localizer('en').translate('error.nope') == 'error.nope'
