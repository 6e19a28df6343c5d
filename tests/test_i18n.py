from whatpicturepath.i18n import Messages, load_catalog, resolve_culture


def test_resolve_culture_maps_chinese_and_defaults_to_english() -> None:
    assert resolve_culture("zh_CN.UTF-8") == "zh-CN"
    assert resolve_culture("zh-TW") == "zh-CN"
    assert resolve_culture("Chinese (Simplified)_China") == "zh-CN"
    assert resolve_culture("en_GB") == "en-US"
    assert resolve_culture("fr-FR") == "en-US"
    assert resolve_culture("") == resolve_culture("auto")


def test_resolve_culture_auto_reads_environment(monkeypatch) -> None:
    monkeypatch.delenv("LANGUAGE", raising=False)
    monkeypatch.delenv("LC_ALL", raising=False)
    monkeypatch.delenv("LC_MESSAGES", raising=False)
    monkeypatch.setenv("LANG", "zh_CN.UTF-8")

    assert resolve_culture("auto") == "zh-CN"

    monkeypatch.setenv("LANG", "de_DE.UTF-8")
    assert resolve_culture(None) == "en-US"


def test_catalogs_share_the_same_keys() -> None:
    assert set(load_catalog("en-US")) == set(load_catalog("zh-CN"))


def test_messages_format_positional_arguments() -> None:
    en = Messages("en-US")
    zh = Messages("zh-CN")

    assert en.get("MenuSelectedCount", 3) == "Files selected: 3"
    assert "3" in zh.get("MenuSelectedCount", 3)
    assert en("AddSuccess", 2, 1).startswith("Added 2 file(s), skipped 1")


def test_messages_fall_back_for_unknown_culture_and_key() -> None:
    messages = Messages("xx-YY")

    assert messages.culture == "en-US"
    assert messages.get("NoSuchKey") == "NoSuchKey"


def test_resolve_culture_auto_prefers_language_list(monkeypatch) -> None:
    monkeypatch.setenv("LANGUAGE", "zh_CN:en_US")
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")
    monkeypatch.setenv("LANG", "en_US.UTF-8")

    assert resolve_culture("auto") == "zh-CN"

    monkeypatch.setenv("LANGUAGE", "en_GB:zh_CN")
    assert resolve_culture("auto") == "en-US"
