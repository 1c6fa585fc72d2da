"""Tests for message translation."""

from fsmanager.translation import Translator


def test_english_catalogue():
    translator = Translator("en")
    assert translator.trans("Files in %s", {"%s": "images"}) == "Files in images"


def test_dutch_catalogue():
    translator = Translator("nl")
    assert translator.trans("Files in %s", {"%s": "images"}) == "Bestanden in images"
    assert translator.trans(
        "Folder '%s' could not be found, or is not readable.", {"%s": "docs"}
    ) == "Map 'docs' kon niet gevonden worden, of is niet leesbaar."


def test_unknown_message_falls_back_to_source():
    assert Translator("nl").trans("Upload %name%", {"%name%": "a.txt"}) == "Upload a.txt"


def test_unknown_locale_falls_back_to_source():
    translator = Translator("xx")
    assert translator.messages == {}
    assert translator("Files in %s", {"%s": "docs"}) == "Files in docs"


def test_custom_locales_dir(tmp_path):
    (tmp_path / "de.yaml").write_text('"Files in %s": "Dateien in %s"\n', encoding="utf-8")
    translator = Translator("de", locales_dir=tmp_path)
    assert translator.trans("Files in %s", {"%s": "docs"}) == "Dateien in docs"
