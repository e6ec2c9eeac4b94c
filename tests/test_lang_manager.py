from dialogkit.core.lang_manager import _, get_lang_manager


def test_untranslated_strings_pass_through(qapp):
    assert _("Cancel") == "Cancel"


def test_missing_catalog_keeps_current_language(qapp):
    manager = get_lang_manager()
    assert manager is get_lang_manager()
    assert not manager.set_language("ja")
    assert manager.current_language == "en"
    assert manager.current_language_name == "English"
