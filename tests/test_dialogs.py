import gc
import json

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest

from dialogkit.core.errors import MissingCollaboratorError
from dialogkit.core.schedule import EditorMode
from dialogkit.ui.dialogs import (
    ComplexCronDialog,
    ConfirmDialog,
    CronDialog,
    ErrorDialog,
    FileSelectDialog,
    MessageDialog,
    SelectFileDialog,
    SelectIDDialog,
    SimpleCronDialog,
    SUPPRESSED_CONFIRM_DELAY_MS,
    TextInputDialog,
)
from dialogkit.ui.list_browser import ListBrowser

CONNECTION = object()


class FakeClock:
    def __init__(self, now=5_000_000):
        self.now = now

    def __call__(self):
        return self.now


# Confirm

def test_confirm_ok_and_cancel(qapp, recorder):
    on_close = recorder()
    dlg = ConfirmDialog(text="Sure?", on_close=on_close)
    dlg.ok_btn.click()
    dlg.cancel_btn.click()
    dlg.reject()
    assert on_close.calls == [(True,)]

    on_close = recorder()
    dlg = ConfirmDialog(text="Sure?", on_close=on_close)
    dlg.reject()
    assert on_close.calls == [(False,)]


def test_confirm_suppression_requires_name_and_store(qapp, store):
    with pytest.raises(MissingCollaboratorError):
        ConfirmDialog(text="Sure?", suppress_question_minutes=5, store=store)
    with pytest.raises(MissingCollaboratorError):
        ConfirmDialog(text="Sure?", suppress_question_minutes=5, dialog_name="delete")


def test_confirm_suppressed_dialog_confirms_itself(qapp, store, recorder):
    clock = FakeClock()
    first = recorder()
    dlg = ConfirmDialog(text="Sure?", suppress_question_minutes=5, dialog_name="delete",
                        store=store, on_close=first, clock=clock)
    assert not dlg.suppressed
    dlg.suppress_chk.setChecked(True)
    dlg.ok_btn.click()
    assert first.calls == [(True,)]
    assert store.get("Confirm.delete") == str(clock.now + 5 * 60000)

    second = recorder()
    clock.now += 60000
    suppressed = ConfirmDialog(text="Sure?", suppress_question_minutes=5, dialog_name="delete",
                               store=store, on_close=second, clock=clock)
    assert suppressed.suppressed
    assert second.calls == []
    QTest.qWait(SUPPRESSED_CONFIRM_DELAY_MS * 3)
    assert second.calls == [(True,)]
    assert suppressed.is_closed


def test_suppressed_confirm_without_reference_still_closes(qapp, store, recorder):
    clock = FakeClock()
    store.set("Confirm.delete", str(clock.now + 60000))
    on_close = recorder()
    ConfirmDialog(text="Sure?", suppress_question_minutes=5, dialog_name="delete",
                  store=store, on_close=on_close, clock=clock)
    gc.collect()
    QTest.qWait(SUPPRESSED_CONFIRM_DELAY_MS * 3)
    assert on_close.calls == [(True,)]
    assert not ConfirmDialog._pending


def test_confirm_asks_again_after_expiry(qapp, store, recorder):
    clock = FakeClock()
    store.set("Confirm.delete", str(clock.now - 1))
    on_close = recorder()
    dlg = ConfirmDialog(text="Sure?", suppress_question_minutes=5, dialog_name="delete",
                        store=store, on_close=on_close, clock=clock)
    assert not dlg.suppressed
    assert store.get("Confirm.delete") is None
    dlg.ok_btn.click()
    # Checkbox not ticked: nothing stored
    assert store.get("Confirm.delete") is None
    assert on_close.calls == [(True,)]


# Message / Error

def test_message_dialog_closes_once(qapp, recorder):
    on_close = recorder()
    dlg = MessageDialog(text="Done", on_close=on_close)
    assert dlg.cancel_btn is None
    dlg.ok_btn.click()
    dlg.reject()
    assert on_close.calls == [()]


def test_error_dialog_defaults(qapp, recorder):
    on_close = recorder()
    dlg = ErrorDialog(on_close=on_close)
    assert dlg.windowTitle() == "Error"
    assert dlg.text_lbl.text() == "Unknown error!"
    assert dlg.ok_btn.style_type == "Red"
    dlg.reject()
    assert on_close.calls == [()]


# Text input

def test_text_input_verify_and_ok(qapp, recorder):
    on_close = recorder()
    dlg = TextInputDialog(title="Rename", input_text="ab", verify=lambda text: len(text) >= 3, on_close=on_close)
    dlg.set_text("ab")
    assert not dlg.ok_btn.isEnabled()
    dlg.handle_ok()
    assert on_close.calls == []

    dlg.set_text("abcd")
    assert dlg.ok_btn.isEnabled()
    dlg.ok_btn.click()
    assert on_close.calls == [("abcd",)]


def test_text_input_rule_and_enter(qapp, recorder):
    on_close = recorder()
    dlg = TextInputDialog(title="Rename", rule=str.upper, on_close=on_close)
    dlg.set_text("lamp")
    assert dlg.text == "LAMP"
    dlg.show()
    QTest.keyClick(dlg.input_field, Qt.Key.Key_Return)
    assert on_close.calls == [("LAMP",)]


def test_text_input_empty_and_cancel(qapp, recorder):
    on_close = recorder()
    dlg = TextInputDialog(title="Rename", on_close=on_close)
    assert not dlg.ok_btn.isEnabled()
    dlg.cancel_btn.click()
    assert on_close.calls == [(None,)]


# Cron

def test_cron_dialog_without_value_opens_wizard(qapp, recorder):
    on_ok, on_close = recorder(), recorder()
    dlg = CronDialog(on_ok=on_ok, on_close=on_close)
    assert dlg.mode == EditorMode.WIZARD
    assert dlg.value == '{}'
    assert set(dlg.mode_radios) == {EditorMode.WIZARD, EditorMode.SIMPLE, EditorMode.COMPLEX}
    dlg.ok_btn.click()
    assert on_ok.calls == [('{}',)]
    assert on_close.calls == [()]


def test_cron_dialog_quoted_cron_opens_simple(qapp, recorder):
    on_ok = recorder()
    dlg = CronDialog(cron='"0 5 * * *"', on_ok=on_ok)
    assert dlg.mode == EditorMode.SIMPLE
    assert dlg.value == '0 5 * * *'
    assert dlg.preview_lbl.text() == "At 05:00 every day"
    dlg.ok_btn.click()
    assert on_ok.calls == [('0 5 * * *',)]


def test_cron_dialog_mode_switch_keeps_value(qapp):
    dlg = CronDialog(cron='0 5 * * *')
    dlg.mode_radios[EditorMode.COMPLEX].setChecked(True)
    assert dlg.mode == EditorMode.COMPLEX
    assert dlg.value == '0 5 * * *'
    assert dlg.stack.currentWidget() is dlg.editors[EditorMode.COMPLEX]
    assert dlg.editors[EditorMode.COMPLEX].line_edit.text() == '0 5 * * *'


def test_cron_dialog_complex_edit_updates_preview(qapp):
    dlg = CronDialog(cron='0 0 1 * *')
    assert dlg.mode == EditorMode.COMPLEX
    dlg.editors[EditorMode.COMPLEX].changed.emit('*/5 * * * *')
    assert dlg.value == '*/5 * * * *'
    assert dlg.preview_lbl.text() == "Every 5 minutes"

    dlg.editors[EditorMode.COMPLEX].changed.emit('61 * * * *')
    assert not dlg.ok_btn.isEnabled()


def test_cron_dialog_simple_builder_edit(qapp):
    dlg = SimpleCronDialog(cron='*/5 * * * *')
    assert dlg.mode == EditorMode.SIMPLE
    assert dlg.mode_radios == {}
    dlg.editors[EditorMode.SIMPLE].period_spin.setValue(10)
    assert dlg.value == '*/10 * * * *'


def test_cron_dialog_invalid_wizard_json_disables_ok(qapp):
    dlg = CronDialog()
    dlg.editors[EditorMode.WIZARD].text_edit.setPlainText('{bad')
    assert not dlg.ok_btn.isEnabled()
    dlg.editors[EditorMode.WIZARD].text_edit.setPlainText('{"period": "daily"}')
    assert dlg.ok_btn.isEnabled()
    assert dlg.value == '{"period": "daily"}'


def test_complex_cron_clear(qapp, recorder):
    on_ok, on_close = recorder(), recorder()
    dlg = ComplexCronDialog(cron='0 5 * * *', clear_button=True, on_ok=on_ok, on_close=on_close)
    assert dlg.mode == EditorMode.COMPLEX
    dlg.clear_btn.click()
    dlg.handle_ok()
    assert on_ok.calls == [(False,)]
    assert on_close.calls == [()]


def test_cron_dialog_cancel(qapp, recorder):
    on_ok, on_close = recorder(), recorder()
    dlg = CronDialog(cron='0 5 * * *', on_ok=on_ok, on_close=on_close)
    dlg.cancel_btn.click()
    dlg.reject()
    assert on_ok.calls == []
    assert on_close.calls == [()]


# Pickers

def test_pickers_require_connection_and_store(qapp, store):
    with pytest.raises(MissingCollaboratorError):
        SelectFileDialog(store=store)
    with pytest.raises(MissingCollaboratorError):
        SelectIDDialog(connection=CONNECTION)


def test_select_file_merges_stored_filters(qapp, store):
    store.set("SelectFile.images", json.dumps({"type": "images", "name": "old"}))
    dlg = SelectFileDialog(dialog_name="images", connection=CONNECTION, store=store, filters={"name": "logo"})
    assert dlg.filters == {"type": "images", "name": "logo"}

    dlg.handle_filter_changed({"name": "icon"})
    assert json.loads(store.get("SelectFile.images")) == {"name": "icon"}


def test_select_file_malformed_filters(qapp, store):
    store.set("SelectFile.default", "{oops")
    dlg = SelectFileDialog(connection=CONNECTION, store=store)
    assert dlg.filters == {}


def test_select_file_double_click_confirms_file(qapp, store, recorder):
    on_ok, on_close = recorder(), recorder()
    dlg = SelectFileDialog(connection=CONNECTION, store=store, on_ok=on_ok, on_close=on_close)
    assert not dlg.ok_btn.isEnabled()

    dlg.handle_select(['/data/a.txt'], False, False)
    assert dlg.ok_btn.isEnabled()
    assert on_ok.calls == []

    dlg.handle_select(['/data/a.txt'], True, False)
    assert on_ok.calls == [('/data/a.txt',)]
    assert on_close.calls == [()]


def test_select_only_folders(qapp, store, recorder):
    on_ok = recorder()
    dlg = SelectFileDialog(connection=CONNECTION, store=store, select_only_folders=True, on_ok=on_ok)
    dlg.handle_select(['/data/a.txt'], True, False)
    assert on_ok.calls == []
    assert not dlg.ok_btn.isEnabled()

    dlg.handle_select(['/data'], True, True)
    assert on_ok.calls == [('/data',)]


def test_multi_select_file(qapp, store, recorder):
    on_ok = recorder()
    dlg = SelectFileDialog(connection=CONNECTION, store=store, multi_select=True,
                           selected=['a', '', 'a', 'b'], on_ok=on_ok)
    assert dlg.selected == ('a', 'b')
    assert dlg.header_lbl.text() == "Selected: 2 items"
    dlg.ok_btn.click()
    assert on_ok.calls == [(['a', 'b'],)]


def test_file_select_rejects_folder_without_folder_mode(qapp, store):
    dlg = FileSelectDialog(connection=CONNECTION, store=store)
    dlg.handle_select('/data', False, True)
    assert not dlg.ok_btn.isEnabled()
    dlg.handle_select('/data/a.txt', False, False)
    assert dlg.ok_btn.isEnabled()


def test_select_id_emits_display_name(qapp, store, recorder):
    on_ok, on_close = recorder(), recorder()
    dlg = SelectIDDialog(connection=CONNECTION, store=store, on_ok=on_ok, on_close=on_close)
    dlg.handle_select(['javascript.0.lamp'], False, 'Lamp')
    assert dlg.header_lbl.text() == "Selected: Lamp [javascript.0.lamp]"
    dlg.ok_btn.click()
    dlg.reject()
    assert on_ok.calls == [('javascript.0.lamp', 'Lamp')]
    assert on_close.calls == [()]


def test_select_id_double_click_confirms(qapp, store, recorder):
    on_ok = recorder()
    dlg = SelectIDDialog(connection=CONNECTION, store=store, on_ok=on_ok)
    dlg.handle_select(['javascript.0.lamp'], True, 'Lamp')
    assert on_ok.calls == [('javascript.0.lamp', 'Lamp')]


def test_select_id_filter_persistence_key(qapp, store):
    dlg = SelectIDDialog(connection=CONNECTION, store=store)
    dlg.handle_filter_changed({"role": "level"})
    assert json.loads(store.get("SelectID.default")) == {"role": "level"}


def test_select_id_filter_func(qapp, store):
    objects = [{"_id": "a", "common": {"type": "boolean"}}, {"_id": "b", "common": {"type": "number"}}]

    dlg = SelectIDDialog(connection=CONNECTION, store=store,
                         filter_func="obj['common']['type'] == 'boolean'")
    assert dlg.filter_predicate is None

    dlg = SelectIDDialog(connection=CONNECTION, store=store,
                         filter_func="obj['common']['type'] == 'boolean'", allow_legacy_filter_source=True)
    assert [o["_id"] for o in dlg.visible_objects(objects)] == ["a"]


def test_picker_driven_by_browser_signals(qapp, store, recorder):
    on_ok = recorder()
    browser = ListBrowser([("/data/a.txt", "a.txt", False), ("/data/sub", "sub", True)])
    dlg = SelectFileDialog(dialog_name="browse", connection=CONNECTION, store=store, browser=browser, on_ok=on_ok)

    browser.filter_changed.emit({"name": "a"})
    assert json.loads(store.get("SelectFile.browse")) == {"name": "a"}

    browser.selected.emit(['/data/sub'], True, True)
    assert on_ok.calls == []
    browser.selected.emit(['/data/a.txt'], True, False)
    assert on_ok.calls == [('/data/a.txt',)]


def test_picker_restores_stored_filters_in_browser(qapp, store):
    store.set("SelectFile.browse", json.dumps({"name": "sub"}))
    browser = ListBrowser([("/data/a.txt", "a.txt", False), ("/data/sub", "sub", True)])
    dialog = SelectFileDialog(dialog_name="browse", connection=CONNECTION, store=store, browser=browser)

    assert browser.filter_edit.text() == "sub"
    assert [entry[0] for entry in browser.visible_entries()] == ["/data/sub"]
    assert browser.list_widget.count() == 1
    # restoring is not a user edit
    assert json.loads(store.get("SelectFile.browse")) == {"name": "sub"}


def test_select_id_filter_func_limits_browser(qapp, store):
    objects = [{"_id": "a", "common": {"name": "Switch", "type": "boolean"}},
               {"_id": "b", "common": {"name": "Level", "type": "number"}}]
    browser = ListBrowser([(o["_id"], o["common"]["name"], False, o) for o in objects], object_mode=True)
    dialog = SelectIDDialog(connection=CONNECTION, store=store, browser=browser,
                            filter_func=lambda obj: obj["common"]["type"] == "number")

    assert [entry[0] for entry in browser.visible_entries()] == ["b"]
    assert browser.list_widget.count() == 1
