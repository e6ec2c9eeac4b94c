# NOTE: setup_error_handling must be called BEFORE other dialogkit imports
# so rich traceback handling is initialized globally.
from dialogkit.main_setup import setup_error_handling, print_fatal

import os
import sys
import argparse
import logging

from PyQt6.QtWidgets import QApplication

from dialogkit.core.settings_store import SqliteSettingsStore
from dialogkit.core.version import VERSION_STRING

DIALOGS = ("confirm", "message", "error", "text", "cron", "complex-cron", "simple-cron",
           "select-file", "file-select", "select-id")


class DemoConnection:
    """Stands in for the backend: lists the working directory and a few objects."""

    def __init__(self, root: str = "."):
        self.root = os.path.abspath(root)

    def list_files(self):
        entries = []
        for name in sorted(os.listdir(self.root)):
            path = os.path.join(self.root, name)
            entries.append((path, name, os.path.isdir(path)))
        return entries

    def list_objects(self):
        objects = [
            {"_id": "system.adapter.admin.0.alive", "common": {"name": "Admin alive", "type": "boolean"}},
            {"_id": "javascript.0.lamp", "common": {"name": "Lamp", "type": "boolean"}},
            {"_id": "javascript.0.temperature", "common": {"name": "Temperature", "type": "number"}},
        ]
        return [(obj["_id"], obj["common"]["name"], False, obj) for obj in objects]


def build_dialog(args, store):
    from dialogkit.ui.dialogs import (
        ConfirmDialog, MessageDialog, ErrorDialog, TextInputDialog,
        CronDialog, ComplexCronDialog, SimpleCronDialog,
        SelectFileDialog, FileSelectDialog, SelectIDDialog
    )
    from dialogkit.ui.list_browser import ListBrowser

    def on_ok(*values):
        logging.info(f"on_ok{values}")

    def on_close(*values):
        logging.info(f"on_close{values}")

    name = args.name
    if args.dialog == "confirm":
        return ConfirmDialog(text="Do you really want to continue?", suppress_question_minutes=args.minutes,
                             dialog_name=name, store=store, on_close=on_close)
    if args.dialog == "message":
        return MessageDialog(text="Operation finished.", icon=MessageDialog.Icon.Information, on_close=on_close)
    if args.dialog == "error":
        return ErrorDialog(text="Something went wrong.", on_close=on_close)
    if args.dialog == "text":
        return TextInputDialog(title="Rename", prompt_text="New name:", input_text=args.value or "",
                               verify=lambda text: not text.startswith(" "), rule=str.lower, on_close=on_close)
    if args.dialog == "cron":
        return CronDialog(cron=args.value, simple=args.simple, complex=args.complex,
                          no_wizard=args.no_wizard, on_ok=on_ok, on_close=on_close)
    if args.dialog == "complex-cron":
        return ComplexCronDialog(cron=args.value, clear_button=True, on_ok=on_ok, on_close=on_close)
    if args.dialog == "simple-cron":
        return SimpleCronDialog(cron=args.value, on_ok=on_ok, on_close=on_close)

    connection = DemoConnection()
    if args.dialog == "select-id":
        browser = ListBrowser(connection.list_objects(), multi_select=args.multi, object_mode=True)
        filter_func = None
        if args.type:
            filter_func = lambda obj: obj["common"].get("type") == args.type
        return SelectIDDialog(dialog_name=name, connection=connection, store=store, selected=args.value,
                              multi_select=args.multi, browser=browser, filter_func=filter_func,
                              on_ok=on_ok, on_close=on_close)

    dialog_class = SelectFileDialog if args.dialog == "select-file" else FileSelectDialog
    browser = ListBrowser(connection.list_files(), multi_select=args.multi)
    return dialog_class(dialog_name=name, connection=connection, store=store, selected=args.value,
                        multi_select=args.multi, select_only_folders=args.folders,
                        browser=browser, on_ok=on_ok, on_close=on_close)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="dialogkit", description=f"{VERSION_STRING} dialog demo")
    parser.add_argument("dialog", choices=DIALOGS)
    parser.add_argument("--name", default=None, help="dialog name used for stored settings")
    parser.add_argument("--value", default=None, help="initial value (cron, text or selection)")
    parser.add_argument("--minutes", type=float, default=None, help="confirm: suppression minutes")
    parser.add_argument("--simple", action="store_true")
    parser.add_argument("--complex", action="store_true")
    parser.add_argument("--no-wizard", action="store_true")
    parser.add_argument("--multi", action="store_true", help="pickers: multi select")
    parser.add_argument("--folders", action="store_true", help="file pickers: select only folders")
    parser.add_argument("--type", default=None, help="select-id: only list objects of this common.type")
    parser.add_argument("--db", default=None, help="settings database (default: config/global.db)")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_error_handling(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        app = QApplication(sys.argv)
        store = SqliteSettingsStore(args.db)
        dialog = build_dialog(args, store)
        logging.info(f"Launched {dialog.__class__.__name__}.")
        result = dialog.exec()
        logging.info(f"Dialog finished with result {result}")
        return 0
    except Exception:
        logging.error("Fatal error in dialog demo", exc_info=True)
        print_fatal()
        return 1


if __name__ == "__main__":
    sys.exit(main())
