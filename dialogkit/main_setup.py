import sys
import os
import logging
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from dialogkit.core.file_handler import FileHandler
from dialogkit.core.version import VERSION_STRING


def setup_error_handling(log_root: str = None, level: int = logging.INFO):
    """リッチなエラー表示 ＋ ログ保存の設定"""
    # ハンドラを強制リセットして、自分たちの設定が反映されるようにする
    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    log_root = log_root or FileHandler().log_dir
    log_dir = os.path.join(log_root, "log")
    error_dir = os.path.join(log_root, "error")
    os.makedirs(log_dir, exist_ok=True)
    os.makedirs(error_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_file = os.path.join(log_dir, f"session_{timestamp}.log")
    error_file = os.path.join(error_dir, f"error_{timestamp}.log")

    install(show_locals=True, width=120)

    root.setLevel(level)
    formatter = logging.Formatter('%(asctime)s | %(levelname)s | [%(name)s] %(message)s')

    # セッションログ
    sh = logging.FileHandler(session_file, encoding='utf-8')
    sh.setFormatter(formatter)
    sh.setLevel(level)
    root.addHandler(sh)

    # エラーログ
    eh = logging.FileHandler(error_file, encoding='utf-8')
    eh.setFormatter(formatter)
    eh.setLevel(logging.ERROR)
    root.addHandler(eh)

    # コンソール出力
    ch = RichHandler(rich_tracebacks=True, markup=True)
    ch.setFormatter(logging.Formatter('%(message)s'))
    ch.setLevel(level)
    root.addHandler(ch)

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception
    logging.info(f"--- {VERSION_STRING} Session Started ---")
    return session_file


def print_fatal():
    """Detailed traceback of the exception being handled."""
    Console().print_exception(show_locals=True)
