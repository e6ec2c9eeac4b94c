import os
import logging
import threading


class FileHandler:
    """Resolves the project, config and log directories and the global settings database."""
    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(FileHandler, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True

        # DIALOGKIT_HOME overrides the project root (config/ and logs/ live below it)
        self.project_root = os.environ.get("DIALOGKIT_HOME") or \
            os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        self.log_dir = os.path.join(self.project_root, "logs")
        self.config_dir = os.path.join(self.project_root, "config")
        self.db_path = os.path.join(self.config_dir, "global.db")

        self._setup_logging()

    def _setup_logging(self):
        # main_setup がすでにロガーを設定している場合はそのまま使う
        if logging.getLogger().hasHandlers():
            self.logger = logging.getLogger("Core")
            return

        os.makedirs(self.log_dir, exist_ok=True)
        log_file = os.path.join(self.log_dir, "app.log")

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            handlers=[
                logging.FileHandler(log_file, encoding='utf-8'),
                logging.StreamHandler()
            ]
        )
        self.logger = logging.getLogger("Core")
        self.logger.info("FileHandler initialized. (Fallback logging used)")

    def ensure_config_dir(self) -> str:
        os.makedirs(self.config_dir, exist_ok=True)
        return self.config_dir

    @classmethod
    def reset(cls):
        """Drops the singleton so the next call re-reads the environment."""
        with cls._lock:
            cls._instance = None
