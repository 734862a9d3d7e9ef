from pathlib import Path
from enum import Enum
import traceback
import logging
import sys
from art import text2art


class LogLevel(Enum):
    """Derivation of levels from the logging module"""
    INFO = 20
    WARNING = 30
    ERROR = 40

class Logger:
    """
    Run logger for selector builds: writes to stdout and a log file, each
    record prefixed with the name of the file that made the call.
    """
    FORMAT = "[%(_filename)s %(asctime)s] %(levelname)s: %(message)s"

    def __init__(self, path: str, verbose: bool = False):
        self.path = path
        self.verbose = verbose
        self._logger = logging.getLogger(__name__)
        self._logger.setLevel(logging.INFO)
        for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(path)):
            handler.setFormatter(logging.Formatter(self.FORMAT))
            self._logger.addHandler(handler)
        self._emit(text2art("Selectors"), LogLevel.INFO, "log.py")
        if verbose:
            self._emit(f"Logging to {path}", LogLevel.INFO, "log.py")

    @classmethod
    def from_config(cls, config: dict) -> 'Logger':
        """
        Pick the production or development log file from `config.json`
        """
        key = 'production' if config['production'] else 'development'
        return cls(config['log_paths'][key], config.get('verbose', False))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self._emit(f"Script crashed with a {exc_type.__name__!r}: view traceback below", LogLevel.ERROR, "log.py")
            self._emit(''.join(traceback.format_exception(exc_type, exc, tb)), LogLevel.ERROR, "log.py")
        else:
            self._emit("Script ran to completion: exiting\n", LogLevel.INFO, "log.py")
        for handler in self._logger.handlers:
            handler.close()
        self._logger.handlers.clear()
        return False

    def log(self, msg: str, level=LogLevel.INFO):
        """External interface to call the logger with the caller filename"""
        self._emit(msg, level, self._caller())

    def log_error(self, subject: str, error: Exception, level=LogLevel.ERROR):
        """
        Record a selector that failed to build or match and carry on.
        The traceback is only written in verbose mode.
        """
        self._emit(f"Skipping {subject}: {type(error).__name__}: {error}", level, self._caller())
        if self.verbose:
            trace = ''.join(traceback.format_exception(type(error), error, error.__traceback__))
            self._emit(trace, level, self._caller())

    @staticmethod
    def _caller() -> str:
        # [-1] is this frame, [-2] the Logger method, [-3] its caller
        return Path(traceback.extract_stack()[-3].filename).name

    def _emit(self, msg: str, level: LogLevel, filename: str):
        self._logger.log(level.value, msg, extra={"_filename": filename})
