"""Logger."""

from .constants import colors


class Logger:
    """
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    NONE = 5

    A message is emitted when its level is at least the configured one.
    """
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    NONE = 5

    def __init__(self, level: int, func: callable):
        self.level = level
        self.func = func
        self.do_color = func is print

    def debug(self, status: str) -> None:
        """Debug."""
        self._emit(self.DEBUG, status)

    def info(self, status: str, color: str = 'reset') -> None:
        """Info."""
        self._emit(self.INFO, status, color)

    def warning(self, status: str, color: str = 'yellow') -> None:
        """Warning."""
        self._emit(self.WARNING, status, color)

    def error(self, status: str, color: str = 'red') -> None:
        """Error."""
        self._emit(self.ERROR, status, color)

    def _emit(self, level: int, status: str, color: str = None) -> None:
        if level < self.level:
            return
        if self.do_color and color:
            status = f"{colors[color]}{status}{colors['reset']}"
        self.func(status)
