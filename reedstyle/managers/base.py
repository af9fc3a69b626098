"""Shared behaviour of the reedstyle build managers."""

import logging
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, NoReturn, Optional

from ..utils.error import ReedStyleError

class BaseManager(ABC):
    """Base class for the optimizer and palette managers.

    Subclasses set ``manager_name`` (the key used by ``ManagerFactory`` and
    the suffix of the ``reedstyle.<name>`` logger) and ``error_class`` (what
    :meth:`handle_error` raises).
    """

    manager_name = 'manager'
    error_class = ReedStyleError

    def __init__(self):
        self.logger = logging.getLogger(f"reedstyle.{self.manager_name}")

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Return counters describing the work done so far."""

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    @contextmanager
    def timed(self, stats: Dict[str, Any], key: str = 'elapsed') -> Iterator[None]:
        """Add the wall time of the block to ``stats[key]``."""
        start = time.perf_counter()
        try:
            yield
        finally:
            stats[key] = stats.get(key, 0.0) + time.perf_counter() - start

    def handle_error(self, error: Exception, message: str) -> NoReturn:
        """Log ``error``, release resources and re-raise it as ``error_class``.

        Args:
            error: The underlying exception, kept as ``__cause__``
            message: What the manager was doing

        Raises:
            ReedStyleError: Always, as an instance of ``error_class``
        """
        self.log_error(message, error)
        self.cleanup()
        raise self.error_class(f"{message}: {error}") from error

    def cleanup(self) -> None:
        """Release resources; the build managers hold none by default."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()

# Exported class
__all__ = ['BaseManager']
