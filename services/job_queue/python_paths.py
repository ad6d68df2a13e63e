import sys
import threading
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from core.logging import get_logger

logger = get_logger(__name__, component="job_queue")


class PythonPathRegistry:
    """Directories added to the interpreter import search path.

    Registration is additive and idempotent: each directory is appended to the
    search path at most once per process and never removed.
    """

    def __init__(self, search_path: Optional[List[str]] = None):
        self._search_path = sys.path if search_path is None else search_path
        self._registered: set[str] = set()
        self._lock = threading.Lock()

    def register(self, directory: Union[str, Path]) -> bool:
        """Add ``directory`` to the search path. Returns False if it was already registered."""
        path = str(Path(directory).resolve())
        with self._lock:
            if path in self._registered:
                return False
            self._registered.add(path)
            if path not in self._search_path:
                self._search_path.append(path)
        logger.debug("Added python path", path=path)
        return True

    @property
    def registered(self) -> FrozenSet[str]:
        return frozenset(self._registered)


# Process-wide registry over sys.path
python_paths = PythonPathRegistry()
