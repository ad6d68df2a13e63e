from pathlib import Path
from typing import Optional

from core.logging import get_logger
from core.utils.exceptions import ArtifactNotFoundError
from .packets import Language
from .python_paths import PythonPathRegistry, python_paths

logger = get_logger(__name__, component="job_queue")

# Compiled algorithms are expected to be copied into the working directory
DEFAULT_ALGORITHM_LOCATION = "QuantConnect.Algorithm.CSharp.dll"


class AlgorithmLocator:
    """Resolves where the execution engine should load the algorithm from."""

    def __init__(self, path_registry: Optional[PythonPathRegistry] = None):
        self._path_registry = path_registry or python_paths

    def resolve(self, language: Language, configured_location: str) -> str:
        """Return the algorithm location for ``language``.

        Python sources must exist on disk; their directory is registered on the
        import path so the algorithm's own imports resolve. Compiled artifacts
        are assumed present in the execution environment and are not checked.
        """
        location = configured_location or DEFAULT_ALGORITHM_LOCATION

        if language.is_interpreted:
            source = Path(location)
            if not source.is_file():
                raise ArtifactNotFoundError(
                    f"Unable to find py file: {location}",
                    path=location,
                )
            self._path_registry.register(source.resolve().parent)

        return location
