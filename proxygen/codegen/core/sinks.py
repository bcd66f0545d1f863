"""
Output sinks for generated artifacts.

A sink is opened once per generated interface as a scoped context. Leaving
the context normally commits the artifact; leaving it with an exception
discards whatever was written, so an incomplete artifact never becomes
visible under its final name.
"""

import io
import os
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager, suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, TextIO, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


def _file_mode() -> int:
    """Permission bits a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@dataclass
class PendingArtifact:
    """An artifact being written but not yet committed."""

    qualified_name: str
    stream: TextIO
    target: Optional[Path] = None
    temp_path: Optional[Path] = None


class OutputSink(ABC):
    """Destination for generated source text."""

    @contextmanager
    def open(self, qualified_name: str, extension: str = "") -> Iterator[TextIO]:
        """
        Open the sink for one artifact.

        Args:
            qualified_name: Fully qualified name of the generated type
            extension: File extension of the target language (e.g. '.java')

        Yields:
            Text stream to write the artifact to

        Raises:
            OSError: If the destination cannot be acquired, written or committed
        """
        pending = self._acquire(qualified_name, extension)
        try:
            yield pending.stream
        except BaseException:
            self._discard(pending)
            raise
        else:
            self._commit(pending)

    @abstractmethod
    def _acquire(self, qualified_name: str, extension: str) -> PendingArtifact:
        pass

    @abstractmethod
    def _commit(self, pending: PendingArtifact) -> None:
        pass

    @abstractmethod
    def _discard(self, pending: PendingArtifact) -> None:
        pass

    def describe(self, qualified_name: str, extension: str = "") -> str:
        """Human readable destination for messages."""
        return qualified_name


class MemorySink(OutputSink):
    """Keeps committed artifacts in memory, keyed by qualified name."""

    def __init__(self):
        self.artifacts: Dict[str, str] = {}
        self._last: Optional[str] = None

    @property
    def value(self) -> Optional[str]:
        """Text of the most recently committed artifact."""
        if self._last is None:
            return None
        return self.artifacts[self._last]

    def _acquire(self, qualified_name: str, extension: str) -> PendingArtifact:
        return PendingArtifact(qualified_name, io.StringIO())

    def _commit(self, pending: PendingArtifact) -> None:
        self.artifacts[pending.qualified_name] = pending.stream.getvalue()
        self._last = pending.qualified_name
        pending.stream.close()

    def _discard(self, pending: PendingArtifact) -> None:
        pending.stream.close()


class FileSink(OutputSink):
    """
    Writes the artifact to a single file path.

    Text goes to a temporary file next to the target and is renamed over
    the target on commit. On failure the temporary file is removed and the
    target keeps its previous state (or stays absent).
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self.written: List[Path] = []

    def target_path(self, qualified_name: str, extension: str) -> Path:
        return self.path

    def describe(self, qualified_name: str, extension: str = "") -> str:
        return str(self.target_path(qualified_name, extension))

    def _acquire(self, qualified_name: str, extension: str) -> PendingArtifact:
        target = self.target_path(qualified_name, extension)
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(
            dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp"
        )
        try:
            # mkstemp creates 0600; committed files follow the umask instead
            os.chmod(temp_name, _file_mode())
            stream = os.fdopen(fd, "w", encoding=self.encoding, newline="")
        except BaseException:
            with suppress(OSError):
                os.close(fd)
            os.unlink(temp_name)
            raise
        logger.debug("Opened %s for %s", temp_name, qualified_name)
        return PendingArtifact(qualified_name, stream, target, Path(temp_name))

    def _commit(self, pending: PendingArtifact) -> None:
        try:
            pending.stream.flush()
            pending.stream.close()
            os.replace(pending.temp_path, pending.target)
        except OSError:
            self._discard(pending)
            raise
        self.written.append(pending.target)
        logger.debug("Committed %s", pending.target)

    def _discard(self, pending: PendingArtifact) -> None:
        try:
            if not pending.stream.closed:
                pending.stream.close()
        except OSError as e:
            # close() flushes again and repeats a failed write
            logger.debug("Closing partial output for %s failed: %s", pending.qualified_name, e)

        try:
            pending.temp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove temporary file %s: %s", pending.temp_path, e)
        logger.debug("Discarded partial output for %s", pending.qualified_name)


class DirectorySink(FileSink):
    """
    Writes each artifact under a source root, one file per type.

    ``io.realm.PersonRealmProxyInterface`` with extension ``.java`` lands at
    ``<root>/io/realm/PersonRealmProxyInterface.java``.
    """

    def __init__(self, root: Union[str, Path], encoding: str = "utf-8"):
        super().__init__(root, encoding)

    @property
    def root(self) -> Path:
        return self.path

    def target_path(self, qualified_name: str, extension: str) -> Path:
        parts = qualified_name.split(".")
        return self.path.joinpath(*parts[:-1], f"{parts[-1]}{extension}")

    def _acquire(self, qualified_name: str, extension: str) -> PendingArtifact:
        target = self.target_path(qualified_name, extension)
        if not target.resolve().is_relative_to(self.path.resolve()):
            raise PermissionError(f"{target} is outside the output root {self.path}")
        return super()._acquire(qualified_name, extension)
