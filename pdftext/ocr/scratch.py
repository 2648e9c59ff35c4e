import uuid
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from pdftext.logging.logger import Log


def ensure_scratch_dir(directory: Path) -> Path:
    """Create the scratch directory if it does not exist yet.

    Called once at startup, before any request is served.
    """
    directory.mkdir(parents=True, exist_ok=True)
    Log.info("Scratch directory ready", path=directory)
    return directory


@dataclass
class ScratchArtifacts:
    """Scratch files owned by a single pipeline invocation.

    Every name is prefixed with ``request_id`` so concurrent invocations
    sharing one directory never touch each other's files.
    """

    directory: Path
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    paths: list[Path] = field(default_factory=list)

    def path(self, suffix: str) -> Path:
        """Reserve ``<directory>/<request_id><suffix>`` for removal on exit."""
        return self.track(self.directory / f"{self.request_id}{suffix}")

    def track(self, path: Path) -> Path:
        if path not in self.paths:
            self.paths.append(path)
        return path

    def cleanup(self) -> None:
        """Remove every tracked file. Failures are logged, never raised."""
        for path in self.paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                Log.warning("Could not remove scratch file", path=path, error=exc)


@contextmanager
def scratch_artifacts(directory: Path) -> Generator[ScratchArtifacts, None, None]:
    """Yield a fresh artifact set and delete its files on every exit path."""
    artifacts = ScratchArtifacts(directory=directory)
    try:
        yield artifacts
    finally:
        artifacts.cleanup()
