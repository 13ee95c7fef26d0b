"""
Temporary file trees for tests that need files on disk, e.g. for serving static files.

>>> with ProjectBuilder("static").file("index.html", "<h1>hi</h1>").build() as p:
...     serve(p.root)
"""
import logging
import os
import shutil
import tempfile
import uuid
import weakref
from pathlib import Path
from pathlib import PurePosixPath

logger = logging.getLogger(__name__)

TMPDIR_ENV = "NETMOCK_TMPDIR"


def projects_root() -> Path:
    """
    The directory all projects are created in.
    Can be changed with the NETMOCK_TMPDIR environment variable.
    """
    base = os.getenv(TMPDIR_ENV) or tempfile.gettempdir()
    return Path(base) / "netmock-integration-tests"


class ProjectBuilder:
    def __init__(self, name: str):
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise ValueError(f"Invalid project name: {name!r}")
        self.name = name
        self.root = projects_root() / uuid.uuid4().hex / name
        self.files: list[tuple[PurePosixPath, bytes]] = []
        # Remove the tree when the builder goes away, even without cleanup().
        self._finalizer = weakref.finalize(self, _remove_project, self.root.parent)

    def file(self, path: str | os.PathLike, body: str | bytes) -> "ProjectBuilder":
        """
        Add a file to the project. path is relative to the project root.
        """
        p = PurePosixPath(Path(path).as_posix())
        if p.is_absolute() or ".." in p.parts or not p.parts:
            raise ValueError(f"File path must be relative to the project root: {path}")
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.files.append((p, body))
        return self

    def build(self) -> "ProjectBuilder":
        """
        Create the project root and write all files, replacing any previous build.
        """
        logger.info(f"Building project {self.name!r} at {self.root}")
        _rmtree(self.root)
        self.root.mkdir(parents=True)
        for path, body in self.files:
            target = self.root.joinpath(*path.parts)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(body)
        return self

    def cleanup(self) -> None:
        """
        Remove the project tree. The builder can be built again afterwards.
        """
        _remove_project(self.root.parent)

    def __enter__(self) -> "ProjectBuilder":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()

    def __repr__(self):
        return f"<ProjectBuilder {self.name!r} at {self.root} ({len(self.files)} files)>"


def _rmtree(path: Path) -> None:
    if path.exists():
        logger.debug(f"Removing {path}")
        shutil.rmtree(path)


def _remove_project(path: Path) -> None:
    _rmtree(path)
    # The shared projects root goes with the last project in it.
    try:
        path.parent.rmdir()
    except OSError as e:
        logger.debug(f"Keeping {path.parent}: {e}")
