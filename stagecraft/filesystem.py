"""Filesystem paths, directory listing and whole-file load/save."""

import os
from enum import Enum
from pathlib import Path
from typing import IO, List, Optional, Sequence, Union

from .errors import EngineError
from .serializer import Serializer
from .strings import to_upper

PathLike = Union[str, "os.PathLike[str]", "EnginePath"]


class EnginePath:
    """A filesystem path that can be moved around and inspected."""

    def __init__(self, path: Optional[PathLike] = None) -> None:
        if path is None:
            self.path = Path.cwd()
        elif isinstance(path, EnginePath):
            self.path = path.path
        else:
            self.path = Path(path)

    def __fspath__(self) -> str:
        return self.full_path()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_path()!r})"

    def is_file(self) -> bool:
        """True for anything that is not a directory."""
        return not self.path.is_dir()

    def is_directory(self) -> bool:
        return self.path.is_dir()

    def exists(self) -> bool:
        return self.path.exists()

    def file_name(self) -> str:
        return self.path.name

    def extension(self) -> str:
        return self.path.suffix

    def is_root(self) -> bool:
        return Path(self.path.anchor) == self.path

    def move_parent(self) -> None:
        self.path = self.path.parent

    def move(self, path: str) -> None:
        """Descend into a sub-path; it must exist."""
        next_path = self.path / path
        if not next_path.exists():
            raise EngineError(f"path does not exist: {next_path}")
        self.path = next_path

    def append_path(self, path: str) -> str:
        return f"{self.full_path()}{os.sep}{path}"

    def full_path(self) -> str:
        return str(self.path)


class EngineDirectory(EnginePath):
    """A directory path with listing and searching helpers."""

    def move_to_search_child(self, name: str) -> None:
        """Walk up from here until a directory holds a child named `name`
        (case-insensitive), then move into it."""
        self.path = self.path.resolve()
        wanted = to_upper(name)
        while True:
            for directory in self.all_directory():
                if to_upper(directory.file_name()) == wanted:
                    self.move(directory.file_name())
                    return
            if self.is_root() or self.path.parent == self.path:
                raise EngineError(f"no directory named {name!r} up to the root")
            self.move_parent()

    def all_file(
        self, extensions: Optional[Sequence[str]] = None, recursive: bool = False
    ) -> List["EngineFile"]:
        """Files in this directory, filtered by extension regardless of case."""
        wanted = {to_upper(ext) for ext in extensions or ()}
        result: List[EngineFile] = []
        self._collect_files(self.path, result, wanted, recursive)
        return result

    def _collect_files(
        self, directory: Path, result: List["EngineFile"], wanted: set, recursive: bool
    ) -> None:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                if recursive:
                    self._collect_files(entry, result, wanted, recursive)
                continue
            if not wanted or to_upper(entry.suffix) in wanted:
                result.append(EngineFile(entry))

    def all_directory(self, recursive: bool = False) -> List["EngineDirectory"]:
        result: List[EngineDirectory] = []
        self._collect_directories(self.path, result, recursive)
        return result

    def _collect_directories(
        self, directory: Path, result: List["EngineDirectory"], recursive: bool
    ) -> None:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if not entry.is_dir():
                continue
            result.append(EngineDirectory(entry))
            if recursive:
                self._collect_directories(entry, result, recursive)

    def new_file(self, file_name: str) -> "EngineFile":
        return EngineFile(self.append_path(file_name))


class OpenMode(Enum):
    NONE = "none"
    WRITE = "w"
    READ = "r"


class DataType(Enum):
    BINARY = "b"
    TEXT = "t"


class EngineFile(EnginePath):
    """A file that loads into or saves from a Serializer in one go."""

    def __init__(self, path: Optional[PathLike] = None) -> None:
        super().__init__(path)
        self.open_mode = OpenMode.NONE
        self.data_type = DataType.BINARY
        self._handle: Optional[IO] = None

    def __enter__(self) -> "EngineFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        handle = getattr(self, "_handle", None)
        if handle is not None:
            handle.close()

    def open(self, open_mode: OpenMode, data_type: DataType) -> None:
        self.close()
        mode = open_mode.value + data_type.value
        try:
            if data_type is DataType.TEXT:
                self._handle = open(self.path, mode, encoding="latin-1")
            else:
                self._handle = open(self.path, mode)
        except OSError as exc:
            raise EngineError(f"failed to open file: {self.full_path()}") from exc
        self.open_mode = open_mode
        self.data_type = data_type

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def save(self, serializer: Serializer) -> None:
        """Write the whole serializer buffer to the file."""
        if self.open_mode is not OpenMode.WRITE or self._handle is None:
            raise EngineError("tried to write to a file not opened for writing")
        data = serializer.data
        if self.data_type is DataType.TEXT:
            self._handle.write(data.decode("latin-1"))
        else:
            self._handle.write(data)
        self._handle.flush()

    def load(self, serializer: Serializer) -> None:
        """Replace the serializer buffer with the file's contents."""
        if self.open_mode is not OpenMode.READ or self._handle is None:
            raise EngineError("tried to read from a file not opened for reading")
        size = self.file_size()
        content = self._handle.read(size)
        if isinstance(content, str):
            content = content.encode("latin-1")
        serializer.buffer_resize(size)
        serializer.data = content + bytes(max(0, size - len(content)))

    def file_size(self) -> int:
        return os.path.getsize(self.path)