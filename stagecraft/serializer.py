"""A growable byte buffer with sequential writes and reads."""

import struct
from typing import Union

from .errors import EngineError

_INT = struct.Struct("<i")


class Serializer:
    """Byte buffer written and read at separate offsets."""

    def __init__(self) -> None:
        self._data = bytearray()
        self.write_offset = 0
        self.read_offset = 0

    @property
    def data(self) -> bytes:
        """The whole buffer, including any unused space past the last write."""
        return bytes(self._data)

    @data.setter
    def data(self, value: bytes) -> None:
        self._data = bytearray(value)

    def buffer_resize(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"buffer size must not be negative: {size}")
        current = len(self._data)
        if size < current:
            del self._data[size:]
        else:
            self._data.extend(bytes(size - current))

    def write(self, data: bytes) -> None:
        size = len(data)
        end = self.write_offset + size
        if end >= len(self._data):
            self.buffer_resize(max(len(self._data) * 2 + size, end))
        self._data[self.write_offset:end] = data
        self.write_offset = end

    def write_int(self, value: int) -> None:
        try:
            packed = _INT.pack(value)
        except struct.error as exc:
            raise ValueError(f"value does not fit in a 32-bit int: {value!r}") from exc
        self.write(packed)

    def write_bool(self, value: bool) -> None:
        self.write(b"\x01" if value else b"\x00")

    def write_string(self, value: Union[str, bytes]) -> None:
        encoded = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        self.write_int(len(encoded))
        self.write(encoded)

    def read(self, size: int) -> bytes:
        end = self.read_offset + size
        if size < 0 or end > len(self._data):
            raise EngineError(
                f"cannot read {size} bytes at offset {self.read_offset} from a buffer of {len(self._data)}"
            )
        chunk = bytes(self._data[self.read_offset:end])
        self.read_offset = end
        return chunk

    def read_int(self) -> int:
        return _INT.unpack(self.read(_INT.size))[0]

    def read_string(self) -> str:
        size = self.read_int()
        if size == 0:
            return ""
        if size < 0:
            raise EngineError(f"negative string length in buffer: {size}")
        return self.read(size).decode("utf-8")