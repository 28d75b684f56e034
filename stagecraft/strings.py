"""String helpers used for case-insensitive names."""

import locale
import string
from typing import Union

from .errors import EngineError

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text: str) -> str:
    """Uppercase ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_UPPER)


def ansi_to_unicode(data: Union[bytes, str]) -> str:
    """Decode text in the system's preferred encoding; empty input is an error."""
    if isinstance(data, str):
        text = data
    else:
        try:
            text = bytes(data).decode(locale.getpreferredencoding(False))
        except UnicodeDecodeError as exc:
            raise EngineError("string conversion failed") from exc
    if not text:
        raise EngineError("string conversion failed or the string was empty")
    return text