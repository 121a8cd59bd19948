# ==================================================
# safe_zstd/errors.py
# ==================================================
from __future__ import annotations


class SafeZstdError(Exception):
    """Base class for everything raised by this package."""


# -------- loading ---------------------------------------------------------

class LoadError(SafeZstdError, OSError):
    """The native library could not be bound; no engine exists."""


class LibraryNotFoundError(LoadError):
    def __init__(self, names: tuple[str, ...], reason: str = ""):
        self.names = names
        msg = "Unable to load zstd shared library (tried: " + ", ".join(names) + ")"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingSymbolError(LoadError):
    def __init__(self, symbol: str, library: str):
        self.symbol = symbol
        self.library = library
        super().__init__(f"{library} does not export {symbol}")


# -------- native results ----------------------------------------------------

class CodecError(SafeZstdError):
    """A native call returned a status for which ``ZSTD_isError`` holds."""
    def __init__(self, code: int, description: str):
        self.code = code
        self.description = description
        super().__init__(f"zstd error {code:#x}: {description}")


class SizeQueryError(SafeZstdError):
    """``ZSTD_getFrameContentSize`` answered with one of its two sentinels."""
    def __init__(self, value: int, message: str):
        self.value = value
        super().__init__(message)


class ContentSizeUnknownError(SizeQueryError):
    def __init__(self, value: int):
        super().__init__(value, "Frame header does not record the content size")


class ContentSizeError(SizeQueryError):
    def __init__(self, value: int):
        super().__init__(value, "Invalid frame: cannot read the content size")
