# ==================================================
# safe_zstd/binding.py
# ==================================================
"""
Runtime binding to the zstd shared library.

This is the only module that touches :mod:`ctypes`.  ``LibraryBinding.load``
opens the library with immediate symbol resolution, resolves every entry
point listed in :data:`const.SYMBOLS` and fails as a whole if any of them is
missing.  The ``call_*`` wrappers hand back the raw native result; deciding
whether a ``size_t`` is a byte count or an error code is left to
:class:`safe_zstd.translator.ErrorTranslator`.
"""
from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
from types import MappingProxyType
from typing import Any, NamedTuple, Optional

from .const import ENV_LIBRARY, LIBRARY_NAMES, SYMBOLS
from .errors import LibraryNotFoundError, MissingSymbolError

logger = logging.getLogger(__name__)

# RTLD_NOW only exists on POSIX; Windows ignores the mode.
_LOAD_MODE = getattr(os, "RTLD_NOW", 0) | getattr(os, "RTLD_LOCAL", 0) or ctypes.DEFAULT_MODE


# -------- borrowed buffers ------------------------------------------------

class Borrowed(NamedTuple):
    """Pointer-like argument plus its length in bytes, valid for one call."""
    ptr: Any
    size: int


def borrow(buf, writable: bool = False) -> Borrowed:
    """
    Build a (pointer, length) view over any C-contiguous buffer.

    Writable views alias the caller's memory.  Read-only views alias
    ``bytes`` directly and copy anything else, as ctypes cannot take the
    address of a read-only export.
    """
    view = memoryview(buf)
    if not view.c_contiguous:
        raise TypeError("buffer must be C-contiguous")
    size = view.nbytes
    if writable and view.readonly:
        raise TypeError("destination buffer must be writable")
    if size == 0:
        return Borrowed(None, 0)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    if writable:
        return Borrowed((ctypes.c_char * size).from_buffer(view), size)
    if isinstance(buf, bytes):
        return Borrowed(buf, size)
    if not view.readonly:
        return Borrowed((ctypes.c_char * size).from_buffer(view), size)
    return Borrowed((ctypes.c_char * size).from_buffer_copy(view), size)


def read_c_string(address: Optional[int], limit: int) -> bytes:
    """Copy at most ``limit`` bytes from ``address``, stopping at the first NUL."""
    if not address:
        return b""
    p = ctypes.cast(address, ctypes.POINTER(ctypes.c_ubyte))
    out = bytearray()
    for i in range(limit):
        b = p[i]
        if b == 0:
            break
        out.append(b)
    return bytes(out)


# -------- library handle ----------------------------------------------------

def _candidates(library_name: Optional[str]) -> tuple[str, ...]:
    if library_name:
        return (library_name,)
    override = os.getenv(ENV_LIBRARY)
    if override:
        return (override,)
    names = list(LIBRARY_NAMES)
    found = ctypes.util.find_library("zstd")
    if found and found not in names:
        names.append(found)
    return tuple(names)


class LibraryBinding:
    """Loaded libzstd plus an immutable table of typed entry points."""

    def __init__(self, name: str, handle: ctypes.CDLL, functions):
        self.name = name
        self._handle = handle
        self._fn = MappingProxyType(dict(functions))

    @classmethod
    def load(cls, library_name: Optional[str] = None) -> "LibraryBinding":
        names = _candidates(library_name)
        handle = None
        last_error = ""
        for name in names:
            try:
                handle = ctypes.CDLL(name, mode=_LOAD_MODE)
            except OSError as exc:
                logger.debug(f"Could not open {name}: {exc}")
                last_error = str(exc)
                continue
            break
        if handle is None:
            raise LibraryNotFoundError(names, last_error)

        functions = {}
        for attr, (symbol, restype, argtypes) in SYMBOLS.items():
            try:
                fn = getattr(handle, symbol)
            except AttributeError:
                raise MissingSymbolError(symbol, name) from None
            fn.restype = restype
            fn.argtypes = argtypes
            functions[attr] = fn

        binding = cls(name, handle, functions)
        logger.debug(f"Loaded {name} (version number {binding.call_version_number()})")
        return binding

    # ------------------------------------------------------------------
    @property
    def symbols(self):
        return self._fn

    # ------------------------------------------------------------------
    def call_version_number(self) -> int:
        return self._fn["version_number"]()

    def call_compress_bound(self, src_size: int) -> int:
        return self._fn["compress_bound"](src_size)

    def call_is_error(self, code: int) -> bool:
        return bool(self._fn["is_error"](code))

    def call_get_error_name(self, code: int) -> Optional[int]:
        return self._fn["get_error_name"](code)

    def call_min_c_level(self) -> int:
        return self._fn["min_c_level"]()

    def call_max_c_level(self) -> int:
        return self._fn["max_c_level"]()

    def call_default_c_level(self) -> int:
        return self._fn["default_c_level"]()

    def call_compress(self, dst, dst_capacity: int, src, src_size: int, level: int) -> int:
        return self._fn["compress"](dst, dst_capacity, src, src_size, level)

    def call_decompress(self, dst, dst_capacity: int, src, src_size: int) -> int:
        return self._fn["decompress"](dst, dst_capacity, src, src_size)

    def call_frame_content_size(self, src, src_size: int) -> int:
        return self._fn["frame_content_size"](src, src_size)

    def __repr__(self):
        return f"LibraryBinding({self.name!r})"
