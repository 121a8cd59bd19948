# ==================================================
# safe_zstd/engine.py
# ==================================================
"""
Single-pass compression on top of :class:`LibraryBinding`.

Two flavours of every operation are offered.  ``compress``, ``decompress``
and ``get_frame_content_size`` return the native result untouched, so the
caller must classify it with :meth:`CompressionEngine.is_error` or compare
against the ``CONTENTSIZE_*`` sentinels.  ``compress_into``,
``decompress_into``, ``frame_content_size`` and the ``*_bytes`` helpers
classify at the boundary and raise :class:`CodecError` /
:class:`SizeQueryError` instead.

Destination buffers are never resized: size them with
:meth:`CompressionEngine.compress_bound` before compressing.
"""
from __future__ import annotations

from typing import Optional

from .binding import LibraryBinding, borrow
from .const import CONTENTSIZE_ERROR, CONTENTSIZE_UNKNOWN, DST_TOO_SMALL_NAME
from .errors import (CodecError, ContentSizeError, ContentSizeUnknownError,
                     LoadError)
from .translator import ErrorTranslator
from .version import VersionInfo

DEFAULT_MAX_OUTPUT = 1 << 30     # ceiling for frames without a content size


class CompressionEngine:
    """Bounds-checked compress/decompress over a loaded libzstd."""

    def __init__(self, library_name: Optional[str] = None,
                 binding: Optional[LibraryBinding] = None):
        self._binding = binding if binding is not None else LibraryBinding.load(library_name)
        self._translator = ErrorTranslator(self._binding)

        min_level     = self._binding.call_min_c_level()
        max_level     = self._binding.call_max_c_level()
        default_level = self._binding.call_default_c_level()
        if not min_level <= default_level <= max_level:
            raise LoadError(
                f"{self._binding.name} reports inconsistent levels "
                f"(min={min_level}, default={default_level}, max={max_level})")
        self._min_level     = min_level
        self._max_level     = max_level
        self._default_level = default_level

    # ------------------------------------------------------------------
    @property
    def binding(self) -> LibraryBinding:
        return self._binding

    @property
    def translator(self) -> ErrorTranslator:
        return self._translator

    def min_comp_level(self) -> int:
        return self._min_level

    def max_comp_level(self) -> int:
        return self._max_level

    def default_comp_level(self) -> int:
        return self._default_level

    def version(self) -> VersionInfo:
        return VersionInfo.from_number(self._binding.call_version_number())

    def clamp_level(self, level: Optional[int]) -> int:
        if level is None:
            return self._default_level
        return max(self._min_level, min(self._max_level, int(level)))

    def is_error(self, status: int) -> bool:
        return self._translator.is_error(status)

    def error_name(self, status: int) -> str:
        return self._translator.error_name(status)

    # -------- raw results ------------------------------------------------
    def compress_bound(self, input_len: int) -> int:
        """Worst-case compressed size for ``input_len`` bytes (or an error code)."""
        if input_len < 0:
            raise ValueError("input length must be non-negative")
        return self._binding.call_compress_bound(input_len)

    def compress(self, dst, src, level: Optional[int] = None) -> int:
        """
        Compress all of ``src`` into ``dst``.

        ``level`` is silently clamped into ``[min_comp_level, max_comp_level]``.
        Returns bytes written or an error status; an undersized ``dst`` is
        reported by the library, not checked here.
        """
        out = borrow(dst, writable=True)
        inp = borrow(src)
        return self._binding.call_compress(out.ptr, out.size, inp.ptr, inp.size,
                                           self.clamp_level(level))

    def decompress(self, dst, src, src_len: Optional[int] = None) -> int:
        """
        Decompress the first ``src_len`` bytes of ``src`` into ``dst``.

        ``src_len`` must be the exact frame length; it defaults to ``len(src)``
        and may not exceed it.
        """
        out = borrow(dst, writable=True)
        inp = borrow(src)
        if src_len is None:
            src_len = inp.size
        if not 0 <= src_len <= inp.size:
            raise ValueError(f"src_len {src_len} outside source buffer of {inp.size} bytes")
        return self._binding.call_decompress(out.ptr, out.size, inp.ptr, src_len)

    def get_frame_content_size(self, src) -> int:
        """Content size from the frame header, or ``CONTENTSIZE_UNKNOWN`` / ``CONTENTSIZE_ERROR``."""
        inp = borrow(src)
        return self._binding.call_frame_content_size(inp.ptr, inp.size)

    # -------- classified results ------------------------------------------
    def compress_into(self, dst, src, level: Optional[int] = None) -> int:
        return self._translator.check(self.compress(dst, src, level))

    def decompress_into(self, dst, src, src_len: Optional[int] = None) -> int:
        return self._translator.check(self.decompress(dst, src, src_len))

    def frame_content_size(self, src) -> int:
        size = self.get_frame_content_size(src)
        if size == CONTENTSIZE_UNKNOWN:
            raise ContentSizeUnknownError(size)
        if size == CONTENTSIZE_ERROR:
            raise ContentSizeError(size)
        return size

    def compress_bytes(self, data, level: Optional[int] = None) -> bytes:
        bound = self._translator.check(self.compress_bound(memoryview(data).nbytes))
        dst = bytearray(bound)
        written = self.compress_into(dst, data, level)
        return bytes(dst[:written])

    def decompress_bytes(self, data, max_output_size: int = DEFAULT_MAX_OUTPUT) -> bytes:
        """
        Decompress one whole frame.

        Frames without a recorded content size are retried with a doubling
        destination while libzstd reports it too small, up to
        ``max_output_size``.
        """
        try:
            size = self.frame_content_size(data)
        except ContentSizeUnknownError:
            size = None
        if size is not None:
            if size > max_output_size:
                raise ValueError(f"frame content size {size} exceeds {max_output_size}")
            dst = bytearray(size)
            written = self.decompress_into(dst, data)
            return bytes(dst[:written])

        capacity = max(memoryview(data).nbytes * 4, 1)
        while True:
            capacity = min(capacity, max_output_size)
            dst = bytearray(capacity)
            status = self.decompress(dst, data)
            if not self.is_error(status):
                return bytes(dst[:status])
            name = self.error_name(status)
            if capacity >= max_output_size or name != DST_TOO_SMALL_NAME:
                raise CodecError(status, name)
            capacity *= 2

    def __repr__(self):
        return (f"CompressionEngine({self._binding.name!r}, levels="
                f"[{self._min_level}, {self._max_level}], default={self._default_level})")
