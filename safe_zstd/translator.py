# ==================================================
# safe_zstd/translator.py
# ==================================================
from __future__ import annotations

from .binding import LibraryBinding, read_c_string
from .const import ERROR_NAME_MAX, NO_ERROR_NAME
from .errors import CodecError


class ErrorTranslator:
    """Turns raw ``size_t`` statuses into counts or :class:`CodecError`."""

    def __init__(self, binding: LibraryBinding):
        self._binding = binding

    def is_error(self, status: int) -> bool:
        # Never compare magnitudes; only the library knows its error range.
        return self._binding.call_is_error(status)

    def error_name(self, status: int) -> str:
        """
        Bounded copy of the library's description for ``status``.

        The returned string is owned by the caller; the native pointer is
        read once and then forgotten.
        """
        if not self.is_error(status):
            return NO_ERROR_NAME
        raw = read_c_string(self._binding.call_get_error_name(status), ERROR_NAME_MAX)
        return raw.decode("utf-8", "replace")

    def check(self, status: int) -> int:
        if self.is_error(status):
            raise CodecError(status, self.error_name(status))
        return status
