from .binding import LibraryBinding
from .const import CONTENTSIZE_ERROR, CONTENTSIZE_UNKNOWN
from .engine import CompressionEngine
from .errors import (CodecError, ContentSizeError, ContentSizeUnknownError,
                     LibraryNotFoundError, LoadError, MissingSymbolError,
                     SafeZstdError, SizeQueryError)
from .translator import ErrorTranslator
from .version import VersionInfo

__all__ = [
    "CompressionEngine", "LibraryBinding", "ErrorTranslator", "VersionInfo",
    "CONTENTSIZE_UNKNOWN", "CONTENTSIZE_ERROR",
    "SafeZstdError", "LoadError", "LibraryNotFoundError", "MissingSymbolError",
    "CodecError", "SizeQueryError", "ContentSizeUnknownError", "ContentSizeError",
]
