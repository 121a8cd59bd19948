# ==================================================
# safe_zstd/const.py
# ==================================================
import ctypes
import sys

ENV_LIBRARY = "SAFE_ZSTD_LIBRARY"      # single name/path overriding the defaults

if sys.platform.startswith("win"):
    LIBRARY_NAMES = ("zstd.dll", "libzstd.dll")
elif sys.platform == "darwin":
    LIBRARY_NAMES = ("libzstd.1.dylib", "libzstd.dylib")
else:
    LIBRARY_NAMES = ("libzstd.so.1", "libzstd.so")

CONTENTSIZE_UNKNOWN = (1 << 64) - 1    # header carries no content size
CONTENTSIZE_ERROR   = (1 << 64) - 2    # bad magic / truncated header

ERROR_NAME_MAX   = 1024                # bytes copied out of the library's message
NO_ERROR_NAME    = "No error detected"
DST_TOO_SMALL_NAME = "Destination buffer is too small"

# attribute -> (native symbol, restype, argtypes)
SYMBOLS = {
    "version_number":     ("ZSTD_versionNumber", ctypes.c_uint, []),
    "compress_bound":     ("ZSTD_compressBound", ctypes.c_size_t, [ctypes.c_size_t]),
    "is_error":           ("ZSTD_isError", ctypes.c_uint, [ctypes.c_size_t]),
    "get_error_name":     ("ZSTD_getErrorName", ctypes.c_void_p, [ctypes.c_size_t]),
    "min_c_level":        ("ZSTD_minCLevel", ctypes.c_int, []),
    "max_c_level":        ("ZSTD_maxCLevel", ctypes.c_int, []),
    "default_c_level":    ("ZSTD_defaultCLevel", ctypes.c_int, []),
    "compress":           ("ZSTD_compress", ctypes.c_size_t,
                           [ctypes.c_void_p, ctypes.c_size_t,
                            ctypes.c_void_p, ctypes.c_size_t, ctypes.c_int]),
    "decompress":         ("ZSTD_decompress", ctypes.c_size_t,
                           [ctypes.c_void_p, ctypes.c_size_t,
                            ctypes.c_void_p, ctypes.c_size_t]),
    "frame_content_size": ("ZSTD_getFrameContentSize", ctypes.c_ulonglong,
                           [ctypes.c_void_p, ctypes.c_size_t]),
}
