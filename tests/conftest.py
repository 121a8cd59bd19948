"""Shared fixtures: a real libzstd engine and an in-process fake binding."""

import ctypes

import numpy as np
import pytest

from safe_zstd import CompressionEngine, LoadError

ERROR_BASE = (1 << 64) - 120     # fake error range, mirrors how libzstd encodes -code


@pytest.fixture(scope="session")
def engine():
    """Engine over the system libzstd; skips native tests when it is absent."""
    try:
        return CompressionEngine()
    except LoadError as exc:
        pytest.skip(f"libzstd not available: {exc}")


@pytest.fixture(scope="session")
def zeros():
    return bytes(16384)


@pytest.fixture(scope="session")
def random_bytes():
    rng = np.random.default_rng(20240611)
    return rng.integers(0, 256, size=16384, dtype=np.uint8).tobytes()


class FakeBinding:
    """Stand-in for LibraryBinding that records calls instead of crossing FFI."""

    def __init__(self, min_level=-7, max_level=22, default_level=3,
                 version=10506, message=b"Destination buffer is too small"):
        self.name = "libfake.so"
        self.levels = (min_level, max_level, default_level)
        self.version = version
        self.calls = []
        self._message = ctypes.create_string_buffer(message)

    def call_min_c_level(self):
        return self.levels[0]

    def call_max_c_level(self):
        return self.levels[1]

    def call_default_c_level(self):
        return self.levels[2]

    def call_version_number(self):
        self.calls.append(("version_number",))
        return self.version

    def call_is_error(self, code):
        return code >= ERROR_BASE

    def call_get_error_name(self, code):
        return ctypes.addressof(self._message)

    def call_compress_bound(self, size):
        return size + 64

    def call_compress(self, dst, dst_capacity, src, src_size, level):
        self.calls.append(("compress", dst_capacity, src_size, level))
        return min(src_size, dst_capacity)

    def call_decompress(self, dst, dst_capacity, src, src_size):
        self.calls.append(("decompress", dst_capacity, src_size))
        return ERROR_BASE if dst_capacity == 0 else dst_capacity

    def call_frame_content_size(self, src, src_size):
        self.calls.append(("frame_content_size", src_size))
        return src_size


@pytest.fixture
def fake_binding():
    return FakeBinding()
