"""Unit tests for status classification and error-name copying."""

import ctypes

import pytest

from safe_zstd import CodecError, ErrorTranslator

from .conftest import ERROR_BASE, FakeBinding


class TestErrorTranslatorFake:
    """Translator behaviour against a fake native table."""

    def test_success_status_has_fixed_name(self, fake_binding):
        translator = ErrorTranslator(fake_binding)
        assert translator.is_error(17) is False
        assert translator.error_name(17) == "No error detected"

    def test_large_success_is_not_an_error(self, fake_binding):
        translator = ErrorTranslator(fake_binding)
        assert translator.is_error(ERROR_BASE - 1) is False

    def test_error_name_is_copied(self, fake_binding):
        translator = ErrorTranslator(fake_binding)
        assert translator.error_name(ERROR_BASE) == "Destination buffer is too small"

    def test_error_name_is_bounded(self):
        binding = FakeBinding(message=b"e" * 4096)
        name = ErrorTranslator(binding).error_name(ERROR_BASE)
        assert name == "e" * 1024

    def test_null_message_is_empty(self, fake_binding):
        fake_binding.call_get_error_name = lambda code: None
        assert ErrorTranslator(fake_binding).error_name(ERROR_BASE) == ""

    def test_copy_survives_native_reuse(self, fake_binding):
        translator = ErrorTranslator(fake_binding)
        name = translator.error_name(ERROR_BASE)
        ctypes.memset(fake_binding._message, ord("?"), 8)
        assert name == "Destination buffer is too small"

    def test_check_passes_counts_through(self, fake_binding):
        assert ErrorTranslator(fake_binding).check(42) == 42

    def test_check_raises_codec_error(self, fake_binding):
        with pytest.raises(CodecError) as info:
            ErrorTranslator(fake_binding).check(ERROR_BASE + 3)
        assert info.value.code == ERROR_BASE + 3
        assert info.value.description == "Destination buffer is too small"


class TestErrorTranslatorNative:
    def test_zero_is_not_an_error(self, engine):
        assert engine.translator.is_error(0) is False
        assert engine.translator.error_name(0) == "No error detected"

    def test_error_code_from_failed_call(self, engine, zeros):
        status = engine.compress(bytearray(1), zeros)
        assert engine.is_error(status)
        assert engine.error_name(status) == "Destination buffer is too small"
