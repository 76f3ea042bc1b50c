"""結果型のテスト"""

import pytest

from simple_object_storage import BinaryResult, ReturnCode, TextResult


class TestReturnCode:

    def test_values(self):
        """正常系: 数値は固定"""
        assert ReturnCode.SUCCESS == 0
        assert ReturnCode.INVALID_KEY == 1
        assert ReturnCode.FILE_NOT_FOUND == 2
        assert ReturnCode.FILE_ALREADY_EXISTS == 3
        assert ReturnCode.UNKNOWN_ERROR == 4
        assert len(ReturnCode) == 5


class TestTextResult:

    def test_success(self):
        result = TextResult.success("Hello World")
        assert result.return_code == ReturnCode.SUCCESS
        assert result.value == "Hello World"
        assert result.is_success is True

    def test_empty_success_is_valid(self):
        """正常系: 空のBlobも成功として扱う"""
        result = TextResult.success("")
        assert result.is_success is True
        assert result.value == ""

    @pytest.mark.parametrize('factory, code', [
        (TextResult.invalid_key, ReturnCode.INVALID_KEY),
        (TextResult.file_not_found, ReturnCode.FILE_NOT_FOUND),
        (TextResult.unknown_error, ReturnCode.UNKNOWN_ERROR),
    ])
    def test_failure_factories(self, factory, code):
        result = factory()
        assert result.return_code == code
        assert result.value == ""
        assert result.is_success is False

    def test_from_return_code(self):
        result = TextResult.from_return_code(ReturnCode.FILE_ALREADY_EXISTS)
        assert result == TextResult(ReturnCode.FILE_ALREADY_EXISTS, "")

    def test_failure_with_value_rejected(self):
        """異常系: 失敗結果にペイロードは持たせられない"""
        with pytest.raises(ValueError):
            TextResult(ReturnCode.FILE_NOT_FOUND, "stale")

    def test_from_bytes_decodes_utf8(self):
        result = TextResult.from_bytes("こんにちは".encode('utf-8'))
        assert result == TextResult.success("こんにちは")

    def test_from_bytes_keeps_bom(self):
        """正常系: 先頭のBOMは内容の一部として保持"""
        result = TextResult.from_bytes(b'\xef\xbb\xbfabc')
        assert result.value == '\ufeffabc'

    def test_from_bytes_invalid_utf8(self):
        """異常系: デコード失敗はUNKNOWN_ERROR"""
        result = TextResult.from_bytes(b'\xff\xfe\xfa')
        assert result.return_code == ReturnCode.UNKNOWN_ERROR
        assert result.value == ""

    def test_immutable(self):
        result = TextResult.success("x")
        with pytest.raises(AttributeError):
            result.value = "y"


class TestBinaryResult:

    def test_success_copies_bytes_like(self):
        result = BinaryResult.success(bytearray(b'\x00\x01'))
        assert result.value == b'\x00\x01'
        assert isinstance(result.value, bytes)

    @pytest.mark.parametrize('factory, code', [
        (BinaryResult.invalid_key, ReturnCode.INVALID_KEY),
        (BinaryResult.file_not_found, ReturnCode.FILE_NOT_FOUND),
        (BinaryResult.unknown_error, ReturnCode.UNKNOWN_ERROR),
    ])
    def test_failure_factories(self, factory, code):
        result = factory()
        assert result.return_code == code
        assert result.value == b""
        assert result.is_success is False

    def test_failure_with_value_rejected(self):
        with pytest.raises(ValueError):
            BinaryResult(ReturnCode.UNKNOWN_ERROR, b'partial')

    def test_from_bytes_keeps_raw_bytes(self):
        data = bytes(range(256))
        assert BinaryResult.from_bytes(data) == BinaryResult(ReturnCode.SUCCESS, data)
