"""操作結果の型定義

すべてのバックエンドはこのリターンコードと結果ラッパーで結果を返す。
失敗時のペイロードは常に空値（"" / b""）になる。
"""

import enum
from dataclasses import dataclass


class ReturnCode(enum.IntEnum):
    """オブジェクトストア操作のリターンコード"""
    SUCCESS = 0
    INVALID_KEY = 1
    FILE_NOT_FOUND = 2
    FILE_ALREADY_EXISTS = 3
    UNKNOWN_ERROR = 4


@dataclass(frozen=True)
class TextResult:
    """テキスト取得結果（リターンコード + 文字列）"""
    return_code: ReturnCode
    value: str = ""

    def __post_init__(self):
        if self.return_code != ReturnCode.SUCCESS and self.value:
            raise ValueError(f"{self.return_code.name} result must not carry a value")

    @property
    def is_success(self) -> bool:
        return self.return_code == ReturnCode.SUCCESS

    @classmethod
    def success(cls, value: str) -> 'TextResult':
        return cls(ReturnCode.SUCCESS, value)

    @classmethod
    def from_return_code(cls, return_code: ReturnCode) -> 'TextResult':
        return cls(return_code, "")

    @classmethod
    def invalid_key(cls) -> 'TextResult':
        return cls.from_return_code(ReturnCode.INVALID_KEY)

    @classmethod
    def file_not_found(cls) -> 'TextResult':
        return cls.from_return_code(ReturnCode.FILE_NOT_FOUND)

    @classmethod
    def unknown_error(cls) -> 'TextResult':
        return cls.from_return_code(ReturnCode.UNKNOWN_ERROR)

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str = 'utf-8') -> 'TextResult':
        """
        バックエンドから読み込んだバイト列をデコードして結果を作る

        先頭のBOMは除去せず、内容の一部としてそのまま返す。

        Args:
            data: 読み込んだ内容
            encoding: 文字コード（デフォルト: UTF-8）

        Returns:
            TextResult: デコード失敗時はUNKNOWN_ERROR
        """
        try:
            return cls.success(data.decode(encoding))
        except UnicodeDecodeError:
            return cls.unknown_error()


@dataclass(frozen=True)
class BinaryResult:
    """バイナリ取得結果（リターンコード + バイト列）"""
    return_code: ReturnCode
    value: bytes = b""

    def __post_init__(self):
        if self.return_code != ReturnCode.SUCCESS and self.value:
            raise ValueError(f"{self.return_code.name} result must not carry a value")

    @property
    def is_success(self) -> bool:
        return self.return_code == ReturnCode.SUCCESS

    @classmethod
    def success(cls, value: bytes) -> 'BinaryResult':
        return cls(ReturnCode.SUCCESS, bytes(value))

    @classmethod
    def from_return_code(cls, return_code: ReturnCode) -> 'BinaryResult':
        return cls(return_code, b"")

    @classmethod
    def invalid_key(cls) -> 'BinaryResult':
        return cls.from_return_code(ReturnCode.INVALID_KEY)

    @classmethod
    def file_not_found(cls) -> 'BinaryResult':
        return cls.from_return_code(ReturnCode.FILE_NOT_FOUND)

    @classmethod
    def unknown_error(cls) -> 'BinaryResult':
        return cls.from_return_code(ReturnCode.UNKNOWN_ERROR)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'BinaryResult':
        return cls.success(data)
