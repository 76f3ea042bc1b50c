"""オブジェクトストア抽象基底クラス

すべてのバックエンドが実装すべきインターフェースを定義。
各操作はキーを検証してから1回だけI/Oを行い、結果をReturnCodeで返す。
操作中の例外は呼び出し元に送出しない。
"""

from abc import ABC, abstractmethod
from typing import Union

from ..keys import is_valid_key
from ..results import BinaryResult, ReturnCode, TextResult

BytesLike = Union[bytes, bytearray, memoryview]


class ObjectStore(ABC):
    """キー/値形式のBlobストアの抽象基底クラス"""

    is_valid_key = staticmethod(is_valid_key)

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """バックエンド識別子（'local', 's3'）"""
        pass

    @classmethod
    @abstractmethod
    def from_config(cls, config) -> 'ObjectStore':
        """バックエンド固有設定からインスタンスを作成"""
        pass

    @abstractmethod
    async def get_text_file(self, key: str) -> TextResult:
        """
        テキストファイルを読み込む

        Args:
            key: オブジェクトキー

        Returns:
            TextResult: UTF-8でデコードした内容
                INVALID_KEY / FILE_NOT_FOUND / UNKNOWN_ERROR の場合は空文字
        """
        pass

    @abstractmethod
    async def set_text_file(self, key: str, value: str) -> ReturnCode:
        """
        テキストファイルを保存する（既存の内容は上書き）

        Args:
            key: オブジェクトキー
            value: 保存する文字列（UTF-8でエンコード）

        Returns:
            ReturnCode: SUCCESS / INVALID_KEY / UNKNOWN_ERROR
        """
        pass

    @abstractmethod
    async def get_binary_file(self, key: str) -> BinaryResult:
        """
        バイナリファイルを読み込む

        Returns:
            BinaryResult: 失敗時は空のバイト列
        """
        pass

    @abstractmethod
    async def set_binary_file(self, key: str, value: BytesLike) -> ReturnCode:
        """
        バイナリファイルを保存する（既存の内容は上書き）

        Returns:
            ReturnCode: SUCCESS / INVALID_KEY / UNKNOWN_ERROR
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> ReturnCode:
        """
        オブジェクトを削除する

        存在しないキーの削除は何もせずSUCCESSを返す。

        Returns:
            ReturnCode: SUCCESS / INVALID_KEY / UNKNOWN_ERROR
        """
        pass
