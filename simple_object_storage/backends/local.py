"""ローカルファイルシステムストレージバックエンド

ルートディレクトリ配下にキーをそのまま結合したパスへ保存する。
中間ディレクトリは作成しない（存在しないディレクトリへの書き込みはUNKNOWN_ERROR）。
"""

import asyncio
import enum
import errno
import logging
import os
import stat
from pathlib import Path
from typing import Optional, Tuple, Union

from ..config import LocalConfig
from ..exceptions import StorageRootNotFoundError
from ..keys import is_valid_key
from ..registry import BackendRegistry
from ..results import BinaryResult, ReturnCode, TextResult
from .base import BytesLike, ObjectStore

logger = logging.getLogger(__name__)


class _Existence(enum.Enum):
    """パスの存在確認結果（内部用）"""
    ABSENT = "absent"
    PRESENT = "present"
    PROBE_FAILED = "probe_failed"


@BackendRegistry.register("local")
class LocalFileObjectStore(ObjectStore):
    """ローカルファイルシステムストレージバックエンド"""

    def __init__(self, root_path: Union[str, Path]):
        """
        ローカルバックエンドを初期化

        Args:
            root_path: ルートディレクトリ（事前に存在している必要がある）

        Raises:
            StorageRootNotFoundError: ルートディレクトリが存在しない場合
        """
        self._root_path = Path(root_path)
        if not self._root_path.is_dir():
            raise StorageRootNotFoundError(f"Folder {self._root_path} does not exist.")
        logger.info(f"LocalFileObjectStore initialized: path={self._root_path}")

    @classmethod
    def from_config(cls, config: Optional[LocalConfig] = None) -> 'LocalFileObjectStore':
        if config is None:
            config = LocalConfig.from_env()
        return cls(config.root_path)

    @property
    def backend_name(self) -> str:
        return "local"

    @property
    def root_path(self) -> Path:
        return self._root_path

    def _get_full_path(self, key: str) -> Path:
        """キーをフルパスに変換"""
        return self._root_path / key

    def _probe(self, path: Path) -> _Existence:
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return _Existence.ABSENT
        except OSError as e:
            # ファイル名長の上限を超えるパスは作成できないため存在しない
            if e.errno == errno.ENAMETOOLONG:
                return _Existence.ABSENT
            logger.error(f"Local probe failed: {path} - {e}")
            return _Existence.PROBE_FAILED
        # ディレクトリ等はBlobとして扱わない
        if stat.S_ISREG(st.st_mode):
            return _Existence.PRESENT
        return _Existence.ABSENT

    # --- 同期処理（ワーカースレッドで実行） ---

    def _read(self, key: str) -> Tuple[ReturnCode, bytes]:
        full_path = self._get_full_path(key)
        existence = self._probe(full_path)
        if existence is _Existence.ABSENT:
            logger.debug(f"Local file not found: {key}")
            return ReturnCode.FILE_NOT_FOUND, b""
        if existence is _Existence.PROBE_FAILED:
            return ReturnCode.UNKNOWN_ERROR, b""

        try:
            with open(full_path, 'rb') as f:
                return ReturnCode.SUCCESS, f.read()
        except OSError as e:
            logger.error(f"Local load failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR, b""

    def _write(self, key: str, content: bytes) -> ReturnCode:
        full_path = self._get_full_path(key)
        try:
            with open(full_path, 'wb') as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Local save failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR
        logger.debug(f"Local save success: {key}")
        return ReturnCode.SUCCESS

    def _remove(self, key: str) -> ReturnCode:
        full_path = self._get_full_path(key)
        existence = self._probe(full_path)
        if existence is _Existence.ABSENT:
            logger.debug(f"Local delete skipped, not found: {key}")
            return ReturnCode.SUCCESS
        if existence is _Existence.PROBE_FAILED:
            return ReturnCode.UNKNOWN_ERROR

        try:
            full_path.unlink()
        except FileNotFoundError:
            # 確認後に他の呼び出しで削除された
            return ReturnCode.SUCCESS
        except OSError as e:
            logger.error(f"Local delete failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR
        logger.debug(f"Local delete success: {key}")
        return ReturnCode.SUCCESS

    # --- ObjectStore実装 ---

    async def get_text_file(self, key: str) -> TextResult:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return TextResult.invalid_key()

        return_code, content = await asyncio.to_thread(self._read, key)
        if return_code != ReturnCode.SUCCESS:
            return TextResult.from_return_code(return_code)
        return TextResult.from_bytes(content)

    async def set_text_file(self, key: str, value: str) -> ReturnCode:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return ReturnCode.INVALID_KEY
        if not isinstance(value, str):
            logger.error(f"Local save failed: {key} - value is not str")
            return ReturnCode.UNKNOWN_ERROR

        return await asyncio.to_thread(self._write, key, value.encode('utf-8'))

    async def get_binary_file(self, key: str) -> BinaryResult:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return BinaryResult.invalid_key()

        return_code, content = await asyncio.to_thread(self._read, key)
        if return_code != ReturnCode.SUCCESS:
            return BinaryResult.from_return_code(return_code)
        return BinaryResult.from_bytes(content)

    async def set_binary_file(self, key: str, value: BytesLike) -> ReturnCode:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return ReturnCode.INVALID_KEY
        if not isinstance(value, (bytes, bytearray, memoryview)):
            logger.error(f"Local save failed: {key} - value is not bytes-like")
            return ReturnCode.UNKNOWN_ERROR

        return await asyncio.to_thread(self._write, key, bytes(value))

    async def delete(self, key: str) -> ReturnCode:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return ReturnCode.INVALID_KEY

        return await asyncio.to_thread(self._remove, key)
