"""S3互換ストレージバックエンド

DigitalOcean Spaces（デフォルト）およびS3互換ストレージに対応。
キーはそのままバケット内のオブジェクト名として使用する。
バケットの存在確認は行わない（存在しない場合は最初の操作でUNKNOWN_ERROR）。
"""

import asyncio
import logging
from typing import Optional, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..config import S3Config
from ..exceptions import StorageConfigError
from ..keys import is_valid_key
from ..registry import BackendRegistry
from ..results import BinaryResult, ReturnCode, TextResult
from .base import BytesLike, ObjectStore

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({'NoSuchKey', 'NotFound', '404'})


def _is_not_found(error: ClientError) -> bool:
    error_code = error.response.get('Error', {}).get('Code', '')
    return error_code in _NOT_FOUND_CODES


@BackendRegistry.register("s3")
class S3ObjectStore(ObjectStore):
    """S3互換ストレージバックエンド"""

    def __init__(
        self,
        access_key: Optional[str],
        secret_key: Optional[str],
        bucket_name: str,
        region: str,
        endpoint_url: Optional[str] = None
    ):
        """
        S3バックエンドを初期化

        Args:
            access_key: アクセスキー
            secret_key: シークレットキー
            bucket_name: バケット（Space）名
            region: リージョン（例: 'nyc3'）
            endpoint_url: エンドポイントURL。Noneの場合はリージョンから導出
        """
        settings = S3Config(
            bucket_name=bucket_name,
            region=region,
            access_key_id=access_key,
            secret_access_key=secret_key,
            endpoint_url=endpoint_url
        )

        self._client = boto3.client(
            's3',
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
            region_name=settings.region,
            endpoint_url=settings.resolved_endpoint_url,
            config=Config(s3={'addressing_style': 'path'})
        )
        self._bucket_name = bucket_name
        logger.info(
            f"S3ObjectStore initialized: bucket={self._bucket_name}, "
            f"endpoint={settings.resolved_endpoint_url}"
        )

    @classmethod
    def from_config(cls, config: Optional[S3Config] = None) -> 'S3ObjectStore':
        if config is None:
            config = S3Config.from_env()
        if not config.bucket_name:
            raise StorageConfigError("S3 bucket name is not configured")
        return cls(
            access_key=config.access_key_id,
            secret_key=config.secret_access_key,
            bucket_name=config.bucket_name,
            region=config.region,
            endpoint_url=config.endpoint_url
        )

    @property
    def backend_name(self) -> str:
        return "s3"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    # --- 同期処理（ワーカースレッドで実行） ---

    def _load(self, key: str) -> Tuple[ReturnCode, bytes]:
        try:
            response = self._client.get_object(Bucket=self._bucket_name, Key=key)
            return ReturnCode.SUCCESS, response['Body'].read()
        except ClientError as e:
            if _is_not_found(e):
                logger.debug(f"S3 object not found: {key}")
                return ReturnCode.FILE_NOT_FOUND, b""
            logger.error(f"S3 load failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR, b""
        except Exception as e:
            logger.error(f"S3 load failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR, b""

    def _save(self, key: str, content: bytes, content_type: str) -> ReturnCode:
        try:
            self._client.put_object(
                Bucket=self._bucket_name,
                Key=key,
                Body=content,
                ContentType=content_type
            )
        except Exception as e:
            logger.error(f"S3 upload failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR
        logger.debug(f"S3 upload success: {key}")
        return ReturnCode.SUCCESS

    def _delete(self, key: str) -> ReturnCode:
        try:
            self._client.delete_object(Bucket=self._bucket_name, Key=key)
        except ClientError as e:
            if _is_not_found(e):
                logger.debug(f"S3 delete skipped, not found: {key}")
                return ReturnCode.SUCCESS
            logger.error(f"S3 delete failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR
        except Exception as e:
            logger.error(f"S3 delete failed: {key} - {e}")
            return ReturnCode.UNKNOWN_ERROR
        logger.debug(f"S3 delete success: {key}")
        return ReturnCode.SUCCESS

    # --- ObjectStore実装 ---

    async def get_text_file(self, key: str) -> TextResult:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return TextResult.invalid_key()

        return_code, content = await asyncio.to_thread(self._load, key)
        if return_code != ReturnCode.SUCCESS:
            return TextResult.from_return_code(return_code)
        return TextResult.from_bytes(content)

    async def set_text_file(self, key: str, value: str) -> ReturnCode:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return ReturnCode.INVALID_KEY
        if not isinstance(value, str):
            logger.error(f"S3 upload failed: {key} - value is not str")
            return ReturnCode.UNKNOWN_ERROR

        return await asyncio.to_thread(
            self._save, key, value.encode('utf-8'), 'text/plain; charset=utf-8'
        )

    async def get_binary_file(self, key: str) -> BinaryResult:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return BinaryResult.invalid_key()

        return_code, content = await asyncio.to_thread(self._load, key)
        if return_code != ReturnCode.SUCCESS:
            return BinaryResult.from_return_code(return_code)
        return BinaryResult.from_bytes(content)

    async def set_binary_file(self, key: str, value: BytesLike) -> ReturnCode:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return ReturnCode.INVALID_KEY
        if not isinstance(value, (bytes, bytearray, memoryview)):
            logger.error(f"S3 upload failed: {key} - value is not bytes-like")
            return ReturnCode.UNKNOWN_ERROR

        return await asyncio.to_thread(
            self._save, key, bytes(value), 'application/octet-stream'
        )

    async def delete(self, key: str) -> ReturnCode:
        if not is_valid_key(key):
            logger.warning(f"Rejected invalid key: {key!r}")
            return ReturnCode.INVALID_KEY

        return await asyncio.to_thread(self._delete, key)
