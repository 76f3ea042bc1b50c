"""Simple Object Storage - キー/値形式のBlobストア

ローカルファイルシステムとS3互換ストレージを同一のインターフェースで扱う。
すべての操作はキーを検証し、例外ではなくReturnCodeで結果を返す。
"""

from .keys import is_valid_key
from .results import ReturnCode, TextResult, BinaryResult
from .exceptions import (
    ObjectStoreError,
    StorageRootNotFoundError,
    StorageConfigError,
    BackendNotRegisteredError
)
from .config import StorageConfig, S3Config, LocalConfig
from .registry import BackendRegistry
from .backends import ObjectStore, LocalFileObjectStore, S3ObjectStore
from .service import create_object_store

__all__ = [
    'is_valid_key',
    'ReturnCode',
    'TextResult',
    'BinaryResult',
    'ObjectStoreError',
    'StorageRootNotFoundError',
    'StorageConfigError',
    'BackendNotRegisteredError',
    'StorageConfig',
    'S3Config',
    'LocalConfig',
    'BackendRegistry',
    'ObjectStore',
    'LocalFileObjectStore',
    'S3ObjectStore',
    'create_object_store'
]

__version__ = '1.0.0'
