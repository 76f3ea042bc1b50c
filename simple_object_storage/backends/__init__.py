"""ストレージバックエンド

インポート時に各バックエンドがBackendRegistryへ登録される。
"""

from .base import ObjectStore
from .local import LocalFileObjectStore
from .s3 import S3ObjectStore

__all__ = [
    'ObjectStore',
    'LocalFileObjectStore',
    'S3ObjectStore'
]
