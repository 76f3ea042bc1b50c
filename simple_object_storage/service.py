"""ObjectStoreファクトリ

設定（環境変数OBJECT_STORE_MODE）に応じてバックエンドを切り替える:
- 'local': ローカルファイルシステム（デフォルト）
- 's3': S3互換ストレージ（DigitalOcean Spaces等）
"""

import logging
from typing import Optional

from .backends.base import ObjectStore
from .config import StorageConfig
from .registry import BackendRegistry

logger = logging.getLogger(__name__)


def create_object_store(config: Optional[StorageConfig] = None) -> ObjectStore:
    """
    設定に対応するObjectStoreを作成する

    呼び出しごとに独立したインスタンスを返す。

    Args:
        config: ストレージ設定。Noneの場合は環境変数から読み込み

    Returns:
        ObjectStore: バックエンドインスタンス

    Raises:
        BackendNotRegisteredError: 未登録のモードが指定された場合
        StorageConfigError: バックエンド設定が不足している場合（S3のバケット名未設定等）
        StorageRootNotFoundError: ローカルのルートディレクトリが存在しない場合
    """
    config = config or StorageConfig.from_env()
    backend_config = config.get_backend_config()
    store = BackendRegistry.build(config.mode, backend_config)
    logger.info(f"ObjectStore created: mode={store.backend_name}")
    return store
