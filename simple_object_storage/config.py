"""ストレージ設定クラス

環境変数からの設定読み込みを一元管理。
"""

from dataclasses import dataclass, field
from typing import Optional
import os

SPACES_ENDPOINT_TEMPLATE = "https://{region}.digitaloceanspaces.com"


@dataclass(frozen=True)
class S3Config:
    """S3互換ストレージ（DigitalOcean Spaces等）固有設定"""
    bucket_name: Optional[str] = None
    region: str = "nyc3"
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    endpoint_url: Optional[str] = None

    @property
    def resolved_endpoint_url(self) -> str:
        """エンドポイントURL（未指定の場合はリージョンから導出）"""
        if self.endpoint_url:
            return self.endpoint_url
        return SPACES_ENDPOINT_TEMPLATE.format(region=self.region)

    @classmethod
    def from_env(cls) -> 'S3Config':
        """環境変数から設定を読み込み"""
        return cls(
            bucket_name=os.getenv('OBJECT_STORE_S3_BUCKET'),
            region=os.getenv('OBJECT_STORE_S3_REGION', 'nyc3'),
            access_key_id=os.getenv('OBJECT_STORE_S3_ACCESS_KEY'),
            secret_access_key=os.getenv('OBJECT_STORE_S3_SECRET_KEY'),
            endpoint_url=os.getenv('OBJECT_STORE_S3_ENDPOINT_URL') or None
        )


@dataclass(frozen=True)
class LocalConfig:
    """ローカルストレージ固有設定"""
    root_path: str = "./data"

    @classmethod
    def from_env(cls) -> 'LocalConfig':
        """環境変数から設定を読み込み"""
        return cls(
            root_path=os.getenv('OBJECT_STORE_LOCAL_PATH', './data')
        )


@dataclass(frozen=True)
class StorageConfig:
    """統合ストレージ設定"""
    mode: str = "local"
    local: LocalConfig = field(default_factory=LocalConfig)
    s3: S3Config = field(default_factory=S3Config)

    @classmethod
    def from_env(cls) -> 'StorageConfig':
        """環境変数から設定を読み込み"""
        return cls(
            mode=os.getenv('OBJECT_STORE_MODE', 'local').lower(),
            local=LocalConfig.from_env(),
            s3=S3Config.from_env()
        )

    def get_backend_config(self):
        """
        現在のモードに対応するバックエンド設定を取得

        local/s3以外のモードはNoneを返す（登録済みバックエンドのfrom_configに委ねる）
        """
        mode = self.mode.lower()
        if mode == 's3':
            return self.s3
        elif mode == 'local':
            return self.local
        return None
