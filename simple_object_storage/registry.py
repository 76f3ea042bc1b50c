"""バックエンドレジストリ

モード名（'local', 's3'）とObjectStore実装クラスの対応を管理。
各バックエンドモジュールはインポート時に自身を登録する。
"""

from typing import Dict, Type, TYPE_CHECKING

from .exceptions import BackendNotRegisteredError

if TYPE_CHECKING:
    from .backends.base import ObjectStore


class BackendRegistry:
    """ObjectStoreバックエンドのレジストリ"""

    _backends: Dict[str, Type['ObjectStore']] = {}

    @classmethod
    def register(cls, mode: str):
        """
        ObjectStore実装を登録するデコレータ

        使用例:
            @BackendRegistry.register("local")
            class LocalFileObjectStore(ObjectStore):
                ...
        """
        def decorator(store_class: Type['ObjectStore']):
            cls._backends[mode.lower()] = store_class
            return store_class
        return decorator

    @classmethod
    def get(cls, mode: str) -> Type['ObjectStore']:
        """
        モード名から実装クラスを取得

        Raises:
            BackendNotRegisteredError: 未登録のモードが指定された場合
        """
        store_class = cls._backends.get(mode.lower())
        if store_class is None:
            available = ", ".join(sorted(cls._backends))
            raise BackendNotRegisteredError(f"Unknown storage mode: {mode}. Available: {available}")
        return store_class

    @classmethod
    def build(cls, mode: str, backend_config) -> 'ObjectStore':
        """モードに対応する実装クラスをバックエンド設定からインスタンス化"""
        return cls.get(mode).from_config(backend_config)

    @classmethod
    def list_modes(cls) -> list:
        return sorted(cls._backends)

    @classmethod
    def is_registered(cls, mode: str) -> bool:
        return mode.lower() in cls._backends

    @classmethod
    def unregister(cls, mode: str):
        """テスト用: 登録を解除"""
        cls._backends.pop(mode.lower(), None)

    @classmethod
    def clear(cls):
        """テスト用: レジストリをクリア"""
        cls._backends.clear()
