"""カスタム例外

構築・設定時のエラーを表す例外クラス。
ストア操作そのものは例外を送出せず、ReturnCodeで結果を返す。
"""


class ObjectStoreError(Exception):
    """オブジェクトストアの基底例外"""
    pass


class StorageRootNotFoundError(ObjectStoreError):
    """ローカルストアのルートディレクトリが存在しない"""
    pass


class StorageConfigError(ObjectStoreError):
    """設定エラー"""
    pass


class BackendNotRegisteredError(ObjectStoreError):
    """バックエンドが未登録"""
    pass
