"""パターンサンプル共通の例外。"""


class PatternError(Exception):
    """本パッケージが送出する例外の基底クラス。"""


class ValidationError(PatternError):
    """ビルダーの最終化時に検証へ失敗した場合に送出される。"""


class SingletonError(PatternError):
    """シングルトンの直接生成・複製・直列化を試みた場合に送出される。"""
