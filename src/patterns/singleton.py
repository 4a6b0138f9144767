"""Singleton パターンのサンプルモジュール。

インスタンスを高々 1 つに限定し、既知のアクセスポイント
``Singleton.get_instance()`` からのみ取得できるようにする。

このファイルが示す要素:

1. **遅延初期化**: 最初の ``get_instance()`` 呼び出しでインスタンスを生成する
2. **一度きりの初期化の同期**: ロック付きの二重チェックにより、
   並行した初回アクセスでも生成されるインスタンスは 1 つだけ
3. **複製の禁止**: 直接生成・``copy``・``pickle`` による 2 つ目の生成を拒否する
"""

import logging
import threading
from typing import Any, ClassVar, NoReturn

from observability.tracing import trace_pattern_operation
from patterns.errors import SingletonError

logger = logging.getLogger(__name__)

# get_instance 以外からの生成を拒否するための合言葉
_CREATION_TOKEN = object()


class Singleton:
    """唯一のインスタンスを持つクラス。

    サブクラスはそれぞれ独立したインスタンスを 1 つずつ持つ。

    不変条件 (Invariant):
        - クラスごとに ``get_instance()`` が返すオブジェクトは常に同一

    Example::

        one = Singleton.get_instance()
        two = Singleton.get_instance()
        assert one is two
    """

    _instances: ClassVar[dict[type, "Singleton"]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, token: object = None) -> None:
        if token is not _CREATION_TOKEN:
            raise SingletonError(
                f"{type(self).__name__} cannot be instantiated directly; "
                "use get_instance()"
            )

    @classmethod
    @trace_pattern_operation("singleton", "get_instance")
    def get_instance(cls) -> "Singleton":
        """唯一のインスタンスを返す。未生成なら生成する。

        事後条件 (Postcondition):
            - 同じクラスに対する戻り値は常に同一オブジェクト

        Returns:
            ``cls`` の唯一のインスタンス。
        """
        instance = cls._instances.get(cls)
        if instance is None:
            with cls._lock:
                instance = cls._instances.get(cls)
                if instance is None:
                    instance = cls(_CREATION_TOKEN)
                    cls._instances[cls] = instance
                    logger.debug("singleton instance created: %s", cls.__name__)
        return instance

    def __copy__(self) -> NoReturn:
        raise SingletonError("Cannot clone a singleton.")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise SingletonError("Cannot clone a singleton.")

    def __reduce__(self) -> NoReturn:
        raise SingletonError("Cannot serialize a singleton.")

    def __setstate__(self, state: Any) -> NoReturn:
        raise SingletonError("Cannot unserialize a singleton.")
