"""Builder パターンのサンプルモジュール。

複雑なオブジェクトの「組み立て手順」と「表現」を分離する Builder パターンを、
任意項目の多い ``Product`` をメソッドチェーンで段階的に構成する形で示す。

このファイルが示す要素:

1. **データ保持と検証の分離**: ``Product`` は検証を持たない単純なデータ保持型で、
   検証は ``ProductBuilder.build()`` だけが担う
2. **流暢なインターフェース**: 設定メソッドは同じビルダーを返し、チェーン可能
3. **Design by Contract**: 最終化時の事前条件・事後条件を docstring に明記する

使用方法::

    product = (
        ProductBuilder("Widget")
        .set_description("A widget")
        .add_option("color", "red")
        .add_option("size", "L")
        .build()
    )
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from observability.tracing import trace_pattern_operation
from patterns.errors import ValidationError

logger = logging.getLogger(__name__)

# オプション値はテキスト・数値・真偽値のいずれか。実行時の型がタグを兼ねる。
OptionValue = str | int | float | bool

# ---------------------------------------------------------------------------
# データクラス: 組み立て対象
# ---------------------------------------------------------------------------


@dataclass
class Product:
    """ビルダーによって組み立てられる製品。

    振る舞いも検証も持たない。``name`` が空でないことの保証は
    ``ProductBuilder.build()`` の責務であり、このクラス自身は何も強制しない。

    ``build()`` から返された後は呼び出し側で凍結済みとして扱うこと
    （型レベルでは強制されない）。

    Attributes:
        name: 製品名。ビルダー生成時に一度だけ設定される。
        description: 説明文。明示的に設定されるまで ``None``。
        options: オプションのキーと値の対応。同じキーは後勝ちで上書きされる。
    """

    name: str
    description: str | None = None
    options: dict[str, OptionValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """表示用のスナップショットを返す。``options`` はコピーされる。"""
        return {
            "name": self.name,
            "description": self.description,
            "options": dict(self.options),
        }


# ---------------------------------------------------------------------------
# ビルダーの契約
# ---------------------------------------------------------------------------


class ProductBuilderInterface(ABC):
    """``Product`` ビルダーが満たすべき契約。"""

    @abstractmethod
    def set_description(self, desc: str) -> "ProductBuilderInterface":
        ...

    @abstractmethod
    def add_option(self, key: str, value: OptionValue) -> "ProductBuilderInterface":
        ...

    @abstractmethod
    def build(self) -> Product:
        ...


# ---------------------------------------------------------------------------
# ビルダー本体
# ---------------------------------------------------------------------------


class ProductBuilder(ProductBuilderInterface):
    """``Product`` を段階的に組み立てるビルダー。

    ビルダー 1 つにつき製品 1 つ。生成時に包んだ ``Product`` を生存期間中
    ずっと保持し、``build()`` はその同じオブジェクトを返す。
    ``build()`` 後もビルダーを再利用しないこと: 設定メソッドはブロックされず、
    すでに返した ``Product`` をその場で書き換えてしまう。

    状態:
        - Accumulating: 生成直後から、``build()`` が成功するまで
        - Finalized: ``build()`` が一度でも成功した後

    スレッドセーフではない。単一の所有者に閉じて使うこと。
    """

    def __init__(self, name: str) -> None:
        """空の製品を名前だけで生成する。

        この時点では検証しない（空文字列も受け付ける）。

        Args:
            name: 製品名。
        """
        self._product = Product(name)
        self._finalized = False

    @property
    def product(self) -> Product:
        """組み立て中の製品（``build()`` が返すものと同一オブジェクト）。"""
        return self._product

    @property
    def finalized(self) -> bool:
        """``build()`` が一度でも成功していれば ``True``。"""
        return self._finalized

    def set_description(self, desc: str) -> "ProductBuilder":
        """説明文を上書きし、同じビルダーを返す。"""
        self._product.description = desc
        return self

    def add_option(self, key: str, value: OptionValue) -> "ProductBuilder":
        """オプションを追加（既存キーなら上書き）し、同じビルダーを返す。

        キーの書式は検証しない。
        """
        self._product.options[key] = value
        return self

    @trace_pattern_operation("builder", "build")
    def build(self) -> Product:
        """製品を検証して返す。

        事前条件 (Precondition):
            - 製品名が空でないこと。満たさない場合は何もせず例外を送出する

        事後条件 (Postcondition):
            - 戻り値は保持中の ``Product`` そのもの（コピーではない）
            - 戻り値の ``name`` は空でない

        複数回呼び出しても毎回再検証し、同じオブジェクトを返す。

        Returns:
            組み立てた ``Product``。

        Raises:
            ValidationError: 製品名が空の場合。ビルダーの状態は変わらない。
        """
        if not self._product.name:
            logger.warning("product build rejected: empty name")
            raise ValidationError("product must have a name")

        assert self._product.name, "postcondition failed: empty product name"

        self._finalized = True
        logger.debug(
            "product built: name=%s options=%d",
            self._product.name,
            len(self._product.options),
        )
        return self._product
