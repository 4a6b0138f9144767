"""パターンサンプルのデモ CLI。

使い方:
    python -m patterns [builder|singleton|all] [--name NAME] [--log-level LEVEL]
"""

import argparse
import logging
from collections.abc import Sequence
from pprint import pformat

from observability.tracing import init_tracer
from patterns.builder import ProductBuilder
from patterns.config import Settings, load_settings, normalize_log_level
from patterns.errors import PatternError
from patterns.singleton import Singleton

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_NAME = "MyProduct"
DEFAULT_DESCRIPTION = "A product built via the Builder pattern"

# ---------------------------------------------------------------------------
# デモ
# ---------------------------------------------------------------------------


def demo_builder(name: str = DEFAULT_PRODUCT_NAME) -> None:
    """サンプル製品を組み立てて表示する。

    Raises:
        ValidationError: ``name`` が空の場合。
    """
    print("--- Builder demo ---")
    product = (
        ProductBuilder(name)
        .set_description(DEFAULT_DESCRIPTION)
        .add_option("color", "red")
        .add_option("size", "L")
        .build()
    )
    print(pformat(product.to_dict(), sort_dicts=False))


def demo_singleton() -> None:
    """シングルトンを 2 回取得し、同一かどうかを表示する。"""
    print("--- Singleton demo ---")
    one = Singleton.get_instance()
    two = Singleton.get_instance()
    print(f"same instance: {one is two}")


DEMO_CHOICES = ("all", "builder", "singleton")


# ---------------------------------------------------------------------------
# メイン
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patterns",
        description="Builder / Singleton パターンのデモを実行する。",
    )
    parser.add_argument("demo", nargs="?", choices=DEMO_CHOICES, default="all")
    parser.add_argument(
        "--name",
        default=DEFAULT_PRODUCT_NAME,
        help="Builder デモで組み立てる製品名",
    )
    parser.add_argument("--log-level", type=normalize_log_level, default=None)
    parser.add_argument(
        "--trace-console",
        action="store_true",
        help="スパンをコンソールへ出力する",
    )
    return parser


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """デモを実行し、終了コードを返す。

    Returns:
        成功時は 0、``PatternError`` が発生した場合は 1。
    """
    args = build_parser().parse_args(argv)
    settings = settings or load_settings()

    log_level = args.log_level or settings.log_level
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    # ルートに既存ハンドラがあると basicConfig はレベルを設定しない
    logging.getLogger().setLevel(log_level)
    if args.trace_console or settings.trace_console:
        init_tracer(settings.service_name, enable_console_export=True)

    try:
        if args.demo in ("all", "singleton"):
            demo_singleton()
        if args.demo in ("all", "builder"):
            demo_builder(args.name)
    except PatternError as exc:
        logger.error("demo failed: %s", exc)
        return 1
    return 0
