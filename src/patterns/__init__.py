"""デザインパターンのサンプル集（Builder / Singleton）。"""

from patterns.builder import (
    OptionValue,
    Product,
    ProductBuilder,
    ProductBuilderInterface,
)
from patterns.errors import PatternError, SingletonError, ValidationError
from patterns.singleton import Singleton

__all__ = [
    "OptionValue",
    "PatternError",
    "Product",
    "ProductBuilder",
    "ProductBuilderInterface",
    "Singleton",
    "SingletonError",
    "ValidationError",
]
