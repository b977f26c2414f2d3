"""
Factory Method pattern.

Clients ask the factory for a product by name and get back something
implementing ``Product``, without knowing the concrete class. Unknown
names produce ``None`` rather than an error.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from catalog.observability.logging import get_logger
from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo

logger = get_logger("patterns.factory_method")


class Product(ABC):
    """Interface every product implements."""

    @abstractmethod
    def print_info(self) -> None:
        """Print which product this is."""


class ConcreteProduct1(Product):
    def print_info(self) -> None:
        print("This is ConcreteProduct1")


class ConcreteProduct2(Product):
    def print_info(self) -> None:
        print("This is ConcreteProduct2")


class Factory:
    """Creates products from their names."""

    _products: Dict[str, Callable[[], Product]] = {
        "Product1": ConcreteProduct1,
        "Product2": ConcreteProduct2,
    }

    @classmethod
    def create_product(cls, kind: str) -> Optional[Product]:
        """Create a product.

        Args:
            kind: Product name, ``Product1`` or ``Product2``

        Returns:
            A new product, or None for unknown names
        """
        creator = cls._products.get(kind)
        if creator is None:
            logger.debug(f"No product registered for '{kind}'")
            return None
        return creator()

    @classmethod
    def product_names(cls) -> List[str]:
        return list(cls._products)


@demo(
    name="factory_method",
    category=PatternCategory.CREATIONAL,
    description="Let a factory decide which concrete class to instantiate.",
)
class FactoryMethodDemo(PatternDemo):
    """Create both known products and print their info."""

    def run(self) -> None:
        for kind in ("Product1", "Product2"):
            product = Factory.create_product(kind)
            if product is not None:
                product.print_info()
