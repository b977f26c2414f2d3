"""
Proxy pattern.

``DatabaseProxy`` stands in for the real database and only connects when
the first query arrives.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.observability.logging import get_logger
from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo

logger = get_logger("patterns.proxy")


class IDatabase(ABC):
    """Subject interface shared by the real database and its proxy."""

    @abstractmethod
    def query(self, sql: str) -> None:
        """Run a query."""


class Database(IDatabase):
    """The real subject; connecting is the expensive part."""

    def __init__(self) -> None:
        print("Connecting to the database...")

    def query(self, sql: str) -> None:
        print(f"Executing query: {sql}")


class DatabaseProxy(IDatabase):
    """Creates the real database lazily on first use."""

    def __init__(self) -> None:
        self._real_database: Optional[Database] = None

    @property
    def is_connected(self) -> bool:
        return self._real_database is not None

    def query(self, sql: str) -> None:
        if self._real_database is None:
            logger.debug("First query, connecting lazily")
            self._real_database = Database()
        self._real_database.query(sql)


@demo(
    name="proxy",
    category=PatternCategory.STRUCTURAL,
    description="Control access to an object through a surrogate.",
)
class ProxyDemo(PatternDemo):
    """Two queries through a proxy; only the first one connects."""

    def run(self) -> None:
        db: IDatabase = DatabaseProxy()
        db.query("SELECT * FROM users")
        db.query("SELECT * FROM orders")
