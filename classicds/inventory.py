"""Simple stock records for goods held in a warehouse."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Stock:
    """Goods from one area, with a unit price and a quantity on hand."""

    area: str
    unit_price: int
    count: int

    def in_storage(self, amount: int) -> None:
        """Add ``amount`` items to stock."""
        self.count += amount

    def out_storage(self, amount: int) -> None:
        """Remove ``amount`` items from stock.

        If fewer items are held, the stock is emptied and ValueError is raised.
        """
        if self.count < amount:
            self.count = 0
            raise ValueError("Insufficient number!")
        self.count -= amount

    def total_value(self) -> int:
        """Return the value of all items held."""
        return self.unit_price * self.count


@dataclass
class Shirt(Stock):
    material: str


@dataclass
class Cap(Stock):
    material: str
    shape: str


@dataclass
class Capboard(Stock):
    material: str
    color: str