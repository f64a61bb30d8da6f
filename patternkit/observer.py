"""Customers notified when an item they follow is in stock."""

from __future__ import annotations


class Customer:
    def __init__(self, name: str) -> None:
        self.name = name

    def receive_info(self) -> str:
        return f"Given mail to {self.name}"


class Item:
    """An item that mails its registered customers when in stock."""

    def __init__(self, name: str, in_stock: bool) -> None:
        self.name = name
        self.in_stock = in_stock
        self.customers: list[Customer] = []

    def register(self, customer: Customer) -> None:
        self.customers.append(customer)

    def deregister(self, customer: Customer) -> None:
        self.customers = [c for c in self.customers if c is not customer]

    def notify_all(self) -> list[str]:
        return [customer.receive_info() for customer in self.customers]

    def check(self) -> list[str]:
        """Notify everyone if the item is in stock."""
        return self.notify_all() if self.in_stock else []


def main(argv: list[str] | None = None) -> int:
    """Register three customers for a stocked item and notify them."""
    shoe = Item("Adidas shoe", True)
    for name in ("Brocklyn", "Dan", "Bronya"):
        shoe.register(Customer(name))
    for line in shoe.check():
        print(line)
    return 0