"""Users of the shop: customers, sellers and the factory that creates them."""

from __future__ import annotations

import hmac
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .payments import PaymentMethod
from .products import Product


class UserType(str, Enum):
    """The kinds of account the shop knows."""

    CUSTOMER = "Customer"
    SELLER = "Seller"


class User(ABC):
    """An account identified by a username and protected by a password."""

    def __init__(self, username: str, password: str) -> None:
        self.username = username
        self._password = password

    def check_password(self, password: str) -> bool:
        """Return whether ``password`` matches the account's password."""
        return hmac.compare_digest(self._password.encode(), password.encode())

    @property
    @abstractmethod
    def user_type(self) -> UserType:
        """The kind of account this is."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(username={self.username!r})"


class Customer(User):
    """A user who buys, holding payment methods with distinct names."""

    def __init__(self, username: str, password: str) -> None:
        super().__init__(username, password)
        self._payment_methods: list[PaymentMethod] = []

    @property
    def user_type(self) -> UserType:
        return UserType.CUSTOMER

    @property
    def payment_methods(self) -> list[PaymentMethod]:
        return list(self._payment_methods)

    def add_payment_method(self, method: PaymentMethod) -> None:
        """Add ``method`` unless one with the same name is already held."""
        if any(m.method_name == method.method_name for m in self._payment_methods):
            return
        self._payment_methods.append(method)

    def remove_payment_method(self, method_name: str) -> None:
        """Remove the payment method called ``method_name``, if there is one."""
        for method in self._payment_methods:
            if method.method_name == method_name:
                self._payment_methods.remove(method)
                return


@dataclass
class _StockItem:
    product: Product
    amount: int


class Seller(User):
    """A user who sells, keeping a stock of products by name."""

    def __init__(self, username: str, password: str) -> None:
        super().__init__(username, password)
        self._stock: dict[str, _StockItem] = {}

    @property
    def user_type(self) -> UserType:
        return UserType.SELLER

    @property
    def products(self) -> list[Product]:
        return [item.product for item in self._stock.values()]

    def add_product(self, product: Product, amount: int) -> None:
        """Stock ``amount`` of ``product``; a known name only raises its amount."""
        item = self._stock.get(product.name)
        if item is not None:
            item.amount += amount
        else:
            self._stock[product.name] = _StockItem(product, amount)

    def remove_product(self, name: str) -> None:
        """Drop the product called ``name`` from stock, if it is there."""
        self._stock.pop(name, None)

    def quantity_of(self, name: str) -> int:
        """Return how many of the product called ``name`` are stocked."""
        item = self._stock.get(name)
        return item.amount if item is not None else 0


def create_user(user_type: UserType | str, username: str, password: str) -> User:
    """Create a customer or seller account; unknown kinds raise ValueError."""
    try:
        kind = UserType(user_type)
    except ValueError:
        raise ValueError(f"unknown user type: {user_type!r}") from None
    if kind is UserType.CUSTOMER:
        return Customer(username, password)
    return Seller(username, password)