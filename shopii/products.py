"""Products that sellers offer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Product(ABC):
    """A product with a name, a description and a whole-number price."""

    name: str
    description: str
    price: int

    @abstractmethod
    def display(self) -> str:
        """Return a human-readable presentation of the product."""