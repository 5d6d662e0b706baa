"""Payment methods a customer can pay with."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentMethod(ABC):
    """A named way of paying; subclasses decide how a payment is carried out."""

    def __init__(self, method_name: str) -> None:
        self.method_name = method_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method_name={self.method_name!r})"

    @abstractmethod
    def process_payment(self, amount: float) -> bool:
        """Charge ``amount`` and report whether the payment went through."""