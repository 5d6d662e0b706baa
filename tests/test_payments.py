import pytest

from shopii.payments import PaymentMethod
from shopii.users import UserType, create_user


class _Wallet(PaymentMethod):
    def __init__(self, method_name, balance):
        super().__init__(method_name)
        self.balance = balance

    def process_payment(self, amount):
        if amount > self.balance:
            return False
        self.balance -= amount
        return True


def _customer():
    password = "password"
    return create_user(UserType.CUSTOMER, "alice", password)


def test_payment_method_is_abstract():
    class Incomplete(PaymentMethod):
        pass

    with pytest.raises(TypeError):
        PaymentMethod("CreditCard")
    with pytest.raises(TypeError, match="process_payment"):
        Incomplete("PayPal")


def test_method_name_is_kept_by_customer():
    customer = _customer()
    customer.add_payment_method(_Wallet("PayPal", 10))
    assert [m.method_name for m in customer.payment_methods] == ["PayPal"]


def test_duplicate_method_name_is_ignored():
    customer = _customer()
    first = _Wallet("PayPal", 10)
    customer.add_payment_method(first)
    customer.add_payment_method(_Wallet("PayPal", 99))
    methods = list(customer.payment_methods)
    assert len(methods) == 1
    assert methods[0] is first


def test_remove_payment_method_by_name():
    customer = _customer()
    customer.add_payment_method(_Wallet("PayPal", 10))
    customer.add_payment_method(_Wallet("BankTransfer", 10))
    customer.remove_payment_method("PayPal")
    customer.remove_payment_method("CreditCard")
    assert [m.method_name for m in customer.payment_methods] == ["BankTransfer"]


def test_process_payment_dispatches_to_subclass():
    customer = _customer()
    customer.add_payment_method(_Wallet("BankTransfer", 10))
    wallet = list(customer.payment_methods)[0]
    assert wallet.process_payment(4) is True
    assert wallet.balance == 6
    assert wallet.process_payment(100) is False
    assert wallet.balance == 6


def test_repr_names_the_method():
    customer = _customer()
    customer.add_payment_method(_Wallet("CreditCard", 0))
    assert "CreditCard" in repr(list(customer.payment_methods)[0])