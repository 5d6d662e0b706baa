from dataclasses import dataclass

import pytest

from shopii.payments import PaymentMethod
from shopii.products import Product
from shopii.users import Customer, Seller, User, UserType, create_user


class _Card(PaymentMethod):
    def process_payment(self, amount):
        return amount >= 0


@dataclass
class _Item(Product):
    def display(self):
        return self.name


def test_user_is_abstract():
    with pytest.raises(TypeError):
        User("alice", "password")


def test_check_password():
    user = create_user("Customer", "alice", "password")
    assert user.check_password("password") is True
    assert user.check_password("secret") is False


def test_create_customer_from_string():
    user = create_user("Customer", "alice", "password")
    assert isinstance(user, Customer)
    assert user.username == "alice"
    assert user.user_type == UserType.CUSTOMER
    assert user.user_type == "Customer"


def test_create_seller_from_enum():
    user = create_user(UserType.SELLER, "bob", "password")
    assert isinstance(user, Seller)
    assert user.user_type == "Seller"


def test_create_unknown_user_type_raises():
    with pytest.raises(ValueError):
        create_user("Admin", "carol", "password")


def test_customer_adds_distinct_payment_methods_in_order():
    customer = Customer("alice", "password")
    card = _Card("CreditCard")
    paypal = _Card("PayPal")
    customer.add_payment_method(card)
    customer.add_payment_method(paypal)
    assert customer.payment_methods == [card, paypal]


def test_customer_ignores_duplicate_payment_method_name():
    customer = Customer("alice", "password")
    first = _Card("CreditCard")
    customer.add_payment_method(first)
    customer.add_payment_method(_Card("CreditCard"))
    assert customer.payment_methods == [first]


def test_customer_removes_payment_method_by_name():
    customer = Customer("alice", "password")
    card = _Card("CreditCard")
    transfer = _Card("BankTransfer")
    customer.add_payment_method(card)
    customer.add_payment_method(transfer)
    customer.remove_payment_method("CreditCard")
    assert customer.payment_methods == [transfer]
    customer.remove_payment_method("PayPal")
    assert customer.payment_methods == [transfer]


def test_payment_methods_returns_a_copy():
    customer = Customer("alice", "password")
    customer.payment_methods.append(_Card("CreditCard"))
    assert customer.payment_methods == []


def test_seller_adds_products():
    seller = Seller("bob", "password")
    pen = _Item("Pen", "Blue", 3)
    cup = _Item("Cup", "White", 8)
    seller.add_product(pen, 5)
    seller.add_product(cup, 2)
    assert seller.products == [pen, cup]
    assert seller.quantity_of("Pen") == 5
    assert seller.quantity_of("Cup") == 2


def test_seller_merges_same_name_amounts_and_keeps_first_product():
    seller = Seller("bob", "password")
    pen = _Item("Pen", "Blue", 3)
    first, second = 5, 4
    seller.add_product(pen, first)
    seller.add_product(_Item("Pen", "Red", 9), second)
    assert seller.products == [pen]
    assert seller.quantity_of("Pen") == first + second


def test_seller_removes_product():
    seller = Seller("bob", "password")
    pen = _Item("Pen", "Blue", 3)
    cup = _Item("Cup", "White", 8)
    seller.add_product(pen, 1)
    seller.add_product(cup, 1)
    seller.remove_product("Pen")
    assert seller.products == [cup]
    assert seller.quantity_of("Pen") == 0
    seller.remove_product("Lamp")
    assert seller.products == [cup]


def test_unknown_product_quantity_is_zero():
    assert Seller("bob", "password").quantity_of("Pen") == 0