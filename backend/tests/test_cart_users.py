from __future__ import annotations

import pytest
from pydantic import ValidationError

from patternkit.cart import CartItem, ShoppingCart
from patternkit.errors import UnknownKey, UnsupportedOperation
from patternkit.notifications import NOTIFIERS, EmailService, OrderProcessor
from patternkit.payments import PaymentProcessorA
from patternkit.users import User, UserController, UserFinder, UserManager, UserPrinter, UserView


def make_cart() -> ShoppingCart:
    cart = ShoppingCart()
    cart.add_item(CartItem(name="iPhone", price=999))
    cart.add_item(CartItem(name="Mac Book Pro 14", price=1899))
    return cart


def make_manager() -> tuple[UserManager, User, User]:
    manager = UserManager()
    alice = User(name="Alice", email="alice@example.com")
    bob = User(name="Bob", email="bob@example.com")
    manager.add_user(alice)
    manager.add_user(bob)
    return manager, alice, bob


def test_cart_total_from_item_prices():
    cart = make_cart()
    assert cart.calculate_total() == 2898
    assert ShoppingCart().calculate_total() == 0


def test_cart_checkout_charges_total():
    receipt = make_cart().checkout(PaymentProcessorA())
    assert receipt.payment == "Processing payment using Processor A: $2898"
    with pytest.raises(ValueError):
        ShoppingCart().checkout(PaymentProcessorA())


def test_cart_item_validation():
    with pytest.raises(ValidationError):
        CartItem(name="Broken", price=-1)


def test_user_manager_add_update_delete():
    manager, alice, bob = make_manager()
    manager.update_user(alice, "Alicia")
    assert alice.name == "Alicia"
    manager.delete_user(bob)
    assert manager.users == [alice]
    # unknown users are ignored
    stranger = User(name="Alicia", email="alice@example.com")
    manager.delete_user(stranger)
    manager.update_user(stranger, "Eve")
    assert [u.name for u in manager.users] == ["Alicia"]


def test_user_finder_and_printer_read_manager():
    manager, alice, _ = make_manager()
    finder = UserFinder(manager)
    assert finder.get_user_by_name("Alice") is alice
    assert finder.get_user_by_name("Carol") is None
    assert UserPrinter(manager).user_names() == ["Alice", "Bob"]


def test_controller_hands_user_to_view():
    controller = UserController()
    assert controller.handle_user_input("Carol") == "User: Carol"
    assert UserPrinter(controller.user_manager).user_names() == ["Carol"]
    assert UserView().render(User(name="Dave")) == "User: Dave"
    with pytest.raises(ValidationError):
        controller.handle_user_input("")


def test_order_processor_uses_injected_notifier():
    processor = OrderProcessor(EmailService())
    assert processor.process_order("test@gmail.com") == "Email sent to test@gmail.com: Your order has been processed."
    sms = OrderProcessor(NOTIFIERS.resolve("Sms"))
    assert sms.process_order("555-0100") == "SMS sent to 555-0100: Your order has been processed."
    with pytest.raises(UnknownKey):
        NOTIFIERS.resolve("Pigeon")
    with pytest.raises(UnsupportedOperation):
        OrderProcessor(object()).process_order("x")
