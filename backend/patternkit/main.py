"""Console entry point: walks every registry and logs what it produces."""

from __future__ import annotations

from patternkit.builders import BUILDERS
from patternkit.builders.computer import COMPUTER_DIRECTOR
from patternkit.cart import CartItem, ShoppingCart
from patternkit.catalog import build_computer, create_family, invoke
from patternkit.characters import create_character
from patternkit.families import FAMILIES
from patternkit.logging_utils import get_logger
from patternkit.notifications import NOTIFIERS, OrderProcessor
from patternkit.payments import PAYMENT_PROCESSORS, Order, format_amount
from patternkit.settings import Settings, get_settings
from patternkit.shapes import RENDERERS, SHAPES, DrawableCircle, DrawableSquare, ShapeCalculator
from patternkit.store import get_item_store
from patternkit.users import UserController, UserPrinter


def run_demo(settings: Settings | None = None) -> list[str]:
    settings = settings or get_settings()
    lines: list[str] = []

    # Configured defaults first, then the rest of each registry
    themes = [settings.DEFAULT_THEME] + [k for k in FAMILIES if k != settings.DEFAULT_THEME]
    for theme in themes:
        product = create_family(theme)
        for contract_id in product.contract_ids():
            lines.append(invoke(product, contract_id, "render"))

    computers = [settings.DEFAULT_COMPUTER] + [k for k in BUILDERS if k != settings.DEFAULT_COMPUTER]
    for kind in computers:
        lines.append(f"{kind} Computer:")
        lines.extend(build_computer(kind).describe())

    for kind, name in settings.DEMO_CHARACTER_NAMES.items():
        lines.append(create_character(kind, name).attack())

    lines.append(f"Triangle Area: {ShapeCalculator.calculate_area(SHAPES.resolve('Triangle', 3, 6))}")
    lines.append(f"Circle Area: {ShapeCalculator.calculate_area(SHAPES.resolve('Circle', 5))}")

    renderer = RENDERERS.resolve(settings.DEFAULT_RENDERER)
    lines.append(DrawableCircle(5, renderer).draw())
    lines.append(DrawableSquare(10, renderer).draw())

    order = Order(settings.DEMO_ORDER_AMOUNT, PAYMENT_PROCESSORS.resolve(settings.DEFAULT_PAYMENT_PROCESSOR))
    receipt = order.checkout()
    lines.extend([receipt.payment, receipt.status])

    cart = ShoppingCart()
    cart.add_item(CartItem(name="iPhone", price=999))
    cart.add_item(CartItem(name="Mac Book Pro 14", price=1899))
    lines.append(f"Total price is: ${format_amount(cart.calculate_total())}")

    lines.append(OrderProcessor(NOTIFIERS.resolve(settings.DEFAULT_NOTIFIER)).process_order(settings.DEMO_CUSTOMER))

    controller = UserController()
    lines.append(controller.handle_user_input("Alice"))
    lines.append(f"Users: {', '.join(UserPrinter(controller.user_manager).user_names())}")

    store = get_item_store()
    store.add_item(f"demo run with {len(COMPUTER_DIRECTOR.sequence)}-step director")
    lines.append(f"Store items: {len(store.get_items())}")
    return lines


def main() -> None:
    settings = get_settings()
    logger = get_logger("patternkit", settings.LOG_LEVEL)
    for line in run_demo(settings):
        logger.info(line)


if __name__ == "__main__":
    main()
