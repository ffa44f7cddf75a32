"""Tests for the read-side projections."""

from app.aggregate import Order, OrderLine
from app.profile import UserProfile
from app.queries import order_to_dict, profile_to_dict


def test_order_to_dict_includes_lines_and_totals():
    order = (
        Order.builder()
        .id("ORDER-001")
        .customer_email("customer@example.com")
        .add_line(OrderLine(item_code="LAPTOP", quantity=1, unit_price_cents=50000))
        .add_line(OrderLine(item_code="MOUSE", quantity=2, unit_price_cents=2500))
        .discount_percent(10)
        .expedited(True)
        .notes("Birthday gift")
        .build()
    )

    assert order_to_dict(order) == {
        "id": "ORDER-001",
        "customer_email": "customer@example.com",
        "lines": [
            {"item_code": "LAPTOP", "quantity": 1, "unit_price_cents": 50000},
            {"item_code": "MOUSE", "quantity": 2, "unit_price_cents": 2500},
        ],
        "discount_percent": 10,
        "expedited": True,
        "notes": "Birthday gift",
        "total_before_discount": 55000,
        "total_after_discount": 49500,
    }


def test_order_to_dict_result_is_detached():
    order = Order.builder().add_line(
        OrderLine(item_code="PEN", quantity=3, unit_price_cents=100)
    ).build()

    projected = order_to_dict(order)
    projected["lines"].clear()

    assert order.total_before_discount() == 300
    assert len(order_to_dict(order)["lines"]) == 1


def test_profile_to_dict():
    profile = UserProfile.builder("u1", "a@b.com").display_name("User One").build()

    assert profile_to_dict(profile) == {
        "id": "u1",
        "email": "a@b.com",
        "phone": None,
        "display_name": "User One",
        "address": None,
        "marketing_opt_in": False,
        "twitter": None,
        "github": None,
    }
