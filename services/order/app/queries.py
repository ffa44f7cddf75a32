"""
Order Service — クエリ (Read 側)

集約をレスポンス用の dict に投影する。
価格は保存せず、投影のたびに集約から導出する。
"""

from .aggregate import Order
from .profile import UserProfile


def order_to_dict(order: Order) -> dict:
    """注文を JSON 化できる dict に変換する。"""
    return {
        "id": order.id,
        "customer_email": order.customer_email,
        "lines": [
            {
                "item_code": line.item_code,
                "quantity": line.quantity,
                "unit_price_cents": line.unit_price_cents,
            }
            for line in order.get_lines()
        ],
        "discount_percent": order.discount_percent,
        "expedited": order.expedited,
        "notes": order.notes,
        "total_before_discount": order.total_before_discount(),
        "total_after_discount": order.total_after_discount(),
    }


def profile_to_dict(profile: UserProfile) -> dict:
    return profile.model_dump()
