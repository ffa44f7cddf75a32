"""
Order Service — コマンドハンドラ (Write 側)

呼び出し側から受け取ったプリミティブな値を Builder に渡すだけの薄いサービス。
注文側は検証を追加しない（Builder の寛容な挙動をそのまま公開する）。
プロフィール側は元の演習どおり id / email の最低限のチェックを行う。
"""

import logging
from collections.abc import Iterable

from .aggregate import Order, OrderLine
from .profile import UserProfile

logger = logging.getLogger(__name__)

MAX_DISPLAY_NAME_LENGTH = 100


def create_order(
    order_id: str | None,
    customer_email: str | None,
    lines: Iterable[OrderLine] | None,
    discount_percent: int | None,
    expedited: bool,
    notes: str | None,
) -> Order:
    """注文作成コマンド — 引数をそのまま Builder に転送する。"""
    order = (
        Order.builder()
        .id(order_id)
        .customer_email(customer_email)
        .add_lines(lines)
        .discount_percent(discount_percent)
        .expedited(expedited)
        .notes(notes)
        .build()
    )
    logger.info(
        "Created order %s: %d line(s), total %d -> %d",
        order.id, len(order.lines),
        order.total_before_discount(), order.total_after_discount(),
    )
    return order


def create_minimal_profile(profile_id: str | None, email: str | None) -> UserProfile:
    """必須フィールドだけのプロフィールを作成する。"""
    if profile_id is None or not profile_id.strip():
        raise ValueError("bad id")
    if email is None or "@" not in email:
        raise ValueError("bad email")

    profile = UserProfile.builder(profile_id, email).build()
    logger.info("Created profile %s", profile.id)
    return profile


def update_display_name(profile: UserProfile | None, display_name: str | None) -> UserProfile:
    """
    表示名を変更した新しいプロフィールを返す。

    元のプロフィールは変更しない。100 文字を超える表示名は切り詰める。
    """
    if profile is None:
        raise ValueError("profile is required")
    if display_name is not None and len(display_name) > MAX_DISPLAY_NAME_LENGTH:
        logger.warning(
            "Display name for profile %s truncated from %d to %d characters",
            profile.id, len(display_name), MAX_DISPLAY_NAME_LENGTH,
        )
        display_name = display_name[:MAX_DISPLAY_NAME_LENGTH]

    return profile.to_builder().display_name(display_name).build()
