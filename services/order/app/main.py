"""
Order Service — FastAPI エントリーポイント

Builder で組み立てた不変オブジェクトを HTTP で確認するための薄いラッパー。
リクエストの値をコマンドに転送し、結果をクエリで dict に投影して返す。
永続化はしない — リクエストごとに新しい集約を組み立てる。
"""

import logging
import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import commands, queries
from .aggregate import OrderLine
from .profile import UserProfile

SERVICE_NAME = os.environ.get("SERVICE_NAME", "order-service")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Order Service")


# ── Request Models ───────────────────────────────

class CreateOrderRequest(BaseModel):
    order_id: str | None = None
    customer_email: str | None = None
    lines: list[OrderLine] = []
    discount_percent: int | None = None
    expedited: bool = False
    notes: str | None = None


class CreateProfileRequest(BaseModel):
    profile_id: str | None = None
    email: str | None = None


class UpdateDisplayNameRequest(BaseModel):
    profile: UserProfile
    display_name: str | None = None


# ── Command Endpoints ────────────────────────────

@app.post("/commands/orders")
async def cmd_create_order(req: CreateOrderRequest):
    """注文作成コマンド — 価格計算済みの注文を返す"""
    order = commands.create_order(
        req.order_id, req.customer_email, req.lines,
        req.discount_percent, req.expedited, req.notes,
    )
    return queries.order_to_dict(order)


@app.post("/commands/profiles")
async def cmd_create_profile(req: CreateProfileRequest):
    """プロフィール作成コマンド"""
    try:
        profile = commands.create_minimal_profile(req.profile_id, req.email)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return queries.profile_to_dict(profile)


@app.post("/commands/profiles/display-name")
async def cmd_update_display_name(req: UpdateDisplayNameRequest):
    """表示名変更コマンド — 新しいプロフィールを返す（元の値は不変）"""
    try:
        profile = commands.update_display_name(req.profile, req.display_name)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return queries.profile_to_dict(profile)


@app.get("/health")
async def health():
    return {"status": "ok", "service": SERVICE_NAME}
