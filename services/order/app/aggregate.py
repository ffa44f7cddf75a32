"""
Order Service — 注文集約 (Order Aggregate)

Builder パターンで不変(immutable)な集約を組み立てる。
Order は Builder の build() からのみ生成し、生成後は状態が変わらない。

防御的コピー (Defensive Copy):
  - build() 時: Builder の作業用リストをタプルにコピーして保持
  - 読み取り時: get_lines() は毎回新しいリストを返す
  → 呼び出し側がリストを変更しても集約の内部状態には影響しない。
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class OrderLine(BaseModel):
    """注文明細 — 値オブジェクト。フィールドの値以外に同一性を持たない。"""

    model_config = ConfigDict(frozen=True)

    item_code: str
    quantity: int
    unit_price_cents: int


class Order(BaseModel):
    """
    注文集約 — 生成後は変更できない。

    discount_percent は 0〜100 を想定しているが検証はしない。
    lines が空でも、id が空でも生成できる（元の演習の挙動のまま）。
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    customer_email: str | None = None
    lines: tuple[OrderLine, ...] = ()
    discount_percent: int | None = None
    expedited: bool = False
    notes: str | None = None

    @staticmethod
    def builder() -> "OrderBuilder":
        return OrderBuilder()

    def get_lines(self) -> list[OrderLine]:
        """明細のコピーを返す。返したリストを変更しても注文は変わらない。"""
        return list(self.lines)

    # ── 価格計算 (毎回再計算、キャッシュしない) ─────────

    def total_before_discount(self) -> int:
        return sum(line.quantity * line.unit_price_cents for line in self.lines)

    def total_after_discount(self) -> int:
        base = self.total_before_discount()
        if self.discount_percent is None:
            return base
        return base - _percent_of(base, self.discount_percent)


def _percent_of(amount: int, percent: int) -> int:
    """amount * percent / 100 を 0 方向への切り捨てで求める。"""
    product = amount * percent
    portion = abs(product) // 100
    return portion if product >= 0 else -portion


class OrderBuilder:
    """
    注文ビルダー — 設定を蓄積して build() で Order を生成する。

    セッターは検証せずに self を返す（メソッドチェーン用）。
    スレッド間で共有しないこと。生成済みの Order は共有してよい。
    """

    def __init__(self) -> None:
        self._id: str | None = None
        self._customer_email: str | None = None
        self._lines: list[OrderLine] = []
        self._discount_percent: int | None = None
        self._expedited: bool = False
        self._notes: str | None = None

    def id(self, order_id: str | None) -> "OrderBuilder":
        self._id = order_id
        return self

    def customer_email(self, customer_email: str | None) -> "OrderBuilder":
        self._customer_email = customer_email
        return self

    def add_line(self, line: OrderLine | None) -> "OrderBuilder":
        if line is None:
            raise ValueError("OrderLine cannot be None")
        self._lines.append(line)
        return self

    def add_lines(self, lines: Iterable[OrderLine] | None) -> "OrderBuilder":
        if lines is not None:
            for line in lines:
                self.add_line(line)
        return self

    def discount_percent(self, discount_percent: int | None) -> "OrderBuilder":
        self._discount_percent = discount_percent
        return self

    def expedited(self, expedited: bool) -> "OrderBuilder":
        self._expedited = expedited
        return self

    def notes(self, notes: str | None) -> "OrderBuilder":
        self._notes = notes
        return self

    def build(self) -> Order:
        """作業用リストをコピーして新しい Order を返す。"""
        return Order(
            id=self._id,
            customer_email=self._customer_email,
            lines=tuple(self._lines),
            discount_percent=self._discount_percent,
            expedited=self._expedited,
            notes=self._notes,
        )
