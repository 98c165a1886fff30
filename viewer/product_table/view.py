"""描画用データモデル（テンプレートに渡す純粋なデータ）."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from product_table.config import (
    CATEGORY_PLACEHOLDER,
    CURRENCY_PREFIX,
    DESCRIPTION_MAX_LENGTH,
    ELLIPSIS,
    MSG_LOAD_ERROR,
    MSG_NO_DATA,
    MSG_NO_MATCH,
    PAGINATION_INFO_TEMPLATE,
    PLACEHOLDER_IMAGE,
)
from product_table.models import Plan, Record


@dataclass(frozen=True)
class TableRow:
    """テーブルの1行. 値はすべて表示用に整形済み（エスケープ前）."""

    image_url: str
    title: str
    price: str  # 例: "$12.50"
    category: str
    description: str


@dataclass(frozen=True)
class PageButton:
    """ページ番号ボタン、または省略記号."""

    label: str
    page: int | None  # None = 省略記号
    active: bool = False


@dataclass(frozen=True)
class PaginationView:
    buttons: list[PageButton]
    has_prev: bool
    has_next: bool
    current_page: int
    info: str


@dataclass(frozen=True)
class TableView:
    """1回の描画に必要な全データ."""

    rows: list[TableRow] = field(default_factory=list)
    empty_message: str | None = None  # 行が無い場合のメッセージ
    pagination: PaginationView | None = None  # None = ページネーション非表示
    error_message: str | None = None


def format_price(price: float) -> str:
    return f"{CURRENCY_PREFIX}{price:.2f}"


def truncate_description(description: str, limit: int = DESCRIPTION_MAX_LENGTH) -> str:
    """先頭 limit 文字に切り詰め、末尾に "..." を付ける."""
    return description[:limit] + "..."


def to_row(record: Record) -> TableRow:
    return TableRow(
        image_url=record.images[0] if record.images else PLACEHOLDER_IMAGE,
        title=record.title,
        price=format_price(record.price),
        category=record.category or CATEGORY_PLACEHOLDER,
        description=truncate_description(record.description),
    )


def build_pagination(plan: Plan) -> PaginationView | None:
    """Plan からページネーション表示データを作る. コントロール不要なら None."""
    if plan.page_numbers is None:
        return None

    buttons = [
        PageButton(label=ELLIPSIS, page=None)
        if p == ELLIPSIS
        else PageButton(label=str(p), page=p, active=p == plan.current_page)
        for p in plan.page_numbers
    ]
    return PaginationView(
        buttons=buttons,
        has_prev=plan.has_prev,
        has_next=plan.has_next,
        current_page=plan.current_page,
        info=PAGINATION_INFO_TEMPLATE.format(
            current=plan.current_page, total=plan.total_pages, count=plan.total_items,
        ),
    )


def build_view(
    filtered: Sequence[Record],
    plan: Plan,
    store_size: int,
    error_message: str | None = None,
) -> TableView:
    """現在の FilteredView と Plan から描画データを作る.

    Args:
        filtered: フィルタ・ソート済みの商品
        plan: pagination.plan() の結果
        store_size: RecordStore の全件数（データなし／該当なしの判定用）
        error_message: 取得失敗時のメッセージ
    """
    rows = [to_row(r) for r in filtered[plan.start:plan.end]]

    empty_message = None
    if not rows:
        if store_size == 0:
            # 取得失敗で1件も無い場合はエラー行を出す
            empty_message = MSG_LOAD_ERROR if error_message else MSG_NO_DATA
        else:
            empty_message = MSG_NO_MATCH

    return TableView(
        rows=rows,
        empty_message=empty_message,
        pagination=build_pagination(plan),
        error_message=error_message,
    )
