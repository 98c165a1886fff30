"""データモデル定義."""

from dataclasses import dataclass
from enum import Enum

from product_table.config import DEFAULT_PAGE_SIZE


class SortKey(str, Enum):
    """ソート対象の列."""

    NONE = "none"
    PRICE = "price"
    TITLE = "title"


class SortDirection(str, Enum):
    """ソート方向."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Record:
    """API から取得した1商品を表す. 取得後は変更しない."""

    id: int | str
    title: str
    price: float  # 0 以上
    category: str | None  # None = カテゴリなし（表示時はプレースホルダ）
    description: str
    images: tuple[str, ...] = ()  # 空の場合あり


@dataclass
class QueryState:
    """検索語とソート指定."""

    search_term: str = ""  # 大文字小文字を区別しない部分一致
    sort_key: SortKey = SortKey.NONE
    sort_direction: SortDirection = SortDirection.ASC


@dataclass
class PageState:
    """現在ページとページサイズ."""

    current_page: int = 1  # 1始まり
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class Plan:
    """ページネーション計画（現在ページのスライスと表示ページ番号）."""

    total_items: int
    total_pages: int
    page_size: int
    current_page: int  # クランプ済み
    start: int  # スライス開始（含む）
    end: int  # スライス終了（含まない）
    page_numbers: list[int | str] | None = None  # None = コントロールなし
    has_prev: bool = False
    has_next: bool = False
