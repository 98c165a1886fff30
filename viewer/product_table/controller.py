"""表示状態コントローラ.

入力イベント（検索・ソート・ページサイズ変更・ページ移動・データロード）を受け取り、
QueryState / PageState / FilteredView / Plan を一貫した状態に保つ。
各イベントの最後に必ず renderer に TableView を渡す。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from product_table import pagination, query
from product_table.api_client import fetch_products
from product_table.config import MSG_FETCH_FAILED, PAGE_SIZE_OPTIONS
from product_table.models import PageState, Plan, QueryState, Record, SortDirection, SortKey
from product_table.store import RecordStore
from product_table.view import TableView, build_view

logger = logging.getLogger(__name__)

Renderer = Callable[[TableView], None]


def _discard(view: TableView) -> None:
    pass


class TableController:
    """RecordStore と検索・ページ状態を保持し、イベントごとに再計算する."""

    def __init__(self, renderer: Renderer | None = None) -> None:
        self.store = RecordStore()
        self.query = QueryState()
        self.page = PageState()
        self.filtered: list[Record] = []
        self.plan: Plan = pagination.plan(0, self.page.page_size, 1)
        self.error_message: str | None = None
        self.renderer: Renderer = renderer or _discard

        self._issued_token = 0
        self._applied_token = 0

    # --- 入力イベント ---

    def on_search(self, term: str) -> None:
        """検索語を変更する. ページは 1 に戻る."""
        self.query.search_term = term
        self.page.current_page = 1
        self._recompute()
        logger.info("検索: term=%r → %d 件", term, len(self.filtered))
        self._render()

    def on_sort(self, key: SortKey | str, direction: SortDirection | str = SortDirection.ASC) -> None:
        """ソート指定を変更する. 検索語は維持し、ページは 1 に戻る."""
        # 両方の値を検証してから代入する（不正な入力では状態を変えない）
        sort_key = SortKey(key)
        sort_direction = SortDirection(direction)
        self.query.sort_key = sort_key
        self.query.sort_direction = sort_direction
        self.page.current_page = 1
        self._recompute()
        logger.info("ソート: key=%s, direction=%s", self.query.sort_key.value, self.query.sort_direction.value)
        self._render()

    def on_page_size_change(self, size: int) -> None:
        """ページサイズを変更する. PAGE_SIZE_OPTIONS 以外は ValueError."""
        if size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page size must be one of {PAGE_SIZE_OPTIONS}, got {size!r}")
        self.page.page_size = size
        self.page.current_page = 1
        self._replan()
        self._render()

    def on_page_request(self, page: int | str) -> None:
        """ページを移動する.

        Args:
            page: 絶対ページ番号、または "prev" / "next"
        """
        if page == "prev":
            requested = self.plan.current_page - 1
        elif page == "next":
            requested = self.plan.current_page + 1
        elif isinstance(page, int) and not isinstance(page, bool):
            requested = page
        else:
            raise ValueError(f"invalid page request: {page!r}")

        self.page.current_page = requested
        self._replan()
        self._render()

    # --- データロード ---

    def begin_load(self) -> int:
        """新しいロード要求のトークンを発行する."""
        self._issued_token += 1
        return self._issued_token

    def complete_load(self, token: int, records: Iterable[Record]) -> bool:
        """ロード結果を反映する.

        Returns:
            反映した場合 True。より新しいロードが既に反映済みなら False（結果は破棄）。
        """
        if token < self._applied_token:
            logger.warning("古いロード結果を破棄: token=%d, applied=%d", token, self._applied_token)
            return False

        self._applied_token = token
        self.store.load(records)
        self.error_message = None
        self.page.current_page = 1
        self._recompute()
        self._render()
        return True

    def fail_load(self, token: int, message: str = MSG_FETCH_FAILED) -> bool:
        """ロード失敗を記録する. RecordStore は変更しない."""
        if token < self._applied_token:
            logger.warning("古いロード失敗を無視: token=%d, applied=%d", token, self._applied_token)
            return False

        self.error_message = message
        self._render()
        return True

    def reload(self, fetch: Callable[[], list[Record] | None] = fetch_products) -> bool:
        """API から再取得して反映する. 失敗時は False."""
        token = self.begin_load()
        records = fetch()
        if records is None:
            self.fail_load(token)
            return False
        return self.complete_load(token, records)

    def dismiss_error(self) -> None:
        self.error_message = None
        self._render()

    # --- 内部処理 ---

    def view(self) -> TableView:
        return build_view(self.filtered, self.plan, len(self.store), self.error_message)

    def _recompute(self) -> None:
        self.filtered = query.derive(self.store.records, self.query)
        self._replan()

    def _replan(self) -> None:
        # クランプは pagination.plan に任せ、その結果を PageState に戻す
        self.plan = pagination.plan(len(self.filtered), self.page.page_size, self.page.current_page)
        self.page.current_page = self.plan.current_page

    def _render(self) -> None:
        self.renderer(self.view())
