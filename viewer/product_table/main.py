"""商品一覧テーブル — メインエントリーポイント（Streamlit）.

起動:
  streamlit run viewer/product_table/main.py

処理フロー:
  1. 初回のみ API から商品一覧を取得し TableController に格納
  2. 検索・ソート・ページサイズ・ページ移動の入力をコントローラへ渡す
  3. コントローラの TableView をテーブル HTML とページ送りボタンで描画
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime

import streamlit as st

from product_table.config import LABEL_NEXT, LABEL_PREV, LOG_DIR, PAGE_SIZE_OPTIONS
from product_table.controller import TableController
from product_table.models import SortDirection, SortKey
from product_table.templates import TABLE_STYLE, render_table_html
from product_table.view import PaginationView

SORT_BUTTONS = [
    ("Giá ↑", SortKey.PRICE, SortDirection.ASC),
    ("Giá ↓", SortKey.PRICE, SortDirection.DESC),
    ("Tên A-Z", SortKey.TITLE, SortDirection.ASC),
    ("Tên Z-A", SortKey.TITLE, SortDirection.DESC),
]


def setup_logging() -> None:
    """ロギングの初期設定."""
    log_file = LOG_DIR / f"viewer_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def get_controller() -> TableController:
    """セッションごとのコントローラを返す. 初回は API から取得する."""
    if "controller" not in st.session_state:
        controller = TableController()
        with st.spinner("⏳ Đang tải dữ liệu..."):
            controller.reload()
        st.session_state.controller = controller
    return st.session_state.controller


def _render_sort_buttons(controller: TableController) -> None:
    cols = st.columns(len(SORT_BUTTONS))
    for col, (label, key, direction) in zip(cols, SORT_BUTTONS):
        active = controller.query.sort_key is key and controller.query.sort_direction is direction
        col.button(
            label,
            key=f"sort_{key.value}_{direction.value}",
            type="primary" if active else "secondary",
            on_click=controller.on_sort,
            args=(key, direction),
        )


def _render_pagination(controller: TableController, pagination: PaginationView | None) -> None:
    """ページ送りボタン. pagination が None なら何も出さない."""
    if pagination is None:
        return

    cols = st.columns(len(pagination.buttons) + 3)
    cols[0].button(
        LABEL_PREV, key="page_prev", disabled=not pagination.has_prev,
        on_click=controller.on_page_request, args=("prev",),
    )
    for i, b in enumerate(pagination.buttons, start=1):
        if b.page is None:
            cols[i].markdown(b.label)
            continue
        cols[i].button(
            b.label,
            key=f"page_{i}_{b.page}",
            type="primary" if b.active else "secondary",
            on_click=controller.on_page_request,
            args=(b.page,),
        )
    next_col = len(pagination.buttons) + 1
    cols[next_col].button(
        LABEL_NEXT, key="page_next", disabled=not pagination.has_next,
        on_click=controller.on_page_request, args=("next",),
    )
    cols[next_col + 1].caption(pagination.info)


def run() -> None:
    """メイン処理."""
    setup_logging()
    st.set_page_config(layout="wide", page_title="Danh sách sản phẩm")
    st.title("Danh sách sản phẩm")

    controller = get_controller()

    top = st.columns([3, 1, 1])
    top[0].text_input(
        "Tìm kiếm theo tên",
        key="search_term",
        on_change=lambda: controller.on_search(st.session_state.search_term),
    )
    top[1].selectbox(
        "Số dòng mỗi trang",
        PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(controller.page.page_size),
        key="page_size",
        on_change=lambda: controller.on_page_size_change(st.session_state.page_size),
    )
    top[2].button("Tải lại", on_click=controller.reload)

    _render_sort_buttons(controller)

    view = controller.view()
    if view.error_message:
        st.error(view.error_message)
        st.button("Đóng", key="dismiss_error", on_click=controller.dismiss_error)

    st.markdown(TABLE_STYLE + render_table_html(view), unsafe_allow_html=True)
    _render_pagination(controller, view.pagination)


if __name__ == "__main__":
    run()
