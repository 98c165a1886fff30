"""ページネーション計画モジュール."""

from __future__ import annotations

import math

from product_table.config import ELLIPSIS, WINDOW_WIDTH
from product_table.models import Plan


def total_pages_for(total_items: int, page_size: int) -> int:
    """総ページ数を返す. 0 件でも 1 ページ."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), total_pages)


def page_window(current_page: int, total_pages: int, width: int = WINDOW_WIDTH) -> list[int | str] | None:
    """表示するページ番号のリストを返す.

    現在ページを中心に width 個のページ番号を並べ、範囲外の先頭・末尾ページは
    明示的に追加する。隣接しない場合は間に ELLIPSIS を挟む。

    Returns:
        例: [1, "...", 47, 48, 49, 50, 51, 52, 53, "...", 100]
        総ページ数が 1 以下なら None（コントロール自体を出さない）。
    """
    if total_pages <= 1:
        return None

    half = width // 2
    start = max(1, current_page - half)
    end = min(total_pages, start + width - 1)
    # 末尾側で幅が足りない場合は左にずらす
    if end - start < width - 1:
        start = max(1, end - width + 1)

    pages: list[int | str] = []
    if start > 1:
        pages.append(1)
        if start > 2:
            pages.append(ELLIPSIS)

    pages.extend(range(start, end + 1))

    if end < total_pages:
        if end < total_pages - 1:
            pages.append(ELLIPSIS)
        pages.append(total_pages)

    return pages


def plan(total_items: int, page_size: int, current_page: int) -> Plan:
    """現在ページのスライス範囲とページ番号ウィンドウを計算する.

    current_page は [1, total_pages] にクランプされる。
    呼び出し側で独自にクランプしないこと。
    """
    total_pages = total_pages_for(total_items, page_size)
    current = clamp_page(current_page, total_pages)
    start = (current - 1) * page_size
    end = min(start + page_size, total_items)

    return Plan(
        total_items=total_items,
        total_pages=total_pages,
        page_size=page_size,
        current_page=current,
        start=start,
        end=end,
        page_numbers=page_window(current, total_pages),
        has_prev=current > 1,
        has_next=current < total_pages,
    )
