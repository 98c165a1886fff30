"""検索・ソートによる表示対象の導出モジュール.

処理フロー:
  1. タイトルの部分一致でフィルタ（大文字小文字を区別しない）
  2. 指定キーで安定ソート（キー指定なしなら元の順序のまま）
"""

from __future__ import annotations

from collections.abc import Iterable

from product_table.models import QueryState, Record, SortDirection, SortKey


def matches(record: Record, search_term: str) -> bool:
    """タイトルに検索語が含まれるか判定する.

    正規表現としては扱わず、前後の空白もそのまま比較する。
    """
    return search_term.lower() in record.title.lower()


def _sort_value(record: Record, sort_key: SortKey):
    if sort_key is SortKey.PRICE:
        return record.price
    return record.title.lower()


def derive(records: Iterable[Record], query: QueryState) -> list[Record]:
    """全商品から表示対象のリストを導出する.

    Args:
        records: RecordStore の全商品
        query: 検索語・ソート指定

    Returns:
        フィルタ・ソート済みの新しいリスト。
    """
    filtered = [r for r in records if matches(r, query.search_term)]

    if query.sort_key is SortKey.NONE:
        return filtered

    # sorted は reverse=True でも同値要素の順序を保つ
    return sorted(
        filtered,
        key=lambda r: _sort_value(r, query.sort_key),
        reverse=query.sort_direction is SortDirection.DESC,
    )
