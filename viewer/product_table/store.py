"""取得済み商品の保持モジュール."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from product_table.models import Record

logger = logging.getLogger(__name__)


class RecordStore:
    """セッション中の全商品（フィルタ前）を保持する.

    load() のたびに全件を差し替え、generation を進める。
    空のリストも正常な状態として扱う。
    """

    def __init__(self) -> None:
        self._records: tuple[Record, ...] = ()
        self.generation = 0

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def load(self, records: Iterable[Record]) -> None:
        """全商品を差し替える. 既存の FilteredView は無効になる."""
        self._records = tuple(records)
        self.generation += 1
        logger.info("商品 %d 件をロード (generation=%d)", len(self._records), self.generation)
