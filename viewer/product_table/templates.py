"""TableView を HTML に変換するテンプレート層.

値は html.escape で事前にエスケープし、Mustache の {{{ }}} でそのまま埋め込む。
（chevron 標準のエスケープはシングルクォートを変換しないため）
"""

from __future__ import annotations

from html import escape as _html_escape
from typing import Any

import chevron

from product_table.config import PLACEHOLDER_IMAGE
from product_table.view import TableRow, TableView

COLUMN_COUNT = 5

TABLE_TEMPLATE = """<table class="product-table">
<thead><tr><th>Hình ảnh</th><th>Tên sản phẩm</th><th>Giá</th><th>Danh mục</th><th>Mô tả</th></tr></thead>
<tbody>
{{#rows}}
<tr>
<td><img src="{{{image_url}}}" alt="{{{title}}}" class="product-image" onerror="this.src='{{{placeholder}}}'"></td>
<td class="product-title">{{{title}}}</td>
<td class="price">{{{price}}}</td>
<td class="category">{{{category}}}</td>
<td>{{{description}}}</td>
</tr>
{{/rows}}
{{#has_empty}}
<tr><td colspan="{{columns}}" class="no-data">{{{empty_message}}}</td></tr>
{{/has_empty}}
</tbody>
</table>"""

TABLE_STYLE = """<style>
.product-table { width: 100%; border-collapse: collapse; }
.product-table th, .product-table td { padding: 8px; border-bottom: 1px solid #ddd; text-align: left; }
.product-image { width: 80px; height: 80px; object-fit: cover; }
.price { font-weight: bold; white-space: nowrap; }
.no-data { text-align: center; color: #888; }
</style>"""


def escape(text: Any) -> str:
    """& < > " ' をエスケープする."""
    return _html_escape(str(text), quote=True)


def _row_context(row: TableRow) -> dict[str, str]:
    return {
        "image_url": escape(row.image_url),
        "title": escape(row.title),
        "price": escape(row.price),
        "category": escape(row.category),
        "description": escape(row.description),
        "placeholder": escape(PLACEHOLDER_IMAGE),
    }


def render_table_html(view: TableView) -> str:
    """現在ページの行（または空メッセージ行）のテーブル HTML を返す."""
    context = {
        "rows": [_row_context(r) for r in view.rows],
        "has_empty": bool(view.empty_message),
        "empty_message": escape(view.empty_message or ""),
        "columns": COLUMN_COUNT,
    }
    return chevron.render(TABLE_TEMPLATE, context)
