"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- 商品 API ---
DEFAULT_API_URL = "https://api.escuelajs.co/api/v1/products"
API_URL: str = os.environ.get("PRODUCT_API_URL", DEFAULT_API_URL)

# --- リクエスト設定 ---
USER_AGENT = "product-table-viewer/0.1"
REQUEST_TIMEOUT = 15  # 秒

# --- ページネーション ---
PAGE_SIZE_OPTIONS = [5, 10, 20, 50]
DEFAULT_PAGE_SIZE = 10
WINDOW_WIDTH = 7  # 表示するページ番号ボタン数
ELLIPSIS = "..."

# --- 表示 ---
PLACEHOLDER_IMAGE = "https://via.placeholder.com/80"
CATEGORY_PLACEHOLDER = "N/A"
DESCRIPTION_MAX_LENGTH = 100
CURRENCY_PREFIX = "$"

# 表示文言（元の UI に合わせてベトナム語）
MSG_NO_DATA = "Không có dữ liệu sản phẩm"
MSG_NO_MATCH = "Không tìm thấy sản phẩm phù hợp"
MSG_LOAD_ERROR = "Lỗi tải dữ liệu"
MSG_FETCH_FAILED = "Lỗi: Không thể tải dữ liệu sản phẩm. Vui lòng thử lại sau!"
LABEL_PREV = "← Trước"
LABEL_NEXT = "Tiếp →"
PAGINATION_INFO_TEMPLATE = "Trang {current}/{total} ({count} kết quả)"

# --- ログ ---
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_DIR.mkdir(exist_ok=True)
