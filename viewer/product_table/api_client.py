"""商品 API からのデータ取得モジュール.

取得戦略:
  1. API_URL へ GET し JSON 配列を受け取る
  2. 各要素を Record に変換（不正な要素はスキップ）
"""

from __future__ import annotations

import json
import logging
import re

import requests

from product_table.config import API_URL, REQUEST_TIMEOUT, USER_AGENT
from product_table.models import Record

logger = logging.getLogger(__name__)

# API が '["https://..."]' のように文字列化して返す画像 URL を検出する
_WRAPPED_URL_PATTERN = re.compile(r'^\s*\[?\s*"?(.*?)"?\s*\]?\s*$')


def fetch_products(url: str = API_URL) -> list[Record] | None:
    """商品一覧を取得する.

    Args:
        url: 商品 API のエンドポイント

    Returns:
        Record のリスト。失敗時は None。
    """
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }

    try:
        resp = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as e:
        logger.error("商品一覧取得失敗: url=%s, error=%s", url, e)
        return None
    except ValueError as e:
        logger.error("商品一覧 JSON パースエラー: url=%s, error=%s", url, e)
        return None

    if not isinstance(payload, list):
        logger.error("商品一覧の形式が不正です: url=%s, type=%s", url, type(payload).__name__)
        return None

    records = parse_products(payload)
    logger.info("商品一覧: %d 件取得 (%d 件スキップ)", len(records), len(payload) - len(records))
    return records


def parse_products(items: list) -> list[Record]:
    """API の JSON 配列を Record のリストに変換する."""
    records: list[Record] = []
    for item in items:
        record = parse_product(item)
        if record is not None:
            records.append(record)
    return records


def parse_product(item) -> Record | None:
    """API の1要素を Record に変換する.

    Returns:
        Record。title や price が不正な場合は None。
    """
    if not isinstance(item, dict):
        logger.warning("商品要素が dict ではありません: %r", item)
        return None

    title = item.get("title")
    price = item.get("price")
    if not isinstance(title, str):
        logger.warning("title が不正な商品をスキップ: id=%s", item.get("id"))
        return None
    # bool は int のサブクラスなので除外
    if isinstance(price, bool) or not isinstance(price, (int, float)) or price < 0:
        logger.warning("price が不正な商品をスキップ: id=%s, price=%r", item.get("id"), price)
        return None

    return Record(
        id=item.get("id"),
        title=title,
        price=price,
        category=_extract_category(item.get("category")),
        description=_extract_description(item.get("description")),
        images=_clean_images(item.get("images")),
    )


def _extract_category(category) -> str | None:
    """category オブジェクトから名前を取り出す. 文字列ならそのまま使う."""
    if isinstance(category, dict):
        name = category.get("name")
    else:
        name = category
    if isinstance(name, str) and name:
        return name
    return None


def _extract_description(description) -> str:
    """文字列以外の description は空文字列として扱う."""
    if isinstance(description, str):
        return description
    return ""


def _clean_images(images) -> tuple[str, ...]:
    """画像 URL リストを正規化する.

    文字列化された JSON 配列（'["https://..."]'）はまず json.loads を試し、
    失敗した断片は括弧と引用符を取り除く。
    """
    if isinstance(images, str):
        images = [images]
    if not isinstance(images, list):
        return ()

    cleaned: list[str] = []
    for raw in images:
        if not isinstance(raw, str):
            continue
        cleaned.extend(_unwrap_url(raw))
    return tuple(u for u in cleaned if u)


def _unwrap_url(raw: str) -> list[str]:
    if raw.lstrip().startswith("["):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(decoded, list):
                return [u.strip() for u in decoded if isinstance(u, str)]
    m = _WRAPPED_URL_PATTERN.match(raw)
    return [m.group(1).strip()] if m else []
