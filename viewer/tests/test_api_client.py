"""api_client モジュールのユニットテスト."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from product_table.api_client import _clean_images, fetch_products, parse_product, parse_products
from product_table.view import to_row

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load_fixture(name: str):
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def _mock_response(payload=None, status_error=None, json_error=None):
    resp = MagicMock()
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


class TestFetchProducts:
    """fetch_products のテスト."""

    @patch("product_table.api_client.requests.get")
    def test_success(self, mock_get):
        """正常系で Record のリストを返すこと."""
        mock_get.return_value = _mock_response(_load_fixture("products.json"))

        records = fetch_products("https://example.test/products")

        assert [r.id for r in records] == [4, 5, 6]
        args, kwargs = mock_get.call_args
        assert args == ("https://example.test/products",)
        assert kwargs["timeout"] == 15
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["headers"]["User-Agent"] == "product-table-viewer/0.1"

    @patch("product_table.api_client.requests.get")
    def test_network_error(self, mock_get):
        """通信エラーでは None を返すこと."""
        mock_get.side_effect = requests.ConnectionError("boom")

        assert fetch_products("https://example.test/products") is None

    @patch("product_table.api_client.requests.get")
    def test_http_error(self, mock_get):
        """非 2xx では None を返すこと."""
        mock_get.return_value = _mock_response(status_error=requests.HTTPError("500"))

        assert fetch_products("https://example.test/products") is None

    @patch("product_table.api_client.requests.get")
    def test_invalid_json(self, mock_get):
        """JSON でないレスポンスでは None を返すこと."""
        mock_get.return_value = _mock_response(json_error=ValueError("no json"))

        assert fetch_products("https://example.test/products") is None

    @patch("product_table.api_client.requests.get")
    def test_not_a_list(self, mock_get):
        """配列以外の JSON では None を返すこと."""
        mock_get.return_value = _mock_response({"message": "oops"})

        assert fetch_products("https://example.test/products") is None

    @patch("product_table.api_client.requests.get")
    def test_empty_list(self, mock_get):
        """空配列はエラーではなく空リスト."""
        mock_get.return_value = _mock_response([])

        assert fetch_products("https://example.test/products") == []


class TestParseProducts:
    """parse_products / parse_product のテスト."""

    def test_skip_invalid(self):
        """title 欠落・price 不正の要素はスキップされること."""
        records = parse_products(_load_fixture("products.json"))

        assert [r.title for r in records] == [
            "Handmade Fresh Table",
            "Classic <Red> Jogger's Sweatpants",
            "Sleek Wireless Headphones",
        ]

    def test_category_name(self):
        records = parse_products(_load_fixture("products.json"))

        assert records[0].category == "Others"
        assert records[1].category == "Clothes & More"
        assert records[2].category is None

    def test_images_tuple(self):
        records = parse_products(_load_fixture("products.json"))

        assert records[0].images == (
            "https://placeimg.com/640/480/any?r=0.9178516507833767",
            "https://placeimg.com/640/480/any?r=0.9300320592588625",
        )
        assert records[2].images == ()

    def test_negative_price(self):
        assert parse_product({"id": 1, "title": "x", "price": -1}) is None

    def test_bool_price(self):
        assert parse_product({"id": 1, "title": "x", "price": True}) is None

    def test_not_dict(self):
        assert parse_product("not a product") is None

    def test_missing_description(self):
        record = parse_product({"id": 1, "title": "x", "price": 1})

        assert record.description == ""
        assert record.images == ()

    def test_non_string_description(self):
        """文字列以外の description は空文字列になり、行の生成で落ちないこと."""
        for value in [12345, ["a", "b"], {"text": "x"}]:
            record = parse_product({"id": 1, "title": "T", "price": 1, "description": value})

            assert record.description == ""
            assert to_row(record).description == "..."


class TestCleanImages:
    """_clean_images のテスト."""

    def test_plain_urls(self):
        assert _clean_images(["https://a.test/1.jpg"]) == ("https://a.test/1.jpg",)

    def test_split_stringified_array(self):
        """文字列化された配列が要素ごとに分割されている場合."""
        images = ['["https://i.imgur.com/a.jpeg"', '"https://i.imgur.com/b.jpeg"]']

        assert _clean_images(images) == (
            "https://i.imgur.com/a.jpeg",
            "https://i.imgur.com/b.jpeg",
        )

    def test_whole_stringified_array(self):
        assert _clean_images(['["https://a.test/1.jpg", "https://a.test/2.jpg"]']) == (
            "https://a.test/1.jpg",
            "https://a.test/2.jpg",
        )

    def test_not_a_list(self):
        assert _clean_images(None) == ()

    def test_drop_empty_and_non_string(self):
        assert _clean_images(["", 3, "https://a.test/1.jpg"]) == ("https://a.test/1.jpg",)
