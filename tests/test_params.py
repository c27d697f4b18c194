import pytest

from articles.schemas import NewArticleRequest, VotesUpdateRequest
from core import params
from core.errors import InvalidFormatError, MalformedBodyError


class TestParseId:
    @pytest.mark.parametrize("raw, expected", [("1", 1), ("007", 7), ("2147483647", 2147483647)])
    def test_accepts_digit_strings(self, raw, expected):
        assert params.parse_id(raw) == expected

    @pytest.mark.parametrize("raw", ["three", "-1", "1.5", "", " 3", "3 ", "1e3", "0x1", "٣", None])
    def test_rejects_anything_else_as_format_error(self, raw):
        with pytest.raises(InvalidFormatError):
            params.parse_id(raw)

    def test_rejects_values_beyond_integer_column(self):
        with pytest.raises(InvalidFormatError):
            params.parse_id("2147483648")


class TestPaging:
    def test_defaults(self):
        assert params.parse_limit(None) == 10
        assert params.parse_page(None) == 1

    def test_default_limit_from_env(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PAGE_LIMIT", "25")
        assert params.parse_limit(None) == 25

    def test_zero_limit_is_allowed(self):
        assert params.parse_limit("0") == 0

    @pytest.mark.parametrize("raw", ["five", "-5", "2.5", ""])
    def test_bad_limit(self, raw):
        with pytest.raises(InvalidFormatError):
            params.parse_limit(raw)

    @pytest.mark.parametrize("raw", ["0", "-1", "two", ""])
    def test_bad_page(self, raw):
        with pytest.raises(InvalidFormatError):
            params.parse_page(raw)

    def test_offset(self):
        assert params.page_offset(limit=5, page=1) == 0
        assert params.page_offset(limit=5, page=3) == 10


class TestParseBody:
    def test_exact_keys(self):
        request = params.parse_body(VotesUpdateRequest, {"inc_votes": -3})
        assert request.inc_votes == -3

    def test_optional_key_may_be_omitted(self):
        request = params.parse_body(
            NewArticleRequest,
            {"author": "lurker", "title": "t", "body": "b", "topic": "cats"},
        )
        assert request.article_img_url is None

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"votes": 1},
            {"inc_votes": 1, "extra": True},
            {"inc_votes": "20"},
            {"inc_votes": 1.5},
            [{"inc_votes": 1}],
            None,
        ],
    )
    def test_anything_but_an_exact_match_is_malformed(self, payload):
        with pytest.raises(MalformedBodyError):
            params.parse_body(VotesUpdateRequest, payload)
