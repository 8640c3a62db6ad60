import pytest

from src.exceptions import NewsNotFoundError, ValidationError
from src.utils.validation_utils import (
    INT32_MAX,
    parse_int32,
    parse_int64,
    parse_page_param,
    validate_news_exists,
)


class TestParseInt:
    def test_parses_decimal_string(self):
        assert parse_int32("42") == 42
        assert parse_int64("-3") == -3

    @pytest.mark.parametrize("value", ["", "abc", "1.5", "1_000", "0x10", "12a", " 7 ", "7\n"])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_int32(value, "limit")
        assert exc_info.value.message == "invalid limit"

    def test_int32_overflow(self):
        assert parse_int32(str(INT32_MAX)) == INT32_MAX
        with pytest.raises(ValidationError, match="out of range"):
            parse_int32(str(INT32_MAX + 1), "limit")

    def test_int64_accepts_values_beyond_int32(self):
        assert parse_int64("9223372036854775807") == 2 ** 63 - 1
        with pytest.raises(ValidationError):
            parse_int64("9223372036854775808")


class TestParsePageParam:
    def test_missing_value_uses_default(self):
        assert parse_page_param(None, 10, "limit") == 10
        assert parse_page_param("", 5, "offset") == 5

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            parse_page_param("-1", 10, "offset")

    def test_max_value(self):
        assert parse_page_param("50", 10, "limit", max_value=50) == 50
        with pytest.raises(ValidationError, match="exceed"):
            parse_page_param("51", 10, "limit", max_value=50)

    def test_no_cap_by_default(self):
        assert parse_page_param(str(INT32_MAX), 10, "limit") == INT32_MAX


def test_validate_news_exists():
    validate_news_exists(object(), 1)
    with pytest.raises(NewsNotFoundError) as exc_info:
        validate_news_exists(None, 9)
    assert exc_info.value.status_code == 400
    assert "not found" in exc_info.value.message
