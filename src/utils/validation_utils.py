import re
from typing import Optional

from ..exceptions import NewsNotFoundError, ValidationError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str, low: int, high: int, name: str) -> int:
    if not isinstance(value, str) or not _INTEGER.fullmatch(value):
        raise ValidationError(f"invalid {name}")

    number = int(value, 10)
    if number < low or number > high:
        raise ValidationError(f"{name} out of range")
    return number


def parse_int32(value: str, name: str = "value") -> int:
    return _parse_int(value, INT32_MIN, INT32_MAX, name)


def parse_int64(value: str, name: str = "value") -> int:
    return _parse_int(value, INT64_MIN, INT64_MAX, name)


def parse_page_param(value: Optional[str], default: int, name: str, max_value: Optional[int] = None) -> int:
    if value is None or value == "":
        return default

    number = parse_int32(value, name)
    if number < 0:
        raise ValidationError(f"{name} must not be negative")
    if max_value is not None and number > max_value:
        raise ValidationError(f"{name} must not exceed {max_value}")
    return number


def validate_news_exists(news, news_id: int) -> None:
    if not news:
        raise NewsNotFoundError(news_id)
