import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

def parse_leading_int(value: Any) -> Optional[int]:
    """문자열 앞부분의 정수를 추출 (예: '3abc' -> 3, 'abc' -> None)"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # int 변환 자릿수 제한(4300자리)을 넘는 값
        return None

def blank_to_none(value: Any) -> Any:
    """빈 문자열 필터는 지정되지 않은 것으로 처리"""
    if isinstance(value, str) and not value.strip():
        return None
    return value
