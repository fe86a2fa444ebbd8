"""
Извлечение JSON из ответа модели и приведение типов

Единая политика для всех генераторов: обрезаем пробелы, снимаем одну
обёртку ```json ... ```, json.loads, проверяем тип верхнего уровня.
Никаких поисков массива регулярками по тексту.
"""
import json
import math
import re
from typing import Any, Iterable

_FENCE_OPEN = re.compile(r"^```[\w-]*\s*")
_FENCE_CLOSE = re.compile(r"\s*```$")


class JSONExtractionError(ValueError):
    """Ответ модели не удалось разобрать как ожидаемый JSON"""
    pass


def strip_code_fence(text: str) -> str:
    trimmed = text.strip()
    trimmed = _FENCE_OPEN.sub("", trimmed, count=1)
    trimmed = _FENCE_CLOSE.sub("", trimmed, count=1)
    return trimmed.strip()


def extract_json(text: str) -> Any:
    cleaned = strip_code_fence(text or "")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise JSONExtractionError(f"Response is not valid JSON: {e.msg}") from e


def extract_json_array(text: str) -> list:
    parsed = extract_json(text)
    if not isinstance(parsed, list):
        raise JSONExtractionError("Response is not an array")
    return parsed


def extract_json_object(text: str, required: Iterable[str] = ()) -> dict:
    parsed = extract_json(text)
    if not isinstance(parsed, dict):
        raise JSONExtractionError("Response is not an object")
    missing = [key for key in required if key not in parsed]
    if missing:
        raise JSONExtractionError(f"Response is missing keys: {', '.join(missing)}")
    return parsed


# ============ ПРИВЕДЕНИЕ ТИПОВ ============

def as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_number(value: Any) -> float:
    """Число или 0 (строки вида "85" разбираются, мусор даёт 0)"""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def as_score(value: Any, low: int = 0, high: int = 100) -> int:
    return int(min(max(round(as_number(value)), low), high))


def as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [as_str(item) for item in value if item is not None]
