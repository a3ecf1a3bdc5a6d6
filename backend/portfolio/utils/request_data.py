from typing import Any, Dict, Iterable, Mapping

from flask import request

from portfolio.errors import InvalidInput


def json_body() -> Dict[str, Any]:
    """Returns the request's JSON object or raises InvalidInput."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Invalid JSON in request body.")
    return data


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    missing = [name for name in fields if is_blank(data.get(name))]
    if missing:
        raise InvalidInput(f"Missing required fields: {', '.join(missing)}")


def pick_fields(data: Mapping[str, Any], allowed: Mapping[str, str]) -> Dict[str, Any]:
    """
    Translates allow-listed JSON keys into model attribute names.

    Keys outside the allow-list are ignored.
    """
    return {attr: data[key] for key, attr in allowed.items() if key in data}
