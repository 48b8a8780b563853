"""Query-string construction for backend URLs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import quote_plus

ParamValue = str | int | float | bool | None | Sequence[str | int]


def _to_text(value: str | int | float | bool) -> str:
    # The backend expects JSON-style booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    # 1.0 is sent as 1, the way a JSON client prints it
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_url_with_params(url: str, params: Mapping[str, ParamValue]) -> str:
    """Append *params* to *url* as a form-encoded query string.

    ``None`` values are dropped.  Lists and tuples expand to repeated
    ``key[]=item`` pairs in sequence order.  Keys keep the mapping's insertion
    order.  When nothing remains, *url* is returned unchanged::

        >>> build_url_with_params("/reports", {"metric": "all", "ids": [1, 2]})
        '/reports?metric=all&ids[]=1&ids[]=2'
    """
    pairs: list[str] = []

    for key, value in params.items():
        if value is None:
            continue

        if isinstance(value, (list, tuple)):
            array_key = quote_plus(str(key)) + "[]"
            for item in value:
                pairs.append(f"{array_key}={quote_plus(_to_text(item))}")
        else:
            pairs.append(f"{quote_plus(str(key))}={quote_plus(_to_text(value))}")

    if not pairs:
        return url
    return f"{url}?{'&'.join(pairs)}"
