from typing import Any, Iterable


def fixed(v: float) -> str:
    return f"{v:f}"


def record(title: str, **fields: Any) -> str:
    body = ", ".join(f"{k} = {v}" for k, v in fields.items())
    return f"{title} = {{ {body} }}"


def bracketed(items: Iterable[Any]) -> str:
    return "[" + ", ".join(str(it) for it in items) + "]"
