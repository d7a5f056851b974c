def require_non_blank(v: str, name: str = "value") -> str:
    if not v.strip():
        raise ValueError(f"{name} must not be blank")
    return v


def is_decimal_id(v: str) -> bool:
    # "".isdecimal() is False, so empty ids fall back to the default price
    return v.isdecimal()


def require_no_separator(v: str, separator: str, name: str = "value") -> str:
    if separator in v:
        raise ValueError(f"{name} must not contain {separator!r}")
    return v
