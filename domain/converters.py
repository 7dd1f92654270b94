"""
Type Conversion Utilities for Domain Model Factories

Safe conversions used when building domain models from DataFrame rows read
out of the build store. SQLite hands back NULLs as NaN/None and booleans as
0/1 integers; these helpers normalise both.

Usage:
    ```python
    from domain.converters import safe_int, safe_str, safe_bool

    build_id = safe_int(row.get('id'))                  # 0 if null
    handle = safe_str(row.get('social_handle'))         # "" if null
    express = safe_bool(row.get('express_delivery'))    # False if null
    ```
"""

import pandas as pd


def safe_int(value, default: int = 0) -> int:
    """
    Convert value to int, returning default if null.

    Examples:
        >>> safe_int(42)
        42
        >>> safe_int(None)
        0
        >>> safe_int(pd.NA, default=-1)
        -1
    """
    if pd.isna(value):
        return default
    return int(value)


def safe_str(value, default: str = "") -> str:
    """
    Convert value to str, returning default if null.

    Examples:
        >>> safe_str("Ducati")
        'Ducati'
        >>> safe_str(float("nan"))
        ''
        >>> safe_str(2024)
        '2024'
    """
    if pd.isna(value):
        return default
    return str(value)


def safe_bool(value, default: bool = False) -> bool:
    """
    Convert a stored flag to bool, returning default if null.

    Accepts real booleans, 0/1 integers and the strings "true"/"false".

    Examples:
        >>> safe_bool(1)
        True
        >>> safe_bool(0)
        False
        >>> safe_bool("false")
        False
        >>> safe_bool(None, default=True)
        True
    """
    if pd.isna(value):
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)
