"""Pandera-backed checks for tabular roster input.

Each helper builds a throwaway `pandera.DataFrameSchema` with
``strict=False`` so unrelated columns pass through untouched, and lets
`pandera.errors.SchemaError` propagate on failure.

Usage:
    >>> import pandas as pd
    >>> from bracket_sim.utils.assertions import assert_columns, assert_value_range
    >>> df = pd.DataFrame({"name": ["Duke"], "seed": [4], "region": ["East"]})
    >>> assert_columns(df, ["name", "seed", "region"])
    >>> assert_value_range(df, "seed", min_val=1, max_val=16)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pandas as pd  # type: ignore[import-untyped]
import pandera.pandas as pa


def assert_columns(df: pd.DataFrame, required: Sequence[str]) -> None:
    """Require every column in *required* to be present.

    Raises:
        pa.errors.SchemaError: If a column is missing.
    """
    if not required:
        return
    pa.DataFrameSchema({col: pa.Column() for col in required}, strict=False).validate(df)


def assert_dtypes(df: pd.DataFrame, expected: Mapping[str, str | type]) -> None:
    """Require each column in *expected* to carry the given dtype.

    A CSV integer column holding ``1.5`` is read as ``float64`` and fails
    ``{"seed": "int64"}``.

    Raises:
        pa.errors.SchemaError: On a dtype mismatch or missing column.
    """
    if not expected:
        return
    pa.DataFrameSchema({col: pa.Column(dtype=dtype) for col, dtype in expected.items()}, strict=False).validate(df)


def assert_no_nulls(df: pd.DataFrame, columns: Sequence[str] | None = None) -> None:
    """Reject null values in *columns* (all columns when ``None``).

    Raises:
        pa.errors.SchemaError: If a null is found or a column is missing.
    """
    cols = list(df.columns) if columns is None else list(columns)
    if not cols:
        return
    pa.DataFrameSchema({col: pa.Column(nullable=False) for col in cols}, strict=False).validate(df)


def assert_value_range(
    df: pd.DataFrame,
    column: str,
    *,
    min_val: float | None = None,
    max_val: float | None = None,
) -> None:
    """Require *column* values to lie within ``[min_val, max_val]``.

    Either bound may be ``None``.  The column must exist even when no bound
    is given.

    Raises:
        pa.errors.SchemaError: On an out-of-range value or missing column.
    """
    checks: list[pa.Check] = []
    if min_val is not None:
        checks.append(pa.Check.ge(min_val))
    if max_val is not None:
        checks.append(pa.Check.le(max_val))
    pa.DataFrameSchema({column: pa.Column(checks=checks or None)}, strict=False).validate(df)
