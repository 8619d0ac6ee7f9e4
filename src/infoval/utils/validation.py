"""
Input helpers shared by the metric functions.

Actuals and scores arrive as lists, numpy arrays or pandas Series and may
carry missing values (None, NaN, pd.NA). They are converted to float arrays
with NaN marking a missing entry; no rows are dropped here.
"""

from typing import Sequence, Tuple, Union

import numpy as np
import pandas as pd

ArrayLike = Union[np.ndarray, pd.Series, Sequence]


def to_float_array(values: ArrayLike, name: str = "values") -> np.ndarray:
    """
    Convert a 1D array-like to a float64 array with NaN for missing entries.

    Args:
        values: Input sequence.
        name: Argument name used in error messages.

    Returns:
        np.ndarray: 1D float array.
    """
    if isinstance(values, pd.Series):
        series = values
    else:
        arr = np.asarray(values, dtype=object)
        if arr.ndim != 1:
            raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}.")
        series = pd.Series(arr)

    try:
        numeric = pd.to_numeric(series, errors="raise")
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be numeric: {e}") from e

    return numeric.to_numpy(dtype="float64", na_value=np.nan)


def check_consistent_length(
    actuals: ArrayLike, predicted_scores: ArrayLike
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate that actuals and scores are aligned and convert both.

    Raises:
        ValueError: If the two sequences differ in length.
    """
    if len(actuals) != len(predicted_scores):
        raise ValueError(
            "actuals and predicted_scores must have the same length, "
            f"got {len(actuals)} and {len(predicted_scores)}."
        )
    return (
        to_float_array(actuals, name="actuals"),
        to_float_array(predicted_scores, name="predicted_scores"),
    )
