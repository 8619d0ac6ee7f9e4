"""
ROC curve by threshold sweep and area under it.

The curve is sampled on a fixed grid of thresholds running from
``max(scores, 1)`` down past ``min(scores, 0)`` in steps of ``step``, so it
always brackets the [0, 1] decision range. The area is integrated with the
trapezoid rule in sweep order and, by default, divided by
``max(fpr) * max(tpr)``: for curves that never reach the (1, 1) corner this
differs from the textbook AUC.
"""

import warnings
from typing import Sequence, Union

import numpy as np
import pandas as pd

from infoval.config import ROC
from infoval.utils.validation import (
    ArrayLike,
    check_consistent_length,
    to_float_array,
)

from .classification import calculate_fpr_tpr

# Absorbs float error in (start - stop) / step before rounding up.
_SWEEP_TOLERANCE = 1e-9


def roc_thresholds(
    predicted_scores: ArrayLike, step: float = ROC.DEFAULT_STEP
) -> np.ndarray:
    """
    Generate the strictly decreasing threshold sweep.

    Args:
        predicted_scores: Predicted scores, missing values ignored.
        step: Distance between consecutive thresholds.

    Returns:
        np.ndarray: Thresholds starting at ``max(scores, 1)``; the last one is
        the first value at or below ``min(scores, 0) - step``.
    """
    if not np.isfinite(step) or step <= 0:
        raise ValueError(f"step must be a positive finite number, got {step}.")

    scores = to_float_array(predicted_scores, name="predicted_scores")
    if np.isinf(scores).any():
        raise ValueError("predicted_scores contains infinite values.")

    start = np.nanmax(np.append(scores, 1.0))
    stop = np.nanmin(np.append(scores, 0.0)) - step

    n_steps = int(np.ceil((start - stop) / step - _SWEEP_TOLERANCE))
    return start - step * np.arange(n_steps + 1)


def roc_curve(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    step: float = ROC.DEFAULT_STEP,
) -> pd.DataFrame:
    """
    Compute the ROC trajectory over the threshold sweep.

    Each point is computed independently from the full observation set.

    Args:
        actuals: Binary labels (1 = event).
        predicted_scores: Predicted scores.
        step: Sweep resolution.

    Returns:
        pd.DataFrame: Columns 'fpr', 'tpr', 'threshold', one row per threshold
        in decreasing threshold order.
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)

    points = [
        (*calculate_fpr_tpr(actuals, scores, threshold=threshold), threshold)
        for threshold in roc_thresholds(scores, step=step)
    ]
    return pd.DataFrame(points, columns=["fpr", "tpr", "threshold"])


def trapezoid_area(
    x: Union[np.ndarray, pd.Series, Sequence[float]],
    y: Union[np.ndarray, pd.Series, Sequence[float]],
) -> float:
    """
    Integrate y over x with the trapezoid rule, points taken in given order.

    Args:
        x: X coordinates.
        y: Y coordinates, same length as x.

    Returns:
        float: sum((x2 - x1) * (y1 + y2) / 2); 0.0 for fewer than two points.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise ValueError("x and y must have the same shape.")
    if len(x) < 2:
        return 0.0

    return float(np.sum(np.diff(x) * (y[:-1] + y[1:]) / 2))


def calculate_auroc(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    step: float = ROC.DEFAULT_STEP,
    normalize: bool = True,
) -> float:
    """
    Calculate the Area Under the ROC curve from the threshold sweep.

    Args:
        actuals: Binary labels (1 = event), missing allowed.
        predicted_scores: Predicted scores, missing allowed.
        step: Sweep resolution. Scores closer than ``step`` may not be told
            apart.
        normalize: Divide by ``max(fpr) * max(tpr)`` of the trajectory. With
            False the raw trapezoid area is returned.

    Returns:
        float: AUROC. NaN when the actuals hold a single class.
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)

    labels = actuals[~np.isnan(actuals)]
    n_events = int(np.sum(labels == 1))
    if n_events == 0 or n_events == len(labels):
        warnings.warn(
            "AUROC is undefined: actuals contain a single class.", stacklevel=2
        )

    curve = roc_curve(actuals, scores, step=step)
    area = trapezoid_area(curve["fpr"], curve["tpr"])
    if not normalize:
        return area

    extent = curve["fpr"].max(skipna=False) * curve["tpr"].max(skipna=False)
    if not extent > 0:
        return np.nan

    return float(area / extent)
