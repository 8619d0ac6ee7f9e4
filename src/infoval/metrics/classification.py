"""
Threshold-based classification statistics.

An observation is predicted as an event when its score is greater than or
equal to the threshold. Missing actuals or scores are excluded by each
statistic at the point of use, so the rows each one drops can differ.
"""

from typing import Tuple

import numpy as np
import pandas as pd

from infoval.config import CLASSIFICATION
from infoval.utils.validation import ArrayLike, check_consistent_length


def _safe_ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return np.nan
    return float(numerator / denominator)


def _predicted_direction(scores: np.ndarray, threshold: float) -> np.ndarray:
    """1.0 for score >= threshold, 0.0 below it, NaN where the score is missing."""
    predicted = np.where(scores < threshold, 0.0, 1.0)
    predicted[np.isnan(scores)] = np.nan
    return predicted


def calculate_sensitivity(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> float:
    """
    Calculate sensitivity (true positive rate).

    Share of event observations (actual == 1) scored at or above the
    threshold. Every event row counts in the denominator; an event row with a
    missing score is never counted as detected.

    Args:
        actuals: Binary labels (1 = event), missing allowed.
        predicted_scores: Predicted scores, missing allowed.
        threshold: Decision threshold.

    Returns:
        float: Sensitivity, NaN when there are no event observations.
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)

    events = actuals == 1
    detected = events & (scores >= threshold)
    return _safe_ratio(np.sum(detected), np.sum(events))


def calculate_specificity(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> float:
    """
    Calculate specificity (true negative rate).

    Share of non-event observations (non-missing actual != 1) scored below
    the threshold.

    Args:
        actuals: Binary labels (1 = event), missing allowed.
        predicted_scores: Predicted scores, missing allowed.
        threshold: Decision threshold.

    Returns:
        float: Specificity, NaN when there are no non-event observations.
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)

    non_events = ~np.isnan(actuals) & (actuals != 1)
    rejected = non_events & (scores < threshold)
    return _safe_ratio(np.sum(rejected), np.sum(non_events))


def calculate_fpr_tpr(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> Tuple[float, float]:
    """
    Calculate one ROC point at a threshold.

    Returns:
        Tuple[float, float]: (1 - specificity, sensitivity).
    """
    fpr = 1 - calculate_specificity(actuals, predicted_scores, threshold=threshold)
    tpr = calculate_sensitivity(actuals, predicted_scores, threshold=threshold)
    return fpr, tpr


def calculate_youdens_index(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> float:
    """
    Calculate Youden's J statistic.
    J = sensitivity + specificity - 1
    """
    sensitivity = calculate_sensitivity(actuals, predicted_scores, threshold=threshold)
    specificity = calculate_specificity(actuals, predicted_scores, threshold=threshold)
    return sensitivity + specificity - 1


def calculate_misclass_error(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> float:
    """
    Calculate the misclassification error rate.

    Pairs where the actual or the score is missing are never counted as
    errors, but they stay in the denominator.

    Args:
        actuals: Binary labels.
        predicted_scores: Predicted scores.
        threshold: Decision threshold.

    Returns:
        float: Error rate rounded to ``CLASSIFICATION.ROUND_DIGITS`` decimals.
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)
    if len(actuals) == 0:
        return np.nan

    predicted = _predicted_direction(scores, threshold)
    both_present = ~np.isnan(predicted) & ~np.isnan(actuals)
    errors = np.sum(predicted[both_present] != actuals[both_present])

    return round(float(errors / len(actuals)), CLASSIFICATION.ROUND_DIGITS)


def calculate_confusion_matrix(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> pd.DataFrame:
    """
    Build the confusion matrix at a threshold.

    Parameters
    ----------
    actuals : array-like
        Binary labels (0/1).
    predicted_scores : array-like
        Predicted scores.
    threshold : float
        Decision threshold.

    Returns
    -------
    pd.DataFrame
        Counts with predicted class (0, 1) as rows and actual class (0, 1)
        as columns. Rows with a missing actual or score are dropped.

    Examples
    --------
    >>> calculate_confusion_matrix([1, 0, 1], [0.8, 0.6, 0.2])
    actual     0  1
    predicted
    0          0  1
    1          1  1
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)

    predicted = _predicted_direction(scores, threshold)
    classes = [0, 1]

    # NaN never equals a class, so incomplete rows drop out here
    counts = [
        [int(np.sum((predicted == p) & (actuals == a))) for a in classes]
        for p in classes
    ]
    return pd.DataFrame(
        counts,
        index=pd.Index(classes, name="predicted"),
        columns=pd.Index(classes, name="actual"),
    )


def calculate_kappa(
    actuals: ArrayLike,
    predicted_scores: ArrayLike,
    threshold: float = CLASSIFICATION.DEFAULT_THRESHOLD,
) -> float:
    """
    Calculate Cohen's kappa between predicted and actual classes.

    Args:
        actuals: Binary labels (0/1).
        predicted_scores: Predicted scores.
        threshold: Decision threshold.

    Returns:
        float: (p_o - p_e) / (1 - p_e), NaN if undefined.
    """
    matrix = calculate_confusion_matrix(
        actuals, predicted_scores, threshold=threshold
    ).to_numpy(dtype=float)

    total = matrix.sum()
    if total == 0:
        return np.nan

    observed_agreement = np.trace(matrix) / total
    # Chance agreement: predicted marginals times actual marginals.
    expected_agreement = np.sum(matrix.sum(axis=1) * matrix.sum(axis=0)) / total**2

    return _safe_ratio(observed_agreement - expected_agreement, 1 - expected_agreement)
