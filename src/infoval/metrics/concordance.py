from typing import Dict, Union

import numpy as np

from infoval.utils.validation import ArrayLike, check_consistent_length


def calculate_concordance(
    actuals: ArrayLike, predicted_scores: ArrayLike
) -> Dict[str, Union[float, int]]:
    """
    Calculate concordant, discordant and tied pair shares.

    Every event (actual == 1) is paired with every non-event (actual == 0).
    A pair is concordant when the event has the higher score. Rows with a
    missing actual or score are dropped before pairing.

    Args:
        actuals: Binary labels (0/1).
        predicted_scores: Predicted scores.

    Returns:
        Dict with 'concordance', 'discordance', 'tied' (shares of all pairs,
        NaN without pairs) and 'pairs' (number of event/non-event pairs).
    """
    actuals, scores = check_consistent_length(actuals, predicted_scores)

    present = ~np.isnan(actuals) & ~np.isnan(scores)
    ones = scores[present & (actuals == 1)]
    zeros = np.sort(scores[present & (actuals == 0)])

    total_pairs = len(ones) * len(zeros)
    if total_pairs == 0:
        return {
            "concordance": np.nan,
            "discordance": np.nan,
            "tied": np.nan,
            "pairs": 0,
        }

    # For each event score: non-events strictly below / at or below it
    below = np.searchsorted(zeros, ones, side="left")
    below_or_equal = np.searchsorted(zeros, ones, side="right")

    concordant = int(np.sum(below))
    discordant = int(np.sum(len(zeros) - below_or_equal))
    tied = total_pairs - concordant - discordant

    return {
        "concordance": concordant / total_pairs,
        "discordance": discordant / total_pairs,
        "tied": tied / total_pairs,
        "pairs": total_pairs,
    }


def calculate_somers_d(actuals: ArrayLike, predicted_scores: ArrayLike) -> float:
    """
    Calculate Somers' D.
    D = concordance - discordance

    Args:
        actuals: Binary labels (0/1).
        predicted_scores: Predicted scores.

    Returns:
        float: Somers' D in [-1, 1], NaN without event/non-event pairs.
    """
    result = calculate_concordance(actuals, predicted_scores)
    return result["concordance"] - result["discordance"]
