from typing import Any, Dict, List, Optional, Union

import pandas as pd

from infoval.config import WOE

from .woe_calculator import SeriesLike, calculate_woe_table


def describe_iv(iv: float) -> str:
    """
    Label the predictive power of an Information Value.

    Args:
        iv: Information Value.

    Returns:
        str: 'Not Predictive', 'Somewhat Predictive' or 'Highly Predictive'.
    """
    if iv < WOE.NOT_PREDICTIVE_IV:
        return "Not Predictive"
    elif iv < WOE.SOMEWHAT_PREDICTIVE_IV:
        return "Somewhat Predictive"
    return "Highly Predictive"


def calculate_iv(
    X: SeriesLike,
    Y: SeriesLike,
    value_of_good: Any = WOE.DEFAULT_VALUE_OF_GOOD,
) -> Dict[str, Union[float, str, pd.DataFrame]]:
    """
    Calculate Information Value (IV) for a categorical feature.

    Args:
        X: Categorical feature.
        Y: Binary target.
        value_of_good: Value of Y counted as 'good'.

    Returns:
        Dict containing 'iv' (float), 'predictive_power' (str) and
        'woe_table' (pd.DataFrame).
    """
    woe_table = calculate_woe_table(X, Y, value_of_good=value_of_good)
    iv = woe_table.attrs["iv"]

    return {
        "iv": iv,
        "predictive_power": describe_iv(iv),
        "woe_table": woe_table,
    }


def rank_iv(
    df: pd.DataFrame,
    target: str,
    features: Optional[List[str]] = None,
    value_of_good: Any = WOE.DEFAULT_VALUE_OF_GOOD,
) -> pd.DataFrame:
    """
    Calculate IV for several features and rank them.

    Parameters
    ----------
    df : pd.DataFrame
        Data containing the features and the target.
    target : str
        Target column name.
    features : List[str], optional
        Columns to evaluate. If None, every column except the target.
    value_of_good : Any
        Value of the target counted as 'good'.

    Returns
    -------
    pd.DataFrame
        Columns feature, iv, predictive_power sorted by IV descending.

    Examples
    --------
    >>> ranking = rank_iv(df, target="default")
    >>> ranking[ranking["predictive_power"] == "Highly Predictive"]
    """
    if target not in df.columns:
        raise ValueError(f"Target column '{target}' not found.")

    if features is None:
        features = [c for c in df.columns if c != target]
    else:
        missing = [f for f in features if f not in df.columns]
        if missing:
            raise ValueError(f"Features not found: {missing}")

    rows = []
    for feature in features:
        result = calculate_iv(df[feature], df[target], value_of_good=value_of_good)
        rows.append(
            {
                "feature": feature,
                "iv": result["iv"],
                "predictive_power": result["predictive_power"],
            }
        )

    ranking = pd.DataFrame(rows, columns=["feature", "iv", "predictive_power"])
    return ranking.sort_values(by="iv", ascending=False, ignore_index=True)
