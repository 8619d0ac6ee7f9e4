import pandas as pd
import numpy as np
from typing import Any, Dict, Sequence, Union

from infoval.config import WOE
from infoval.utils.decorators import requires_fit

SeriesLike = Union[pd.Series, np.ndarray, Sequence]


def _as_series(values: SeriesLike) -> pd.Series:
    return values if isinstance(values, pd.Series) else pd.Series(values)


def _binary_target(Y: SeriesLike, value_of_good: Any) -> pd.Series:
    """Recode Y to 1.0 (good) / 0.0 (bad), keeping missing values as NaN."""
    y = _as_series(Y)
    if y.dropna().nunique() != 2:
        raise ValueError("WOE can't be computed because the Y is not binary.")
    good = (y == value_of_good).astype(float)
    return good.where(y.notna())


def calculate_woe_table(
    X: SeriesLike,
    Y: SeriesLike,
    value_of_good: Any = WOE.DEFAULT_VALUE_OF_GOOD,
    epsilon: float = WOE.DEFAULT_EPSILON,
) -> pd.DataFrame:
    """
    Build the Weight of Evidence table of a categorical feature.

    Args:
        X: Categorical feature. Categorical dtype keeps its level order,
            anything else is converted with sorted levels.
        Y: Binary target with exactly two distinct non-missing values.
        value_of_good: Value of Y counted as 'good'; the other one is 'bad'.
        epsilon: Lower bound applied to the good/bad shares before the log.

    Returns:
        pd.DataFrame: One row per category with columns category, goods,
        bads, total, pct_good, pct_bad, woe, iv. The total Information Value
        is stored in ``attrs["iv"]``.
    """
    x = _as_series(X)
    if len(x) != len(Y):
        raise ValueError(
            f"X and Y must have the same length, got {len(x)} and {len(Y)}."
        )
    y = _binary_target(Y, value_of_good)

    if not isinstance(x.dtype, pd.CategoricalDtype):
        x = x.astype("category")

    df = pd.DataFrame(
        {"category": x.reset_index(drop=True), "good": y.reset_index(drop=True)}
    ).dropna()

    # Calculate Good/Bad stats, unobserved levels included
    grouped = df.groupby("category", observed=False)["good"].agg(["sum", "count"])
    grouped = grouped.rename(columns={"sum": "goods", "count": "total"})
    grouped["goods"] = grouped["goods"].astype(int)
    grouped["bads"] = grouped["total"] - grouped["goods"]

    table = grouped[["goods", "bads", "total"]].copy()
    table["pct_good"] = table["goods"] / table["goods"].sum()
    table["pct_bad"] = table["bads"] / table["bads"].sum()

    # WoE and IV
    table["woe"] = np.log(
        table["pct_good"].clip(lower=epsilon) / table["pct_bad"].clip(lower=epsilon)
    )
    table["iv"] = (table["pct_good"] - table["pct_bad"]) * table["woe"]

    table = table.reset_index()
    table.attrs["iv"] = float(table["iv"].sum())
    return table


def calculate_woe(
    X: SeriesLike,
    Y: SeriesLike,
    value_of_good: Any = WOE.DEFAULT_VALUE_OF_GOOD,
) -> pd.Series:
    """Look up the WOE of each observation's category (NaN for missing X)."""
    table = calculate_woe_table(X, Y, value_of_good=value_of_good)
    woe_map = dict(zip(table["category"], table["woe"]))
    return _as_series(X).astype(object).map(woe_map).astype(float)


class WOEEncoder:
    """
    Weight of Evidence (WoE) Encoder for categorical features.

    Learns the WoE of each category against a binary target and replaces
    categories with it. Categories not seen during fit get the neutral
    WoE of 0.0.
    """

    def __init__(
        self,
        value_of_good: Any = WOE.DEFAULT_VALUE_OF_GOOD,
        epsilon: float = WOE.DEFAULT_EPSILON,
    ):
        self.value_of_good = value_of_good
        self.epsilon = epsilon
        self.woe_map_: Dict[Any, float] = {}
        self.iv_ = 0.0
        self.woe_table_ = pd.DataFrame()
        self.is_fitted_ = False

    def fit(self, X: SeriesLike, y: SeriesLike) -> "WOEEncoder":
        """
        Fit the WoE encoder to the data.

        Args:
            X: Categorical feature data.
            y: Binary target data.
        """
        self.woe_table_ = calculate_woe_table(
            X, y, value_of_good=self.value_of_good, epsilon=self.epsilon
        )
        self.woe_map_ = dict(zip(self.woe_table_["category"], self.woe_table_["woe"]))
        self.iv_ = self.woe_table_.attrs["iv"]
        self.is_fitted_ = True
        return self

    @requires_fit()
    def transform(self, X: SeriesLike) -> pd.Series:
        """
        Transform X using the learned WoE mapping.

        Args:
            X: Feature data to transform.

        Returns:
            Transformed data (WoE values).
        """
        x = _as_series(X)
        mapped = x.astype(object).map(self.woe_map_).astype(float)

        # Unseen categories fall back to neutral WoE, missing stays NaN
        unseen = mapped.isna() & x.notna()
        return mapped.mask(unseen, 0.0)

    def fit_transform(self, X: SeriesLike, y: SeriesLike) -> pd.Series:
        """Fit and transform in one step."""
        self.fit(X, y)
        return self.transform(X)
