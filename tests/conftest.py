import numpy as np
import pytest


@pytest.fixture(scope="session")
def separable_sample():
    """
    Two classes with non-overlapping score ranges.
    Events score in [0.6, 1.0], non-events in [0.0, 0.4].
    """
    rng = np.random.default_rng(42)
    n = 200
    y_true = np.concatenate([np.ones(n), np.zeros(n)]).astype(int)
    y_prob = np.concatenate(
        [rng.uniform(0.6, 1.0, n), rng.uniform(0.0, 0.4, n)]
    )
    return {"y_true": y_true, "y_prob": y_prob}


@pytest.fixture(scope="session")
def scored_sample():
    """
    Overlapping classes with scores on a 0.05 grid.

    Distinct scores are further apart than the default sweep step and all
    stay below 1, so the swept curve passes through every vertex of the
    exact ROC curve.
    """
    rng = np.random.default_rng(7)
    n = 500
    y_prob = np.round(rng.uniform(0.0, 0.95, n) * 20) / 20
    # Event probability rises with the score
    y_true = rng.binomial(1, 0.2 + 0.6 * y_prob)
    return {"y_true": y_true, "y_prob": y_prob}
