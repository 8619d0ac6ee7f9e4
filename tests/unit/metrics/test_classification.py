import numpy as np
import pandas as pd
import pytest
from sklearn.metrics import cohen_kappa_score, confusion_matrix

from infoval.metrics.classification import (
    calculate_confusion_matrix,
    calculate_fpr_tpr,
    calculate_kappa,
    calculate_misclass_error,
    calculate_sensitivity,
    calculate_specificity,
    calculate_youdens_index,
)


@pytest.fixture
def small_data():
    # Last score is missing
    actuals = [1, 1, 0, 0, 1]
    scores = [0.9, 0.4, 0.3, 0.6, None]
    return actuals, scores


def test_sensitivity(small_data):
    actuals, scores = small_data
    # The event with a missing score stays in the denominator
    assert abs(calculate_sensitivity(actuals, scores) - 1 / 3) < 1e-12


def test_specificity(small_data):
    actuals, scores = small_data
    assert calculate_specificity(actuals, scores) == 0.5


def test_threshold_is_inclusive():
    assert calculate_sensitivity([1, 1], [0.5, 0.49], threshold=0.5) == 0.5
    assert calculate_specificity([0, 0], [0.5, 0.49], threshold=0.5) == 0.5


def test_missing_actuals_excluded():
    actuals = [1, 0, np.nan, 0]
    scores = [0.7, 0.2, 0.9, 0.8]
    assert calculate_sensitivity(actuals, scores) == 1.0
    assert calculate_specificity(actuals, scores) == 0.5


def test_degenerate_classes_give_nan():
    assert np.isnan(calculate_sensitivity([0, 0], [0.1, 0.9]))
    assert np.isnan(calculate_specificity([1, 1], [0.1, 0.9]))


def test_fpr_tpr(small_data):
    actuals, scores = small_data
    fpr, tpr = calculate_fpr_tpr(actuals, scores, threshold=0.5)
    assert fpr == 0.5
    assert abs(tpr - 1 / 3) < 1e-12


def test_youdens_index(small_data):
    actuals, scores = small_data
    j = calculate_youdens_index(actuals, scores)
    assert abs(j - (1 / 3 + 0.5 - 1)) < 1e-12

    assert calculate_youdens_index([1, 0], [0.9, 0.1]) == 1.0


def test_misclass_error(small_data):
    actuals, scores = small_data
    # Two wrong predictions over five rows
    assert calculate_misclass_error(actuals, scores) == 0.4


def test_misclass_error_rounding():
    actuals = [1, 0, 0]
    scores = [0.2, 0.1, 0.1]
    assert calculate_misclass_error(actuals, scores) == 0.3333


def test_misclass_error_empty():
    assert np.isnan(calculate_misclass_error([], []))


def test_confusion_matrix(small_data):
    actuals, scores = small_data
    matrix = calculate_confusion_matrix(actuals, scores)

    assert isinstance(matrix, pd.DataFrame)
    assert list(matrix.index) == [0, 1]
    assert list(matrix.columns) == [0, 1]
    assert matrix.index.name == "predicted"
    assert matrix.columns.name == "actual"
    # Missing score row dropped
    assert matrix.to_numpy().sum() == 4
    assert (matrix.to_numpy() == 1).all()


def test_confusion_matrix_fills_absent_classes():
    matrix = calculate_confusion_matrix([1, 0], [0.9, 0.8])
    assert matrix.loc[0].sum() == 0
    assert matrix.loc[1, 0] == 1
    assert matrix.loc[1, 1] == 1


def test_confusion_matrix_matches_sklearn(scored_sample):
    y_true = scored_sample["y_true"]
    y_prob = scored_sample["y_prob"]
    y_pred = (y_prob >= 0.5).astype(int)

    ours = calculate_confusion_matrix(y_true, y_prob, threshold=0.5).to_numpy()
    reference = confusion_matrix(y_true, y_pred, labels=[0, 1])

    # sklearn puts actuals on rows
    assert (ours == reference.T).all()


def test_kappa_matches_sklearn(scored_sample):
    y_true = scored_sample["y_true"]
    y_prob = scored_sample["y_prob"]

    for threshold in [0.3, 0.5, 0.7]:
        y_pred = (y_prob >= threshold).astype(int)
        kappa = calculate_kappa(y_true, y_prob, threshold=threshold)
        assert abs(kappa - cohen_kappa_score(y_true, y_pred)) < 1e-9


def test_kappa_edge_cases():
    assert calculate_kappa([1, 1, 0, 0], [0.9, 0.8, 0.2, 0.1]) == 1.0
    # Every observation predicted and observed as the same class
    assert np.isnan(calculate_kappa([1, 1], [0.9, 0.8]))
    assert np.isnan(calculate_kappa([None], [None]))


@pytest.mark.parametrize(
    "func",
    [
        calculate_sensitivity,
        calculate_specificity,
        calculate_youdens_index,
        calculate_misclass_error,
        calculate_confusion_matrix,
        calculate_kappa,
        calculate_fpr_tpr,
    ],
)
def test_length_mismatch(func):
    with pytest.raises(ValueError, match="same length"):
        func([1, 0, 1], [0.5, 0.5])
