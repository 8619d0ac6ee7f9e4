import pytest

from infoval.utils.decorators import requires_fit


class ThresholdPicker:
    def __init__(self):
        self.is_fitted_ = False
        self.calibrated = False

    def fit(self):
        self.is_fitted_ = True

    def calibrate(self):
        self.calibrated = True

    @requires_fit()
    def best_threshold(self):
        return 0.5

    @requires_fit(attr_name="calibrated")
    def calibrated_threshold(self):
        return 0.42


def test_requires_fit_success():
    obj = ThresholdPicker()
    obj.fit()
    assert obj.best_threshold() == 0.5


def test_requires_fit_failure():
    obj = ThresholdPicker()
    with pytest.raises(ValueError, match="ThresholdPicker is not fitted"):
        obj.best_threshold()


def test_custom_attr_success():
    obj = ThresholdPicker()
    obj.calibrate()
    assert obj.calibrated_threshold() == 0.42


def test_custom_attr_failure():
    obj = ThresholdPicker()
    # Regular fit does not set the custom flag
    obj.fit()
    with pytest.raises(ValueError, match="ThresholdPicker is not fitted"):
        obj.calibrated_threshold()


def test_wraps_preserves_name():
    assert ThresholdPicker.best_threshold.__name__ == "best_threshold"


def test_error_names_method():
    with pytest.raises(ValueError, match=r"before calibrated_threshold\(\)"):
        ThresholdPicker().calibrated_threshold()
