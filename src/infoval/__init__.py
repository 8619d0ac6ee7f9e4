"""
Infoval - Classifier Evaluation and Information Value Toolkit

A small Python library for assessing binary classification models with:
- ROC curve by threshold sweep and area under it
- Threshold statistics (sensitivity, specificity, Youden's index, kappa)
- Concordance and Somers' D
- WOE/IV analysis of categorical predictors
"""

__version__ = "0.1.0"

# WOE/IV analysis
from infoval.features.analysis import (
    WOEEncoder,
    calculate_iv,
    calculate_woe,
    calculate_woe_table,
    describe_iv,
    rank_iv,
)

# Metrics
from infoval.metrics import (
    calculate_auroc,
    calculate_concordance,
    calculate_confusion_matrix,
    calculate_fpr_tpr,
    calculate_kappa,
    calculate_misclass_error,
    calculate_sensitivity,
    calculate_somers_d,
    calculate_specificity,
    calculate_youdens_index,
    roc_curve,
    roc_thresholds,
    trapezoid_area,
)

__all__ = [
    # ROC
    "calculate_auroc",
    "roc_curve",
    "roc_thresholds",
    "trapezoid_area",
    # Threshold statistics
    "calculate_fpr_tpr",
    "calculate_sensitivity",
    "calculate_specificity",
    "calculate_youdens_index",
    "calculate_misclass_error",
    "calculate_confusion_matrix",
    "calculate_kappa",
    # Pairs
    "calculate_concordance",
    "calculate_somers_d",
    # WOE/IV
    "WOEEncoder",
    "calculate_woe_table",
    "calculate_woe",
    "calculate_iv",
    "describe_iv",
    "rank_iv",
]
