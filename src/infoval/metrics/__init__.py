from .classification import (
    calculate_confusion_matrix,
    calculate_fpr_tpr,
    calculate_kappa,
    calculate_misclass_error,
    calculate_sensitivity,
    calculate_specificity,
    calculate_youdens_index,
)
from .concordance import calculate_concordance, calculate_somers_d
from .roc import calculate_auroc, roc_curve, roc_thresholds, trapezoid_area

__all__ = [
    "calculate_auroc",
    "roc_curve",
    "roc_thresholds",
    "trapezoid_area",
    "calculate_fpr_tpr",
    "calculate_sensitivity",
    "calculate_specificity",
    "calculate_youdens_index",
    "calculate_misclass_error",
    "calculate_confusion_matrix",
    "calculate_kappa",
    "calculate_concordance",
    "calculate_somers_d",
]
