"""
Models sub-package: formula interface for scikit-learn estimators
(:mod:`~statnotes.models.formula`), statsmodels and penalized regressions
(:mod:`~statnotes.models.regression`), classifiers and ensembles
(:mod:`~statnotes.models.classification`) and the evaluation helpers shared
by all of them (:mod:`~statnotes.models.evaluation`).
"""
from .formula import (
    split_formula,
    expand_formula,
    design_matrices,
    FormulaModel,
)
from .regression import (
    fit_ols,
    fit_polynomial,
    compare_models,
    fit_logistic,
    odds_ratios,
    fit_quantile,
    fit_regularized,
    coefficient_table,
)
from .classification import (
    make_estimator,
    fit_classifier,
    fit_regressor,
    feature_importances,
    tune_hyperparameters,
)
from .evaluation import (
    split_data,
    cross_validate_model,
    classification_metrics,
    regression_metrics,
    confusion_table,
)

__all__ = [
    "split_formula",
    "expand_formula",
    "design_matrices",
    "FormulaModel",
    "fit_ols",
    "fit_polynomial",
    "compare_models",
    "fit_logistic",
    "odds_ratios",
    "fit_quantile",
    "fit_regularized",
    "coefficient_table",
    "make_estimator",
    "fit_classifier",
    "fit_regressor",
    "feature_importances",
    "tune_hyperparameters",
    "split_data",
    "cross_validate_model",
    "classification_metrics",
    "regression_metrics",
    "confusion_table",
]
