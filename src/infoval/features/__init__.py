"""Feature analysis for categorical predictors."""
