"""
Decorators guarding stateful encoders.
"""

from functools import wraps
from typing import Callable, TypeVar

F = TypeVar("F", bound=Callable)


def requires_fit(attr_name: str = "is_fitted_") -> Callable[[F], F]:
    """
    Refuse to run a method until the instance has been fitted.

    Parameters
    ----------
    attr_name : str
        Boolean attribute set by ``fit``. Default "is_fitted_".

    Returns
    -------
    Callable
        Decorator whose wrapped method raises ValueError on an unfitted
        instance, naming both the class and the method.

    Examples
    --------
    >>> class CategoryEncoder:
    ...     def __init__(self):
    ...         self.is_fitted_ = False
    ...
    ...     @requires_fit()
    ...     def transform(self, X):
    ...         return X
    >>> CategoryEncoder().transform(["a"])
    Traceback (most recent call last):
    ...
    ValueError: CategoryEncoder is not fitted. Call fit() before transform().
    """

    def decorator(method: F) -> F:
        @wraps(method)
        def wrapper(self, *args, **kwargs):
            if getattr(self, attr_name, False):
                return method(self, *args, **kwargs)
            raise ValueError(
                f"{type(self).__name__} is not fitted. "
                f"Call fit() before {method.__name__}()."
            )

        return wrapper  # type: ignore

    return decorator
