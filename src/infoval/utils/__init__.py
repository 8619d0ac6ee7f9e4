from .decorators import requires_fit  # noqa: F401
from .validation import check_consistent_length, to_float_array  # noqa: F401
