from .woe_calculator import (  # noqa: F401
    WOEEncoder,
    calculate_woe,
    calculate_woe_table,
)
from .iv_calculator import calculate_iv, describe_iv, rank_iv  # noqa: F401
