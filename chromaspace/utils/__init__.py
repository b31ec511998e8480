from .num_utils import clamp, round_to, is_close_to_int, as_percentage, PERCENT_PRECISION

__all__ = ["clamp", "round_to", "is_close_to_int", "as_percentage", "PERCENT_PRECISION"]
