from .helpers import get_field, is_present, parse_decimal, parse_int, to_date, to_datetime

__all__ = ["get_field", "is_present", "parse_decimal", "parse_int", "to_date", "to_datetime"]
