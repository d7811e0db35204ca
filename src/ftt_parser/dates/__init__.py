from .edtf import is_valid_date, parse_date

__all__ = ["is_valid_date", "parse_date"]
