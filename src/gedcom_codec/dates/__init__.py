from .partial import GEDCOM_MONTHS, format_partial_date, parse_partial_date

__all__ = ["GEDCOM_MONTHS", "format_partial_date", "parse_partial_date"]
