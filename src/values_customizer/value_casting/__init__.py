"""Value casting exports."""

from .value_caster import cast_value, literal_label, parse_number

__all__ = ["cast_value", "literal_label", "parse_number"]
