from .number_predicate import NumberPredicate, parse_number
from .range_predicate import Interval, RangePredicate
from .url_predicate import UrlPredicate

__all__ = [
    "Interval",
    "NumberPredicate",
    "RangePredicate",
    "UrlPredicate",
    "parse_number",
]
