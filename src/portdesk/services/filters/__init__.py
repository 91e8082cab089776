"""Record filtering exports."""

from .criteria import FilterCriteria, filter_records, matches_criteria

__all__ = ["FilterCriteria", "filter_records", "matches_criteria"]
