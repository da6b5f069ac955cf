"""Calendar policy, entry generation, aggregation and baseline engines."""
from worktime_sync.engine.aggregator import aggregate
from worktime_sync.engine.calendar_policy import check_eligibility, is_eligible
from worktime_sync.engine.synthesizer import generate_entries
from worktime_sync.engine.required_hours import compute_required_hours

__all__ = [
    "aggregate",
    "check_eligibility",
    "is_eligible",
    "generate_entries",
    "compute_required_hours",
]
