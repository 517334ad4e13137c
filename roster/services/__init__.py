"""
Services package - Pairing, statistics and report assembly
"""

from .pairing import PairingBuilder, build_pairs
from .statistics import StatisticsAggregator, calculate_stats
from .flight_detail import FlightDetailService, build_flight_detail
from .assignment import (
    build_assignment_pairs,
    sort_pairs,
    calculate_counts,
    build_flight_assignment
)

__all__ = [
    "PairingBuilder",
    "build_pairs",
    "StatisticsAggregator",
    "calculate_stats",
    "FlightDetailService",
    "build_flight_detail",
    "build_assignment_pairs",
    "sort_pairs",
    "calculate_counts",
    "build_flight_assignment"
]
