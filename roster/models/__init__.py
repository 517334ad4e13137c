"""
Models package - Pydantic schemas for roster records and reports
"""

from .person import PersonRecord, PersonKind, BusCode
from .pair import PairRecord, has_bus_mismatch
from .stats import FlightOccupancyStats, TOURS
from .flight import (
    FlightInfo,
    AssignmentFlightInfo,
    FlightDocumentError,
    parse_flight_document,
    parse_assignment_flight_document
)
from .flight_detail import FlightDetailResult
from .assignment import (
    AssignmentPerson,
    AssignmentPair,
    AssignmentCounts,
    FlightAssignment
)

__all__ = [
    "PersonRecord",
    "PersonKind",
    "BusCode",
    "PairRecord",
    "has_bus_mismatch",
    "FlightOccupancyStats",
    "TOURS",
    "FlightInfo",
    "AssignmentFlightInfo",
    "FlightDocumentError",
    "parse_flight_document",
    "parse_assignment_flight_document",
    "FlightDetailResult",
    "AssignmentPerson",
    "AssignmentPair",
    "AssignmentCounts",
    "FlightAssignment"
]
