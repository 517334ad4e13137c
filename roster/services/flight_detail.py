"""
Flight Detail Service - Assembles the seat/bus report for one flight
Runs the pairing builder, then the statistics aggregator, over rows the caller already fetched
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from roster.models.flight import parse_flight_document
from roster.models.flight_detail import FlightDetailResult
from roster.services.pairing import PairingBuilder
from roster.services.statistics import StatisticsAggregator

logger = logging.getLogger(__name__)


class FlightDetailService:
    """
    Builds FlightDetailResult reports

    Holds no per-flight state, so one instance can serve any number of flights
    (including concurrently).
    """

    def __init__(
        self,
        builder: Optional[PairingBuilder] = None,
        aggregator: Optional[StatisticsAggregator] = None
    ):
        """
        Initialize the service

        Args:
            builder: Pairing builder to use (default PairingBuilder())
            aggregator: Statistics aggregator to use (default StatisticsAggregator())
        """
        self.builder = builder or PairingBuilder()
        self.aggregator = aggregator or StatisticsAggregator()

    def build(
        self,
        flight_doc: Mapping[str, Any],
        rows: Iterable[Mapping[str, Any]]
    ) -> FlightDetailResult:
        """
        Build the flight detail report

        Args:
            flight_doc: The flight's own document (_id, name, capacity, flight_date)
            rows: flight_pairings view rows scoped to this flight

        Returns:
            FlightDetailResult with flight metadata, stats and pairs

        Raises:
            FlightDocumentError: If flight_doc is not a flight record
        """
        flight = parse_flight_document(flight_doc)
        logger.info(f"Building flight detail for {flight.name or flight.id or '<unnamed flight>'}")

        # Statistics need the finished pair list
        pairs = self.builder.build(rows)
        stats = self.aggregator.aggregate(pairs)

        return FlightDetailResult(flight=flight, stats=stats, pairs=pairs)


def build_flight_detail(
    flight_doc: Mapping[str, Any],
    rows: Iterable[Mapping[str, Any]]
) -> FlightDetailResult:
    """
    Build a flight detail report with the default builder and aggregator

    Raises:
        FlightDocumentError: If flight_doc is not a flight record
    """
    return FlightDetailService().build(flight_doc, rows)
