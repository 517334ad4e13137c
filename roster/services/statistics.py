"""
Statistics Aggregator - Occupancy counts for a finished set of pairs
Counts unique people per bus, per tour and per flight (nofly excluded)
"""

import logging
from typing import Dict, Iterable, Set

from roster.core.normalize import NO_BUS, VALID_BUSES
from roster.models.pair import PairRecord
from roster.models.stats import TOURS, FlightOccupancyStats

logger = logging.getLogger(__name__)


class StatisticsAggregator:
    """
    Computes the buses/tours/flight tables of a flight detail report

    A person is counted once per bus no matter how many pairs they show up in,
    since deduplication is by person ID.
    """

    def aggregate(self, pairs: Iterable[PairRecord]) -> FlightOccupancyStats:
        """
        Calculate occupancy statistics

        Args:
            pairs: Finished pair records for one flight

        Returns:
            FlightOccupancyStats with all three tables filled in
        """
        bus_people: Dict[str, Set[str]] = {bus: set() for bus in VALID_BUSES}
        flying_people: Dict[str, Set[str]] = {bus: set() for bus in VALID_BUSES}

        for pair in pairs:
            for person in pair.people:
                bus = person.bus or NO_BUS
                if bus not in bus_people:
                    logger.debug(f"Person {person.id!r} has unknown bus {bus!r}; not counted")
                    continue

                bus_people[bus].add(person.id)
                if not person.nofly:
                    flying_people[bus].add(person.id)

        stats = FlightOccupancyStats(
            buses={bus: len(bus_people[bus]) for bus in VALID_BUSES},
            tours=self._tour_counts(bus_people),
            flight=self._tour_counts(flying_people)
        )

        logger.debug(f"Occupancy: tours={stats.tours} flight={stats.flight}")
        return stats

    @staticmethod
    def _tour_counts(people_by_bus: Dict[str, Set[str]]) -> Dict[str, int]:
        """Sum the per-bus set sizes into the Alpha/Bravo/None buckets"""
        return {
            tour: sum(len(people_by_bus[bus]) for bus in buses)
            for tour, buses in TOURS.items()
        }


# Convenience function for quick aggregation
def calculate_stats(pairs: Iterable[PairRecord]) -> FlightOccupancyStats:
    """
    Calculate occupancy statistics without keeping an aggregator around

    Args:
        pairs: Finished pair records

    Returns:
        FlightOccupancyStats
    """
    return StatisticsAggregator().aggregate(pairs)
