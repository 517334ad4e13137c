"""
Flight detail models - Seat and bus report for a single flight
Combines flight metadata, occupancy statistics and the reconstructed pairs
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from roster.models.flight import FlightInfo
from roster.models.pair import PairRecord
from roster.models.stats import FlightOccupancyStats


class FlightDetailResult(BaseModel):
    """
    Complete flight detail report

    Built fresh for every request from the flight document and the
    flight_pairings view rows; never persisted.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "flight": {"id": "flight-123", "name": "SSHF-Nov2024", "capacity": 100, "flight_date": "2024-11-05"},
                "stats": {"buses": {}, "tours": {}, "flight": {}},
                "pairs": []
            }
        }
    )

    flight: FlightInfo = Field(default_factory=FlightInfo, description="Flight metadata")
    stats: FlightOccupancyStats = Field(default_factory=FlightOccupancyStats, description="Occupancy counts")
    pairs: Tuple[PairRecord, ...] = Field(default_factory=tuple, description="Veteran/guardian groups")

    @property
    def people_count(self) -> int:
        return sum(pair.size for pair in self.pairs)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready report; the internal pairing claims are never included"""
        return {
            "flight": self.flight.to_dict(),
            "stats": self.stats.to_dict(),
            "pairs": [pair.to_dict() for pair in self.pairs],
        }
