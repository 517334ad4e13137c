"""
Occupancy statistics models - Per-bus, per-tour and per-flight head counts
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from roster.core.normalize import VALID_BUSES


# Tour buckets and the buses that make them up
TOURS: Dict[str, Tuple[str, ...]] = {
    "Alpha": ("Alpha1", "Alpha2", "Alpha3", "Alpha4", "Alpha5"),
    "Bravo": ("Bravo1", "Bravo2", "Bravo3", "Bravo4", "Bravo5"),
    "None": ("None",),
}


def empty_bus_counts() -> Dict[str, int]:
    return {bus: 0 for bus in VALID_BUSES}


def empty_tour_counts() -> Dict[str, int]:
    return {tour: 0 for tour in TOURS}


class FlightOccupancyStats(BaseModel):
    """
    Head counts for one flight

    All buckets count unique person IDs:
    - buses: one entry per bus code, including None
    - tours: Alpha (Alpha1-5), Bravo (Bravo1-5), None
    - flight: same buckets as tours, excluding people marked nofly

    The count tables are read-only mappings.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "buses": {"None": 0, "Alpha1": 2, "Alpha2": 0, "Alpha3": 0, "Alpha4": 0, "Alpha5": 0,
                          "Bravo1": 0, "Bravo2": 1, "Bravo3": 0, "Bravo4": 0, "Bravo5": 0},
                "tours": {"Alpha": 2, "Bravo": 1, "None": 0},
                "flight": {"Alpha": 2, "Bravo": 0, "None": 0}
            }
        }
    )

    buses: Mapping[str, int] = Field(
        default_factory=empty_bus_counts,
        validate_default=True,
        description="Unique people per bus"
    )
    tours: Mapping[str, int] = Field(
        default_factory=empty_tour_counts,
        validate_default=True,
        description="Unique people per tour"
    )
    flight: Mapping[str, int] = Field(
        default_factory=empty_tour_counts,
        validate_default=True,
        description="Unique people per tour who are actually flying"
    )

    @field_validator("buses", "tours", "flight", mode="after")
    @classmethod
    def freeze_counts(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer("buses", "tours", "flight")
    def serialize_counts(self, v):
        return dict(v)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict copies of the count tables"""
        return {
            "buses": dict(self.buses),
            "tours": dict(self.tours),
            "flight": dict(self.flight),
        }
