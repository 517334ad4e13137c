"""
Pair models - Veteran/guardian groups with data-quality flags
"""

from typing import Any, Dict, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roster.core.normalize import clean_str, parse_boolean
from roster.models.person import PersonRecord


def has_bus_mismatch(people: Sequence[PersonRecord]) -> bool:
    """
    Check whether the people in a group are split across buses

    Args:
        people: Group members in display order

    Returns:
        True if any member's bus differs from the first member's bus.
        Groups of zero or one person never mismatch.
    """
    if len(people) < 2:
        return False
    first_bus = people[0].bus
    return any(person.bus != first_bus for person in people[1:])


class PairRecord(BaseModel):
    """
    One veteran/guardian group on a flight, or an unpaired veteran on their own

    pairId is the guardian's id for guardian-anchored groups and the veteran's
    id for an unpaired veteran.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "pairId": "guard-456",
                "busMismatch": False,
                "missingPairedPerson": False,
                "people": [
                    {"type": "Veteran", "id": "vet-123", "bus": "Alpha3"},
                    {"type": "Guardian", "id": "guard-456", "bus": "Alpha3"}
                ]
            }
        }
    )

    pair_id: str = Field(default="", alias="pairId", description="Guardian ID, or veteran ID when unpaired")
    bus_mismatch: bool = Field(
        default=False,
        alias="busMismatch",
        description="True if the people in the group are not all on the same bus"
    )
    missing_paired_person: bool = Field(
        default=False,
        alias="missingPairedPerson",
        description="True if someone in the group claims a partner who is not on the flight"
    )
    people: Tuple[PersonRecord, ...] = Field(
        default_factory=tuple,
        description="Veterans first, then the guardian"
    )

    @field_validator("pair_id", mode="before")
    @classmethod
    def validate_pair_id(cls, v):
        return clean_str(v)

    @field_validator("bus_mismatch", "missing_paired_person", mode="before")
    @classmethod
    def validate_flags(cls, v):
        """Flags rehydrated from stored JSON may arrive as 'true'/'false' strings"""
        return parse_boolean(v)

    @property
    def size(self) -> int:
        return len(self.people)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pairId": self.pair_id,
            "busMismatch": self.bus_mismatch,
            "missingPairedPerson": self.missing_paired_person,
            "people": [person.to_dict() for person in self.people],
        }
