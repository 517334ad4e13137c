"""
Assignment models - Flight assignment roster built from the flight_assignment view
Used by the flight coordinators to see who is booked, confirmed and contacted
"""

from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roster.core.normalize import clean_id, clean_str, parse_boolean, parse_nofly, parse_yes_no
from roster.models.flight import AssignmentFlightInfo


class AssignmentPerson(BaseModel):
    """
    One person row of the flight assignment roster

    confirmed holds the confirmation date as emitted by the view (blank when
    the person has not confirmed yet), paired_with the partner's ID.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "type": "Veteran",
                "id": "vet-123",
                "name_first": "John",
                "name_last": "Smith",
                "city": "Chicago",
                "appdate": "2024-01-15",
                "group": "GroupA",
                "nofly": False,
                "fm_number": "FM-001",
                "assigned_to": "Caller1",
                "mail_sent": True,
                "email_sent": True,
                "confirmed": "2024-02-01",
                "paired_with": "guard-456"
            }
        }
    )

    type: str = Field(default="", description="Veteran or Guardian")
    id: str = Field(default="", description="Person document ID")
    name_first: str = Field(default="")
    name_last: str = Field(default="")
    city: str = Field(default="")
    appdate: str = Field(default="", description="Application date")
    group: str = Field(default="", description="Travel group")
    nofly: bool = Field(default=False)
    fm_number: str = Field(default="", description="Flight manager number")
    assigned_to: str = Field(default="", description="Caller responsible for this person")
    mail_sent: bool = Field(default=False, description="Invitation mailed")
    email_sent: bool = Field(default=False, description="Invitation emailed")
    confirmed: str = Field(default="", description="Confirmation date, blank if unconfirmed")
    paired_with: str = Field(default="", description="Partner ID")

    @field_validator(
        "type", "name_first", "name_last", "city", "appdate", "group",
        "fm_number", "assigned_to", "confirmed",
        mode="before"
    )
    @classmethod
    def validate_text(cls, v):
        return clean_str(v)

    @field_validator("id", "paired_with", mode="before")
    @classmethod
    def validate_ids(cls, v):
        return clean_id(v)

    @field_validator("nofly", mode="before")
    @classmethod
    def validate_nofly(cls, v):
        """Accepts the view's 'nofly' token as well as a plain 'true'"""
        return parse_nofly(v) or parse_boolean(v)

    @field_validator("mail_sent", "email_sent", mode="before")
    @classmethod
    def validate_sent(cls, v):
        """The view emits 'Y'/'N'; stored JSON may carry 'true'"""
        return parse_yes_no(v) or parse_boolean(v)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_view_row(cls, value: Any) -> "AssignmentPerson":
        if not isinstance(value, Mapping):
            value = {}
        return cls.model_validate(value)


class AssignmentPair(BaseModel):
    """
    A pair on the assignment roster, as keyed by the flight_assignment view
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pair_id: str = Field(default="", alias="pairId")
    group: str = Field(default="")
    app_date: str = Field(default="", alias="appDate")
    missing_person: bool = Field(
        default=False,
        alias="missingPerson",
        description="True if a lone person in the pair names a partner who is not in it"
    )
    people: Tuple[AssignmentPerson, ...] = Field(default_factory=tuple)

    @field_validator("pair_id", "group", "app_date", mode="before")
    @classmethod
    def validate_text(cls, v):
        return clean_str(v)

    @field_validator("missing_person", mode="before")
    @classmethod
    def validate_missing_person(cls, v):
        return parse_boolean(v)

    @property
    def sort_key(self) -> str:
        """Group (or 'aa' when ungrouped) followed by the application date"""
        return (self.group or "aa") + self.app_date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pairId": self.pair_id,
            "group": self.group,
            "appDate": self.app_date,
            "missingPerson": self.missing_person,
            "people": [person.to_dict() for person in self.people],
        }


class AssignmentCounts(BaseModel):
    """Head counts for the assignment roster, nofly people excluded"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    veterans: int = Field(default=0)
    guardians: int = Field(default=0)
    veterans_confirmed: int = Field(default=0, alias="veteransConfirmed")
    guardians_confirmed: int = Field(default=0, alias="guardiansConfirmed")
    remaining: int = Field(default=0, description="Capacity minus booked veterans and guardians")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class FlightAssignment(BaseModel):
    """Complete flight assignment report"""

    model_config = ConfigDict(frozen=True)

    flight: AssignmentFlightInfo = Field(default_factory=AssignmentFlightInfo)
    counts: AssignmentCounts = Field(default_factory=AssignmentCounts)
    pairs: Tuple[AssignmentPair, ...] = Field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flight": self.flight.to_dict(),
            "counts": self.counts.to_dict(),
            "pairs": [pair.to_dict() for pair in self.pairs],
        }
