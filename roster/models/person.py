"""
Person models - Normalized veteran/guardian assignment records
Built from flight_pairings view rows through the field normalizer
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from roster.core.normalize import (
    clean_id,
    clean_str,
    normalize_bus,
    parse_boolean,
    parse_confirmed,
    parse_nofly,
)


class PersonKind(str, Enum):
    """Document type of a person on the roster"""
    VETERAN = "Veteran"
    GUARDIAN = "Guardian"


class BusCode(str, Enum):
    """Bus assignments for the tour day"""
    NONE = "None"
    ALPHA1 = "Alpha1"
    ALPHA2 = "Alpha2"
    ALPHA3 = "Alpha3"
    ALPHA4 = "Alpha4"
    ALPHA5 = "Alpha5"
    BRAVO1 = "Bravo1"
    BRAVO2 = "Bravo2"
    BRAVO3 = "Bravo3"
    BRAVO4 = "Bravo4"
    BRAVO5 = "Bravo5"


VETERAN_FIELDS = ("med_limits", "group")
GUARDIAN_FIELDS = ("med_exprnc", "training", "training_complete")


class PersonRecord(BaseModel):
    """
    One veteran or guardian assigned to a flight

    Key Fields:
    - kind is serialized as "type" to match the source documents
    - bus is always a member of BusCode
    - Veteran records carry med_limits/group, Guardian records carry
      med_exprnc/training/training_complete; the other kind's fields stay
      None and are left out of to_dict()
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "type": "Veteran",
                "id": "vet-123",
                "name_first": "John",
                "name_last": "Smith",
                "city": "Chicago, IL",
                "bus": "Alpha3",
                "seat": "14A",
                "shirt": "XL",
                "nofly": False,
                "confirmed": True,
                "med_limits": "[3/3] wheelchair",
                "group": "583-2"
            }
        }
    )

    # Identification
    kind: PersonKind = Field(default=PersonKind.VETERAN.value, alias="type", description="Veteran or Guardian")
    id: str = Field(default="", description="Person document ID")

    # Display fields
    name_first: str = Field(default="", description="First name")
    name_last: str = Field(default="", description="Last name")
    city: str = Field(default="", description="Home city")

    # Tour day assignment
    bus: BusCode = Field(default=BusCode.NONE.value, description="Bus assignment: None, Alpha1-5, Bravo1-5")
    seat: str = Field(default="", description="Seat on the aircraft")
    shirt: str = Field(default="", description="Shirt size")
    nofly: bool = Field(default=False, description="Assigned but not flying")
    confirmed: bool = Field(default=False, description="Attendance confirmed")

    # Veteran only
    med_limits: Optional[str] = Field(default=None, description="Medical limitations (Veteran)")
    group: Optional[str] = Field(default=None, description="Travel group (Veteran)")

    # Guardian only
    med_exprnc: Optional[str] = Field(default=None, description="Medical experience (Guardian)")
    training: Optional[str] = Field(default=None, description="Training session (Guardian)")
    training_complete: Optional[bool] = Field(default=None, description="Training completed (Guardian)")

    @model_validator(mode="before")
    @classmethod
    def shape_kind_fields(cls, data: Any) -> Any:
        """Resolve the kind and keep only the fields that belong to it"""
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, Mapping):
            data = {}

        data = dict(data)
        raw_kind = data.pop("type", data.pop("kind", None))
        kind = PersonKind.GUARDIAN if raw_kind == PersonKind.GUARDIAN.value else PersonKind.VETERAN
        data["kind"] = kind

        if kind == PersonKind.VETERAN:
            data["med_limits"] = clean_str(data.get("med_limits"))
            data["group"] = clean_str(data.get("group"))
            for name in GUARDIAN_FIELDS:
                data[name] = None
        else:
            data["med_exprnc"] = clean_str(data.get("med_exprnc"))
            data["training"] = clean_str(data.get("training"))
            data["training_complete"] = parse_boolean(data.get("training_complete"))
            for name in VETERAN_FIELDS:
                data[name] = None
        return data

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v):
        """Numeric ids are kept as their string form"""
        return clean_id(v)

    @field_validator("name_first", "name_last", "city", "seat", "shirt", mode="before")
    @classmethod
    def validate_text(cls, v):
        """Missing or non-string display values become empty strings"""
        return clean_str(v)

    @field_validator("bus", mode="before")
    @classmethod
    def validate_bus(cls, v):
        return normalize_bus(v)

    @field_validator("nofly", mode="before")
    @classmethod
    def validate_nofly(cls, v):
        return parse_nofly(v)

    @field_validator("confirmed", mode="before")
    @classmethod
    def validate_confirmed(cls, v):
        return parse_confirmed(v)

    @property
    def is_guardian(self) -> bool:
        return self.kind == PersonKind.GUARDIAN

    @property
    def is_veteran(self) -> bool:
        return self.kind == PersonKind.VETERAN

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with only the kind-appropriate fields"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_view_row(cls, value: Any) -> "PersonRecord":
        """
        Build a PersonRecord from the value object of a view row

        Never raises: unknown keys (such as the pairing claim) are ignored and
        malformed fields fall back to defaults.
        """
        if not isinstance(value, Mapping):
            value = {}
        return cls.model_validate(value)
