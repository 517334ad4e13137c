"""
Flight data models - Flight metadata taken from the flight document
Handles lenient parsing of the stored flight record into the fields reports need
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roster.core.normalize import clean_str


FLIGHT_DOC_TYPE = "Flight"


class FlightDocumentError(ValueError):
    """Raised when the metadata document handed in is not a flight record"""
    pass


class FlightInfo(BaseModel):
    """
    Flight metadata echoed back in roster reports
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "flight-123",
                "name": "SSHF-Nov2024",
                "capacity": 100,
                "flight_date": "2024-11-05"
            }
        }
    )

    id: str = Field(default="", description="Flight document ID")
    name: str = Field(default="", description="Flight name, e.g. SSHF-Nov2024")
    capacity: int = Field(default=0, description="Seat capacity")
    flight_date: str = Field(default="", description="Flight date in YYYY-MM-DD format")

    @field_validator("id", "name", "flight_date", mode="before")
    @classmethod
    def validate_text(cls, v):
        return clean_str(v)

    @field_validator("capacity", mode="before")
    @classmethod
    def validate_capacity(cls, v):
        """Capacity defaults to 0 when absent or not a whole number"""
        if isinstance(v, bool) or v is None:
            return 0
        if isinstance(v, int):
            return v
        if isinstance(v, float) and v.is_integer():
            return int(v)
        if isinstance(v, str):
            try:
                return int(v.strip())
            except ValueError:
                return 0
        return 0

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class AssignmentFlightInfo(FlightInfo):
    """Flight metadata for assignment reports, which also echo the document revision"""

    rev: str = Field(default="", description="Document revision")

    @field_validator("rev", mode="before")
    @classmethod
    def validate_rev(cls, v):
        return clean_str(v)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "rev": self.rev,
            "name": self.name,
            "capacity": self.capacity,
            "flight_date": self.flight_date,
        }


def check_flight_document(doc: Any) -> Mapping[str, Any]:
    """
    Make sure a metadata document can be reported on as a flight

    Args:
        doc: Flight document as stored (keys _id, _rev, type, name, capacity, flight_date)

    Returns:
        The document as a mapping

    Raises:
        FlightDocumentError: If doc is not a mapping or its type is not Flight
    """
    if not isinstance(doc, Mapping):
        raise FlightDocumentError("Flight document must be a JSON object")

    doc_type = doc.get("type")
    if doc_type != FLIGHT_DOC_TYPE:
        raise FlightDocumentError(f"Document is not a flight record (type={doc_type!r})")

    return doc


def parse_flight_document(doc: Any) -> FlightInfo:
    """
    Extract report metadata from a flight document

    Raises:
        FlightDocumentError: If the document is not a flight record
    """
    doc = check_flight_document(doc)
    return FlightInfo(
        id=doc.get("_id", doc.get("id")),
        name=doc.get("name"),
        capacity=doc.get("capacity"),
        flight_date=doc.get("flight_date")
    )


def parse_assignment_flight_document(doc: Any) -> AssignmentFlightInfo:
    """Same as parse_flight_document, keeping the document revision"""
    doc = check_flight_document(doc)
    return AssignmentFlightInfo(
        id=doc.get("_id", doc.get("id")),
        rev=doc.get("_rev", doc.get("rev")),
        name=doc.get("name"),
        capacity=doc.get("capacity"),
        flight_date=doc.get("flight_date")
    )
