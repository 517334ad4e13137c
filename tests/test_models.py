"""
Model tests: person/pair/stats records and their serialized shape
"""

import pytest
from pydantic import ValidationError

from roster.models import (
    FlightDocumentError,
    FlightInfo,
    FlightOccupancyStats,
    PairRecord,
    PersonRecord,
    has_bus_mismatch,
    parse_flight_document,
)

BASE_KEYS = {"type", "id", "name_first", "name_last", "city", "bus", "seat", "shirt", "nofly", "confirmed"}


def test_person_defaults_from_empty_row():
    person = PersonRecord.from_view_row({})
    assert person.kind == "Veteran"
    assert person.id == ""
    assert person.bus == "None"
    assert person.nofly is False
    assert person.confirmed is False
    assert person.med_limits == ""


def test_person_from_malformed_value():
    person = PersonRecord.from_view_row("not a row")
    assert person.id == ""
    assert person.bus == "None"


def test_veteran_fields_only():
    person = PersonRecord.from_view_row({
        "type": "Veteran",
        "id": "vet-123",
        "name_first": "John",
        "name_last": "Smith",
        "city": "Chicago, IL",
        "bus": "Alpha3",
        "seat": "14A",
        "shirt": "XL",
        "med_limits": "[3/3] wheelchair",
        "group": "583-2",
        "med_exprnc": "should not appear",
        "pairing": "guard-456"
    })
    data = person.to_dict()

    assert set(data) == BASE_KEYS | {"med_limits", "group"}
    assert data["type"] == "Veteran"
    assert data["med_limits"] == "[3/3] wheelchair"
    assert "pairing" not in data


def test_guardian_fields_only():
    person = PersonRecord.from_view_row({
        "type": "Guardian",
        "id": "guard-456",
        "med_exprnc": "Retired Nurse",
        "training": "Main [A]",
        "training_complete": "true",
        "group": "should not appear"
    })
    data = person.to_dict()

    assert person.is_guardian
    assert set(data) == BASE_KEYS | {"med_exprnc", "training", "training_complete"}
    assert data["training_complete"] is True


def test_view_encodings_are_normalized():
    person = PersonRecord.from_view_row({
        "type": "Veteran",
        "id": "vet-xyz",
        "bus": "Bravo4",
        "nofly": "nofly",
        "confirmed": ""
    })
    assert person.bus == "Bravo4"
    assert person.nofly is True
    assert person.confirmed is True


def test_unknown_type_is_treated_as_veteran():
    person = PersonRecord.from_view_row({"type": "Volunteer", "id": "x1"})
    assert person.is_veteran
    assert "med_exprnc" not in person.to_dict()


def test_person_rehydrates_to_equal_record():
    person = PersonRecord.from_view_row({
        "type": "Guardian", "id": "g1", "bus": "Bravo2", "confirmed": "unconfirmed", "training_complete": True
    })
    assert PersonRecord.model_validate(person.to_dict()) == person


def test_person_is_immutable():
    person = PersonRecord.from_view_row({"id": "v1", "bus": "Alpha1"})
    with pytest.raises(ValidationError):
        person.bus = "Alpha2"


def test_has_bus_mismatch():
    alpha = PersonRecord.from_view_row({"id": "v1", "bus": "Alpha3"})
    same = PersonRecord.from_view_row({"type": "Guardian", "id": "g1", "bus": "Alpha3"})
    bravo = PersonRecord.from_view_row({"type": "Guardian", "id": "g2", "bus": "Bravo2"})

    assert has_bus_mismatch([]) is False
    assert has_bus_mismatch([alpha]) is False
    assert has_bus_mismatch([alpha, same]) is False
    assert has_bus_mismatch([alpha, bravo]) is True


def test_pair_rehydrates_string_flags():
    pair = PairRecord.model_validate({
        "pairId": "pair-123",
        "busMismatch": "true",
        "missingPairedPerson": "no",
        "people": [{"type": "Veteran", "id": "v1", "bus": "Alpha1"}]
    })
    assert pair.pair_id == "pair-123"
    assert pair.bus_mismatch is True
    assert pair.missing_paired_person is False
    assert pair.people[0].bus == "Alpha1"


def test_pair_to_dict_shape():
    pair = PairRecord(pair_id="g1", people=[PersonRecord.from_view_row({"id": "v1"})])
    data = pair.to_dict()
    assert list(data) == ["pairId", "busMismatch", "missingPairedPerson", "people"]
    assert data["people"][0]["id"] == "v1"


def test_stats_start_at_zero_and_copy_out():
    stats = FlightOccupancyStats()
    data = stats.to_dict()

    assert set(data["buses"]) == {"None", "Alpha1", "Alpha2", "Alpha3", "Alpha4", "Alpha5",
                                  "Bravo1", "Bravo2", "Bravo3", "Bravo4", "Bravo5"}
    assert data["tours"] == {"Alpha": 0, "Bravo": 0, "None": 0}
    assert data["flight"] == {"Alpha": 0, "Bravo": 0, "None": 0}

    data["buses"]["Alpha1"] = 999
    assert stats.buses["Alpha1"] == 0


def test_stats_tables_are_read_only():
    stats = FlightOccupancyStats(buses={"Alpha1": 2}, tours={"Alpha": 2}, flight={"Alpha": 1})

    with pytest.raises(TypeError):
        stats.buses["Alpha1"] = 5
    with pytest.raises(TypeError):
        FlightOccupancyStats().flight["Alpha"] = 1
    assert stats.model_dump()["buses"] == {"Alpha1": 2}


def test_flight_info_from_document(flight_doc):
    flight = parse_flight_document(flight_doc)
    assert flight.to_dict() == {
        "id": "flight-123",
        "name": "SSHF-Nov2024",
        "capacity": 100,
        "flight_date": "2024-11-05"
    }


def test_flight_info_defaults():
    flight = parse_flight_document({"type": "Flight", "name": "SSHF-Dec2024", "capacity": "abc"})
    assert flight.id == ""
    assert flight.capacity == 0
    assert FlightInfo(capacity="150").capacity == 150


def test_non_flight_document_rejected():
    with pytest.raises(FlightDocumentError):
        parse_flight_document({"_id": "vet-1", "type": "Veteran"})
    with pytest.raises(FlightDocumentError):
        parse_flight_document(["not", "a", "document"])


def test_untyped_document_rejected():
    with pytest.raises(FlightDocumentError):
        parse_flight_document({"_id": "flight-123", "name": "SSHF-Nov2024"})
