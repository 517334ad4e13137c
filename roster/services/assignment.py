"""
Assignment Roster - Pairs, ordering and head counts from the flight_assignment view
Rows arrive sorted by [flightName, pairId], so a pair is a run of consecutive rows
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Set

from roster.core.normalize import is_confirmation_date
from roster.models.assignment import AssignmentCounts, AssignmentPair, AssignmentPerson, FlightAssignment
from roster.models.flight import parse_assignment_flight_document
from roster.services.pairing import row_value

logger = logging.getLogger(__name__)


def _finish_pair(pair_id: str, group: str, app_date: str, people: List[AssignmentPerson]) -> AssignmentPair:
    """A lone person naming a partner means the partner is missing from the pair"""
    missing = False
    if len(people) < 2 and people and people[0].paired_with.strip():
        missing = True
    return AssignmentPair(
        pair_id=pair_id,
        group=group,
        app_date=app_date,
        missing_person=missing,
        people=people
    )


def build_assignment_pairs(rows: Iterable[Mapping[str, Any]]) -> List[AssignmentPair]:
    """
    Group flight_assignment view rows into pairs

    A new pair starts whenever the row's "pair" key differs from the previous
    row's. The pair takes its group and application date from its first row.

    Args:
        rows: View rows for one flight, in view order

    Returns:
        List of AssignmentPair objects in view order
    """
    pairs: List[AssignmentPair] = []
    current_people: List[AssignmentPerson] = []
    current_id: Optional[str] = None
    current_group = ""
    current_app_date = ""

    for row in rows:
        value = row_value(row)
        pair_id = value.get("pair")
        pair_id = pair_id if isinstance(pair_id, str) else ""

        if current_id is None or pair_id != current_id:
            if current_id is not None:
                pairs.append(_finish_pair(current_id, current_group, current_app_date, current_people))
            current_id = pair_id
            current_people = []
            current_group = value.get("group") or ""
            current_app_date = value.get("appdate") or ""

        current_people.append(AssignmentPerson.from_view_row(value))

    if current_id is not None:
        pairs.append(_finish_pair(current_id, current_group, current_app_date, current_people))

    logger.debug(f"Grouped assignment rows into {len(pairs)} pairs")
    return pairs


def sort_pairs(pairs: Sequence[AssignmentPair]) -> List[AssignmentPair]:
    """
    Order pairs for the roster screen

    Descending by (group or 'aa') + appDate: ungrouped pairs come ahead of
    groups named with capitals, and newer applications come first within a
    bucket. Equal keys keep their view order.
    """
    return sorted(pairs, key=lambda pair: pair.sort_key, reverse=True)


def calculate_counts(pairs: Iterable[AssignmentPair], capacity: int) -> AssignmentCounts:
    """
    Count booked and confirmed veterans and guardians

    People marked nofly are left out, and each person ID is counted once.

    Args:
        pairs: Assignment pairs for one flight
        capacity: Seat capacity of the flight

    Returns:
        AssignmentCounts including remaining = capacity - veterans - guardians
    """
    veterans: Set[str] = set()
    guardians: Set[str] = set()
    veterans_confirmed: Set[str] = set()
    guardians_confirmed: Set[str] = set()

    for pair in pairs:
        for person in pair.people:
            if person.nofly:
                continue

            if person.type == "Veteran":
                veterans.add(person.id)
                if is_confirmation_date(person.confirmed):
                    veterans_confirmed.add(person.id)
            elif person.type == "Guardian":
                guardians.add(person.id)
                if is_confirmation_date(person.confirmed):
                    guardians_confirmed.add(person.id)

    return AssignmentCounts(
        veterans=len(veterans),
        guardians=len(guardians),
        veterans_confirmed=len(veterans_confirmed),
        guardians_confirmed=len(guardians_confirmed),
        remaining=capacity - len(veterans) - len(guardians)
    )


def build_flight_assignment(
    flight_doc: Mapping[str, Any],
    rows: Iterable[Mapping[str, Any]]
) -> FlightAssignment:
    """
    Build the flight assignment report

    Args:
        flight_doc: The flight's own document
        rows: flight_assignment view rows scoped to this flight

    Returns:
        FlightAssignment with sorted pairs and counts

    Raises:
        FlightDocumentError: If flight_doc is not a flight record
    """
    flight = parse_assignment_flight_document(flight_doc)
    pairs = sort_pairs(build_assignment_pairs(rows))
    counts = calculate_counts(pairs, flight.capacity)

    if counts.remaining < 0:
        logger.warning(f"Flight {flight.name or flight.id} is overbooked by {-counts.remaining}")
    logger.info(
        f"Assignment roster for {flight.name or flight.id}: "
        f"{counts.veterans} veterans, {counts.guardians} guardians, {counts.remaining} seats left"
    )

    return FlightAssignment(flight=flight, counts=counts, pairs=pairs)
