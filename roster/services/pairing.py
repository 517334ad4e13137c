"""
Pairing Builder - Reconstructs veteran/guardian groups for one flight
The flight_pairings view only carries a single partner claim per row, so groups are rebuilt here
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Set, Tuple, Union

from roster.core.normalize import parse_partner_claim
from roster.models.pair import PairRecord, has_bus_mismatch
from roster.models.person import PersonRecord

logger = logging.getLogger(__name__)

# Person id, or the row number for rows that carry no id
PersonKey = Union[str, int]


def row_value(row: Any) -> Mapping[str, Any]:
    """Return the value object of a view row, or an empty mapping if it has none"""
    if not isinstance(row, Mapping):
        return {}
    value = row.get("value")
    if not isinstance(value, Mapping):
        return {}
    return value


class PairingBuilder:
    """
    Groups the people assigned to a flight around their guardians

    Core Logic:
    - Guardians are deduplicated by ID (the view repeats a guardian once per veteran)
    - Every veteran claiming a guardian who is on the flight joins that guardian's group
    - Veterans whose claim is empty or points off the flight stand alone
    - Guardians nobody claimed still get a group of their own
    - busMismatch / missingPairedPerson are computed once per finished group
    """

    def build(self, rows: Iterable[Mapping[str, Any]]) -> List[PairRecord]:
        """
        Build pair records from flight_pairings view rows

        Args:
            rows: View rows for one flight; each row's "value" holds the person
                  fields plus "pairing", the ID of the partner the row claims

        Returns:
            Guardian-anchored groups (in the order they were first formed),
            followed by unpaired veterans (in encounter order)

        Example:
            builder = PairingBuilder()
            pairs = builder.build([
                {"value": {"type": "Veteran", "id": "v1", "bus": "Alpha1", "pairing": "g1"}},
                {"value": {"type": "Guardian", "id": "g1", "bus": "Alpha1", "pairing": "v1"}}
            ])
        """
        present_ids: Set[str] = set()
        veterans: Dict[PersonKey, Tuple[PersonRecord, str]] = {}
        guardians: Dict[PersonKey, Tuple[PersonRecord, List[str]]] = {}
        row_count = 0

        # First pass: normalize every row and dedupe people by ID
        for row in rows:
            row_count += 1
            value = row_value(row)
            person = PersonRecord.from_view_row(value)
            claim = parse_partner_claim(value.get("pairing"))

            # Rows without an id are never duplicates of each other
            key: PersonKey = person.id
            if not person.id:
                logger.warning(f"View row {row_count} has no person id; keeping it under an empty id")
                key = row_count
            present_ids.add(person.id)

            if person.is_guardian:
                if key not in guardians:
                    guardians[key] = (person, [claim] if claim else [])
                else:
                    # Later occurrences only contribute their partner claim
                    claims = guardians[key][1]
                    if claim and claim not in claims:
                        claims.append(claim)
            elif key in veterans:
                logger.debug(f"Duplicate veteran row for {person.id!r} ignored")
            else:
                veterans[key] = (person, claim)

        # Second pass: group veterans under the guardian they claim
        groups: Dict[PersonKey, List[Tuple[PersonRecord, str]]] = {}
        unpaired: List[Tuple[PersonRecord, str]] = []

        for person, claim in veterans.values():
            if claim and claim in guardians:
                groups.setdefault(claim, []).append((person, claim))
            else:
                unpaired.append((person, claim))

        # Guardians on the flight whose veterans are not
        for guardian_key in guardians:
            if guardian_key not in groups:
                groups[guardian_key] = []

        pairs: List[PairRecord] = []

        for guardian_key, members in groups.items():
            guardian, guardian_claims = guardians[guardian_key]
            people = [person for person, _ in members] + [guardian]
            claims = [claim for _, claim in members] + guardian_claims
            pairs.append(self._make_pair(guardian.id, people, claims, present_ids))

        for person, claim in unpaired:
            pairs.append(self._make_pair(person.id, [person], [claim], present_ids))

        self._log_summary(row_count, pairs)
        return pairs

    @staticmethod
    def _make_pair(
        pair_id: str,
        people: List[PersonRecord],
        claims: List[str],
        present_ids: Set[str]
    ) -> PairRecord:
        """
        Finish a group and compute its data-quality flags

        Args:
            pair_id: Guardian ID or lone veteran ID
            people: Group members, veterans first
            claims: Partner IDs claimed by members ('' means no claim)
            present_ids: Every person ID on the flight
        """
        missing = any(claim and claim not in present_ids for claim in claims)
        return PairRecord(
            pair_id=pair_id,
            people=people,
            bus_mismatch=has_bus_mismatch(people),
            missing_paired_person=missing
        )

    @staticmethod
    def _log_summary(row_count: int, pairs: List[PairRecord]) -> None:
        mismatches = sum(1 for pair in pairs if pair.bus_mismatch)
        missing = sum(1 for pair in pairs if pair.missing_paired_person)
        logger.info(
            f"Built {len(pairs)} pairs from {row_count} rows "
            f"({mismatches} bus mismatches, {missing} missing partners)"
        )


# Convenience function for one-off grouping
def build_pairs(rows: Iterable[Mapping[str, Any]]) -> List[PairRecord]:
    """
    Group flight_pairings view rows without keeping a PairingBuilder around

    Args:
        rows: View rows for one flight

    Returns:
        List of PairRecord objects
    """
    return PairingBuilder().build(rows)
