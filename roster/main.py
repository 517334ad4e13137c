"""
Flight Roster Engine - Command-line entry point
Builds flight detail or assignment reports from an exported flight document and its view rows
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Load .env file explicitly (before reading settings)
from dotenv import load_dotenv

from roster.core.config import configure_logging, get_settings
from roster.models.flight import FlightDocumentError
from roster.services.assignment import build_flight_assignment
from roster.services.flight_detail import build_flight_detail

logger = logging.getLogger(__name__)

REPORTS = ("detail", "assignments")


def load_export(path: Path) -> Dict[str, Any]:
    """
    Read an export file holding {"flight": {...}, "rows": [...]}

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid JSON or lacks a flight document
    """
    with path.open(encoding="utf-8") as handle:
        data = json.load(handle)

    if not isinstance(data, dict) or not isinstance(data.get("flight"), dict):
        raise ValueError(f"{path} must contain an object with a 'flight' document")

    rows = data.get("rows") or []
    if not isinstance(rows, list):
        raise ValueError(f"'rows' in {path} must be a list of view rows")

    return {"flight": data["flight"], "rows": rows}


def run_report(report: str, flight_doc: Dict[str, Any], rows: List[Any]) -> Dict[str, Any]:
    """Build the requested report and return it as a JSON-ready dict"""
    if report == "detail":
        return build_flight_detail(flight_doc, rows).to_dict()
    if report == "assignments":
        return build_flight_assignment(flight_doc, rows).to_dict()
    raise ValueError(f"Unknown report {report!r}; expected one of {REPORTS}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build flight roster reports from exported view rows")
    parser.add_argument("report", choices=REPORTS, help="Report to build")
    parser.add_argument("export", type=Path, help="JSON file with the flight document and view rows")
    parser.add_argument("--indent", type=int, default=2, help="Indentation of the JSON output")
    parser.add_argument("--env-file", type=Path, default=Path(".env"), help="Environment file to load")
    args = parser.parse_args(argv)

    load_dotenv(dotenv_path=args.env_file)
    settings = get_settings()
    configure_logging(settings)
    logger.debug(f"{settings.app_name} v{settings.app_version} ({settings.environment})")

    try:
        export = load_export(args.export)
        result = run_report(args.report, export["flight"], export["rows"])
    except FlightDocumentError as e:
        logger.error(f"Rejected flight document: {str(e)}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not read {args.export}: {str(e)}")
        return 1

    json.dump(result, sys.stdout, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
