"""
Run the incident analysis engine from the command line.

Usage:
    python scripts/analyze_incident.py "Rajesh Kumar reported a theft at Main Street on 15 January 2024"
    python scripts/analyze_incident.py --type Theft --file incident.txt
"""
import sys
import argparse
import logging
from pathlib import Path

# Add backend to path
sys.path.append(str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv("backend/.env")

from app.services.analysis.models import InvalidInputError
from app.services.analysis.service import analysis_service

logging.basicConfig(level=logging.INFO)


def main():
    parser = argparse.ArgumentParser(description="Analyze an incident description")
    parser.add_argument("description", nargs="?", default="", help="Incident description text")
    parser.add_argument("--file", help="Read the description from a text file instead")
    parser.add_argument("--type", default="", help="Incident type hint (e.g. Theft)")
    args = parser.parse_args()

    description = args.description
    if args.file:
        description = Path(args.file).read_text(encoding="utf-8")

    try:
        result = analysis_service.analyze(description, args.type)
    except InvalidInputError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(result.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
