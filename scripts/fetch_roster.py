"""Print the current roster as JSON using the service layer (no Flask).

Usage: python scripts/fetch_roster.py
"""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.office_presence.office_presence.container import build_container
from src.office_presence.office_presence.core.exceptions import DomainError


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    try:
        roster = container.roster_service.get_roster_json()
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(dict(sorted(roster.items())), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
