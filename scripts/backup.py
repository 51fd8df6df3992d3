"""Backup one project to a JSON file.

Note: the file keeps the camelCase shape the front end uses, so it can be
inspected or re-imported by hand.
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import Container, build_container


def project_snapshot(container: Container, project_id: str) -> dict:
    financials = container.financials_repo.get_for_project(project_id)
    return {
        "projectId": project_id,
        "projectName": container.project_service.get(project_id).name,
        "employees": [e.to_dict() for e in container.employees_repo.list_for_project(project_id)],
        "attendance": container.attendance_repo.get_ledger(project_id),
        "settings": container.settings_service.get(project_id).to_dict(),
        "financials": {
            emp_id: {
                str(year): {str(month): fin.to_dict() for month, fin in months.items()}
                for year, months in years.items()
            }
            for emp_id, years in financials.items()
        },
        "notes": container.notes_repo.get_for_project(project_id),
    }


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    default_project_id = getattr(settings, "DEFAULT_PROJECT_ID", "default")
    parser.add_argument("--project", default=default_project_id)
    args = parser.parse_args()

    container = build_container(db_config=settings.DB_CONFIG, default_project_id=default_project_id)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"payroll_{args.project}_{ts}.json"

    out_file.write_text(
        json.dumps(project_snapshot(container, args.project), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
