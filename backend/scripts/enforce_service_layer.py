"""
Engineering audit: Enforce service layer pattern.
Scans code and fails if workflow writes are detected outside services.py.
"""

import sys
from pathlib import Path

# pattern -> the only module allowed to contain it
FORBIDDEN_PATTERNS = {
    "AdoptionRequest.objects.create(": "apps/adoptions/services.py",
    "AdoptionRequest.objects.update(": "apps/adoptions/services.py",
    ".current_status = ": "apps/animals/services.py",
    ".quantity_on_hand = ": "apps/inventory/services.py",
    "ActivityLog.objects.create(": "apps/activity/services.py",
}

SKIPPED_PARTS = ("__pycache__", ".venv", "tests", "migrations", "management", "scripts")


def scan_file(filepath):
    """Scan Python file for forbidden patterns."""
    issues = []
    content = filepath.read_text()
    for pattern, allowed_path in FORBIDDEN_PATTERNS.items():
        if allowed_path in filepath.as_posix():
            continue
        if pattern in content:
            issues.append(f"{filepath}: Found {pattern}")
    return issues


def main():
    backend = Path(__file__).resolve().parent.parent
    all_issues = []

    for pyfile in backend.rglob("*.py"):
        if any(part in pyfile.parts for part in SKIPPED_PARTS):
            continue
        all_issues.extend(scan_file(pyfile))

    if all_issues:
        print("ERROR: Workflow writes detected outside the service layer:")
        for issue in all_issues:
            print(f"  {issue}")
        sys.exit(1)

    print("OK: No workflow writes outside service layer")


if __name__ == "__main__":
    main()
