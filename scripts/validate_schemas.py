"""Checks every bundled (or given) schema document against the SemSchema vocabulary."""

from pathlib import Path
import json
import sys

from semschema.validation.api import validate_schema


SCHEMA_DIR = Path(__file__).resolve().parent.parent / "semschema" / "schemas"


def validate(schema_dir: Path = SCHEMA_DIR) -> list[str]:
    failures = []
    for schema in sorted(schema_dir.glob("*.schema.json")):
        data = json.loads(schema.read_text(encoding="utf-8"))
        result = validate_schema(data)
        if not result.valid:
            failures.append(f"{schema.name}: {result.message}")
    return failures


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else SCHEMA_DIR
    problems = validate(target)
    for problem in problems:
        print(problem)
    sys.exit(1 if problems else 0)
