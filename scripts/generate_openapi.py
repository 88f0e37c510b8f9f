"""Generate OpenAPI specification from FastAPI app.

Usage:
    python scripts/generate_openapi.py [--output docs/openapi.json]

Writes the OpenAPI 3.1 document for the Student Ledger API to the given path.
"""

import json
import sys
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from student_ledger.main import create_app

DEFAULT_OUTPUT = "docs/openapi.json"


def generate_openapi(output_path: str = DEFAULT_OUTPUT) -> dict:
    """Generate and save OpenAPI specification."""
    app = create_app()
    openapi_spec = app.openapi()

    openapi_spec["info"]["x-generated-at"] = datetime.now(UTC).isoformat()

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w") as f:
        json.dump(openapi_spec, f, indent=2)

    print(f"OpenAPI spec written to: {output}")
    return openapi_spec


if __name__ == "__main__":
    args = sys.argv[1:]
    if args[:1] == ["--output"]:
        args = args[1:]
    generate_openapi(args[0] if args else DEFAULT_OUTPUT)
