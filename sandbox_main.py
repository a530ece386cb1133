#!/usr/bin/env python3
"""
Sandbox entrypoint for kindlefy.
Reads the scan target from stdin JSON, scans it, outputs a ScanResult as JSON to stdout.
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from pydantic import ValidationError

from kindlefy.dispatcher import scan_paths
from kindlefy.file_walker import resolve_targets
from kindlefy.models import ScanRequest, ScanResult


def run_scan(request: ScanRequest) -> ScanResult:
    """Scan the requested path, keeping only files with advisories."""
    files = resolve_targets(request.path)
    reports = scan_paths(files)
    return ScanResult(
        target=request.path,
        files_scanned=len(reports),
        reports=[r for r in reports if r.advisories],
    )


def main() -> None:
    try:
        input_data = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON input: {e}"}))
        sys.exit(1)

    try:
        request = ScanRequest.model_validate(input_data)
    except ValidationError:
        print(
            json.dumps(
                {
                    "error": "Missing required input: 'path'",
                    "example": {"path": "./site"},
                }
            )
        )
        sys.exit(1)

    try:
        response = run_scan(request)
        print(json.dumps(response.model_dump(mode="json")))
    except Exception as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)


if __name__ == "__main__":
    main()
