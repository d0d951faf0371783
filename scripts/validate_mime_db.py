"""Validate the bundled MIME database before packaging.

Usage:
    python scripts/validate_mime_db.py [PATH]

Checks that the document is a JSON object mapping MIME types to arrays of
extension strings. Exits 1 with the parse error on stderr if it is not.
"""

import os
import sys
from pathlib import Path

# Add project root to path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from src.mime_to_ext.dataset import DATASET_RESOURCE, parse_document  # noqa: E402
from src.mime_to_ext.exceptions import DatasetMalformed  # noqa: E402

DEFAULT_PATH = Path(ROOT) / "src" / "mime_to_ext" / DATASET_RESOURCE


def validate(path: Path) -> int:
    """Validate a dataset file and return a process exit code."""
    try:
        text = path.read_bytes()
    except OSError as e:
        print(f"{path} could not be read: {e}", file=sys.stderr)
        return 1

    try:
        mapping = parse_document(text)
    except DatasetMalformed as e:
        print(f"{path} is not a valid MIME database: {e}", file=sys.stderr)
        return 1

    extensions = sum(len(exts) for exts in mapping.values())
    print(f"{path}: {len(mapping)} MIME types, {extensions} extensions")
    return 0


def main() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_PATH
    sys.exit(validate(path))


if __name__ == "__main__":
    main()
