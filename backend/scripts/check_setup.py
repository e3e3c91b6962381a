"""Check a local Study Helper setup.

Initialises (or migrates) the notes database, saves a test note, reads the
notes back, and reports whether the Gemini API key is configured.

Usage:
    python scripts/check_setup.py [--db-path PATH] [--keep-note]

Exits with status 1 if any database step fails.
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Allow running from backend/ directory without installing the package.
_BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_BACKEND_DIR))

# Load .env from project root (parent of backend/).
load_dotenv(_BACKEND_DIR.parent / ".env")

from study_helper.config import settings  # noqa: E402
from study_helper.db import InitializationError  # noqa: E402
from study_helper.services.store import NoteStore, NotFoundError, ValidationError  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Verify the Study Helper database and configuration.")
    parser.add_argument(
        "--db-path",
        type=Path,
        default=settings.db_path,
        help=f"SQLite database file (default: {settings.db_path})",
    )
    parser.add_argument(
        "--keep-note",
        action="store_true",
        help="Leave the test note in the database instead of deleting it.",
    )
    args = parser.parse_args()

    store = NoteStore(f"sqlite:///{args.db_path}")
    try:
        print("1. Initialising database …")
        store.initialize()

        print("2. Saving a test note …")
        note = store.create(
            "This is a test summary for the Study Helper application.",
            "summary",
            "Original text for testing purposes.",
            title="Setup check",
        )
        print(f"   saved note {note.id}")

        print("3. Reading notes back …")
        print(f"   {len(store.list_all())} note(s) in the database")

        if not args.keep_note:
            store.delete_by_id(note.id)
            print(f"   removed test note {note.id}")
    except (InitializationError, ValidationError, NotFoundError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        store.close()

    print("4. Checking configuration …")
    if settings.gemini_api_key:
        print("   Gemini API key is configured")
    else:
        print("   WARNING: Gemini API key not found - set GEMINI_API_KEY in .env")
    print(f"   Gemini model: {settings.gemini_model}")
    print(f"   Server port: {settings.port}")
    print(f"   Database path: {args.db_path}")

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
