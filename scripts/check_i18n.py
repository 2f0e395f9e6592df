#!/usr/bin/env python3
"""
Locale completeness checker for CI.

Compares every locale file in the locales directory against the reference
locale (``en`` unless REFERENCE_LANGUAGE says otherwise) and fails when any
key is missing or still identical to the reference text.

Exit code:
- 0: OK (all locales complete)
- 1: Untranslated keys found
- 2: Configuration/IO error
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from localetree.main import main as localetree_main  # noqa: E402


def main() -> int:
    # global options such as --locales-dir must precede the subcommand
    return localetree_main([*sys.argv[1:], "status", "--strict"])


if __name__ == "__main__":
    sys.exit(main())
