"""
CLI: list the markdown notes a reindex would embed.

Example:
    python -m scripts.list_notes --vault ~/Notes
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from vault_search.config import settings
from vault_search.indexing.vault import iter_markdown_files, note_id


def list_notes(vault_dir: str | Path) -> List[str]:
    return [note_id(path, vault_dir) for path in iter_markdown_files(vault_dir)]


def main() -> None:
    parser = argparse.ArgumentParser(description="List markdown notes in a vault.")
    parser.add_argument("--vault", default=settings.vault_dir, help="Vault directory")
    args = parser.parse_args()

    notes = list_notes(args.vault)
    if not notes:
        print("No markdown notes found")
        return
    print("Markdown files in vault:")
    print("\n".join(notes))


if __name__ == "__main__":
    main()
