"""
Vault loader: walk markdown notes and read them as documents.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Protocol

from vault_search.config import settings
from vault_search.vector_store.base import Document

VAULT_DIR = settings.vault_dir
MARKDOWN_SUFFIX = ".md"

logger = logging.getLogger(__name__)


class DocumentSource(Protocol):
    def load_documents(self) -> List[Document]:
        ...


def iter_markdown_files(vault_dir: str | Path = VAULT_DIR) -> Iterator[Path]:
    """Yield markdown files under the vault, skipping hidden folders such as .obsidian and .trash."""
    base = Path(vault_dir)
    if not base.is_dir():
        return

    for path in sorted(base.rglob(f"*{MARKDOWN_SUFFIX}")):
        relative = path.relative_to(base)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file():
            yield path


def note_id(path: Path, vault_dir: str | Path) -> str:
    return path.relative_to(Path(vault_dir)).as_posix()


class VaultDocumentSource:
    """Reads every markdown note of a vault directory fresh on each call."""

    def __init__(self, vault_dir: str | Path | None = None) -> None:
        self.vault_dir = Path(vault_dir or VAULT_DIR)

    def load_documents(self) -> List[Document]:
        if not self.vault_dir.is_dir():
            logger.warning("Vault directory not found", extra={"vault_dir": str(self.vault_dir)})
            return []

        documents: List[Document] = []
        for path in iter_markdown_files(self.vault_dir):
            doc_id = note_id(path, self.vault_dir)
            try:
                # Undecodable bytes become U+FFFD rather than dropping the note.
                text = path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                logger.warning("Skipping unreadable note", extra={"note": doc_id, "error": str(exc)})
                continue
            documents.append(Document(id=doc_id, text=text))

        logger.info("Loaded vault notes", extra={"vault_dir": str(self.vault_dir), "notes": len(documents)})
        return documents


__all__ = ["DocumentSource", "VaultDocumentSource", "iter_markdown_files", "note_id", "VAULT_DIR"]
