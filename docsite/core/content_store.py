import json
import sqlite3
import logging
from typing import Optional, Dict, List, Any, Iterable, Union

from docsite.core.search.models import SearchableDocument, SEARCHABLE_FIELDS

logger = logging.getLogger(__name__)

TABLE_NAME = "content_documents"


class ContentStore:
    """
    SQLite-backed collection of site documents.
    Schema comes from db/migrations (see docsite.db.database).
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self):
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def searchable_fields(self) -> List[str]:
        return list(SEARCHABLE_FIELDS)

    def remote_index_name(self, prefix: str = "") -> str:
        """Name of the remote index mirroring this collection."""
        return f"{prefix}{TABLE_NAME}"

    def upsert_document(self, doc: Union[SearchableDocument, Dict[str, Any]]) -> int:
        """
        Inserts or updates a document keyed by slug. Returns its row id.
        """
        if isinstance(doc, dict):
            doc = SearchableDocument.from_record(doc)
        if not doc.slug:
            raise ValueError("Document slug is required")

        with self._get_conn() as conn:
            cur = conn.execute(f"""
                INSERT INTO {TABLE_NAME} (slug, title, category, parent, description, headings, params_inline, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(slug) DO UPDATE SET
                    title=excluded.title,
                    category=excluded.category,
                    parent=excluded.parent,
                    description=excluded.description,
                    headings=excluded.headings,
                    params_inline=excluded.params_inline,
                    updated_at=CURRENT_TIMESTAMP
                RETURNING id;
            """, (
                doc.slug, doc.title, doc.category, doc.parent, doc.description,
                json.dumps(doc.headings), doc.params_inline
            ))
            row = cur.fetchone()
            return row[0]

    def load_documents(self, records: Iterable[Dict[str, Any]]) -> int:
        count = 0
        for record in records:
            self.upsert_document(record)
            count += 1
        logger.info(f"Loaded {count} documents into {self.db_path}")
        return count

    def get(self, slug: str) -> Optional[SearchableDocument]:
        with self._get_conn() as conn:
            row = conn.execute(f"SELECT * FROM {TABLE_NAME} WHERE slug = ?", (slug,)).fetchone()
        return SearchableDocument.from_record(dict(row)) if row else None

    def count(self) -> int:
        with self._get_conn() as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()[0]

    def list_all(self) -> List[SearchableDocument]:
        """All documents in insertion order."""
        with self._get_conn() as conn:
            rows = conn.execute(f"SELECT * FROM {TABLE_NAME} ORDER BY id ASC").fetchall()
        return [SearchableDocument.from_record(dict(r)) for r in rows]
