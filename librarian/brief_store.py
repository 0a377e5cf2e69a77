"""Supabase persistence for validated briefs.

Each brief becomes one row in the briefs table, and each of its user stories
one row in the user-stories table keyed by the generated brief id. The two
inserts are not transactional.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from config import settings
from contracts import MissingCredentialsError, ProjectBrief, StorageError
from utils import get_logger

logger = get_logger(__name__)


class InsertionSummary(BaseModel):
    """What was written for one brief."""
    brief_id: Any
    brief: Dict[str, Any]
    user_stories_inserted: int = 0


def create_supabase_client(url: Optional[str] = None, key: Optional[str] = None):
    """Create a Supabase client from explicit values or settings.

    Raises:
        MissingCredentialsError: If the project URL or anon key is missing
        StorageError: If the client cannot be created from them
    """
    url = url or settings.supabase_project_url
    key = key or settings.supabase_anon_key
    if not url or not key:
        raise MissingCredentialsError(
            "Missing SUPABASE_PROJECT_URL or SUPABASE_ANON_KEY. Set them in your environment or .env file."
        )
    from supabase import create_client

    try:
        return create_client(url, key)
    except Exception as e:
        raise StorageError(f"Could not create Supabase client for {url}: {e}") from e


def user_story_rows(brief: ProjectBrief, brief_id: Any) -> List[Dict[str, Any]]:
    """Rows for the user-stories table, ordered from 1."""
    rows = []
    for order, story in enumerate(brief.user_stories, start=1):
        row = story.model_dump(mode="json")
        row["brief_id"] = brief_id
        row["story_order"] = order
        rows.append(row)
    return rows


class BriefStore:
    """Thin wrapper over a Supabase client for the two brief tables."""

    def __init__(
        self,
        client: Optional[Any] = None,
        briefs_table: Optional[str] = None,
        user_stories_table: Optional[str] = None,
    ):
        self._client = client
        self.briefs_table = briefs_table or settings.briefs_table
        self.user_stories_table = user_stories_table or settings.user_stories_table

    @property
    def client(self):
        if self._client is None:
            self._client = create_supabase_client()
        return self._client

    def connect(self):
        """Create the client now, raising MissingCredentialsError early if unconfigured."""
        return self.client

    def _insert(self, table: str, rows: Any) -> List[Dict[str, Any]]:
        try:
            response = self.client.table(table).insert(rows).execute()
        except Exception as e:
            raise StorageError(f"Error inserting into {table}: {e}") from e
        return list(getattr(response, "data", None) or [])

    def insert_brief(self, brief: ProjectBrief, embedding: List[float]) -> InsertionSummary:
        """Insert a brief and its user stories.

        Args:
            brief: Validated brief
            embedding: Vector from BriefEmbedder

        Returns:
            InsertionSummary with the generated id and stored row

        Raises:
            StorageError: If either insert fails. A failed brief insert
                means no user-story rows are written.
        """
        row = brief.to_row()
        row["embedding"] = list(embedding)

        data = self._insert(self.briefs_table, row)
        if not data or data[0].get("id") is None:
            raise StorageError(f"Insert into {self.briefs_table} returned no id")
        stored = data[0]
        brief_id = stored["id"]

        stories = user_story_rows(brief, brief_id)
        if stories:
            self._insert(self.user_stories_table, stories)
        else:
            logger.warning("Brief %s has no user stories; skipped %s insert", brief_id, self.user_stories_table)

        logger.info("Brief inserted into database with ID: %s", brief_id)
        return InsertionSummary(brief_id=brief_id, brief=stored, user_stories_inserted=len(stories))
