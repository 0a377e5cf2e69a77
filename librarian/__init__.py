"""Embedding and persistence of validated briefs."""

from .embedder import BriefEmbedder
from .brief_store import BriefStore, InsertionSummary, create_supabase_client

__all__ = ["BriefEmbedder", "BriefStore", "InsertionSummary", "create_supabase_client"]
