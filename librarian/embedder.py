"""Brief embeddings via sentence-transformers.

gte-small mean-pools token embeddings; vectors are L2-normalized so they can
be compared with a plain dot product in the datastore.
"""

from __future__ import annotations

import time
from typing import Any, List, Optional

from config import settings
from contracts import ProjectBrief
from utils import get_logger

logger = get_logger(__name__)


class BriefEmbedder:
    """Lazily loads a feature-extraction model and embeds texts one at a time."""

    def __init__(self, model_name: Optional[str] = None, model: Optional[Any] = None):
        """Initialize the embedder.

        Args:
            model_name: sentence-transformers model id. Defaults to settings.embedding_model.
            model: Already-loaded model exposing ``encode`` (skips loading).
        """
        self.model_name = model_name or settings.embedding_model
        self._model = model

    def _get_model(self):
        if self._model is None:
            from sentence_transformers import SentenceTransformer

            st = time.monotonic()
            self._model = SentenceTransformer(self.model_name)
            logger.info("Loaded embedding model %s in %dms", self.model_name, int((time.monotonic() - st) * 1000))
        return self._model

    @property
    def dimension(self) -> int:
        """Length of every vector this embedder returns."""
        return int(self._get_model().get_sentence_embedding_dimension())

    def embed_text(self, text: str) -> List[float]:
        """Embed a UTF-8 string into a fixed-length normalized vector."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        vector = self._get_model().encode(
            text,
            normalize_embeddings=True,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        return [float(v) for v in vector]

    def embed_brief(self, brief: ProjectBrief) -> List[float]:
        """Embed the brief's full JSON serialization."""
        return self.embed_text(brief.to_embedding_text())
