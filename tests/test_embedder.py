"""Tests for the brief embedder."""

import hashlib
import math
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from contracts import ProjectBrief
from librarian import BriefEmbedder


class HashModel:
    """Deterministic stand-in for a SentenceTransformer."""

    DIM = 8

    def __init__(self):
        self.calls = []

    def get_sentence_embedding_dimension(self):
        return self.DIM

    def encode(self, text, normalize_embeddings=False, **kwargs):
        self.calls.append({"text": text, "normalize_embeddings": normalize_embeddings, **kwargs})
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        vec = np.array([b - 128 for b in digest[: self.DIM]], dtype=np.float32)
        if normalize_embeddings:
            vec = vec / np.linalg.norm(vec)
        return vec


class TestBriefEmbedder:
    """Embedding behaviour with an injected model."""

    def test_embed_text_is_deterministic(self):
        embedder = BriefEmbedder(model=HashModel())
        first = embedder.embed_text("Build a booking portal")
        second = embedder.embed_text("Build a booking portal")
        assert len(first) == len(second) == HashModel.DIM
        assert first == pytest.approx(second)

    def test_vectors_are_normalized_floats(self):
        embedder = BriefEmbedder(model=HashModel())
        vector = embedder.embed_text("héllo wörld")
        assert all(isinstance(v, float) for v in vector)
        assert math.sqrt(sum(v * v for v in vector)) == pytest.approx(1.0, abs=1e-5)

    def test_requests_normalization(self):
        model = HashModel()
        BriefEmbedder(model=model).embed_text("x")
        assert model.calls[0]["normalize_embeddings"] is True

    def test_embed_brief_uses_full_json(self, brief_data):
        model = HashModel()
        brief = ProjectBrief.model_validate(brief_data)
        BriefEmbedder(model=model).embed_brief(brief)
        assert model.calls[0]["text"] == brief.to_embedding_text()

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            BriefEmbedder(model=HashModel()).embed_text(b"bytes")

    def test_dimension(self):
        assert BriefEmbedder(model=HashModel()).dimension == HashModel.DIM

    def test_model_loaded_lazily_once(self):
        fake = HashModel()
        with patch("sentence_transformers.SentenceTransformer", return_value=fake) as mock_cls:
            embedder = BriefEmbedder(model_name="thenlper/gte-small")
            mock_cls.assert_not_called()
            embedder.embed_text("a")
            embedder.embed_text("b")
        mock_cls.assert_called_once_with("thenlper/gte-small")

    def test_default_model_name_from_settings(self):
        with patch("librarian.embedder.settings", MagicMock(embedding_model="some/model")):
            assert BriefEmbedder().model_name == "some/model"


@pytest.mark.model
def test_real_model_is_deterministic():
    embedder = BriefEmbedder()
    first = embedder.embed_text("A patient appointment portal")
    second = embedder.embed_text("A patient appointment portal")
    assert len(first) == embedder.dimension == 384
    assert np.allclose(first, second, atol=1e-6)
