"""Brief Pipeline - sequences one generation run.

1. Ask the BriefAgent for briefs and validate them
2. Embed and insert each brief, one at a time
3. Write the generated JSON to the output directory

Any failure aborts the run; nothing is retried or rolled back.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from agents import BriefAgent
from config import settings
from contracts import GenerationRequest
from librarian import BriefEmbedder, BriefStore
from orchestrator.output_writer import write_briefs_to_file
from utils import get_logger

logger = get_logger(__name__)


class BriefPipeline:
    """Generation pipeline: LLM → validate → (embed → store) → file."""

    def __init__(
        self,
        agent: Optional[BriefAgent] = None,
        embedder: Optional[BriefEmbedder] = None,
        store: Optional[BriefStore] = None,
        output_dir: Optional[str] = None,
        skip_db: bool = False,
    ):
        """Initialize the pipeline.

        Args:
            agent: Brief generator (defaults to settings' provider/model)
            embedder: Embedding generator, unused when skip_db is set
            store: Datastore wrapper, unused when skip_db is set
            output_dir: Directory for the output file
            skip_db: Validate and write the file without embedding or storing
        """
        self.agent = agent or BriefAgent()
        self.skip_db = skip_db
        self.embedder = None if skip_db else (embedder or BriefEmbedder())
        self.store = None if skip_db else (store or BriefStore())
        self.output_dir = Path(output_dir or settings.output_dir)

    def run(self, request: GenerationRequest) -> Dict[str, Any]:
        """Execute one generation run.

        Returns:
            Run summary with briefs, insertions, token usage and output path

        Raises:
            BriefFactoryError: On missing credentials, empty response,
                invalid brief or failed insert
            json.JSONDecodeError: If the LLM output is not JSON
        """
        started = datetime.now()
        run_id = f"run_{started.strftime('%Y%m%d_%H%M%S')}"

        if self.store is not None:
            # Datastore credentials are checked before the LLM call
            self.store.connect()

        generation = self.agent.generate(request)

        insertions = []
        if not self.skip_db:
            for i, brief in enumerate(generation.briefs, start=1):
                logger.info("Embedding brief %d/%d (%s)", i, len(generation.briefs), brief.domain)
                embedding = self.embedder.embed_brief(brief)
                insertions.append(self.store.insert_brief(brief, embedding))

        output_path = write_briefs_to_file(generation.raw, self.output_dir, timestamp=started)
        logger.info("Briefs saved to %s", output_path)

        duration = (datetime.now() - started).total_seconds()
        return {
            "run_id": run_id,
            "status": "completed",
            "model": generation.model,
            "provider": generation.provider,
            "briefs": generation.briefs,
            "insertions": insertions,
            "token_usage": generation.token_usage.model_dump(),
            "output_path": output_path,
            "duration_seconds": round(duration, 2),
        }
