"""Configuration settings for Brief Factory."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

# Load .env into os.environ so the SDK fallbacks (e.g. OPENAI_API_KEY) work
load_dotenv()


class Settings(BaseSettings):
    """Global settings for Brief Factory.

    Settings can be overridden via environment variables with BRIEF_FACTORY_ prefix.
    Example: BRIEF_FACTORY_DEFAULT_MODEL=gpt-4o

    Credentials also accept the plain variable names used by the SDKs
    (OPENAI_API_KEY, SUPABASE_PROJECT_URL, SUPABASE_ANON_KEY).
    """

    # Model config
    default_provider: str = Field(
        default="openai",
        description="LLM provider used when --provider is not given"
    )
    default_model: str = Field(
        default="gpt-4o-mini",
        description="Default model for brief generation"
    )
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for generation calls"
    )
    max_briefs_per_request: int = Field(
        default=20,
        description="Upper bound for --count"
    )

    # Embeddings
    embedding_model: str = Field(
        default="thenlper/gte-small",
        description="sentence-transformers model used for brief embeddings"
    )

    # Paths
    output_dir: str = Field(
        default="./outputs",
        description="Directory for generated brief files"
    )
    dataset_path: str = Field(
        default="./data/briefs_dataset.json",
        description="Dataset checked by the validate command"
    )

    # Datastore
    briefs_table: str = Field(default="briefs")
    user_stories_table: str = Field(default="brief_user_stories")

    # API settings (env: BRIEF_FACTORY_<KEY> or standard env var)
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("BRIEF_FACTORY_OPENAI_API_KEY", "OPENAI_API_KEY"),
        description="OpenAI API key",
    )
    supabase_project_url: str = Field(
        default="",
        validation_alias=AliasChoices("BRIEF_FACTORY_SUPABASE_PROJECT_URL", "SUPABASE_PROJECT_URL"),
        description="Supabase project URL",
    )
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices("BRIEF_FACTORY_SUPABASE_ANON_KEY", "SUPABASE_ANON_KEY"),
        description="Supabase anon key",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    model_config = {
        "env_prefix": "BRIEF_FACTORY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def get_output_path(self) -> Path:
        """Get output path as Path object."""
        return Path(self.output_dir)

    def get_dataset_path(self) -> Path:
        """Get dataset path as Path object."""
        return Path(self.dataset_path)


# Create singleton instance
settings = Settings()
