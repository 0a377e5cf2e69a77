"""Orchestrator module for Brief Factory runs."""

from .brief_pipeline import BriefPipeline
from .output_writer import write_briefs_to_file, load_briefs_file

__all__ = [
    "BriefPipeline",
    "write_briefs_to_file",
    "load_briefs_file",
]
