"""
Writer agent: turn a research summary into a publishable article.

No tools and no fetch step; it consumes the Researcher's output as context
through the shared Agent.prompt.
"""

from article_pipeline.agent.base import Agent
from article_pipeline.agent.prompts import WRITER_SYSTEM


class Writer(Agent):
    name = "Writer"
    default_system_instruction = WRITER_SYSTEM
