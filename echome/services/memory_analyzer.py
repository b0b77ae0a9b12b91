# echome/services/memory_analyzer.py

import logging
from typing import List, NamedTuple

from ..components.prompts import EMOTIONS_LABEL, SUMMARY_LABEL, build_analysis_messages
from ..utils.llm_api_client import LLMAPIClient

logger = logging.getLogger(__name__)


class MemoryAnalysis(NamedTuple):
    summary: str
    emotions: List[str]


EMPTY_ANALYSIS = MemoryAnalysis(summary='', emotions=[])


def parse_analysis(output: str) -> MemoryAnalysis:
    """
    Parse the two-line analyzer reply.

    Line 1 is the summary and line 2 the comma-separated emotions, each with
    an optional label prefix. Anything missing degrades to an empty value.
    """
    if not output:
        return EMPTY_ANALYSIS

    lines = output.split('\n')
    summary_line = lines[0] if len(lines) > 0 else ''
    emotions_line = lines[1] if len(lines) > 1 else ''

    summary = summary_line.replace(SUMMARY_LABEL, '').strip()
    emotions = [
        emotion.strip()
        for emotion in emotions_line.replace(EMOTIONS_LABEL, '').split(',')
        if emotion.strip()
    ]
    return MemoryAnalysis(summary=summary, emotions=emotions)


class MemoryAnalyzer:
    """Derives a short summary and an emotion list from a memory's text."""

    def __init__(self, llm_client: LLMAPIClient):
        self.llm_client = llm_client

    def analyze(self, text: str) -> MemoryAnalysis:
        """
        Summarize text and tag it with emotions.

        Never raises: any provider or parsing failure yields an empty analysis
        so the caller can still save the record.
        """
        try:
            output = self.llm_client.complete(build_analysis_messages(text))
            analysis = parse_analysis(output)
        except Exception as e:
            logger.error(f"Memory analysis failed: {str(e)}", exc_info=True)
            return EMPTY_ANALYSIS

        if not analysis.summary or not analysis.emotions:
            logger.warning("Memory analysis reply did not follow the two-line format")
        return analysis
