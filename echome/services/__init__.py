# echome/services/__init__.py

from .conversation import ConversationService, SubmissionResult
from .memory_analyzer import MemoryAnalysis, MemoryAnalyzer, parse_analysis

__all__ = ['ConversationService', 'SubmissionResult', 'MemoryAnalysis', 'MemoryAnalyzer', 'parse_analysis']
