# echome/tests/unit/test_memory_analyzer.py

import unittest

from ...core.errors import AIError
from ...services.memory_analyzer import MemoryAnalyzer, parse_analysis
from ..mocks import MockLLMClient


class TestParseAnalysis(unittest.TestCase):
    """Test the positional two-line parse of analyzer replies."""

    def test_well_formed_output(self):
        analysis = parse_analysis("Summary: felt great\nEmotions: happy, relieved, calm")

        self.assertEqual(analysis.summary, "felt great")
        self.assertEqual(analysis.emotions, ["happy", "relieved", "calm"])

    def test_output_without_labels(self):
        analysis = parse_analysis("A quiet day at the lake.\njoy,  peace , nostalgia, gratitude")

        self.assertEqual(analysis.summary, "A quiet day at the lake.")
        self.assertEqual(analysis.emotions, ["joy", "peace", "nostalgia", "gratitude"])

    def test_single_line_output_has_no_emotions(self):
        analysis = parse_analysis("Summary: only a summary")

        self.assertEqual(analysis.summary, "only a summary")
        self.assertEqual(analysis.emotions, [])

    def test_empty_output(self):
        analysis = parse_analysis("")

        self.assertEqual(analysis.summary, "")
        self.assertEqual(analysis.emotions, [])

    def test_blank_emotion_entries_are_dropped(self):
        analysis = parse_analysis("Summary: s\nEmotions: happy, , calm,")

        self.assertEqual(analysis.emotions, ["happy", "calm"])

    def test_unexpected_shape_degrades(self):
        # A leading blank line pushes everything out of position
        analysis = parse_analysis("\nSummary: late\nEmotions: sad")

        self.assertEqual(analysis.summary, "")
        self.assertEqual(analysis.emotions, ["Summary: late"])


class TestMemoryAnalyzer(unittest.TestCase):

    def test_analyze_sends_single_user_instruction(self):
        llm = MockLLMClient(replies=["Summary: a trip\nEmotions: excited, nervous, happy"])
        analyzer = MemoryAnalyzer(llm)

        analysis = analyzer.analyze("We went to Lisbon")

        self.assertEqual(analysis.summary, "a trip")
        self.assertEqual(len(analysis.emotions), 3)
        self.assertEqual(len(llm.calls), 1)
        messages = llm.calls[0]
        self.assertEqual(len(messages), 1)
        self.assertEqual(messages[0]["role"], "user")
        self.assertIn("We went to Lisbon", messages[0]["content"])
        self.assertIn("1-2 sentences", messages[0]["content"])

    def test_provider_failure_yields_empty_analysis(self):
        analyzer = MemoryAnalyzer(MockLLMClient(replies=[AIError("provider down")]))

        analysis = analyzer.analyze("anything")

        self.assertEqual(analysis.summary, "")
        self.assertEqual(analysis.emotions, [])


if __name__ == '__main__':
    unittest.main()
