import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.matching.keywords import Keyword, extract_keywords, keyword_terms  # noqa: E402


class KeywordExtractionTests(unittest.TestCase):
    def test_technical_terms_rank_first_then_by_frequency(self):
        keywords = extract_keywords("Release v2.1 shipped with Python and Docker. Docker everywhere")
        self.assertEqual(
            list(keywords),
            [
                Keyword(term="docker", frequency=2),
                Keyword(term="python", frequency=1),
                Keyword(term="v2.1", frequency=1),
            ],
        )

    def test_ties_keep_first_occurrence_order(self):
        keywords = extract_keywords("kubernetes aws python")
        self.assertEqual(keyword_terms(keywords), ["kubernetes", "aws", "python"])

    def test_multi_word_terms_are_counted_as_phrases(self):
        keywords = extract_keywords(
            "Machine learning engineer. We love machine learning and CI/CD pipelines."
        )
        terms = keyword_terms(keywords)
        self.assertEqual(terms[:2], ["machine learning", "ci cd"])
        self.assertEqual(keywords[0].frequency, 2)
        self.assertNotIn("machine", terms)
        self.assertNotIn("learning", terms)

    def test_symbol_and_digit_tokens_are_kept(self):
        terms = keyword_terms(extract_keywords("Built web3 tools in c++ and python3 for iso-9001 audits"))
        self.assertIn("c++", terms)
        self.assertIn("web3", terms)
        self.assertIn("python3", terms)
        self.assertIn("iso-9001", terms)
        self.assertNotIn("built", terms)
        self.assertNotIn("tools", terms)

    def test_short_tokens_and_stop_words_are_dropped(self):
        terms = keyword_terms(extract_keywords("Go and R with the experience of 10 years"))
        self.assertEqual(terms, [])

    def test_sentence_final_period_does_not_hide_terms(self):
        terms = keyword_terms(extract_keywords("We run everything on AWS."))
        self.assertEqual(terms, ["aws"])

    def test_empty_text_returns_empty_list(self):
        self.assertEqual(extract_keywords(""), ())
        self.assertEqual(extract_keywords("   \n\t "), ())

    def test_results_are_unique_and_capped(self):
        text = " ".join(f"build-{index}" for index in range(60)) + " python python"
        keywords = extract_keywords(text)
        terms = keyword_terms(keywords)
        self.assertLessEqual(len(keywords), 30)
        self.assertEqual(len(terms), len(set(terms)))
        self.assertEqual(terms[0], "python")


if __name__ == "__main__":
    unittest.main()
