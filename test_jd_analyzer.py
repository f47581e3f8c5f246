import unittest

from jd_analyzer import MAX_KEYWORDS, STOP_WORDS, extract_keywords


class TestExtractKeywords(unittest.TestCase):
    def test_empty_text(self):
        self.assertEqual(extract_keywords(""), ())
        self.assertEqual(extract_keywords(None), ())

    def test_lowercases_and_strips_punctuation(self):
        keywords = extract_keywords("Python, Django/PostgreSQL; Kubernetes!")
        self.assertEqual(keywords, ("python", "django", "postgresql", "kubernetes"))

    def test_drops_short_tokens_and_stop_words(self):
        keywords = extract_keywords("We use AWS and SQL with Terraform for infra")
        self.assertEqual(keywords, ("terraform", "infra"))

    def test_dedupes_in_first_seen_order(self):
        keywords = extract_keywords("React react REACT redux React testing redux")
        self.assertEqual(keywords, ("react", "redux", "testing"))

    def test_caps_at_max_keywords(self):
        text = " ".join(f"skill{i:03d}" for i in range(100))
        keywords = extract_keywords(text)
        self.assertEqual(len(keywords), MAX_KEYWORDS)
        self.assertEqual(keywords[0], "skill000")
        self.assertEqual(keywords[-1], f"skill{MAX_KEYWORDS - 1:03d}")

    def test_invariants_on_realistic_jd(self):
        jd = (
            "Senior Backend Engineer. You will design, build and operate "
            "high-throughput APIs in Python and Go. Experience with Kafka, "
            "PostgreSQL, Redis and Docker is required. Strong communication "
            "skills; mentoring junior engineers is a plus. Python! Python?"
        )
        keywords = extract_keywords(jd)
        self.assertLessEqual(len(keywords), MAX_KEYWORDS)
        self.assertEqual(len(keywords), len(set(keywords)))
        for kw in keywords:
            self.assertEqual(kw, kw.lower())
            self.assertGreater(len(kw), 3)
            self.assertNotIn(kw, STOP_WORDS)
        self.assertIn("python", keywords)
        self.assertIn("kafka", keywords)


if __name__ == "__main__":
    unittest.main()
