import unittest
from unittest import mock

from question_generator import GENERIC_QUESTIONS, generate_questions


class TestGenerateQuestions(unittest.TestCase):
    def test_keywords_lead_then_generic(self):
        questions = generate_questions(("python", "kafka", "docker", "redis"), max_questions=5)
        self.assertEqual(len(questions), 5)
        self.assertIn("python", questions[0])
        self.assertIn("kafka", questions[1])
        self.assertIn("docker", questions[2])
        self.assertEqual(questions[3:], GENERIC_QUESTIONS[:2])

    def test_no_keywords_gives_generic_only(self):
        self.assertEqual(generate_questions((), max_questions=3), GENERIC_QUESTIONS[:3])

    def test_never_exceeds_limit_and_no_duplicates(self):
        keywords = tuple(f"tool{i}" for i in range(30))
        for limit in range(0, 12):
            questions = generate_questions(keywords, max_questions=limit)
            self.assertLessEqual(len(questions), limit)
            self.assertEqual(len(questions), len(set(questions)))

    def test_keyword_share_rounds_half_up(self):
        keywords = ("python", "kafka", "docker", "redis")
        with mock.patch("question_generator.KEYWORD_QUESTION_SHARE", 0.5):
            questions = generate_questions(keywords, max_questions=5)
        # 5 * 0.5 = 2.5 -> 3 keyword questions
        self.assertIn("docker", questions[2])
        self.assertEqual(questions[3:], GENERIC_QUESTIONS[:2])

    def test_deterministic(self):
        keywords = ("terraform", "golang")
        self.assertEqual(generate_questions(keywords, 4), generate_questions(keywords, 4))


if __name__ == "__main__":
    unittest.main()
