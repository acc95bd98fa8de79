"""
Unit tests for course / task-type classification.
"""

import unittest

from canvastasks.classify import classify, determine_task_type, extract_course


class TestExtractCourse(unittest.TestCase):
    def test_bracket_wins(self) -> None:
        self.assertEqual(extract_course("Quiz 3 [cs_101_999]"), "cs_101_999")
        self.assertEqual(extract_course("math_241 Exam [eng_100_120258_252389]"), "eng_100_120258_252389")

    def test_prefix_patterns_case_insensitive(self) -> None:
        self.assertEqual(extract_course("ECE_210 Homework 2"), "ECE_210")
        self.assertEqual(extract_course("rhet_105 essay draft"), "rhet_105")
        self.assertEqual(extract_course("Read Math_241 notes"), "Math_241")

    def test_pattern_order(self) -> None:
        # eng_ is tried before cs_
        self.assertEqual(extract_course("cs_225 and eng_100"), "eng_100")

    def test_unknown(self) -> None:
        self.assertEqual(extract_course("Office hours"), "Unknown Course")
        self.assertEqual(extract_course(None), "Unknown Course")
        self.assertEqual(extract_course(""), "Unknown Course")
        self.assertEqual(extract_course("cs_ without digits"), "Unknown Course")


class TestDetermineTaskType(unittest.TestCase):
    def test_each_type(self) -> None:
        self.assertEqual(determine_task_type("Midterm EXAM"), "exam")
        self.assertEqual(determine_task_type("Final project"), "exam")
        self.assertEqual(determine_task_type("Lecture 4"), "lecture")
        self.assertEqual(determine_task_type("Discussion class"), "lecture")
        self.assertEqual(determine_task_type("Assignment 1"), "assignment")
        self.assertEqual(determine_task_type("Homework 2"), "assignment")
        self.assertEqual(determine_task_type("Quiz 3"), "quiz")
        self.assertEqual(determine_task_type("Unit test"), "quiz")
        self.assertEqual(determine_task_type("Office hours"), "task")

    def test_first_match_wins(self) -> None:
        self.assertEqual(determine_task_type("Quiz before final"), "exam")
        self.assertEqual(determine_task_type("Homework for class"), "lecture")

    def test_absent_title(self) -> None:
        self.assertEqual(determine_task_type(None), "task")
        self.assertEqual(determine_task_type(""), "task")


class TestClassify(unittest.TestCase):
    def test_examples(self) -> None:
        self.assertEqual(classify("Quiz 3 [cs_101_999]"), ("cs_101_999", "quiz"))
        self.assertEqual(classify("ECE_210 Homework 2"), ("ECE_210", "assignment"))
        self.assertEqual(classify(None), ("Unknown Course", "task"))


if __name__ == "__main__":
    unittest.main()
