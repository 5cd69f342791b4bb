# Tests for core.strength_utils
import unittest

from core.strength_utils import (
    Criteria,
    StrengthResult,
    _round_half_up,
    classify,
    evaluate,
    strength_view,
)


class TestEvaluate(unittest.TestCase):
    def test_empty_password(self):
        r = evaluate("")
        self.assertEqual(r.score, 0)
        self.assertEqual(r.criteria, Criteria())
        self.assertFalse(any(r.criteria.as_dict().values()))

    def test_lowercase_word(self):
        r = evaluate("password")
        self.assertEqual(r.score, 42)
        self.assertEqual(
            r.criteria.as_dict(),
            {
                "hasLength": True,
                "hasUpper": False,
                "hasLower": True,
                "hasNumber": False,
                "hasSymbol": False,
                "hasLength12": False,
            },
        )
        self.assertEqual(r.label, "Medium")

    def test_short_four_class_password_is_very_strong(self):
        r = evaluate("Passw0rd!")
        self.assertEqual(r.score, 91)
        self.assertEqual(r.label, "Very Strong")
        self.assertTrue(r.criteria.has_length)
        self.assertFalse(r.criteria.has_length12)

    def test_long_four_class_passwords_score_100(self):
        for pw in ("Abcdefgh1!xy", "Z9$zzzzzzzzzzzzzzzzzzzzzzzzzz", "aA1 " * 10):
            with self.subTest(pw=pw):
                self.assertEqual(evaluate(pw).score, 100)

    def test_symbol_is_anything_outside_ascii_alnum(self):
        self.assertTrue(evaluate("abc def").criteria.has_symbol)
        self.assertTrue(evaluate("héllo").criteria.has_symbol)
        self.assertFalse(evaluate("abcXYZ019").criteria.has_symbol)

    def test_non_ascii_letters_are_not_upper_or_lower(self):
        c = evaluate("ÄÖÜ").criteria
        self.assertFalse(c.has_upper)
        self.assertFalse(c.has_lower)
        self.assertTrue(c.has_symbol)

    def test_length_thresholds(self):
        cases = {
            7: (False, False),
            8: (True, False),
            11: (True, False),
            12: (True, True),
        }
        for n, (has_length, has_length12) in cases.items():
            c = evaluate("a" * n).criteria
            with self.subTest(n=n):
                self.assertIs(c.has_length, has_length)
                self.assertIs(c.has_length12, has_length12)

    def test_length_cap(self):
        # 12 * 3.4 = 40.8 -> capped at 40
        self.assertEqual(evaluate("a" * 12).score, 55)
        self.assertEqual(evaluate("a" * 50).score, 55)

    def test_idempotent(self):
        self.assertEqual(evaluate("Tr0ub4dor&3"), evaluate("Tr0ub4dor&3"))
        self.assertEqual(evaluate("x").as_dict(), evaluate("x").as_dict())

    def test_score_monotonic_in_length(self):
        for unit in ("a", "A1", "a!"):
            scores = [evaluate(unit * n).score for n in range(1, 20)]
            with self.subTest(unit=unit):
                self.assertEqual(scores, sorted(scores))

    def test_as_dict_shape(self):
        d = evaluate("Passw0rd!").as_dict()
        self.assertEqual(set(d), {"score", "criteria"})
        self.assertEqual(len(d["criteria"]), 6)


class TestRoundingAndClassify(unittest.TestCase):
    def test_round_half_up(self):
        self.assertEqual(_round_half_up(8.5), 9)
        self.assertEqual(_round_half_up(30.6), 31)
        self.assertEqual(_round_half_up(27.2), 27)
        self.assertEqual(_round_half_up(0.0), 0)

    def test_classify_boundaries(self):
        cases = {
            0: "Weak",
            29: "Weak",
            30: "Medium",
            59: "Medium",
            60: "Strong",
            89: "Strong",
            90: "Very Strong",
            100: "Very Strong",
        }
        for score, label in cases.items():
            with self.subTest(score=score):
                self.assertEqual(classify(score), label)


class TestStrengthView(unittest.TestCase):
    def test_reset_state(self):
        v = strength_view(None)
        self.assertEqual(v["score"], 0)
        self.assertEqual(v["width"], 0)
        self.assertEqual(v["label"], "Enter a password")
        self.assertEqual(v["css_class"], "")
        self.assertEqual(len(v["checks"]), 6)
        self.assertFalse(any(met for _, met in v["checks"]))

    def test_scored_state(self):
        v = strength_view(evaluate("Passw0rd!"))
        self.assertEqual(v["width"], 91)
        self.assertEqual(v["label"], "Very Strong")
        self.assertEqual(v["css_class"], "strength-bar-very-strong")
        self.assertTrue(v["color"].startswith("#"))
        met = [m for _, m in v["checks"]]
        self.assertEqual(met, [True, True, True, True, True, False])

    def test_weak_bar(self):
        v = strength_view(StrengthResult(score=10, criteria=Criteria()))
        self.assertEqual(v["css_class"], "strength-bar-weak")
        self.assertEqual(v["label"], "Weak")


if __name__ == "__main__":
    unittest.main()
