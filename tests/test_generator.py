"""
Tests for single-date and date-range password generation.
"""

import unittest
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from unittest.mock import patch

from arris_potd import generator
from arris_potd.config import DEFAULT_SEED, PASSWORD_ALPHABET, PASSWORD_LENGTH
from arris_potd.errors import InvalidDate, InvalidDateRange, InvalidSeed
from arris_potd.generator import generate, generate_range, iter_range


class TestGenerate(unittest.TestCase):
    def test_golden_vectors(self):
        cases = [
            ("admin", "2023-01-01", "YmmynQSi"),
            ("admin", "2023-01-02", "75Kk5J9m"),
            ("admin", "2023-01-03", "2weNCVZF"),
            ("admin", "2024-02-29", "AQ7QHTAs"),
            ("admin", "2099-12-31", "Yujxuh4X"),
            ("MPSJKMDH", "2023-01-01", "6LwW8M6M"),
            ("password", "2023-01-01", "CjvGSJ2t"),
        ]
        for seed, day, expected in cases:
            with self.subTest(seed=seed, day=day):
                self.assertEqual(generate(day, seed), expected)

    def test_compact_date_form_gives_same_password(self):
        self.assertEqual(generate("20230101", "admin"), generate("2023-01-01", "admin"))

    def test_default_seed(self):
        self.assertEqual(generate("2023-01-01"), generate("2023-01-01", DEFAULT_SEED))

    def test_deterministic(self):
        self.assertEqual(generate("2023-07-04", "seedy"), generate("2023-07-04", "seedy"))

    def test_seed_sensitivity(self):
        self.assertNotEqual(generate("2023-01-01", "admin"), generate("2023-01-01", "admim"))
        self.assertEqual(generate("2023-01-01", "admim"), "JU3TzqUA")

    def test_date_sensitivity(self):
        passwords = {generate(f"2023-03-{d:02d}", "admin") for d in range(1, 32)}
        self.assertEqual(len(passwords), 31)

    def test_length_and_alphabet(self):
        for seed in ("abcd", "MPSJKMDH", "a b~c!"):
            pw = generate("2022-12-25", seed)
            self.assertEqual(len(pw), PASSWORD_LENGTH)
            self.assertTrue(set(pw) <= set(PASSWORD_ALPHABET), pw)

    def test_invalid_seed(self):
        with self.assertRaises(InvalidSeed):
            generate("2023-01-01", "abc")
        with self.assertRaises(InvalidSeed):
            generate("2023-01-01", "abcdefghi")

    def test_invalid_date(self):
        with self.assertRaises(InvalidDate):
            generate("2023-02-30", "admin")
        with self.assertRaises(InvalidDate):
            generate("2023-13-01", "admin")

    def test_seed_error_takes_precedence(self):
        with self.assertRaises(InvalidSeed):
            generate("2023-02-30", "abc")

    def test_no_cipher_work_on_invalid_input(self):
        with patch.object(generator, "encrypt_block") as enc:
            with self.assertRaises(InvalidDate):
                generate("not-a-date", "admin")
            with self.assertRaises(InvalidSeed):
                generate("2023-01-01", "x")
            enc.assert_not_called()

    def test_concurrent_calls(self):
        days = [(date(2023, 1, 1) + timedelta(days=i)).isoformat() for i in range(60)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda d: generate(d, "admin"), days))
        self.assertEqual(results, [generate(d, "admin") for d in days])


class TestGenerateRange(unittest.TestCase):
    def test_three_days(self):
        result = generate_range("2023-01-01", "2023-01-03", "admin")
        self.assertEqual(result, {
            "2023-01-01": "YmmynQSi",
            "2023-01-02": "75Kk5J9m",
            "2023-01-03": "2weNCVZF",
        })
        self.assertEqual(list(result), ["2023-01-01", "2023-01-02", "2023-01-03"])

    def test_entries_match_single_generation(self):
        result = generate_range("2024-02-27", "2024-03-02", "seed")
        self.assertEqual(len(result), 5)
        for day, pw in result.items():
            self.assertEqual(pw, generate(day, "seed"))
        self.assertIn("2024-02-29", result)

    def test_entry_count_across_year_boundary(self):
        result = generate_range("2023-12-01", "2024-01-31", "admin")
        self.assertEqual(len(result), (date(2024, 1, 31) - date(2023, 12, 1)).days + 1)
        keys = list(result)
        self.assertEqual(keys, sorted(keys))
        self.assertEqual(keys[0], "2023-12-01")
        self.assertEqual(keys[-1], "2024-01-31")

    def test_single_day_range(self):
        self.assertEqual(
            generate_range("2023-01-01", "2023-01-01", "admin"),
            {"2023-01-01": "YmmynQSi"},
        )

    def test_keys_are_canonical(self):
        result = generate_range("20230101", "20230102", "admin")
        self.assertEqual(list(result), ["2023-01-01", "2023-01-02"])

    def test_start_after_end(self):
        with self.assertRaises(InvalidDateRange) as ctx:
            generate_range("2023-01-03", "2023-01-01", "admin")
        self.assertEqual(ctx.exception.start, "2023-01-03")
        self.assertEqual(ctx.exception.end, "2023-01-01")

    def test_invalid_boundary(self):
        with self.assertRaises(InvalidDate):
            generate_range("2023-01-01", "2023-02-30", "admin")
        with self.assertRaises(InvalidDate):
            generate_range("2023-13-01", "2023-12-31", "admin")

    def test_invalid_seed_checked_first(self):
        with self.assertRaises(InvalidSeed):
            generate_range("2023-01-03", "2023-01-01", "toolongseed")

    def test_default_seed(self):
        self.assertEqual(
            generate_range("2023-01-01", "2023-01-02"),
            generate_range("2023-01-01", "2023-01-02", DEFAULT_SEED),
        )


class TestIterRange(unittest.TestCase):
    def test_validates_before_iteration(self):
        with self.assertRaises(InvalidDateRange):
            iter_range("2023-01-02", "2023-01-01", "admin")

    def test_lazy_pairs(self):
        it = iter(iter_range("2023-01-01", "2023-01-03", "admin"))
        self.assertEqual(next(it), ("2023-01-01", "YmmynQSi"))
        self.assertEqual(len(list(it)), 2)

    def test_length_known_without_generating(self):
        days = iter_range("2023-12-30", "2024-01-02", "admin")
        with patch.object(generator, "encrypt_block") as enc:
            self.assertEqual(len(days), 4)
            enc.assert_not_called()

    def test_length_matches_pairs(self):
        days = iter_range("2024-02-01", "2024-03-01", "admin")
        self.assertEqual(len(days), 30)
        self.assertEqual(len(list(days)), len(days))

    def test_reiterable(self):
        days = iter_range("2023-01-01", "2023-01-02", "admin")
        self.assertEqual(list(days), list(days))


if __name__ == "__main__":
    unittest.main()
