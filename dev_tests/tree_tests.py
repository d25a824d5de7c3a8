import os
import random
import sys
import unittest

# Ensure repo root is on sys.path so "lextree" is importable from dev_tests/
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from lextree import ALPHABET, InsertResult, InvalidCharacterError, LexicographicTree


# ---------- Test data ----------
def gen_words_fixed():
    return [
        "app", "apple", "apply",
        "bat", "batch", "bath",
        "bar", "bark",
        "cat", "cater",
        "do", "dog", "dove",
        "well-being", "o'clock", "don't", "co-op",
    ]


def codec_key(word):
    return [ALPHABET.index(ch) for ch in word]


def gen_random_words(rng, n, alphabet=ALPHABET, min_len=1, max_len=9):
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len)))
            for _ in range(n)]


def scenario_tree():
    t = LexicographicTree()
    for w in ("cat", "car", "dog"):
        t.insert(w)
    return t


# ---------------------------------- Tests ----------------------------------
class TestScenarios(unittest.TestCase):
    def test_insert_three_words(self):
        t = scenario_tree()
        self.assertEqual(t.size(), 3)
        self.assertTrue(t.contains("cat"))
        self.assertFalse(t.contains("ca"))

    def test_prefix_query_is_ordered(self):
        self.assertEqual(scenario_tree().get_words("ca"), ["car", "cat"])

    def test_length_query(self):
        self.assertEqual(scenario_tree().get_words_of_length(3), ["car", "cat", "dog"])

    def test_reinsert_reports_already_present(self):
        t = scenario_tree()
        self.assertIs(t.insert("cat"), InsertResult.ALREADY_PRESENT)
        self.assertEqual(t.size(), 3)

    def test_invalid_character_rejected(self):
        t = scenario_tree()
        with self.assertRaises(InvalidCharacterError) as ctx:
            t.insert("c4t")
        self.assertEqual(ctx.exception.char, "4")
        self.assertEqual(ctx.exception.position, 1)
        self.assertEqual(t.size(), 3)
        self.assertFalse(t.contains("c4t"))


class TestInsert(unittest.TestCase):
    def test_first_insert_reports_inserted(self):
        t = LexicographicTree()
        self.assertIs(t.insert("hello"), InsertResult.INSERTED)
        self.assertEqual(len(t), 1)

    def test_size_counts_distinct_words(self):
        t = LexicographicTree()
        words = ["a", "ab", "abc", "ab", "a", "b", "abc"]
        for w in words:
            t.insert(w)
        self.assertEqual(t.size(), len(set(words)))

    def test_prefix_of_existing_word_becomes_word(self):
        t = LexicographicTree()
        t.insert("apple")
        self.assertFalse(t.contains("app"))
        self.assertIs(t.insert("app"), InsertResult.INSERTED)
        self.assertTrue(t.contains("app"))
        self.assertEqual(t.size(), 2)

    def test_invalid_word_leaves_no_partial_path(self):
        t = LexicographicTree()
        t.insert("cat")
        nodes_before = t.count_nodes()
        for bad in ("catz9", "Cat", "ca t", "dog!", "héllo"):
            with self.assertRaises(InvalidCharacterError):
                t.insert(bad)
        self.assertEqual(t.count_nodes(), nodes_before)
        self.assertIsNone(t.prefix_search("catz"))
        self.assertEqual(t.get_words(""), ["cat"])

    def test_invalid_error_is_value_error(self):
        with self.assertRaises(ValueError):
            LexicographicTree().insert("UPPER")

    def test_hyphen_and_apostrophe_accepted(self):
        t = LexicographicTree()
        t.insert("rock-'n'-roll")
        self.assertTrue(t.contains("rock-'n'-roll"))

    def test_empty_word(self):
        t = LexicographicTree()
        self.assertFalse(t.contains(""))
        self.assertIs(t.insert(""), InsertResult.INSERTED)
        self.assertIs(t.insert(""), InsertResult.ALREADY_PRESENT)
        self.assertTrue(t.contains(""))
        self.assertEqual(t.size(), 1)
        t.insert("a")
        self.assertEqual(t.get_words(""), ["", "a"])
        self.assertEqual(t.get_words_of_length(0), [])


class TestBatchInsert(unittest.TestCase):
    def test_counts_and_membership(self):
        t = LexicographicTree()
        words = gen_words_fixed() + ["app", "dog", "bath"]
        inserted, present = t.batch_insert(words)
        self.assertEqual(inserted, len(set(words)))
        self.assertEqual(present, 3)
        self.assertEqual(t.size(), len(set(words)))
        for w in words:
            self.assertTrue(t.contains(w), w)

    def test_unsorted_input_matches_single_inserts(self):
        rng = random.Random(7)
        words = gen_random_words(rng, 500)
        a = LexicographicTree(words)
        b = LexicographicTree()
        for w in words:
            b.insert(w)
        self.assertEqual(a.get_words(""), b.get_words(""))
        self.assertEqual(a.size(), b.size())
        self.assertEqual(a.count_nodes(), b.count_nodes())

    def test_shrinking_neighbour_reuses_correct_path(self):
        t = LexicographicTree()
        t.batch_insert(["abcd", "ab", "abx", "b"])
        self.assertEqual(t.get_words(""), ["ab", "abcd", "abx", "b"])
        self.assertFalse(t.contains("abc"))

    def test_invalid_word_stops_batch(self):
        t = LexicographicTree()
        with self.assertRaises(InvalidCharacterError):
            t.batch_insert(["one", "two", "thr3e", "four"])
        self.assertEqual(t.get_words(""), ["one", "two"])
        self.assertIsNone(t.prefix_search("thr"))

    def test_constructor_populates(self):
        t = LexicographicTree(["b", "a", "b"])
        self.assertEqual(t.size(), 2)


class TestContains(unittest.TestCase):
    def test_present_and_missing(self):
        t = LexicographicTree(gen_words_fixed())
        for w in ["app", "apple", "bath", "bark", "dog", "don't", "co-op"]:
            self.assertTrue(t.contains(w), w)
            self.assertIn(w, t)
        for w in ["applyy", "apps", "ba", "d", "co", "dont", "zzz"]:
            self.assertFalse(t.contains(w), w)

    def test_unknown_characters_do_not_raise(self):
        t = LexicographicTree(["cat"])
        for probe in ["c4t", "CAT", "cat ", "ça", "\n"]:
            self.assertFalse(t.contains(probe))

    def test_query_does_not_allocate(self):
        t = LexicographicTree(["cat"])
        before = t.count_nodes()
        t.contains("catalogue")
        t.get_words("dogma")
        self.assertEqual(t.count_nodes(), before)


class TestGetWords(unittest.TestCase):
    def test_all_words_sorted_under_codec_order(self):
        words = gen_words_fixed()
        t = LexicographicTree(words)
        self.assertEqual(t.get_words(""), sorted(set(words), key=codec_key))

    def test_hyphen_and_apostrophe_sort_after_z(self):
        t = LexicographicTree(["a'", "a-", "az", "a"])
        self.assertEqual(t.get_words(""), ["a", "az", "a-", "a'"])

    def test_prefix_subset(self):
        t = LexicographicTree(gen_words_fixed())
        self.assertEqual(t.get_words("ba"), ["bar", "bark", "bat", "batch", "bath"])
        self.assertEqual(t.get_words("do"), ["do", "dog", "don't", "dove"])

    def test_prefix_equal_to_word(self):
        t = LexicographicTree(["cater", "cat"])
        self.assertEqual(t.get_words("cat"), ["cat", "cater"])
        self.assertEqual(t.get_words("cater"), ["cater"])

    def test_broken_prefix_is_empty(self):
        t = LexicographicTree(gen_words_fixed())
        self.assertEqual(t.get_words("apz"), [])
        self.assertEqual(t.get_words("q"), [])
        self.assertEqual(t.get_words("4"), [])

    def test_empty_tree(self):
        self.assertEqual(LexicographicTree().get_words(""), [])

    def test_iter_words_limit(self):
        t = LexicographicTree(gen_words_fixed())
        self.assertEqual(list(t.iter_words("app", k=2)), ["app", "apple"])
        self.assertEqual(list(t), t.get_words(""))

    def test_siblings_see_no_stale_characters(self):
        t = LexicographicTree(["ab", "abc", "ad", "b", "bcd", "bce"])
        self.assertEqual(t.get_words(""), ["ab", "abc", "ad", "b", "bcd", "bce"])

    def test_long_word_not_bound_by_recursion_limit(self):
        word = "ab" * (sys.getrecursionlimit() + 100)
        t = LexicographicTree([word])
        self.assertEqual(t.get_words("abab"), [word])
        self.assertEqual(t.get_words_of_length(len(word)), [word])


class TestGetWordsOfLength(unittest.TestCase):
    def test_exact_lengths(self):
        words = gen_words_fixed()
        t = LexicographicTree(words)
        for n in range(1, 12):
            expected = sorted({w for w in words if len(w) == n}, key=codec_key)
            self.assertEqual(t.get_words_of_length(n), expected, n)

    def test_non_positive_length_is_empty(self):
        t = LexicographicTree(gen_words_fixed())
        self.assertEqual(t.get_words_of_length(0), [])
        self.assertEqual(t.get_words_of_length(-3), [])

    def test_length_beyond_longest_word(self):
        t = LexicographicTree(["cat"])
        self.assertEqual(t.get_words_of_length(4), [])

    def test_internal_nodes_not_reported(self):
        t = LexicographicTree(["cater"])
        self.assertEqual(t.get_words_of_length(3), [])


class TestCountNodes(unittest.TestCase):
    def test_small_controlled_tree(self):
        t = LexicographicTree(["a", "ab", "ac", "b"])
        # root, a, ab, ac, b
        self.assertEqual(t.count_nodes(), 5)
        # root has 2 children, a has 2 children
        self.assertEqual(t.count_nodes(get_avg_branch_factor=True), 2.0)

    def test_empty_tree(self):
        t = LexicographicTree()
        self.assertEqual(t.count_nodes(), 1)
        self.assertEqual(t.count_nodes(get_avg_branch_factor=True), 0.0)


class TestRandomProperties(unittest.TestCase):
    def setUp(self):
        rng = random.Random(1337)
        self.words = gen_random_words(rng, 2000, min_len=1, max_len=8)
        self.tree = LexicographicTree(self.words + self.words[:200])
        self.distinct = set(self.words)

    def test_size_matches_distinct(self):
        self.assertEqual(self.tree.size(), len(self.distinct))

    def test_export_equals_inserted_set_sorted(self):
        got = self.tree.get_words("")
        self.assertEqual(got, sorted(self.distinct, key=codec_key))

    def test_prefix_results_start_with_prefix(self):
        for prefix in ["a", "zq", "-", "'", "ab'"]:
            found = self.tree.get_words(prefix)
            expected = sorted((w for w in self.distinct if w.startswith(prefix)), key=codec_key)
            self.assertEqual(found, expected, prefix)

    def test_length_sweep_sums_to_size(self):
        longest = max(len(w) for w in self.distinct)
        total = sum(len(self.tree.get_words_of_length(n)) for n in range(longest + 1))
        self.assertEqual(total, self.tree.size())

    def test_invalid_insert_keeps_results(self):
        before = self.tree.get_words("")
        with self.assertRaises(InvalidCharacterError):
            self.tree.insert("abc1")
        self.assertEqual(self.tree.get_words(""), before)


if __name__ == "__main__":
    unittest.main(verbosity=2)
