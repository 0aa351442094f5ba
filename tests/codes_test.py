import unittest
from huffcode.codes import assign_codes, codewords_are_unique, is_prefix_code
from huffcode.frequency import count_frequencies
from huffcode.settings import HuffmanCodeSettings
from huffcode.tree import build_tree

class TestAssignCodes(unittest.TestCase):
    def test_left_is_zero_right_is_one(self):
        table = assign_codes(build_tree({'a': 1, 'b': 1, 'c': 2, 'd': 3, 'e': 5}))
        self.assertEqual(table.as_dict(), {'e': '0', 'd': '10', 'c': '110', 'a': '1110', 'b': '1111'})

    def test_empty_tree(self):
        self.assertEqual(len(assign_codes(None)), 0)

    def test_single_leaf_gets_one_bit(self):
        table = assign_codes(build_tree({'a': 4}))
        self.assertEqual(table.as_dict(), {'a': '0'})

    def test_single_leaf_codeword_from_settings(self):
        table = assign_codes(build_tree({'a': 4}), HuffmanCodeSettings(single_symbol_codeword='1'))
        self.assertEqual(table.as_dict(), {'a': '1'})

    def test_generated_codes_are_prefix_free_and_unique(self):
        for text in ["abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
                     "dagoth ur was a hotep", "fifty liquors yeah good",
                     "the quick brown fox jumped over the lazy dog"]:
            table = assign_codes(build_tree(count_frequencies(text)))
            self.assertEqual(len(table), len(set(text)))
            self.assertTrue(codewords_are_unique(table.codewords()))
            self.assertTrue(is_prefix_code(table.codewords()))

class TestCodeChecks(unittest.TestCase):
    def test_is_prefix_code(self):
        self.assertTrue(is_prefix_code(['0', '10', '110', '111']))
        self.assertFalse(is_prefix_code(['0', '01', '11']))
        self.assertFalse(is_prefix_code(['10', '0', '101']))
        self.assertTrue(is_prefix_code([]))

    def test_codewords_are_unique(self):
        self.assertTrue(codewords_are_unique(['0', '10', '11']))
        self.assertFalse(codewords_are_unique(['0', '10', '0']))

if __name__ == '__main__':
    unittest.main()
