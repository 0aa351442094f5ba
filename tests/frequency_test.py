import unittest

import numpy as np

from huffcode.codec import HuffmanCode
from huffcode.frequency import count_frequencies, frequencies_from_mapping

class TestCountFrequencies(unittest.TestCase):
    def test_counts(self):
        freqs = count_frequencies("abracadabra")
        self.assertEqual(dict(freqs), {'a': 5, 'b': 2, 'r': 2, 'c': 1, 'd': 1})

    def test_first_occurrence_order(self):
        freqs = count_frequencies("cabbage")
        self.assertEqual(list(freqs), ['c', 'a', 'b', 'g', 'e'])

    def test_empty(self):
        self.assertEqual(len(count_frequencies("")), 0)

    def test_result_is_read_only(self):
        freqs = count_frequencies("aa")
        with self.assertRaises(TypeError):
            freqs['a'] = 5

class TestFrequenciesFromMapping(unittest.TestCase):
    def test_keeps_order_and_drops_zero_counts(self):
        freqs = frequencies_from_mapping({'x': 3, 'y': 0, 'z': 1})
        self.assertEqual(list(freqs.items()), [('x', 3), ('z', 1)])

    def test_numpy_integer_counts(self):
        freqs = frequencies_from_mapping({'a': np.int64(2), 'b': np.int32(1), 'c': np.int64(0)})
        self.assertEqual(dict(freqs), {'a': 2, 'b': 1})
        self.assertIs(type(freqs['a']), int)
        with self.assertRaises(ValueError):
            frequencies_from_mapping({'a': np.int64(-1)})

    def test_numpy_counts_build_a_codec(self):
        code = HuffmanCode.from_frequencies({'a': np.int64(2), 'b': np.int64(1)})
        self.assertEqual(code.code_table.as_dict(), {'a': '1', 'b': '0'})
        self.assertEqual(code.decode(code.encode("abba")), "abba")

    def test_invalid_counts(self):
        for bad in (-1, 1.5, True, "3"):
            with self.assertRaises(ValueError):
                frequencies_from_mapping({'a': bad})

    def test_invalid_symbols(self):
        for bad in ("ab", "", 7):
            with self.assertRaises(ValueError):
                frequencies_from_mapping({bad: 1})

if __name__ == '__main__':
    unittest.main()
