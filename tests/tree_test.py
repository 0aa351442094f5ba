import unittest
from huffcode.errors import EmptyDistributionError
from huffcode.frequency import count_frequencies
from huffcode.tree import build_tree, iter_leaves, tree_depth, weighted_path_length

class TestBuildTree(unittest.TestCase):
    def _check_weights(self, node):
        if node.is_leaf:
            return node.weight
        self.assertEqual(node.weight, self._check_weights(node.left) + self._check_weights(node.right))
        return node.weight

    def test_empty_distribution(self):
        with self.assertRaises(EmptyDistributionError):
            build_tree({})

    def test_single_leaf(self):
        root = build_tree(count_frequencies("aaaa"))
        self.assertTrue(root.is_leaf)
        self.assertEqual(root.symbol, 'a')
        self.assertEqual(root.weight, 4)
        self.assertEqual(weighted_path_length(root), 0)
        self.assertEqual(tree_depth(root), 0)

    def test_lighter_node_goes_left(self):
        root = build_tree(count_frequencies("aab"))
        self.assertEqual(root.left.symbol, 'b')
        self.assertEqual(root.right.symbol, 'a')

    def test_ties_broken_by_creation_order(self):
        root = build_tree(count_frequencies("abc"))
        self.assertEqual(root.left.symbol, 'c')
        self.assertEqual(root.right.left.symbol, 'a')
        self.assertEqual(root.right.right.symbol, 'b')

    def test_internal_weights_are_sums(self):
        root = build_tree(count_frequencies("the quick brown fox jumped over the lazy dog"))
        self.assertEqual(self._check_weights(root), 44)

    def test_every_symbol_is_a_leaf_once(self):
        freqs = count_frequencies("dagoth ur was a hotep")
        leaves = [leaf.symbol for leaf, _ in iter_leaves(build_tree(freqs))]
        self.assertEqual(sorted(leaves), sorted(freqs))

    def test_fibonacci_weights_are_optimal(self):
        root = build_tree({'a': 1, 'b': 1, 'c': 2, 'd': 3, 'e': 5})
        self.assertEqual(weighted_path_length(root), 25)
        self.assertEqual(tree_depth(root), 4)

    def test_uniform_weights_give_balanced_tree(self):
        root = build_tree({sym: 1 for sym in "abcdefgh"})
        self.assertEqual(tree_depth(root), 3)
        self.assertEqual(weighted_path_length(root), 24)

class TestIterLeaves(unittest.TestCase):
    def test_left_to_right_with_depths(self):
        root = build_tree({'a': 1, 'b': 1, 'c': 2, 'd': 3, 'e': 5})
        leaves = [(leaf.symbol, depth) for leaf, depth in iter_leaves(root)]
        self.assertEqual(leaves, [('e', 1), ('d', 2), ('c', 3), ('a', 4), ('b', 4)])

if __name__ == '__main__':
    unittest.main()
