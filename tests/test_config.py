import dataclasses
import unittest
from collections import OrderedDict

import numpy as np
import sympy

from stern_brocot import ContractViolation, NodeStore, TreeConfig


class TestTreeConfig(unittest.TestCase):

    def test_defaults(self):
        config = TreeConfig()
        self.assertIs(config.integer, int)
        self.assertIs(config.size, int)
        self.assertIs(config.map_factory, dict)
        self.assertTrue(config.check_coprime)

    def test_frozen(self):
        config = TreeConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.check_coprime = False

    def test_conversions(self):
        config = TreeConfig(integer=sympy.Integer, size=np.int64)
        self.assertIsInstance(config.to_integer(np.int64(7)), sympy.Integer)
        self.assertIsInstance(config.to_size(sympy.Integer(7)), np.int64)


class TestConfiguredStores(unittest.TestCase):

    def test_sympy_integers(self):
        store = NodeStore(TreeConfig(integer=sympy.Integer))
        f = store.fraction(8, 5)
        self.assertIsInstance(f.p(), sympy.Integer)
        self.assertEqual((f.p(), f.q()), (8, 5))
        self.assertTrue(f.equals(16, 10))
        f1, f2 = f.get_split()
        self.assertEqual((f1.p(), f1.q(), f2.p(), f2.q()), (3, 2, 5, 3))
        self.assertTrue(store.is_valid())

    def test_sympy_big_integers(self):
        store = NodeStore(TreeConfig(integer=sympy.Integer))
        p, q = sympy.fibonacci(200), sympy.fibonacci(199)
        f = store.fraction(p, q)
        self.assertEqual(f.p(), p)
        self.assertEqual(f.k(), 198)
        self.assertEqual(f.father().p() + f.ancestor().p(), p)

    def test_numpy_sizes(self):
        store = NodeStore(TreeConfig(size=np.int64))
        f = store.fraction(355, 113)
        self.assertIsInstance(f.u(), np.int64)
        self.assertIsInstance(f.k(), np.int64)
        self.assertEqual([int(c) for c in f.cfrac()], [3, 7, 16])
        self.assertEqual(store.display(f), "[Fraction f=355/113 u=16 k=3 cfrac=[3, 7, 16]]")

    def test_ordered_children(self):
        store = NodeStore(TreeConfig(map_factory=OrderedDict))
        one = store.one_over_one()
        for v in (5, 2, 4):
            store.child(one.node_id, v)
        children = store.node(one.node_id).children
        self.assertIsInstance(children, OrderedDict)
        self.assertEqual(list(children), [5, 2, 4])

    def test_unchecked_gcd(self):
        # Euclid on 6/4 gives the expansion of 3/2.
        store = NodeStore(TreeConfig(check_coprime=False))
        self.assertTrue(store.fraction(6, 4).equals(3, 2))
        with self.assertRaises(ContractViolation):
            NodeStore().fraction(6, 4)


if __name__ == "__main__":
    unittest.main()
