import math
import unittest

import stern_brocot
from stern_brocot import ContractViolation, NodeStore
from stern_brocot.core import ONE_OVER_ONE, ONE_OVER_ZERO, ZERO_OVER_ONE


class TestNodeStore(unittest.TestCase):

    def setUp(self):
        self.store = NodeStore()

    def test_initial_nodes(self):
        self.assertEqual(self.store.nb_fractions, 3)
        zero = self.store.node(ZERO_OVER_ONE)
        inf = self.store.node(ONE_OVER_ZERO)
        one = self.store.node(ONE_OVER_ONE)
        self.assertEqual((zero.p, zero.q), (0, 1))
        self.assertEqual((inf.p, inf.q), (1, 0))
        self.assertEqual((one.p, one.q, one.u, one.k), (1, 1, 1, 1))
        self.assertEqual(one.origin, ONE_OVER_ZERO)
        self.assertTrue(self.store.is_valid())

    def test_fraction_round_trip(self):
        for p in range(0, 30):
            for q in range(0, 30):
                if (p, q) == (0, 0) or math.gcd(p, q) != 1:
                    continue
                f = self.store.fraction(p, q)
                self.assertEqual((f.p(), f.q()), (p, q))
        self.assertTrue(self.store.is_valid())

    def test_only_fractions_above_one_are_stored(self):
        self.store.fraction(3, 8)
        self.store.fraction(13, 21)
        for node in self.store:
            if not node.is_root():
                self.assertGreaterEqual(node.p, node.q)

    def test_fibonacci_path_built_once(self):
        f = self.store.fraction(8, 5)
        self.assertEqual(self.store.nb_fractions, 7)
        stored = {(n.p, n.q) for n in self.store}
        for pq in [(1, 1), (2, 1), (3, 2), (5, 3), (8, 5)]:
            self.assertIn(pq, stored)

        g = self.store.fraction(8, 5)
        self.assertEqual(self.store.nb_fractions, 7)
        self.assertEqual(f.node_id, g.node_id)
        self.assertIs(self.store.node(f.node_id), self.store.node(g.node_id))

    def test_memoization_shared_with_reciprocal(self):
        f = self.store.fraction(13, 8)
        count = self.store.nb_fractions
        g = self.store.fraction(8, 13)
        self.assertEqual(self.store.nb_fractions, count)
        self.assertEqual(f.node_id, g.node_id)
        self.assertFalse(f.reciprocal)
        self.assertTrue(g.reciprocal)

    def test_one_node_per_value(self):
        for p in range(1, 25):
            for q in range(1, 25):
                if math.gcd(p, q) == 1:
                    self.store.fraction(p, q)
        values = [(n.p, n.q) for n in self.store]
        self.assertEqual(len(values), len(set(values)))

    def test_large_coefficient_is_one_step(self):
        # 2/1 on the path, then [1; 10**6] and its father [1; 10**6 - 1]
        f = self.store.fraction(10**6 + 1, 10**6)
        self.assertEqual(self.store.nb_fractions, 6)
        self.assertEqual(f.cfrac(), [1, 10**6])
        self.assertTrue(f.father().equals(10**6, 10**6 - 1))
        self.assertEqual(self.store.nb_fractions, 6)

    def test_child_formula(self):
        f = self.store.fraction(3, 2)
        child_id = self.store.child(f.node_id, 5)
        child = self.store.node(child_id)
        # [1; 2] -> [1; 1, 5] = 11/6
        self.assertEqual((child.p, child.q, child.u, child.k), (11, 6, 5, 3))
        self.assertEqual(child.origin, f.node_id)
        self.assertEqual(self.store.child(f.node_id, 5), child_id)

    def test_children_of_one_fold(self):
        child = self.store.node(self.store.child(ONE_OVER_ONE, 4))
        self.assertEqual((child.p, child.q, child.u, child.k), (4, 1, 4, 1))

    def test_child_contract(self):
        with self.assertRaises(ContractViolation):
            self.store.child(ONE_OVER_ONE, 1)
        with self.assertRaises(ContractViolation):
            self.store.child(ONE_OVER_ZERO, 2)

    def test_fraction_contract(self):
        with self.assertRaises(ContractViolation):
            self.store.fraction(4, 2)
        with self.assertRaises(ContractViolation):
            self.store.fraction(-1, 2)
        with self.assertRaises(ContractViolation):
            self.store.fraction(0, 0)
        self.assertIsInstance(ContractViolation("x"), ValueError)

    def test_roots(self):
        self.assertEqual(self.store.fraction(0, 1).node_id, ZERO_OVER_ONE)
        self.assertEqual(self.store.fraction(1, 0).node_id, ONE_OVER_ZERO)
        self.assertEqual(self.store.fraction(1, 1).node_id, ONE_OVER_ONE)
        self.assertEqual(self.store.nb_fractions, 3)

    def test_independent_stores(self):
        other = NodeStore()
        self.store.fraction(21, 13)
        self.assertEqual(other.nb_fractions, 3)

    def test_display(self):
        f = self.store.fraction(5, 3)
        self.assertEqual(self.store.display(f), "[Fraction f=5/3 u=2 k=3 cfrac=[1, 1, 2]]")
        self.assertEqual(self.store.display(stern_brocot.Fraction()), "[Fraction f=0/0]")


class TestLazyConstruction(unittest.TestCase):

    PAIRS = [(31, 7), (10, 3), (11, 4), (355, 113), (8, 5), (7, 31),
             (10**6 + 1, 10**6), (2**89 - 1, 3**50)]

    def test_reads_build_nothing(self):
        for p, q in self.PAIRS:
            store = NodeStore()
            f = store.fraction(p, q)
            count = store.nb_fractions
            f.cfrac()
            f.get_split()
            f.get_split_berstel()
            f.father()
            f.ancestor()
            f.previous_partial()
            for i in range(int(f.k()) + 2):
                f.reduced(i)
            for kp in range(1, int(f.k()) + 1):
                f.partial(kp)
            self.assertEqual(store.nb_fractions, count, (p, q))
            self.assertTrue(store.is_valid())

    def test_navigation_builds_at_most_one_node(self):
        for p, q in self.PAIRS:
            f = NodeStore().fraction(p, q)
            for step in (f.left, f.right, f.origin, f.inverse, lambda: f.father(1)):
                count = f.store.nb_fractions
                step()
                self.assertLessEqual(f.store.nb_fractions - count, 1, (p, q))


class TestProcessWideStore(unittest.TestCase):

    def test_instance_is_shared(self):
        self.assertIs(NodeStore.instance(), NodeStore.instance())

    def test_module_level_fraction(self):
        f = stern_brocot.fraction(3, 2)
        self.assertIs(f.store, NodeStore.instance())
        self.assertTrue(f.equals(3, 2))


if __name__ == "__main__":
    unittest.main()
