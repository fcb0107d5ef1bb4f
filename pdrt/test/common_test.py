import unittest
from ..common import *


class CommonTest(unittest.TestCase):

    def test1_DRSVar(self):
        x = DRSVar('x')
        self.assertEqual(x, DRSVar('x'))
        self.assertNotEqual(x, DRSVar('y'))
        self.assertNotEqual(x, 'x')
        self.assertEqual('x', str(x))
        self.assertEqual('DRSVar(x)', repr(x))
        self.assertTrue(x < DRSVar('y'))
        self.assertEqual(1, len(set([x, DRSVar('x')])))
        self.assertRaises(TypeError, DRSVar, 1)

    def test2_LambdaDRSVar(self):
        p = LambdaDRSVar('P', ['x', DRSVar('y')])
        self.assertEqual(p, LambdaDRSVar(DRSVar('P'), [DRSVar('x'), DRSVar('y')]))
        # Argument order is significant
        self.assertNotEqual(p, LambdaDRSVar('P', ['y', 'x']))
        self.assertEqual('P', p.name)
        self.assertListEqual([DRSVar('x'), DRSVar('y')], p.referents)
        self.assertRaises(TypeError, LambdaDRSVar, 1, [])
        self.assertRaises(TypeError, LambdaDRSVar, 'P', [1])
        refs = ['x']
        q = LambdaDRSVar('Q', refs)
        refs.append('y')
        self.assertListEqual([DRSVar('x')], q.referents)
        self.assertEqual(LambdaDRSVar('Q', ['x']), LambdaDRSVar('Q', (v for v in 'x')))

    def test3_LambdaTuple(self):
        p = LambdaDRSVar('P', [])
        q = LambdaDRSVar('Q', [])
        self.assertEqual(LambdaTuple(p, 1), LambdaTuple(p, 1))
        self.assertNotEqual(LambdaTuple(p, 1), LambdaTuple(p, 2))
        self.assertListEqual([LambdaTuple(q, 0), LambdaTuple(p, 1), LambdaTuple(q, 1)],
                             sorted([LambdaTuple(q, 1), LambdaTuple(p, 1), LambdaTuple(q, 0)]))
        self.assertRaises(TypeError, LambdaTuple, 'P', 1)


if __name__ == '__main__':
    unittest.main()
