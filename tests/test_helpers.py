import unittest
from unistrings.helpers import chain_operations

class TestChainOperations(unittest.TestCase):
    def test_order(self):
        result = chain_operations(' hello ', [str.strip, str.upper, lambda s: s + '!'])
        self.assertEqual(result, 'HELLO!')

    def test_no_operations(self):
        self.assertEqual(chain_operations('hello', []), 'hello')
