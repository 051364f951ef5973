import re
import unittest
from unistrings import expressions
from unistrings.entities import MatchOrder, RegexPattern

class TestSplitRegex(unittest.TestCase):
    def test_split(self):
        self.assertEqual(expressions.split_regex('One,  two,three', ',\\s*'), ['One', 'two', 'three'])

    def test_keeps_delimiters(self):
        result = expressions.split_regex('One,  two,three', '(,)\\s*')
        self.assertEqual(result, ['One', ',', 'two', ',', 'three'])

    def test_drops_unmatched_groups(self):
        result = expressions.split_regex('a,b;c', '(,)|(;)')
        self.assertEqual(result, ['a', ',', 'b', ';', 'c'])

    def test_skip_empty(self):
        result = expressions.split_regex(',a,,b,', ',', skip_empty=True)
        self.assertEqual(result, ['a', 'b'])

    def test_flags(self):
        self.assertEqual(expressions.split_regex('aXbxc', 'x', re.I), ['a', 'b', 'c'])

    def test_without_delimiter_capture(self):
        pattern = RegexPattern('(,)\\s*', delimiter_capture=False)
        self.assertEqual(expressions.split_regex('One,  two,three', pattern), ['One', 'two', 'three'])

class TestMatchFirst(unittest.TestCase):
    def test_match(self):
        self.assertEqual(expressions.match_first('One,  two,three', '[a-z]+', re.I), ['One'])

    def test_groups(self):
        result = expressions.match_first('Order 66', '([a-z]+) (\\d+)', re.I)
        self.assertEqual(result, ['Order 66', 'Order', '66'])

    def test_no_match(self):
        self.assertIsNone(expressions.match_first('One,  two,three', '\\d+'))

    def test_offset(self):
        self.assertEqual(expressions.match_first('One,  two,three', '[a-z]+', re.I, 4), ['two'])
        self.assertIsNone(expressions.match_first('abc', 'c', offset=4))
        self.assertEqual(expressions.match_first('abc', '$', offset=3), [''])

    def test_regex_pattern(self):
        pattern = RegexPattern('^two$', ignore_case=True, multiline=True)
        self.assertEqual(expressions.match_first('one\nTWO\nthree', pattern), ['TWO'])

    def test_compiled_pattern(self):
        self.assertEqual(expressions.match_first('a1', re.compile('\\d')), ['1'])

class TestMatchAll(unittest.TestCase):
    def test_set_order(self):
        result = expressions.match_all('One,  two,three', '[a-z]+', re.I)
        self.assertEqual(result, [['One'], ['two'], ['three']])

    def test_pattern_order(self):
        result = expressions.match_all('a1 b2', '([a-z])(\\d)', order=MatchOrder.PATTERN)
        self.assertEqual(result, [['a1', 'b2'], ['a', 'b'], ['1', '2']])

    def test_no_match(self):
        self.assertEqual(expressions.match_all('One,  two,three', '\\d+'), [])
        self.assertEqual(expressions.match_all('abc', '(\\d)', order=MatchOrder.PATTERN), [[], []])

    def test_offset(self):
        self.assertEqual(expressions.match_all('a1 b2', '\\d', offset=2), [['2']])
        self.assertEqual(expressions.match_all('a1 b2', '\\d', offset=6), [])

class TestReplace(unittest.TestCase):
    subject = 'One,  two,three'

    def test_string(self):
        self.assertEqual(expressions.replace(self.subject, '(?i)[a-z]+', '*'), '*,  *,*')

    def test_template(self):
        self.assertEqual(expressions.replace('John Smith', '(\\w+) (\\w+)', '\\2 \\1'), 'Smith John')

    def test_mapping(self):
        patterns = {'(?i)[a-z]+': '*', '\\s+': '+'}
        self.assertEqual(expressions.replace(self.subject, patterns), '*,+*,*')

    def test_parallel_sequences(self):
        result = expressions.replace(self.subject, ['(?i)[a-z]+', '\\s+', ','], ['*', '+'])
        self.assertEqual(result, '*+*')

    def test_callback(self):
        result = expressions.replace(self.subject, '(?i)[a-z]+', lambda m: m[0][::-1])
        self.assertEqual(result, 'enO,  owt,eerht')

    def test_callback_groups(self):
        result = expressions.replace('a1 b2', '([a-z])(\\d)', lambda m: m[2] + m[1])
        self.assertEqual(result, '1a 2b')

    def test_limit(self):
        self.assertEqual(expressions.replace('aaa', 'a', 'b', 2), 'bba')
        self.assertEqual(expressions.replace('aaa', 'a', 'b', 0), 'aaa')
        self.assertEqual(expressions.replace('aaa', 'a', 'b', -1), 'bbb')

    def test_regex_pattern(self):
        pattern = RegexPattern('[a-z]+', ignore_case=True)
        self.assertEqual(expressions.replace(self.subject, pattern, '*'), '*,  *,*')

    def test_invalid_replacement(self):
        with self.assertRaises(TypeError):
            expressions.replace(self.subject, '[a-z]+', 42)

class TestRegexPattern(unittest.TestCase):
    def test_flags(self):
        pattern = RegexPattern('x', ignore_case=True, dotall=True, unicode=False)
        self.assertEqual(pattern.flags, re.IGNORECASE | re.DOTALL | re.ASCII)

    def test_compiled_once(self):
        pattern = RegexPattern('x')
        self.assertIs(pattern.compiled, pattern.compiled)

    def test_hashable(self):
        self.assertEqual(len({RegexPattern('x'), RegexPattern('x')}), 1)
