import unittest
from unistrings import layout

class TestTrim(unittest.TestCase):
    def test_default_characters(self):
        self.assertEqual(layout.trim(' \t Hello World\x00\x0b\r\n'), 'Hello World')

    def test_charlist(self):
        self.assertEqual(layout.trim('-+Hello-+', '+-'), 'Hello')

    def test_keeps_inner_whitespace(self):
        self.assertEqual(layout.trim('  a  b  '), 'a  b')

class TestTruncate(unittest.TestCase):
    text = 'Hello, how are you today?'

    def test_hard_cut(self):
        self.assertEqual(layout.truncate(self.text, 5), 'Hell…')

    def test_word_boundary(self):
        self.assertEqual(layout.truncate(self.text, 20), 'Hello, how are you…')
        self.assertEqual(layout.truncate(self.text, 20, '~'), 'Hello, how are you~')

    def test_short_enough(self):
        self.assertEqual(layout.truncate(self.text, 30), self.text)
        self.assertEqual(layout.truncate(self.text, len(self.text)), self.text)

    def test_no_room(self):
        self.assertEqual(layout.truncate(self.text, 2, '...'), '...')

    def test_length_limit(self):
        for max_len in range(1, len(self.text) + 1):
            self.assertLessEqual(len(layout.truncate(self.text, max_len)), max_len)

class TestIndent(unittest.TestCase):
    def test_indent(self):
        self.assertEqual(layout.indent('Hello'), '\tHello')
        self.assertEqual(layout.indent('Hello', 2, '+'), '++Hello')

    def test_skips_blank_lines(self):
        self.assertEqual(layout.indent('one\n\ntwo\r\nthree\n', 1, '  '), '  one\n\n  two\r\n  three\n')

    def test_zero_level(self):
        self.assertEqual(layout.indent('Hello', 0), 'Hello')

    def test_replacement_characters_are_literal(self):
        self.assertEqual(layout.indent('a', 1, '\\1'), '\\1a')

class TestPad(unittest.TestCase):
    def test_pad_left(self):
        self.assertEqual(layout.pad_left('Hello', 6), ' Hello')
        self.assertEqual(layout.pad_left('Hello', 8, '+*'), '+*+Hello')

    def test_pad_right(self):
        self.assertEqual(layout.pad_right('Hello', 6), 'Hello ')
        self.assertEqual(layout.pad_right('Hello', 8, '+*'), 'Hello+*+')

    def test_shorter_target(self):
        self.assertEqual(layout.pad_left('Hello', 3), 'Hello')
        self.assertEqual(layout.pad_right('Hello', -1), 'Hello')

    def test_unicode_pad(self):
        self.assertEqual(layout.pad_left('ž', 4, 'čř'), 'čřčž')

    def test_empty_pad(self):
        with self.assertRaises(ValueError):
            layout.pad_left('Hello', 8, '')

    def test_noop_padding_round_trip(self):
        s = 'Hello'
        self.assertEqual(layout.trim(layout.pad_left(layout.pad_right(s, 3), 5)), s)
