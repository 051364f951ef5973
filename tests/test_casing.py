import unicodedata
import unittest
from unistrings import casing

class TestCaseConversion(unittest.TestCase):
    def test_lower_upper(self):
        self.assertEqual(casing.to_lower('ŽLUŤOUČKÝ Kůň'), 'žluťoučký kůň')
        self.assertEqual(casing.to_upper('žluťoučký kůň'), 'ŽLUŤOUČKÝ KŮŇ')

    def test_first_lower(self):
        self.assertEqual(casing.first_lower('Hello World'), 'hello World')
        self.assertEqual(casing.first_lower(''), '')

    def test_first_upper(self):
        self.assertEqual(casing.first_upper('čau Světe'), 'Čau Světe')
        self.assertEqual(casing.first_upper(''), '')

class TestTitleCase(unittest.TestCase):
    def test_title_case(self):
        self.assertEqual(casing.title_case('hello wORLD'), 'Hello World')

    def test_apostrophe(self):
        self.assertEqual(casing.title_case("don't stop"), "Don't Stop")

    def test_capitalize_alias(self):
        self.assertEqual(casing.capitalize('žluťoučký kůň'), 'Žluťoučký Kůň')

    def test_underscore_to_camel(self):
        self.assertEqual(casing.underscore_to_camel('user_first_name'), 'UserFirstName')
        self.assertEqual(casing.underscore_to_camel('USER_ID'), 'UserId')

    def test_decomposed_marks_stay_in_word(self):
        decomposed = unicodedata.normalize('NFD', 'école élève')
        expected = unicodedata.normalize('NFD', 'École Élève')
        self.assertEqual(casing.title_case(decomposed), expected)

    def test_decomposed_underscore_to_camel(self):
        decomposed = unicodedata.normalize('NFD', 'prénom_utilisé')
        expected = unicodedata.normalize('NFD', 'PrénomUtilisé')
        self.assertEqual(casing.underscore_to_camel(decomposed), expected)

class TestNormalize(unittest.TestCase):
    def test_newlines(self):
        self.assertEqual(casing.normalize_newlines('a\r\nb\rc\nd'), 'a\nb\nc\nd')

    def test_normalize(self):
        result = casing.normalize('\r\n\nHello \t\r\n\x00World\x07\x9f  \n\n\n')
        self.assertEqual(result, 'Hello\nWorld')

    def test_keeps_tabs_and_inner_blank_lines(self):
        self.assertEqual(casing.normalize('a\tb\n\n c'), 'a\tb\n\n c')

    def test_keeps_leading_spaces(self):
        self.assertEqual(casing.normalize('  indented'), '  indented')

    def test_composes(self):
        self.assertEqual(casing.normalize('Cafe\u0301'), 'Caf\u00e9')

    def test_idempotent(self):
        samples = [
            '\n e\x01\u0301 \t\r\n\r\nline\x85 two  \n',
            '  \n\n',
            'a\x00\u0308\rb\t',
            ''
        ]
        for sample in samples:
            once = casing.normalize(sample)
            self.assertEqual(casing.normalize(once), once)
