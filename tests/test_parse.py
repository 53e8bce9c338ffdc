import unittest

from osrelease.utils.parse import iter_assigns, parse_osrelease_contents, unquote


class TestUnquote(unittest.TestCase):
    def test_double_quotes(self) -> None:
        self.assertEqual(unquote('"1.0 (Core)"'), "1.0 (Core)")

    def test_single_quotes(self) -> None:
        self.assertEqual(unquote("'1.0'"), "1.0")

    def test_unquoted(self) -> None:
        self.assertEqual(unquote("1.0"), "1.0")
        self.assertEqual(unquote("  1.0  "), "1.0")

    def test_unbalanced(self) -> None:
        self.assertEqual(unquote('"1.0'), '"1.0')
        self.assertEqual(unquote("1.0'"), "1.0'")
        self.assertEqual(unquote('"'), '"')

    def test_mismatched(self) -> None:
        self.assertEqual(unquote("\"1.0'"), "\"1.0'")
        self.assertEqual(unquote("'1.0\""), "'1.0\"")

    def test_empty(self) -> None:
        self.assertEqual(unquote(""), "")
        self.assertEqual(unquote('""'), "")
        self.assertEqual(unquote("''"), "")

    def test_only_one_pair(self) -> None:
        self.assertEqual(unquote('""a""'), '"a"')
        # Unquoting an already unquoted value changes nothing
        self.assertEqual(unquote(unquote('"a b"')), "a b")

    def test_internal_whitespace(self) -> None:
        self.assertEqual(unquote('"  a   b  "'), "  a   b  ")


class TestParse(unittest.TestCase):
    def test_assigns(self) -> None:
        self.assertEqual(
            list(iter_assigns(["A=1", "B='2'", 'C="3"', "A=4"])),
            [("A", "1"), ("B", "2"), ("C", "3"), ("A", "4")],
        )

    def test_skipped_lines(self) -> None:
        contents = "\n".join(
            [
                "",
                "   ",
                "# ID=ignored",
                "   # indented comment",
                "GARBAGE_NO_EQUALS",
                "ID=real",
            ]
        )
        self.assertEqual(parse_osrelease_contents(contents), {"ID": "real"})

    def test_last_value_wins(self) -> None:
        self.assertEqual(parse_osrelease_contents("ID=a\nNAME=x\nID=b\n"), {"ID": "b", "NAME": "x"})

    def test_split_on_first_equals(self) -> None:
        self.assertEqual(parse_osrelease_contents("URL=http://example.org/?a=b\n"), {"URL": "http://example.org/?a=b"})

    def test_hash_in_value(self) -> None:
        self.assertEqual(parse_osrelease_contents("ANSI_COLOR=#ff0000 # red\n"), {"ANSI_COLOR": "#ff0000 # red"})

    def test_empty_value(self) -> None:
        self.assertEqual(parse_osrelease_contents('A=\nB=""\n'), {"A": "", "B": ""})

    def test_surrounding_whitespace(self) -> None:
        self.assertEqual(parse_osrelease_contents('   NAME= "Debian GNU/Linux"   \n'), {"NAME": "Debian GNU/Linux"})

    def test_crlf(self) -> None:
        self.assertEqual(parse_osrelease_contents('ID=fedora\r\nVERSION_ID="40"\r\n'), {"ID": "fedora", "VERSION_ID": "40"})

    def test_empty(self) -> None:
        self.assertEqual(parse_osrelease_contents(""), {})
