import unittest

from tiered_config import JSON, YAML, is_valid_format
from tiered_config.formats import file_extensions


class IsValidFormatTests(unittest.TestCase):
    def test_recognized_formats(self) -> None:
        self.assertTrue(is_valid_format("json"))
        self.assertTrue(is_valid_format("yaml"))
        self.assertTrue(is_valid_format(JSON))
        self.assertTrue(is_valid_format(YAML))

    def test_unrecognized_formats(self) -> None:
        for value in ("toml", "N/A", "", "yml", "ini", " json", "json ", None, 1):
            with self.subTest(value=value):
                self.assertFalse(is_valid_format(value))

    def test_format_names_are_case_sensitive(self) -> None:
        for value in ("JSON", "Json", "YAML", "Yaml"):
            with self.subTest(value=value):
                self.assertFalse(is_valid_format(value))

    def test_yaml_accepts_both_extensions(self) -> None:
        self.assertEqual(tuple(file_extensions(YAML)), ("yaml", "yml"))
        self.assertEqual(tuple(file_extensions(JSON)), ("json",))


if __name__ == "__main__":
    unittest.main()
