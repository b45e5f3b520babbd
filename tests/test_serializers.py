import unittest

from tiered_config import InvalidFormatError
from tiered_config.serializers import FormatSerializer


class FormatSerializerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.serializer = FormatSerializer()

    def test_yaml_keeps_ambiguous_strings(self) -> None:
        data = self.serializer.encode({"flag": "yes", "version": "1.0", "empty": ""}, "yaml")
        self.assertEqual(
            self.serializer.decode(data, "yaml"),
            {"flag": "yes", "version": "1.0", "empty": ""},
        )

    def test_empty_documents_decode_to_empty_mapping(self) -> None:
        self.assertEqual(self.serializer.decode(b"", "yaml"), {})
        self.assertEqual(self.serializer.decode(b"   \n", "json"), {})

    def test_top_level_must_be_mapping(self) -> None:
        with self.assertRaises(ValueError):
            self.serializer.decode(b"- a\n- b\n", "yaml")
        with self.assertRaises(ValueError):
            self.serializer.decode(b"[1, 2]", "json")

    def test_malformed_input_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            self.serializer.decode(b"{not json", "json")
        with self.assertRaises(ValueError):
            self.serializer.decode(b"foo: [unclosed", "yaml")

    def test_unknown_format_is_rejected(self) -> None:
        with self.assertRaises(InvalidFormatError):
            self.serializer.encode({}, "toml")
        with self.assertRaises(InvalidFormatError):
            self.serializer.decode(b"{}", "JSON")


if __name__ == "__main__":
    unittest.main()
