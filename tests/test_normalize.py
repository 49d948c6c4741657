import unittest

from formgen.normalize import normalize_options


class NormalizeOptionsTest(unittest.TestCase):
    def test_empty_input_is_noop(self) -> None:
        self.assertEqual(normalize_options([]), [])
        self.assertEqual(normalize_options({}), [])
        self.assertEqual(normalize_options(None), [])

    def test_associative_uses_keys_as_values(self) -> None:
        result = normalize_options({"v1": "Label 1", "v2": "Label 2"})
        self.assertEqual(
            result,
            [{"value": "v1", "label": "Label 1"}, {"value": "v2", "label": "Label 2"}],
        )

    def test_indexed_uses_labels_as_values(self) -> None:
        result = normalize_options(["red", "blue"])
        self.assertEqual(
            result,
            [{"value": "red", "label": "red"}, {"value": "blue", "label": "blue"}],
        )

    def test_mapping_with_contiguous_int_keys_is_indexed(self) -> None:
        result = normalize_options({0: "a", 1: "b"})
        self.assertEqual(result, [{"value": "a", "label": "a"}, {"value": "b", "label": "b"}])

    def test_mapping_with_numeric_string_keys_is_indexed(self) -> None:
        result = normalize_options({"0": "No", "1": "Yes"})
        self.assertEqual(result, [{"value": "No", "label": "No"}, {"value": "Yes", "label": "Yes"}])

    def test_mapping_with_padded_numeric_keys_is_associative(self) -> None:
        result = normalize_options({"00": "a", "1": "b"})
        self.assertEqual(result, [{"value": "00", "label": "a"}, {"value": "1", "label": "b"}])

    def test_mapping_with_offset_int_keys_is_associative(self) -> None:
        result = normalize_options({1: "a", 2: "b"})
        self.assertEqual(result, [{"value": 1, "label": "a"}, {"value": 2, "label": "b"}])

    def test_prebuilt_mappings_pass_through(self) -> None:
        options = [
            {"type": "optgroup", "label": "Fruit"},
            {"value": "apple", "label": "Apple", "disabled": True},
            {"type": "optgroup", "label": "__end__"},
        ]
        self.assertEqual(normalize_options(options), options)

    def test_normalization_is_idempotent(self) -> None:
        once = normalize_options({"a": "A", "b": "B"})
        self.assertEqual(normalize_options(once), once)

    def test_insertion_order_is_kept(self) -> None:
        result = normalize_options({"z": "Z", "a": "A", "m": "M"})
        self.assertEqual([option["value"] for option in result], ["z", "a", "m"])


if __name__ == "__main__":
    unittest.main()
