"""Tests for inspecting transform output."""
from blockshift.block import BlockInstance, Invalid, Sequence, Single, inspect_output


class TestInspectOutput:

    def test_single_block(self):
        block = BlockInstance(name="core/text-block")

        output = inspect_output(block)

        assert isinstance(output, Single)
        assert output.block is block
        assert output.blocks == [block]

    def test_single_mapping(self):
        output = inspect_output({"name": "core/text-block", "attributes": {"value": "ribs"}})

        assert isinstance(output, Single)
        assert output.block.name == "core/text-block"
        assert output.block.attributes == {"value": "ribs"}
        assert output.block.id

    def test_mapping_without_attributes(self):
        output = inspect_output({"name": "core/text-block"})

        assert isinstance(output, Single)
        assert output.block.attributes == {}

    def test_sequence(self):
        first = BlockInstance(name="core/text-block")
        second = BlockInstance(name="core/quote-block")

        output = inspect_output((first, second))

        assert isinstance(output, Sequence)
        assert output.blocks == [first, second]

    def test_none(self):
        assert isinstance(inspect_output(None), Invalid)

    def test_empty_list(self):
        output = inspect_output([])

        assert isinstance(output, Invalid)
        assert output.blocks == []

    def test_mapping_without_name(self):
        assert isinstance(inspect_output({"attributes": {"value": "ribs"}}), Invalid)

    def test_mapping_with_bad_attributes(self):
        assert isinstance(inspect_output({"name": "core/text-block", "attributes": "ribs"}), Invalid)

    def test_mapping_with_non_string_attribute_keys(self):
        output = inspect_output({"name": "core/text-block", "attributes": {1: "ribs"}})

        assert isinstance(output, Invalid)
        assert "malformed" in output.reason

    def test_sequence_with_malformed_item(self):
        output = inspect_output([BlockInstance(name="core/text-block"), {"name": "core/text-block", "attributes": {1: "ribs"}}])

        assert isinstance(output, Invalid)
        assert "item 1" in output.reason

    def test_sequence_with_invalid_item(self):
        output = inspect_output([BlockInstance(name="core/text-block"), "ribs"])

        assert isinstance(output, Invalid)
        assert "item 1" in output.reason

    def test_unsupported_value(self):
        assert isinstance(inspect_output("core/text-block"), Invalid)
