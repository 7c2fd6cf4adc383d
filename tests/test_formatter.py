"""Tests for the flatten and pretty renderers."""

import pytest
from edn_bridge.edn.reader import parse_edn
from edn_bridge.formatter import flatten, pretty
from edn_bridge.models import Keyword, Vector, EdnList, EdnMap


class TestFlatten:
    """Tests for flatten."""
    
    def test_flattens_empty_containers(self):
        """Test empty map and sequence."""
        assert flatten(EdnMap()) == "{}"
        assert flatten(Vector()) == "[]"
        assert flatten([]) == "[]"
        assert flatten({}) == "{}"
    
    def test_flattens_simple_map(self, simple_edn_map):
        """Test a flat keyword map."""
        assert flatten(simple_edn_map) == '{:name "test" :value 42}'
    
    def test_flattens_nested_map(self, nested_edn_map):
        """Test a nested map."""
        assert flatten(nested_edn_map) == '{:user {:id 1 :settings {:theme "dark"}}}'
    
    def test_flattens_array(self):
        """Test a plain list with a map element."""
        array = [1, "test", EdnMap((Keyword("key"),), ("value",))]
        assert flatten(array) == '[1 "test" {:key "value"}]'
    
    def test_list_renders_as_vector(self):
        """Test EDN lists use square brackets."""
        assert flatten(EdnList((1, 2))) == "[1 2]"
    
    def test_plain_dict_keys_are_quoted(self):
        """Test generic mappings encode their keys as strings."""
        assert flatten({"a": [1, None]}) == '{"a" [1 nil]}'
    
    def test_normalises_scalars(self):
        """Test scalars are re-encoded rather than copied."""
        assert flatten(parse_edn('[1.50 +7 "a\\u0041"]')) == '[1.5 7 "aA"]'
    
    def test_idempotent_on_flat_text(self):
        """Test flattening already flat EDN yields the same text."""
        text = '{:user {:id 1 :settings {:theme "dark"}}}'
        assert flatten(parse_edn(text)) == text
    
    @pytest.mark.parametrize("text", [
        '{:a  1,\n :b [1\n 2   3]}',
        '[  {:x "y z"}  ()  [] ]',
        '{:menu {:items [{:v "New"} {:v "Open"}]}}',
    ])
    def test_no_newlines_or_double_spaces(self, text):
        """Test flatten output is a single line with single separators."""
        result = flatten(parse_edn(text))
        
        assert "\n" not in result
        assert "  " not in result.replace('"y z"', "")


class TestPretty:
    """Tests for pretty."""
    
    def test_empty_containers(self):
        """Test empty map and sequence."""
        assert pretty(EdnMap()) == "{}"
        assert pretty(Vector()) == "[]"
        assert pretty({}) == "{}"
        assert pretty([]) == "[]"
    
    def test_scalar(self):
        """Test a scalar renders as its token."""
        assert pretty(Keyword("a")) == ":a"
        assert pretty("x") == '"x"'
    
    def test_simple_map_pads_keys(self, simple_edn_map):
        """Test keys are padded to the longest sibling key."""
        assert pretty(simple_edn_map) == '{:name  "test"\n :value 42}'
    
    def test_single_entry_map_stays_on_one_line(self):
        """Test a one-pair map has no newline."""
        assert pretty(EdnMap((Keyword("theme"),), ("dark",))) == '{:theme "dark"}'
    
    def test_nested_map_aligns_to_parent_value_column(self, nested_edn_map):
        """Test nested map keys line up under the nested map's first key."""
        expected = (
            '{:user {:id       1\n'
            '        :settings {:theme "dark"}}}'
        )
        assert pretty(nested_edn_map) == expected
    
    def test_sequence_elements_use_single_space(self):
        """Test elements after the first start one column in."""
        array = [1, "test", EdnMap((Keyword("key"),), ("value",))]
        assert pretty(array) == '[1\n "test"\n {:key "value"}]'
    
    def test_sequence_nesting_is_ragged(self):
        """Test map continuation lines inside a vector sit four columns in."""
        tree = parse_edn("[1 {:a 1 :bb 2}]")
        assert pretty(tree) == '[1\n {:a  1\n     :bb 2}]'
    
    def test_multi_entry_containers_have_newlines(self):
        """Test any container with two or more entries spans lines."""
        assert "\n" in pretty(parse_edn("{:a 1 :b 2}"))
        assert "\n" in pretty(parse_edn("[1 2]"))
        assert "\n" in pretty(parse_edn("(1 2)"))
    
    def test_value_column_alignment(self):
        """Test every sibling value starts in the same column."""
        tree = parse_edn('{:a "v1" :longer "v2" :mid "v3"}')
        lines = pretty(tree).split("\n")
        columns = {line.index('"v') for line in lines}
        
        # "{" + ":longer" + " "
        assert columns == {1 + len(":longer") + 1}
    
    def test_nested_value_column_alignment(self):
        """Test alignment holds inside nested maps."""
        tree = parse_edn('{:outer {:k "v1" :key "v2"} :o "v3"}')
        lines = pretty(tree).split("\n")
        
        assert lines[0].index('"v1"') == lines[1].index('"v2"')
        assert lines[0].index("{:k") == lines[2].index('"v3"') - 1
    
    def test_string_keys_in_plain_dicts(self):
        """Test quoted key width is used for padding."""
        assert pretty({"a": 1, "bcd": 2}) == '{"a"   1\n "bcd" 2}'
