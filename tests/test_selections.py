"""Tests for applying operations across editor selections."""

from edn_bridge.edn_converter import EdnConverter
from edn_bridge.selections import process_selections
from edn_bridge.tracing import RecordingTracer
from edn_bridge.types import Operation, ParseError, StructuralError


class TestProcessSelections:
    """Tests for process_selections."""
    
    def test_all_selections_succeed(self):
        """Test each selection is converted."""
        report = process_selections(['{"a":1}', '[1, 2]'], Operation.FLATTEN)
        
        assert report.replacements == ['{"a":1}', "[1,2]"]
        assert report.succeeded == 2
        assert report.failed == 0
        assert report.message == "Converted 2 selections"
    
    def test_failure_does_not_stop_other_selections(self):
        """Test a bad selection keeps its text while the rest convert."""
        selections = ["{:a 1}", "{not valid}", "{:b 2}"]
        report = process_selections(selections, Operation.EDN_TO_JSON)
        
        assert report.replacements[0] == '{\n  "a": 1\n}'
        assert report.replacements[1] == "{not valid}"
        assert report.replacements[2] == '{\n  "b": 2\n}'
        assert report.message == "Converted 2 of 3 selections (1 failed)"
    
    def test_structural_failure_does_not_stop_other_selections(self):
        """Test a selection that cannot become EDN keeps its text."""
        report = process_selections(['{"": 1}', '{"a":1}'], Operation.JSON_TO_EDN)
        
        assert isinstance(report.results[0].error, StructuralError)
        assert report.replacements == ['{"": 1}', "{:a 1}"]
        assert report.failed == 1
        assert report.succeeded == 1
    
    def test_deeply_nested_selection_does_not_stop_others(self):
        """Test a selection nested past the recursion limit fails alone."""
        deep = "[" * 100000 + "]" * 100000
        report = process_selections([deep, '{"a":1}'], Operation.FLATTEN)
        
        assert isinstance(report.results[0].error, ParseError)
        assert report.replacements[0] == deep
        assert report.replacements[1] == '{"a":1}'
        assert report.failed == 1
        assert report.message == "Converted 1 of 2 selections (1 failed)"
    
    def test_all_selections_fail(self):
        """Test the message reports the first error."""
        report = process_selections(["{not valid}"], Operation.PRETTY_PRINT)
        
        assert report.replacements == ["{not valid}"]
        assert report.message.startswith("Conversion failed: Input is neither valid JSON nor valid EDN")
    
    def test_empty_selections_are_skipped(self):
        """Test empty ranges are passed through and counted."""
        report = process_selections(["", "{:a 1}"], Operation.FLATTEN_EDN)
        
        assert report.skipped == 1
        assert report.replacements == ["", "{:a 1}"]
        assert len(report.results) == 1
    
    def test_no_selections(self):
        """Test the message when nothing is selected."""
        report = process_selections([], Operation.FLATTEN)
        
        assert report.message == "No text selected"
    
    def test_uses_given_converter_and_tracer(self):
        """Test the supplied converter and tracer are used."""
        tracer = RecordingTracer()
        converter = EdnConverter(json_indent=4)
        report = process_selections(["{:a 1}"], Operation.EDN_TO_JSON, converter=converter, tracer=tracer)
        
        assert report.replacements == ['{\n    "a": 1\n}']
        assert "parse.edn" in tracer.stages
    
    def test_single_selection_message(self):
        """Test singular wording."""
        report = process_selections(["{:a 1}"], Operation.FLATTEN_EDN)
        
        assert report.message == "Converted 1 selection"
