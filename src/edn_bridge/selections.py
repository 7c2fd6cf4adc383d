"""Host boundary: apply one operation to every selected range of text."""

import logging
from typing import Iterable, Optional
from .edn_converter import EdnConverter
from .tracing import Tracer
from .types import ConversionResult, Operation, SelectionReport


def process_selections(selections: Iterable[str], operation: Operation,
                       converter: Optional[EdnConverter] = None,
                       tracer: Optional[Tracer] = None,
                       logger: Optional[logging.Logger] = None) -> SelectionReport:
    """
    Run ``operation`` over each selection independently.

    A failing selection keeps its original text and does not stop the
    others. Empty selections are passed through untouched and counted
    as skipped.

    Args:
        selections: Text of each selected range, in editor order
        operation: Operation to apply
        converter: Converter to use, a default one if omitted
        tracer: Optional tracer passed to every conversion
        logger: Optional logger instance

    Returns:
        SelectionReport with one result per non-empty selection
    """
    logger = logger or logging.getLogger(__name__)
    converter = converter or EdnConverter(logger=logger)
    report = SelectionReport(operation=operation)

    for index, text in enumerate(selections):
        if not text:
            report.skipped += 1
            report.replacements.append(text)
            continue
        result: ConversionResult = converter.transform(text, operation, tracer)
        if not result.success:
            logger.warning(f"Selection {index} left unchanged: {result.errors[0]}")
        report.results.append(result)
        report.replacements.append(result.text)

    logger.info(report.message)
    return report
