"""Command-line interface for EDN Bridge."""

import logging
import click
from pathlib import Path
from typing import Optional
from .edn_converter import EdnConverter
from .profiler import PerformanceProfiler
from .tracing import LoggingTracer
from .types import Operation


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output and trace every conversion stage')
@click.option('--profile', is_flag=True, help='Print timing and memory figures after the conversion')
@click.pass_context
def main(ctx: click.Context, verbose: bool, profile: bool):
    """EDN Bridge - Convert and reformat JSON and EDN text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )
    logger = logging.getLogger("edn_bridge")
    profiler = PerformanceProfiler(logger) if profile else None
    ctx.obj = EdnConverter(
        logger=logger,
        tracer=LoggingTracer(logger) if verbose else None,
        profiler=profiler
    )
    if profiler is not None:
        ctx.call_on_close(lambda: _print_profile(profiler))


def _print_profile(profiler: PerformanceProfiler) -> None:
    summary = profiler.get_performance_summary()
    for op in summary.get("operations", []):
        click.echo(f"📊 {op['name']}: {op['duration'] * 1000:.2f}ms, "
                   f"{op['input_size']}B -> {op['output_size']}B", err=True)


def _run(ctx: click.Context, operation: Operation, input_file, output: Optional[str]) -> None:
    converter: EdnConverter = ctx.obj
    text = input_file.read()
    result = converter.transform(text, operation)

    if not result.success:
        click.echo(f"❌ {operation.value} failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        ctx.exit(1)

    if output:
        output_path = Path(output)
        output_path.write_text(result.text + "\n", encoding='utf-8')
        click.echo(f"✅ Wrote {operation.value} output to {output_path}", err=True)
    else:
        click.echo(result.text)


def _conversion_command(name: str, operation: Operation, help_text: str):
    @main.command(name=name, help=help_text)
    @click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
    @click.option('--output', '-o', help='Output file path (default: stdout)')
    @click.pass_context
    def command(ctx: click.Context, input_file, output: Optional[str]):
        _run(ctx, operation, input_file, output)

    return command


json_to_edn = _conversion_command(
    'json-to-edn', Operation.JSON_TO_EDN,
    'Convert JSON to pretty-printed EDN with keyword keys.'
)
edn_to_json = _conversion_command(
    'edn-to-json', Operation.EDN_TO_JSON,
    'Convert EDN to indented JSON.'
)
pretty = _conversion_command(
    'pretty', Operation.PRETTY_PRINT,
    'Pretty-print JSON or EDN (JSON is tried first).'
)
flatten = _conversion_command(
    'flatten', Operation.FLATTEN,
    'Render JSON or EDN on a single line (JSON is tried first).'
)


if __name__ == '__main__':
    main()
