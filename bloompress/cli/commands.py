"""
CLI commands for bloompress.
"""

import click
import sys
from pathlib import Path
from rich.console import Console
from rich.table import Table

from bloompress.models import Bitmap, CodecSettings
from bloompress.services import GolombCodec, CodecEvaluator


def _read_bitmap(path: Path, bit_length):
    with open(path, 'rb') as f:
        data = f.read()
    try:
        if bit_length is None:
            return Bitmap.from_bytes(data)
        # Trailing bytes past bit_length are ignored
        return Bitmap.from_bytes(data[:(bit_length + 7) // 8], bit_length)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.option('--input', '-i', required=True, help='Raw bitmap file (LSB-first bytes)')
@click.option('--output', '-o', required=True, help='Output container path')
@click.option('--div', type=int, default=None, help='Division parameter (default: estimated)')
@click.option('--bit-length', type=int, default=None, help='Bits in the bitmap (default: 8 x file size)')
@click.option('--measure', '-m', is_flag=True, help='Display compression metrics')
@click.option('--verbose', '-v', is_flag=True, help='Print codec progress')
def compress(input, output, div, bit_length, measure, verbose):
    """
    Compress a bitmap file with Golomb-Rice coding.

    Example:
        bloompress compress -i filter.bin -o filter.bpz -m
    """
    input_path = Path(input)
    output_path = Path(output)

    if not input_path.exists():
        click.echo(f"Error: Input file not found: {input}", err=True)
        sys.exit(1)

    bitmap = _read_bitmap(input_path, bit_length)
    click.echo(f"Compressing {input_path.name} ({len(bitmap):,} bits)...")

    codec = GolombCodec(CodecSettings(div=div, verbose=verbose))
    try:
        result = codec.save(bitmap, output_path)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if measure:
        original_size = len(bitmap.data)
        compressed_size = len(result.compressed)
        ratio = original_size / compressed_size if compressed_size > 0 else 0

        click.echo("\n=== Compression Results ===")
        click.echo(f"Set bits: {bitmap.count():,} / {len(bitmap):,}")
        click.echo(f"Division parameter: {result.div}")
        click.echo(f"Original size: {original_size:,} bytes")
        click.echo(f"Payload size: {compressed_size:,} bytes")
        click.echo(f"Compression ratio: {ratio:.2f}×")

    click.echo(f"\n✓ Compressed to {output_path}")


@click.command()
@click.option('--input', '-i', required=True, help='Container file path')
@click.option('--output', '-o', required=True, help='Output raw bitmap path')
@click.option('--strict', is_flag=True, help='Fail on payloads that do not fit the bitmap')
@click.option('--verbose', '-v', is_flag=True, help='Print codec progress')
def decompress(input, output, strict, verbose):
    """
    Restore a bitmap from a container file.

    Example:
        bloompress decompress -i filter.bpz -o filter.bin
    """
    input_path = Path(input)
    output_path = Path(output)

    if not input_path.exists():
        click.echo(f"Error: Container file not found: {input}", err=True)
        sys.exit(1)

    codec = GolombCodec(CodecSettings(strict=strict, verbose=verbose))
    try:
        bitmap = codec.load(input_path)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'wb') as f:
        f.write(bitmap.to_bytes())

    click.echo(f"✓ Restored {len(bitmap):,} bits ({bitmap.count():,} set) to {output_path}")


@click.command()
@click.option('--input', '-i', required=True, help='Raw bitmap file (LSB-first bytes)')
@click.option('--bit-length', type=int, default=None, help='Bits in the bitmap (default: 8 x file size)')
@click.option('--sweep', is_flag=True, help='Show payload size for divs around the estimate')
@click.option('--radius', type=int, default=None, help='Sweep radius (default: 3)')
def stats(input, bit_length, sweep, radius):
    """
    Compare Golomb-Rice against raw and zstd sizes.

    Example:
        bloompress stats -i filter.bin --sweep
    """
    input_path = Path(input)
    if not input_path.exists():
        click.echo(f"Error: Input file not found: {input}", err=True)
        sys.exit(1)

    bitmap = _read_bitmap(input_path, bit_length)
    settings = CodecSettings()
    if radius is None:
        radius = settings.sweep_radius
    evaluator = CodecEvaluator(settings.zstd_level)
    result = evaluator.evaluate(bitmap)

    console = Console()
    table = Table(title=f"{input_path.name}: {result.set_bits:,} of {result.bit_length:,} bits set")
    table.add_column("Encoding", style="cyan")
    table.add_column("Bytes", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_row("raw", f"{result.original_size:,}", "1.00×")
    zstd_ratio = result.original_size / result.zstd_size if result.zstd_size else 0
    table.add_row(f"zstd -{evaluator.zstd_level}", f"{result.zstd_size:,}", f"{zstd_ratio:.2f}×")
    table.add_row(f"golomb (div={result.div})", f"{result.compressed_size:,}",
                  f"{result.compression_ratio:.2f}×")
    console.print(table)

    if sweep:
        sweep_table = Table(title="Division parameter sweep")
        sweep_table.add_column("div", justify="right")
        sweep_table.add_column("Bytes", justify="right")
        sweep_table.add_column("Bits/element", justify="right")
        for div, size in evaluator.sweep(bitmap, radius):
            marker = " ◀" if div == result.div else ""
            per_element = size * 8 / result.set_bits if result.set_bits else 0.0
            sweep_table.add_row(f"{div}{marker}", f"{size:,}", f"{per_element:.2f}")
        console.print(sweep_table)
        console.print(f"Best div: {evaluator.best_div(bitmap, radius)} (estimated: {result.div})")


if __name__ == '__main__':
    compress()
