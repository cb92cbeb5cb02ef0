"""
Integration tests for the command line interface
"""

import pytest
from click.testing import CliRunner
from bloompress.__main__ import cli
from bloompress.models import Bitmap


@pytest.fixture
def runner():
    return CliRunner()


class TestCompressDecompressWorkflow:
    """Test compress → decompress through the CLI"""

    def test_round_trip(self, runner, tmp_path, bitmap_file, sparse_bitmap):
        container = tmp_path / "out" / "filter.bpz"
        restored = tmp_path / "restored.bin"

        result = runner.invoke(cli, ['compress', '-i', str(bitmap_file), '-o', str(container), '-m'])
        assert result.exit_code == 0, result.output
        assert "Compression ratio" in result.output
        assert container.exists()

        result = runner.invoke(cli, ['decompress', '-i', str(container), '-o', str(restored)])
        assert result.exit_code == 0, result.output
        assert restored.read_bytes() == sparse_bitmap.to_bytes()

    def test_explicit_div_and_length(self, runner, tmp_path):
        source = tmp_path / "vector.bin"
        source.write_bytes(bytes([0x09, 0x02]))
        container = tmp_path / "vector.bpz"
        restored = tmp_path / "vector.out"

        result = runner.invoke(cli, ['compress', '-i', str(source), '-o', str(container),
                                     '--div', '0', '--bit-length', '10', '-m'])
        assert result.exit_code == 0, result.output
        assert "Division parameter: 0" in result.output

        result = runner.invoke(cli, ['decompress', '-i', str(container), '-o', str(restored), '--strict'])
        assert result.exit_code == 0, result.output
        assert Bitmap.from_bytes(restored.read_bytes(), 10) == Bitmap.from_positions([0, 3, 9], 10)

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(cli, ['compress', '-i', str(tmp_path / "nope.bin"), '-o', str(tmp_path / "x")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_div(self, runner, tmp_path, bitmap_file):
        result = runner.invoke(cli, ['compress', '-i', str(bitmap_file), '-o', str(tmp_path / "x"),
                                     '--div=-2'])
        assert result.exit_code == 1

    def test_bit_length_longer_than_file(self, runner, tmp_path, bitmap_file):
        result = runner.invoke(cli, ['compress', '-i', str(bitmap_file), '-o', str(tmp_path / "x"),
                                     '--bit-length', '100000'])
        assert result.exit_code == 1

    def test_corrupt_container(self, runner, tmp_path):
        bad = tmp_path / "bad.bpz"
        bad.write_bytes(b'\x93\x01\x02\x03')  # msgpack array, not a map
        result = runner.invoke(cli, ['decompress', '-i', str(bad), '-o', str(tmp_path / "out.bin")])
        assert result.exit_code == 1

    def test_verbose_progress(self, runner, tmp_path, bitmap_file):
        container = tmp_path / "filter.bpz"
        result = runner.invoke(cli, ['compress', '-i', str(bitmap_file), '-o', str(container), '-v'])
        assert result.exit_code == 0, result.output
        assert "Compressed 8,192 bits" in result.output

        result = runner.invoke(cli, ['decompress', '-i', str(container), '-o',
                                     str(tmp_path / "out.bin"), '--verbose'])
        assert result.exit_code == 0, result.output
        assert "Decompressed" in result.output

    def test_quiet_without_verbose(self, runner, tmp_path, bitmap_file):
        result = runner.invoke(cli, ['compress', '-i', str(bitmap_file), '-o', str(tmp_path / "x.bpz")])
        assert result.exit_code == 0, result.output
        assert "Compressed 8,192" not in result.output


class TestStatsCommand:
    """Test the stats report"""

    def test_stats_table(self, runner, bitmap_file):
        result = runner.invoke(cli, ['stats', '-i', str(bitmap_file)])
        assert result.exit_code == 0, result.output
        assert "golomb" in result.output
        assert "zstd" in result.output

    def test_stats_sweep(self, runner, bitmap_file):
        result = runner.invoke(cli, ['stats', '-i', str(bitmap_file), '--sweep', '--radius', '1'])
        assert result.exit_code == 0, result.output
        assert "sweep" in result.output
        assert "Best div" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert "1.0.0" in result.output
