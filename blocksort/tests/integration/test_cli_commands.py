"""
Integration tests for the command-line interface
"""

import pytest
from click.testing import CliRunner

from blocksort.__main__ import cli
from blocksort.context.encoding.bwt import bwt_transform
from blocksort.context.encoding.mtf import mtf_encode


@pytest.fixture
def runner():
    return CliRunner()


class TestTransformCommands:
    """Test the single-stage bwt and mtf commands"""

    def test_bwt_transform_stdin(self, runner, abracadabra):
        result = runner.invoke(cli, ['bwt', '--transform'], input=abracadabra)
        assert result.exit_code == 0
        assert result.stdout_bytes == b"\x00\x00\x00\x03ARD!RCAAAABB"

    def test_bwt_inverse_stdin(self, runner):
        result = runner.invoke(cli, ['bwt', '--inverse'], input=b"\x00\x00\x00\x03ARD!RCAAAABB")
        assert result.exit_code == 0
        assert result.stdout_bytes == b"ABRACADABRA!"

    def test_bwt_requires_mode(self, runner, abracadabra):
        result = runner.invoke(cli, ['bwt'], input=abracadabra)
        assert result.exit_code == 1
        assert "Specify --transform or --inverse" in result.output

    def test_bwt_inverse_rejects_bad_first(self, runner):
        result = runner.invoke(cli, ['bwt', '--inverse'], input=b"\x00\x00\x00\x09abc")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_mtf_encode_stdin(self, runner):
        result = runner.invoke(cli, ['mtf', '--encode'], input=b"CAAABCCCACCF")
        assert result.exit_code == 0
        assert list(result.stdout_bytes) == [67, 66, 0, 0, 67, 2, 0, 0, 2, 1, 0, 70]

    def test_mtf_decode_file(self, runner, test_data_dir, test_output_dir, abracadabra):
        encoded = test_output_dir / "abra.mtf"
        encoded.write_bytes(mtf_encode(abracadabra))
        restored = test_output_dir / "abra.restored"

        result = runner.invoke(cli, ['mtf', '--decode', '-i', str(encoded), '-o', str(restored)])

        assert result.exit_code == 0
        assert restored.read_bytes() == abracadabra

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestPipelineCommands:
    """Test compress, expand and stats"""

    def test_compress_and_expand(self, runner, test_data_dir, test_output_dir):
        source = test_data_dir / "apache.log"
        packed = test_output_dir / "nested" / "apache.bs"
        restored = test_output_dir / "apache.log"

        result = runner.invoke(cli, ['compress', '-i', str(source), '-o', str(packed), '-m'])
        assert result.exit_code == 0
        assert "Pipeline Results" in result.output
        assert packed.read_bytes() == mtf_encode(bwt_transform(source.read_bytes()))

        result = runner.invoke(cli, ['expand', '-i', str(packed), '-o', str(restored)])
        assert result.exit_code == 0
        assert restored.read_bytes() == source.read_bytes()

    def test_compress_without_mtf(self, runner, test_data_dir, test_output_dir):
        source = test_data_dir / "abra.txt"
        packed = test_output_dir / "abra.bwt"

        result = runner.invoke(cli, ['compress', '-i', str(source), '-o', str(packed), '--no-mtf'])

        assert result.exit_code == 0
        assert packed.read_bytes() == b"\x00\x00\x00\x03ARD!RCAAAABB"

    def test_compress_empty_file(self, runner, test_data_dir, test_output_dir):
        packed = test_output_dir / "empty.bs"
        restored = test_output_dir / "empty.out"

        result = runner.invoke(cli, ['compress', '-i', str(test_data_dir / "empty.bin"), '-o', str(packed)])
        assert result.exit_code == 0
        result = runner.invoke(cli, ['expand', '-i', str(packed), '-o', str(restored)])
        assert result.exit_code == 0
        assert restored.read_bytes() == b""

    def test_compress_missing_input(self, runner, tmp_path):
        result = runner.invoke(cli, ['compress', '-i', str(tmp_path / "missing"), '-o', str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_expand_truncated_input(self, runner, tmp_path):
        broken = tmp_path / "broken.bs"
        broken.write_bytes(b"\x00")
        result = runner.invoke(cli, ['expand', '-i', str(broken), '-o', str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_stats_table(self, runner, test_data_dir):
        result = runner.invoke(cli, ['stats', '-i', str(test_data_dir / "apache.log")])
        assert result.exit_code == 0
        assert "raw" in result.output
        assert "bwt+mtf" in result.output
