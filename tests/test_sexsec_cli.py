"""
Tests for the SexSec CLI.

This module covers the value, file and directory commands through
click's CliRunner.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

import cli.main as cli_main
from cli import cli
from sexsec import __version__

PASSPHRASE = "cli passphrase"


@pytest.fixture(autouse=True)
def mock_setup_logging(mocker) -> MagicMock:
    """Keep the CLI from reconfiguring the root logger during tests"""
    return mocker.patch.object(cli_main, 'setup_logging')


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestValueCommands:
    """Test encrypt-value and decrypt-value."""

    def test_value_roundtrip(self, runner: CliRunner) -> None:
        """Test encrypting and decrypting a value from the command line"""
        result = runner.invoke(cli, ['--passphrase', PASSPHRASE, 'encrypt-value', 'hello world'])
        assert result.exit_code == 0, result.output
        token = result.output.strip()

        result = runner.invoke(cli, ['--passphrase', PASSPHRASE, 'decrypt-value', token])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == 'hello world'

    def test_passphrase_from_environment(self, runner: CliRunner) -> None:
        """Test that SEXSEC_PASSPHRASE supplies the key"""
        with_option = runner.invoke(cli, ['--passphrase', PASSPHRASE, 'encrypt-value', 'x'])
        with_env = runner.invoke(cli, ['encrypt-value', 'x'], env={'SEXSEC_PASSPHRASE': PASSPHRASE})
        assert with_env.exit_code == 0
        assert with_env.output == with_option.output

    def test_passphrase_prompt(self, runner: CliRunner) -> None:
        """Test that the passphrase is prompted for when missing"""
        expected = runner.invoke(cli, ['--passphrase', PASSPHRASE, 'encrypt-value', 'x']).output.strip()
        result = runner.invoke(
            cli, ['encrypt-value', 'x'], input=f"{PASSPHRASE}\n", env={'SEXSEC_PASSPHRASE': ''})
        assert result.exit_code == 0, result.output
        assert expected in result.output

    def test_base64_encoding(self, runner: CliRunner) -> None:
        """Test the --encoding option"""
        result = runner.invoke(
            cli, ['--passphrase', PASSPHRASE, '--encoding', 'base64', 'encrypt-value', 'x'])
        assert result.exit_code == 0
        assert result.output.strip().endswith('==')

    def test_decrypt_failure(self, runner: CliRunner) -> None:
        """Test that a bad token exits with an error"""
        result = runner.invoke(cli, ['--passphrase', PASSPHRASE, 'decrypt-value', 'nothex'])
        assert result.exit_code == 1
        assert '❌ Failed to decrypt value' in result.output

    def test_invalid_iv_length(self, runner: CliRunner) -> None:
        """Test that an AES-incompatible IV length is reported"""
        result = runner.invoke(
            cli, ['--passphrase', PASSPHRASE, '--iv-length', '17', 'encrypt-value', 'x'])
        assert result.exit_code == 1
        assert 'IV length must be at most 16' in result.output


class TestFileCommands:
    """Test encrypt-file and decrypt-file."""

    def test_file_roundtrip_with_force(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the file commands end to end"""
        path = tmp_path / 'doc.txt'
        path.write_text('file content')

        result = runner.invoke(cli, ['-p', PASSPHRASE, 'encrypt-file', str(path), '--force'])
        assert result.exit_code == 0, result.output
        assert '✅ Encrypted' in result.output
        assert not path.exists()

        result = runner.invoke(cli, ['-p', PASSPHRASE, 'decrypt-file', str(path) + '.sex', '--force'])
        assert result.exit_code == 0, result.output
        assert path.read_text() == 'file content'
        assert not Path(str(path) + '.sex').exists()

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that a missing file exits with an error"""
        result = runner.invoke(cli, ['-p', PASSPHRASE, 'encrypt-file', str(tmp_path / 'nope')])
        assert result.exit_code == 1
        assert 'File does not exist' in result.output


class TestDirectoryCommands:
    """Test encrypt-dir and decrypt-dir."""

    def test_directory_roundtrip(self, runner: CliRunner, sample_tree: Path, tree_contents) -> None:
        """Test the directory commands end to end"""
        result = runner.invoke(cli, ['-p', PASSPHRASE, 'encrypt-dir', str(sample_tree), '--force'])
        assert result.exit_code == 0, result.output
        assert f'✅ Encrypted {len(tree_contents)} file(s)' in result.output

        result = runner.invoke(cli, ['-v', '-p', PASSPHRASE, 'decrypt-dir', str(sample_tree), '-f'])
        assert result.exit_code == 0, result.output
        assert f'✅ Decrypted {len(tree_contents)} file(s)' in result.output
        for relative, content in tree_contents.items():
            assert (sample_tree / relative).read_bytes() == content

    def test_missing_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that a missing directory exits with an error"""
        result = runner.invoke(cli, ['-p', PASSPHRASE, 'decrypt-dir', str(tmp_path / 'nope')])
        assert result.exit_code == 1
        assert 'Directory does not exist' in result.output


def test_version(runner: CliRunner) -> None:
    """Test the --version flag"""
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_logging_configured(runner: CliRunner, mock_setup_logging: MagicMock) -> None:
    """Test that verbose mode configures debug logging"""
    runner.invoke(cli, ['-v', '-p', PASSPHRASE, 'encrypt-value', 'x'])
    assert mock_setup_logging.call_args.kwargs['level'] == 'DEBUG'
