"""Test CLI commands."""

from typer.testing import CliRunner

from peakxml.cli.app import app
from peakxml.io.files import read_peaklist

runner = CliRunner()


class TestCLIHelp:
    """Tests for CLI help messages."""

    def test_main_help(self):
        """Main command should show help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "peakxml" in result.stdout
        assert "show" in result.stdout
        assert "convert" in result.stdout
        assert "init" in result.stdout

    def test_show_help(self):
        """Show command should show help."""
        result = runner.invoke(app, ["show", "--help"])
        assert result.exit_code == 0
        assert "--no-peaks" in result.stdout

    def test_version(self):
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.stdout


class TestShowCommand:
    """Tests for show command."""

    def test_show(self, peaklist_file):
        """Headers and peaks are printed."""
        result = runner.invoke(app, ["show", str(peaklist_file)])
        assert result.exit_code == 0
        assert "sucrose" in result.stdout
        assert "Bob" in result.stdout
        assert "100.0" in result.stdout

    def test_show_without_peaks(self, peaklist_file):
        """--no-peaks hides the peak tables."""
        result = runner.invoke(app, ["show", str(peaklist_file), "--no-peaks"])
        assert result.exit_code == 0
        assert "sucrose" in result.stdout
        assert "F1 (ppm)" not in result.stdout

    def test_show_missing_file(self, tmp_path):
        """A missing file exits with code 1."""
        result = runner.invoke(app, ["show", str(tmp_path / "missing.xml")])
        assert result.exit_code == 1
        assert "Could not read" in result.stdout

    def test_show_without_peak_list(self, tmp_path):
        """A document without PeakList exits with code 1."""
        path = tmp_path / "other.xml"
        path.write_text("<Spectrum/>")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1
        assert "No <PeakList> element" in result.stdout

    def test_show_writes_log(self, peaklist_file, tmp_path):
        """--log-file records the parse."""
        log_file = tmp_path / "logs" / "show.log"
        result = runner.invoke(app, ["show", str(peaklist_file), "--log-file", str(log_file)])
        assert result.exit_code == 0
        assert "Parsed <PeakList>" in log_file.read_text()


class TestConvertCommand:
    """Tests for convert command."""

    def test_convert(self, peaklist_file, tmp_path):
        """Converted output reads back to the same objects."""
        output = tmp_path / "converted.xml"
        result = runner.invoke(app, ["convert", str(peaklist_file), str(output)])
        assert result.exit_code == 0
        assert "Wrote 1 peak list(s), 2 peak(s)" in result.stdout
        assert read_peaklist(output) == read_peaklist(peaklist_file)

    def test_convert_with_config(self, peaklist_file, sample_config_file, tmp_path, monkeypatch):
        """Output settings come from the configuration file."""
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "converted.xml"
        result = runner.invoke(
            app,
            ["convert", str(peaklist_file), str(output), "--config", str(sample_config_file)],
        )
        assert result.exit_code == 0
        data = output.read_bytes()
        assert data.startswith(b"<?xml version='1.0' encoding='ISO-8859-1'?>")
        assert b"\n  <PeakList1D>" not in data
        assert (tmp_path / "session.log").exists()

    def test_convert_compact(self, peaklist_file, tmp_path):
        """--compact disables indentation."""
        output = tmp_path / "compact.xml"
        result = runner.invoke(app, ["convert", str(peaklist_file), str(output), "--compact"])
        assert result.exit_code == 0
        assert b"\n  <PeakList1D>" not in output.read_bytes()

    def test_convert_bad_config(self, peaklist_file, tmp_path):
        """An invalid configuration exits with code 1."""
        config = tmp_path / "bad.toml"
        config.write_text("[output]\nindent = 4\n")
        result = runner.invoke(
            app,
            ["convert", str(peaklist_file), str(tmp_path / "out.xml"), "--config", str(config)],
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout

    def test_convert_unsupported_encoding(self, peaklist_file, tmp_path):
        """An encoding lxml cannot write is reported as a configuration error."""
        config = tmp_path / "rot13.toml"
        config.write_text('[output]\nencoding = "rot13"\n')
        output = tmp_path / "out.xml"
        result = runner.invoke(
            app,
            ["convert", str(peaklist_file), str(output), "--config", str(config)],
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout
        assert not output.exists()

    def test_convert_bad_value(self, tmp_path):
        """A malformed attribute value exits with code 1."""
        source = tmp_path / "bad.xml"
        source.write_text('<PeakList modified="01/01/2020"/>')
        result = runner.invoke(app, ["convert", str(source), str(tmp_path / "out.xml")])
        assert result.exit_code == 1
        assert "Could not read" in result.stdout


class TestInitCommand:
    """Tests for init command."""

    def test_init_creates_file(self, tmp_path):
        """Init should create config file."""
        config_path = tmp_path / "test_config.toml"
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 0
        assert config_path.exists()
        assert "Created" in result.stdout

    def test_init_no_overwrite_without_force(self, tmp_path):
        """Init should not overwrite existing file without --force."""
        config_path = tmp_path / "existing.toml"
        config_path.write_text("# existing content")

        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 1
        assert "already exists" in result.stdout

    def test_init_force(self, tmp_path):
        """--force overwrites an existing file."""
        config_path = tmp_path / "existing.toml"
        config_path.write_text("# existing content")

        result = runner.invoke(app, ["init", str(config_path), "--force"])
        assert result.exit_code == 0
        assert "[output]" in config_path.read_text()


class TestInfoCommand:
    """Tests for info command."""

    def test_info(self):
        """Info lists versions and supported extensions."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "lxml version" in result.stdout
        assert "xml" in result.stdout
