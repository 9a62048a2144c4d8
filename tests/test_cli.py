"""
Tests for the CollectorConf command-line interface.
"""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

import yaml
from click.testing import CliRunner

from CollectorConf.cli import cli


class TestConfigCommands(unittest.TestCase):
    """Test cases for the config command group."""

    def setUp(self):
        """Write a collector configuration file to a temporary directory."""
        self.runner = CliRunner()
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = str(Path(self.temp_dir) / "config.yaml")
        with open(self.config_path, "w") as f:
            yaml.dump({
                "processors": {"batch": {"timeout": "5s", "send_batch_size": 8192}},
                "service": {"pipelines": {"traces": {"receivers": ["otlp", "jaeger"]}}},
            }, f)

    def tearDown(self):
        """Remove the temporary directory."""
        shutil.rmtree(self.temp_dir)

    def test_show_json(self):
        """Test showing the configuration with overrides as JSON."""
        result = self.runner.invoke(cli, [
            "config", "show", "--config", self.config_path, "--format", "json",
            "--set", "processors.batch.timeout=2s",
            "--set", "service.pipelines.traces.receivers=[otlp]",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), {
            "processors": {"batch": {"timeout": "2s", "send_batch_size": 8192}},
            "service": {"pipelines": {"traces": {"receivers": ["otlp"]}}},
        })

    def test_show_yaml_section(self):
        """Test showing a single section as YAML."""
        result = self.runner.invoke(cli, [
            "config", "show", "--config", self.config_path,
            "--section", "processors.batch", "--set", "processors.batch.send_batch_max_size=10000",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(yaml.safe_load(result.output), {
            "timeout": "5s", "send_batch_size": 8192, "send_batch_max_size": 10000,
        })

    def test_show_without_file(self):
        """Test that overrides alone build a configuration."""
        result = self.runner.invoke(cli, [
            "config", "show", "--format", "json", "--set", "processors.batch.timeout=2s",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), {"processors": {"batch": {"timeout": "2s"}}})

    def test_show_unknown_section(self):
        """Test that an unknown section exits with an error."""
        result = self.runner.invoke(cli, ["config", "show", "--section", "exporters"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("not found", result.output)

    def test_keys(self):
        """Test listing keys with their values."""
        result = self.runner.invoke(cli, [
            "config", "keys", "--config", self.config_path, "--set", "m.x=1",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), [
            "m.x=1",
            "processors.batch.send_batch_size=8192",
            'processors.batch.timeout="5s"',
            'service.pipelines.traces.receivers=["otlp", "jaeger"]',
        ])

    def test_get(self):
        """Test printing a single value."""
        result = self.runner.invoke(cli, [
            "config", "get", "processors.batch.timeout", "--config", self.config_path,
            "--set", "processors.batch.timeout=1s", "--set", "processors.batch.timeout=2s",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), "2s")

    def test_get_missing_key(self):
        """Test that a missing key exits with an error."""
        result = self.runner.invoke(cli, ["config", "get", "exporters.otlp.endpoint"])
        self.assertEqual(result.exit_code, 1)

    def test_malformed_override(self):
        """Test that a malformed override aborts the command."""
        result = self.runner.invoke(cli, [
            "config", "show", "--set", "a=1", "--set", "a.b=2",
        ])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("failed to read set flag config", result.output)

    def test_missing_config_file(self):
        """Test that a missing configuration file aborts the command."""
        result = self.runner.invoke(cli, [
            "config", "show", "--config", str(Path(self.temp_dir) / "missing.yaml"),
        ])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unable to load the configuration file", result.output)

    def test_log_level_option(self):
        """Test that the log level option is accepted."""
        result = self.runner.invoke(cli, [
            "config", "show", "--log-level", "warning", "--format", "json",
        ])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), {})

    def test_help_describes_set_flag(self):
        """Test that the --set help text is shown."""
        result = self.runner.invoke(cli, ["config", "show", "--help"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("--set", result.output)
        self.assertIn("processors.batch.timeout=2s", result.output)


if __name__ == "__main__":
    unittest.main()
