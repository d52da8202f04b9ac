"""End-to-end tests for the jsoncst command line."""

import json

import pytest

from jsoncst import cli

SOURCE = '{\n  // service settings\n  "port": 8080,\n  "plugins": ["a"]\n}\n'


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(SOURCE, encoding="utf-8")
    return path


class TestCli:

    def test_help(self, capsys):
        assert cli.main([]) == 0
        assert "Commands:" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert cli.main(["frobnicate"]) == 2
        assert "Unknown command" in capsys.readouterr().err

    def test_get(self, config, capsys):
        assert cli.main(["get", str(config), "plugins"]) == 0
        assert capsys.readouterr().out == '["a"]\n'

    def test_get_missing(self, config, capsys):
        assert cli.main(["get", str(config), "nope"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_replace_to_stdout(self, config, capsys):
        assert cli.main(["replace", str(config), "--set", "port", "9090"]) == 0
        assert capsys.readouterr().out == SOURCE.replace("8080", "9090")
        assert config.read_text(encoding="utf-8") == SOURCE

    def test_replace_in_place(self, config):
        assert cli.main(["replace", str(config), "--set", "/port", "1", "--in-place"]) == 0
        assert config.read_text(encoding="utf-8") == SOURCE.replace("8080", "1")

    def test_insert_out_file(self, config, tmp_path):
        out = tmp_path / "out.json"
        rc = cli.main(["insert", str(config), "plugins", '"b"', "--position", "0", "--out", str(out)])
        assert rc == 0
        assert '["b", "a"]' in out.read_text(encoding="utf-8")

    def test_insert_existing_key_is_patch_error(self, config, capsys):
        assert cli.main(["insert", str(config), "", "1", "--key", "port"]) == 2
        assert "already exists" in capsys.readouterr().err

    def test_remove(self, config, capsys):
        assert cli.main(["remove", str(config), "plugins"]) == 0
        assert capsys.readouterr().out == '{\n  // service settings\n  "port": 8080\n}\n'

    def test_check(self, config):
        assert cli.main(["replace", str(config), "--set", "port", "8080", "--check"]) == 0
        assert cli.main(["replace", str(config), "--set", "port", "1", "--check"]) == 1

    def test_verify_rejects_invalid_literal(self, config, capsys):
        assert cli.main(["replace", str(config), "--set", "port", "oops", "--verify"]) == 2
        assert "invalid" in capsys.readouterr().err

    def test_parse_error_reports_line_and_column(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text('{\n  "a": @\n}', encoding="utf-8")
        assert cli.main(["get", str(bad), "a"]) == 3
        assert f"{bad}:2:8: unexpected character '@'" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main(["remove", str(tmp_path / "nope.json"), "a"]) == 3


class TestCliBatch:

    def write_patches(self, tmp_path, entries):
        path = tmp_path / "patches.json"
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path

    def test_batch(self, config, tmp_path, capsys):
        patches = self.write_patches(tmp_path, [
            {"operation": "delete", "path": "plugins"},
            {"operation": "replace", "path": "port", "value": "80"},
        ])
        assert cli.main(["batch", str(config), str(patches)]) == 0
        assert capsys.readouterr().out == '{\n  // service settings\n  "port": 80\n}\n'

    def test_batch_schema_errors(self, config, tmp_path, capsys):
        patches = self.write_patches(tmp_path, [{"path": "port", "value": "80"}])
        assert cli.main(["batch", str(config), str(patches)]) == 2
        assert "/0" in capsys.readouterr().err

    def test_batch_json_errors(self, config, tmp_path, capsys):
        patches = self.write_patches(tmp_path, [{"operation": "move", "path": "port"}])
        assert cli.main(["batch", str(config), str(patches), "--json-errors"]) == 2
        errors = json.loads(capsys.readouterr().err)
        assert errors[0]["pointer"] == "/0/operation"

    def test_batch_without_validation_still_fails_fast(self, config, tmp_path, capsys):
        patches = self.write_patches(tmp_path, [{"path": "port", "value": "80"}])
        assert cli.main(["batch", str(config), str(patches), "--no-validate"]) == 2
        assert "operation is required" in capsys.readouterr().err

    def test_unreadable_patch_file(self, config, tmp_path):
        bad = tmp_path / "patches.json"
        bad.write_text("not json", encoding="utf-8")
        assert cli.main(["batch", str(config), str(bad)]) == 3
