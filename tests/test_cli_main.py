#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the command-line interface of csvToJson.
"""

import io
import json
import logging
from unittest.mock import patch

import pytest

import csvToJson.config
from csvToJson.__main__ import main, setup_argparse
from csvToJson.config import ConfigManager
from csvToJson.errors import ClipboardUnavailableError


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Keep logging setup, .env files and config files out of the tests."""
    monkeypatch.setattr(csvToJson.config, "config_manager", ConfigManager(search_paths=[]))
    with patch("csvToJson.__main__.configure_logging"), patch("csvToJson.__main__.load_dotenv"):
        yield


@pytest.fixture
def people_csv(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("name,age\nJane,34\nJoe,\n", encoding="utf-8")
    return path


class TestCliSetup:
    """Tests for CLI argument parsing."""
    
    def test_defaults(self):
        args = setup_argparse().parse_args([])
        assert args.files == []
        assert args.output is None
        assert args.highlight == "none"
        assert args.copy is False
        assert args.log_level == "warning"
    
    def test_files_and_output(self):
        args = setup_argparse().parse_args(["a.csv", "-o", "out.json", "--highlight", "ansi"])
        assert args.files == ["a.csv"]
        assert str(args.output) == "out.json"
        assert args.highlight == "ansi"


class TestConvertCommand:
    """Tests for conversions run through main()."""
    
    def test_sample(self, capsys):
        assert main(["--sample"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert len(records) == 5
        assert records[1]["age"] == 34
    
    def test_single_file_to_stdout(self, people_csv, capsys):
        assert main([str(people_csv)]) == 0
        assert json.loads(capsys.readouterr().out) == [
            {"name": "Jane", "age": 34},
            {"name": "Joe", "age": None},
        ]
    
    def test_single_file_to_output(self, people_csv, tmp_path, capsys):
        output = tmp_path / "out" / "people.json"
        
        assert main([str(people_csv), "-o", str(output)]) == 0
        
        assert json.loads(output.read_text(encoding="utf-8"))[0]["name"] == "Jane"
        assert capsys.readouterr().out == ""
    
    def test_output_must_be_json(self, people_csv, tmp_path, capsys):
        assert main([str(people_csv), "-o", str(tmp_path / "people.txt")]) == 1
        assert "must end with .json" in capsys.readouterr().err
    
    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("a,b\ntrue,null\n"))
        assert main(["-"]) == 0
        assert json.loads(capsys.readouterr().out) == [{"a": True, "b": None}]
    
    def test_stdin_flag(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("a\n1"))
        assert main(["--stdin"]) == 0
        assert json.loads(capsys.readouterr().out) == [{"a": 1}]
    
    def test_html_highlight(self, capsys):
        assert main(["--sample", "--highlight", "html"]) == 0
        assert '<span class="json-key">"name"</span>' in capsys.readouterr().out
    
    def test_conversion_error(self, tmp_path, capsys):
        bad = tmp_path / "bad.csv"
        bad.write_text("a,b\n1,2,3", encoding="utf-8")
        
        assert main([str(bad)]) == 1
        
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Row 2 has 3 columns, but header has 2 columns" in captured.err
    
    def test_empty_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("   "))
        assert main(["-"]) == 1
        assert "CSV input is empty" in capsys.readouterr().err
    
    def test_non_csv_file(self, tmp_path, capsys):
        path = tmp_path / "data.txt"
        path.write_text("a\n1", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "Please select a valid CSV file" in capsys.readouterr().err
    
    def test_no_input(self):
        assert main([]) == 1
    
    def test_multiple_files(self, tmp_path, people_csv, capsys):
        other = tmp_path / "other.csv"
        other.write_text("x\n1", encoding="utf-8")
        out_dir = tmp_path / "json"
        
        assert main([str(people_csv), str(other), "--output-dir", str(out_dir)]) == 0
        
        assert (out_dir / "people.json").exists()
        assert json.loads((out_dir / "other.json").read_text(encoding="utf-8")) == [{"x": 1}]
        assert str(out_dir / "other.json") in capsys.readouterr().out
    
    def test_multiple_files_with_failure(self, tmp_path, people_csv, capsys):
        bad = tmp_path / "bad.csv"
        bad.write_text("x", encoding="utf-8")
        
        assert main([str(people_csv), str(bad)]) == 1
        
        assert (tmp_path / "people.json").exists()
        assert "InsufficientRows" in capsys.readouterr().err
    
    def test_multiple_files_reject_single_output(self, tmp_path, people_csv):
        other = tmp_path / "other.csv"
        other.write_text("x\n1", encoding="utf-8")
        assert main([str(people_csv), str(other), "-o", str(tmp_path / "all.json")]) == 1
    
    def test_copy(self, capsys):
        with patch("csvToJson.session.copy_to_clipboard") as mock_copy:
            assert main(["--sample", "--copy"]) == 0
        mock_copy.assert_called_once_with(capsys.readouterr().out.rstrip("\n"))

    def test_copy_unavailable(self, capsys):
        with patch("csvToJson.session.copy_to_clipboard",
                   side_effect=ClipboardUnavailableError("no clipboard")):
            assert main(["--sample", "--copy"]) == 1
        assert "Failed to copy to clipboard" in capsys.readouterr().err
    
    def test_indent_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("CSVTOJSON_INDENT", "4")
        assert main(["--sample"]) == 0
        assert capsys.readouterr().out.startswith('[\n    {\n        "name"')
    
    def test_invalid_configuration(self, monkeypatch, capsys):
        monkeypatch.setenv("CSVTOJSON_INDENT", "-3")
        assert main(["--sample"]) == 1
        assert "Configuration Error" in capsys.readouterr().err
    
    def test_unknown_encoding(self, monkeypatch, people_csv, capsys):
        monkeypatch.setenv("CSVTOJSON_ENCODING", "no-such-codec")
        assert main([str(people_csv)]) == 1
        err = capsys.readouterr().err
        assert "Configuration Error" in err
        assert "no-such-codec" in err
        assert "Unhandled exception" not in err
    
    def test_failed_file_logs_error_summary(self, tmp_path, people_csv, caplog):
        bad = tmp_path / "bad.csv"
        bad.write_text("x,y\n1", encoding="utf-8")
        caplog.set_level(logging.INFO, logger="csvToJson")
        
        assert main([str(people_csv), str(bad)]) == 1
        
        summaries = [r.error for r in caplog.records if hasattr(r, "error")]
        assert summaries == [{
            "type": "ColumnMismatchError",
            "message": "Row 2 has 1 columns, but header has 2 columns",
            "kind": "ColumnMismatch",
            "file": str(bad),
            "row": 2,
            "observed": 1,
            "expected": 2,
        }]
    
    @pytest.mark.parametrize("argv", [
        ["-", "a.csv"],
        ["a.csv", "-"],
        ["--stdin", "a.csv"],
        ["--stdin", "-"],
        ["--sample", "a.csv"],
        ["--sample", "--stdin"],
        ["--sample", "-"],
    ])
    def test_conflicting_inputs_rejected(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
        assert "cannot be combined" in capsys.readouterr().err
    
    def test_config_file(self, tmp_path, capsys):
        config_path = tmp_path / "csvtojson.yml"
        config_path.write_text("profiles:\n  compact:\n    indent: 0\n", encoding="utf-8")
        
        assert main(["--sample", "--config", str(config_path), "--profile", "compact"]) == 0
        assert capsys.readouterr().out.startswith('[\n{\n"name"')


def test_keyboard_interrupt_handling():
    """Test that keyboard interrupts are handled gracefully."""
    with patch("csvToJson.__main__.handle_convert_command", side_effect=KeyboardInterrupt):
        assert main(["--sample"]) == 130


def test_unexpected_exception_handling():
    """Test that unexpected exceptions are caught and handled."""
    with patch("csvToJson.__main__.handle_convert_command", side_effect=Exception("Unexpected error")):
        assert main(["--sample"]) == 1
