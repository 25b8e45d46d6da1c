"""Test the command-line interface."""

import io
import json
import pytest

from smartsplit.cli import main, create_parser


TEXT = "Dr. Smith gave a talk yesterday. It was clear and useful for everyone."


class TestCli:
    """Test CLI commands end to end."""
    
    def test_no_command_prints_help(self, capsys):
        """Test that running without a command fails with help."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()
    
    def test_split_plain_output(self, capsys):
        """Test one sentence per line."""
        assert main(["split", TEXT]) == 0
        
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["Dr. Smith gave a talk yesterday.", "It was clear and useful for everyone."]
    
    def test_split_json_with_min_words(self, capsys):
        """Test JSON output and the threshold override."""
        text = "One two. Three four. Five six seven eight nine ten eleven twelve."
        
        assert main(["split", text, "--min-words", "5", "--json"]) == 0
        
        sentences = json.loads(capsys.readouterr().out)
        assert sentences == ["One two. Three four.", "Five six seven eight nine ten eleven twelve."]
    
    def test_split_reads_stdin(self, capsys, monkeypatch):
        """Test reading text from stdin when no argument is given."""
        monkeypatch.setattr("sys.stdin", io.StringIO("  Hello world from unit tests.  \n"))
        
        assert main(["split"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Hello world from unit tests."]
    
    def test_split_with_config_file(self, capsys, temp_config_file):
        """Test that a config file sets the threshold."""
        assert main(["split", TEXT, "--config", str(temp_config_file), "--json"]) == 0
        
        # Both sentences have at least 6 words
        assert len(json.loads(capsys.readouterr().out)) == 2
    
    def test_split_with_missing_config(self, capsys):
        """Test config errors are reported with a non-zero exit."""
        assert main(["split", TEXT, "--config", "/nonexistent/splitter.yaml"]) == 1
        assert "Config error" in capsys.readouterr().err
    
    def test_analyze_json(self, capsys):
        """Test analyze JSON output."""
        text = "First sentence has five words. Second sentence has exactly six words."
        
        assert main(["analyze", text, "--json"]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["word_counts"] == [5, 6]
        assert len(data["sentences"]) == 2
        assert data["summary"]["avg_words"] == pytest.approx(5.5)
    
    def test_analyze_plain(self, capsys):
        """Test analyze human-readable output."""
        assert main(["analyze", TEXT]) == 0
        
        out = capsys.readouterr().out
        assert "[6 words] Dr. Smith gave a talk yesterday." in out
        assert "Sentences: 2, words: 13" in out
    
    def test_validate_config(self, capsys, temp_config_file):
        """Test validating a good config file."""
        assert main(["validate-config", str(temp_config_file)]) == 0
        assert "min_words_per_sentence: 6" in capsys.readouterr().out
    
    def test_validate_invalid_config(self, capsys, tmp_path):
        """Test validating a bad config file."""
        bad = tmp_path / "bad.yaml"
        bad.write_text("min_words_per_sentence: lots\n", encoding="utf-8")
        
        assert main(["validate-config", str(bad)]) == 1
        captured = capsys.readouterr()
        assert "validation failed" in captured.err
        assert "validation failed" not in captured.out

    def test_validate_missing_config(self, capsys):
        """Test that a missing config file is reported on stderr."""
        assert main(["validate-config", "/nonexistent/splitter.yaml"]) == 1

        captured = capsys.readouterr()
        assert "Config file not found" in captured.err
        assert captured.out == ""

    def test_split_unicode_json(self, capsys):
        """Test that non-ASCII sentences are printed as readable JSON."""
        assert main(["split", "Café au lait está muy bueno hoy.", "--json"]) == 0

        out = capsys.readouterr().out
        assert "Café" in out
        assert json.loads(out) == ["Café au lait está muy bueno hoy."]

    def test_info(self, capsys):
        """Test the info command."""
        assert main(["info"]) == 0
        assert "Python:" in capsys.readouterr().out
    
    def test_parser_commands(self):
        """Test that all subcommands parse."""
        parser = create_parser()
        for argv in (["split", "x"], ["analyze", "x", "-m", "3"], ["validate-config", "c.yaml"], ["info"]):
            assert parser.parse_args(argv).command == argv[0]
