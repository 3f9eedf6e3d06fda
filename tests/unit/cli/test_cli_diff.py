"""Unit tests for the diff CLI command."""

import argparse
import io

import pytest

from linediff.cli import main
from linediff.cli.builder import (
    EXIT_CANCELLED,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    non_negative_int,
    option_overrides,
    positive_float,
    positive_int,
)
from linediff.cli.commands.diff import build_options, handle_diff_command
from linediff.exceptions import (
    DiffCancelledError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    UsageError,
    ValidationError,
)


@pytest.mark.unit
class TestArgumentTypes:
    """Test argument type helpers."""

    def test_non_negative_int(self):
        """Test valid and invalid context widths."""
        assert non_negative_int("0") == 0
        assert non_negative_int("10") == 10
        with pytest.raises(argparse.ArgumentTypeError, match="non-negative"):
            non_negative_int("-1")
        with pytest.raises(argparse.ArgumentTypeError, match="expected an integer"):
            non_negative_int("3.5")

    def test_positive_int(self):
        """Test that zero is rejected for positive integers."""
        assert positive_int("5") == 5
        with pytest.raises(argparse.ArgumentTypeError, match="positive"):
            positive_int("0")

    def test_positive_float(self):
        """Test timeout parsing."""
        assert positive_float("0.5") == 0.5
        with pytest.raises(argparse.ArgumentTypeError):
            positive_float("0")
        with pytest.raises(argparse.ArgumentTypeError, match="expected a number"):
            positive_float("soon")


@pytest.mark.unit
class TestCreateParser:
    """Test create_parser() function."""

    def test_parser_creation(self):
        """Test parser is created correctly."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "linediff"

    def test_short_flags(self):
        """Test GNU-style short flags."""
        parsed = create_parser().parse_args(["-u", "-i", "-w", "-q", "-y", "-r", "-c", "a", "b"])
        assert parsed.unified and parsed.ignore_case and parsed.ignore_whitespace
        assert parsed.brief and parsed.side_by_side and parsed.recursive and parsed.context_diff
        assert parsed.operands == ["a", "b"]

    def test_numeric_flags(self):
        """Test flags taking numbers."""
        parsed = create_parser().parse_args(["-U", "1", "-C", "2", "-W", "30", "--timeout", "1.5"])
        assert parsed.unified_context == 1
        assert parsed.context_lines == 2
        assert parsed.width == 30
        assert parsed.timeout == 1.5

    def test_unset_flags_are_none(self):
        """Test that flags not given do not override config values."""
        parsed = create_parser().parse_args(["a", "b"])
        assert option_overrides(parsed) == {}

    def test_overrides_collects_given_flags(self):
        """Test override collection."""
        parsed = create_parser().parse_args(["-i", "--algorithm", "positional", "a", "b"])
        assert option_overrides(parsed) == {"ignore_case": True, "algorithm": "positional"}

    def test_algorithm_choices(self):
        """Test that unknown algorithms are rejected by the parser."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--algorithm", "myers", "a", "b"])

    def test_help_from_option_metadata(self):
        """Test that help text comes from option field metadata."""
        assert "Ignore case differences" in create_parser().format_help()


@pytest.mark.unit
class TestExitCodes:
    """Test get_exit_code_for_exception()."""

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (UsageError("missing operand"), EXIT_VALIDATION_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (argparse.ArgumentTypeError("bad config"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x"), EXIT_FILE_ERROR),
            (FileAccessError("x"), EXIT_FILE_ERROR),
            (FileError("x"), EXIT_FILE_ERROR),
            (DiffCancelledError(), EXIT_CANCELLED),
            (KeyboardInterrupt(), EXIT_CANCELLED),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, expected):
        """Test exception to exit code mapping."""
        assert get_exit_code_for_exception(exception) == expected


@pytest.mark.unit
@pytest.mark.cli
class TestHandleDiffCommand:
    """Test handle_diff_command()."""

    def test_normal(self, isolated_config, abc_files, capsys):
        """Test the default normal output."""
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "2c2\n< b\n---\n> x\n"

    def test_main_delegates(self, isolated_config, abc_files, capsys):
        """Test that main() runs the diff command."""
        assert main(["-q", *map(str, abc_files)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.endswith("differ\n")

    def test_unified(self, isolated_config, abc_files, capsys):
        """Test -u output."""
        old, new = abc_files
        assert handle_diff_command(["-u", str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            f"--- {old}",
            f"+++ {new}",
            "@@ -1,3 +1,3 @@",
            " a",
            "-b",
            "+x",
            " c",
        ]

    def test_unified_context_width(self, isolated_config, abc_files, capsys):
        """Test that -U selects unified output with the given width."""
        assert handle_diff_command(["-U", "0", *map(str, abc_files)]) == EXIT_SUCCESS
        assert "@@ -2 +2 @@" in capsys.readouterr().out

    def test_context(self, isolated_config, abc_files, capsys):
        """Test -c output."""
        assert handle_diff_command(["-c", *map(str, abc_files)]) == EXIT_SUCCESS
        out = capsys.readouterr().out.splitlines()
        assert out[2:5] == ["***************", "*** 1,3 ****", "  a"]

    def test_side_by_side_width(self, isolated_config, abc_files, capsys):
        """Test -y with -W."""
        assert handle_diff_command(["-y", "-W", "3", *map(str, abc_files)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == ["a     a", "b   | x", "c     c"]

    def test_ignore_case(self, isolated_config, make_file, capsys):
        """Test -i hides case-only changes."""
        old = make_file("a.txt", ["Hello"])
        new = make_file("b.txt", ["HELLO"])
        assert handle_diff_command(["-i", str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_ignore_whitespace(self, isolated_config, make_file, capsys):
        """Test -w hides whitespace-only changes."""
        old = make_file("a.txt", ["a  b"])
        new = make_file("b.txt", [" a b"])
        assert handle_diff_command(["-w", str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_labels(self, isolated_config, abc_files, capsys):
        """Test --label replaces names in headers."""
        args = ["-u", "--label", "before", "--label", "after", *map(str, abc_files)]
        assert handle_diff_command(args) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[:2] == ["--- before", "+++ after"]

    def test_too_many_labels(self, isolated_config, abc_files, capsys):
        """Test that three labels are rejected."""
        args = ["--label", "a", "--label", "b", "--label", "c", *map(str, abc_files)]
        assert handle_diff_command(args) == EXIT_VALIDATION_ERROR
        assert "too many file label options" in capsys.readouterr().err

    def test_stdin_operand(self, isolated_config, abc_files, monkeypatch, capsys):
        """Test reading '-' from standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n"))
        assert handle_diff_command(["-", str(abc_files[1])]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "2c2\n< b\n---\n> x\n"

    def test_missing_operand(self, isolated_config, capsys):
        """Test the missing operand diagnostic."""
        assert handle_diff_command(["only.txt"]) == EXIT_VALIDATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "diff: missing operand after 'only.txt'\n"

    def test_missing_file(self, isolated_config, tmp_path, abc_files, capsys):
        """Test the diagnostic for a nonexistent file."""
        missing = tmp_path / "missing.txt"
        assert handle_diff_command([str(missing), str(abc_files[0])]) == EXIT_FILE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == f"diff: {missing}: No such file or directory\n"

    def test_invalid_width_value(self, isolated_config, capsys):
        """Test argparse rejection of a negative width as a usage error."""
        assert handle_diff_command(["-U", "-2", "a", "b"]) == EXIT_VALIDATION_ERROR
        assert "non-negative" in capsys.readouterr().err

    def test_unknown_flag(self, isolated_config, abc_files, capsys):
        """Test that an unrecognized flag exits with the usage error code."""
        assert handle_diff_command(["--no-such-flag", *map(str, abc_files)]) == EXIT_VALIDATION_ERROR
        assert "unrecognized arguments" in capsys.readouterr().err

    def test_flag_between_operands(self, isolated_config, abc_files, capsys):
        """Test that a flag placed between the operands still applies."""
        old, new = abc_files
        assert handle_diff_command([str(old), "-u", str(new)]) == EXIT_SUCCESS
        out = capsys.readouterr().out.splitlines()
        assert out[:3] == [f"--- {old}", f"+++ {new}", "@@ -1,3 +1,3 @@"]

    def test_flags_after_operands(self, isolated_config, abc_files, capsys):
        """Test that flags with values may follow both operands."""
        old, new = abc_files
        assert handle_diff_command([str(old), str(new), "-y", "-W", "3"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == ["a     a", "b   | x", "c     c"]

    def test_recursive_warning_on_diagnostic_stream(self, isolated_config, abc_files, capsys):
        """Test that log records reach stderr with the diff: prefix."""
        assert handle_diff_command(["-r", *map(str, abc_files)]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == "2c2\n< b\n---\n> x\n"
        assert captured.err.startswith("diff: warning: Recursive comparison is not supported")

    def test_help(self, isolated_config, capsys):
        """Test that --help exits successfully."""
        assert handle_diff_command(["--help"]) == 0
        assert "--side-by-side" in capsys.readouterr().out

    def test_version(self, isolated_config, capsys):
        """Test that --version prints the program name."""
        assert handle_diff_command(["--version"]) == 0
        assert capsys.readouterr().out.startswith("linediff ")

    def test_cancelled(self, isolated_config, abc_files, monkeypatch, capsys):
        """Test that a cancelled run exits with the cancellation code and no diagnostic."""

        def cancelled(*args, **kwargs):
            raise DiffCancelledError("rendering cancelled")

        monkeypatch.setattr("linediff.cli.commands.diff.run_diff", cancelled)
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_CANCELLED
        assert capsys.readouterr().err == ""

    def test_keyboard_interrupt(self, isolated_config, abc_files, monkeypatch):
        """Test that Ctrl-C maps to the cancellation code."""

        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("linediff.cli.commands.diff.run_diff", interrupted)
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_CANCELLED

    def test_timeout_creates_deadline(self, isolated_config, abc_files, monkeypatch):
        """Test that --timeout hands a deadline token to the command."""
        seen = {}

        def capture(operands, options, labels, token):
            seen["token"] = token
            return EXIT_SUCCESS

        monkeypatch.setattr("linediff.cli.commands.diff.run_diff", capture)
        assert handle_diff_command(["--timeout", "30", *map(str, abc_files)]) == EXIT_SUCCESS
        assert seen["token"].deadline is not None
        assert not seen["token"].cancelled


@pytest.mark.unit
@pytest.mark.cli
class TestConfigIntegration:
    """Test configuration files feeding the diff command."""

    def test_config_file_sets_defaults(self, isolated_config, abc_files, capsys):
        """Test that a discovered config file selects the output format."""
        (isolated_config / ".linediff.toml").write_text("[diff]\nbrief = true\n")
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_SUCCESS
        assert capsys.readouterr().out.endswith("differ\n")

    def test_flags_override_config(self, isolated_config):
        """Test that command-line values take precedence."""
        (isolated_config / ".linediff.yaml").write_text("unified_context: 5\nignore_case: true\n")
        options = build_options(create_parser().parse_args(["-U", "1", "a", "b"]))
        assert options.resolved_unified_context == 1
        assert options.ignore_case

    def test_no_config(self, isolated_config):
        """Test that --no-config skips discovery."""
        (isolated_config / ".linediff.json").write_text('{"brief": true}')
        options = build_options(create_parser().parse_args(["--no-config", "a", "b"]))
        assert not options.brief

    def test_explicit_config(self, isolated_config, tmp_path):
        """Test --config with an explicit path."""
        config = tmp_path / "custom.toml"
        config.write_text('algorithm = "positional"\n')
        options = build_options(create_parser().parse_args(["--config", str(config), "a", "b"]))
        assert options.algorithm == "positional"

    def test_env_config(self, isolated_config, tmp_path, monkeypatch):
        """Test the LINEDIFF_CONFIG environment variable."""
        config = tmp_path / "env.json"
        config.write_text('{"diff": {"side-by-side": true}}')
        monkeypatch.setenv("LINEDIFF_CONFIG", str(config))
        options = build_options(create_parser().parse_args(["a", "b"]))
        assert options.side_by_side

    def test_unknown_config_key(self, isolated_config, abc_files, capsys):
        """Test that an unknown key fails with a validation error."""
        (isolated_config / ".linediff.toml").write_text("colour = true\n")
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_VALIDATION_ERROR
        assert "unknown option" in capsys.readouterr().err

    def test_malformed_config(self, isolated_config, abc_files, capsys):
        """Test that a malformed config file fails with a validation error."""
        (isolated_config / ".linediff.toml").write_text("unified = [\n")
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_VALIDATION_ERROR
        assert "Invalid TOML" in capsys.readouterr().err

    def test_quoted_boolean_in_config(self, isolated_config, abc_files, capsys):
        """Test that a string flag value in a config file is a validation error."""
        (isolated_config / ".linediff.yaml").write_text('brief: "false"\n')
        assert handle_diff_command([str(p) for p in abc_files]) == EXIT_VALIDATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "brief must be true or false" in captured.err
