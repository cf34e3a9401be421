"""Tests for the bigdecimal command line tool."""

import pytest

from bigdecimal.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ignore BIGDECIMAL_* variables from the developer's shell."""
    for name in ("BIGDECIMAL_PRECISION", "BIGDECIMAL_ROUNDING_MODE", "BIGDECIMAL_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestOperations:
    """Each operation prints its result."""

    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["add", "0.1", "0.2"], "0.3"),
            (["sub", "1", "2.5"], "-1.5"),
            (["mul", "1.5", "2"], "3"),
            (["div", "1", "3"], "0.3333333333"),
            (["idiv", "7", "2"], "3"),
            (["rem", "-7", "2"], "-1"),
            (["cmp", "1", "2"], "-1"),
            (["min", "1", "2"], "1"),
            (["max", "1", "2"], "2"),
            (["pow", "2", "16"], "65536"),
            (["sqrt", "4"], "2"),
            (["abs", "-2.5"], "2.5"),
            (["neg", "2.5"], "-2.5"),
            (["int", "10.25"], "10"),
            (["frac", "10.25"], "0.25"),
            (["sign", "-3"], "-1"),
            (["add", "1.5e3", "1"], "1501"),
        ],
    )
    def test_operation(self, capsys, argv, expected):
        code, out, err = run(capsys, *argv)
        assert code == 0
        assert out == expected + "\n"
        assert err == ""

    def test_round_defaults(self, capsys):
        code, out, _ = run(capsys, "round", "1.23456789012345")
        assert code == 0
        assert out == "1.2345678901\n"

    def test_round_options(self, capsys):
        code, out, _ = run(capsys, "--precision", "1", "--mode", "halfEven", "round", "2.25")
        assert code == 0
        assert out == "2.2\n"
        code, out, _ = run(capsys, "--precision", "1", "--mode", "up", "round", "2.13")
        assert out == "2.2\n"

    def test_negative_operand(self, capsys):
        code, out, _ = run(capsys, "add", "-2.5", "1")
        assert code == 0
        assert out == "-1.5\n"


class TestErrors:
    """Library errors are reported on stderr with exit code 1."""

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["div", "1", "0"], "Division by zero"),
            (["div", "0", "0"], "0/0 is undefined"),
            (["add", "abc", "1"], "Invalid decimal string"),
            (["pow", "2", "-1"], "Negative exponents"),
        ],
    )
    def test_library_error(self, capsys, argv, message):
        code, out, err = run(capsys, *argv)
        assert code == 1
        assert out == ""
        assert err.startswith("error: ")
        assert message in err

    def test_beyond_float_range(self, capsys):
        """sqrt seeds from a float, so huge operands are reported, not raised."""
        code, out, err = run(capsys, "sqrt", "1.0e400")
        assert code == 1
        assert out == ""
        assert err.startswith("error: ")
        assert "too large" in err

    def test_negative_precision(self, capsys):
        code, _, err = run(capsys, "--precision", "-1", "round", "2.5")
        assert code == 1
        assert err.startswith("error: ")

    def test_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["explode", "1"])
        assert exc_info.value.code == 2

    def test_unknown_mode(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--mode", "nearest", "round", "1"])
        assert exc_info.value.code == 2

    def test_invalid_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("BIGDECIMAL_PRECISION", "many")
        code, _, err = run(capsys, "add", "1", "1")
        assert code == 2
        assert "invalid environment configuration" in err


class TestConfiguration:
    """Defaults come from the environment."""

    def test_env_precision_and_mode(self, capsys, monkeypatch):
        monkeypatch.setenv("BIGDECIMAL_PRECISION", "2")
        code, out, _ = run(capsys, "round", "2.345")
        assert out == "2.34\n"
        monkeypatch.setenv("BIGDECIMAL_ROUNDING_MODE", "halfUp")
        code, out, _ = run(capsys, "round", "2.345")
        assert code == 0
        assert out == "2.35\n"

    def test_flags_override_env(self, capsys, monkeypatch):
        monkeypatch.setenv("BIGDECIMAL_PRECISION", "2")
        code, out, _ = run(capsys, "--precision", "0", "round", "2.345")
        assert out == "2\n"

    def test_verbose_logs_lossy_division(self, capsys):
        code, out, _ = run(capsys, "-v", "div", "1", "3")
        assert code == 0
        assert "division_precision_exhausted" in out
        assert out.rstrip().endswith("0.3333333333")

    def test_quiet_by_default(self, capsys):
        code, out, _ = run(capsys, "div", "1", "3")
        assert "division_precision_exhausted" not in out

    def test_verbose_exact_division(self, capsys):
        code, out, _ = run(capsys, "-v", "div", "1", "4")
        assert code == 0
        assert "division_precision_exhausted" not in out
        assert "operation_evaluated" in out
        assert out.rstrip().endswith("0.25")
