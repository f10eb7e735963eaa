"""Tests for the strutils command line interface and its models."""

import json
import sys
from pathlib import Path
from typing import Any

import pytest

from klaytn.strutils.cli import run_cli
from klaytn.strutils.core.content_hash import ContentHash
from klaytn.strutils.core.search import DEFAULT_STRATEGY, SearchStrategy
from klaytn.strutils.models.cli_arguments import CLIArguments
from klaytn.strutils.models.operation import Operation
from klaytn.strutils.models.operation_report import OperationReport
from klaytn.strutils.strings import to_slice


def _apply(operation: Operation, text: str, *args: str) -> Any:
    return operation.apply(to_slice(text), [arg.encode() for arg in args], DEFAULT_STRATEGY)


def _report(operation: Operation, text: str, *args: str) -> dict:
    result = _apply(operation, text, *args)
    return json.loads(OperationReport(operation, text.encode(), [arg.encode() for arg in args], result).to_json())


class TestCLIArguments:
    """Tests for the CLI argument model."""

    def test_text_and_args(self) -> None:
        """The first positional is the text, the others are arguments."""
        args = CLIArguments(["strutils", "pad-start", "123123", "10", "x"])

        assert args.operation is Operation.PAD_START
        assert args.text == b"123123"
        assert args.args == [b"10", b"x"]
        assert args.input is None
        assert args.algorithm is ContentHash.SHA3_256
        assert args.chunk_width == 32

    def test_input_file(self, tmp_path: Path) -> None:
        """With an input file every positional is an argument."""
        args = CLIArguments(["strutils", "count", "-i", str(tmp_path / "in.txt"), ","])

        assert args.input == (tmp_path / "in.txt").resolve()
        assert args.text == b""
        assert args.args == [b","]

    def test_options(self) -> None:
        """Search options are parsed into their types."""
        args = CLIArguments(["strutils", "find", "abc", "b", "-a", "blake2b", "-w", "4", "-q", "-v"])

        assert args.algorithm is ContentHash.BLAKE2B
        assert args.chunk_width == 4
        assert args.quiet
        assert args.verbose

    def test_unknown_operation(self) -> None:
        """Unknown operations are rejected by the parser."""
        with pytest.raises(SystemExit):
            CLIArguments(["strutils", "reverse", "abc"])


class TestOperation:
    """Tests for running operations by name."""

    def test_arity(self) -> None:
        """Each operation declares its arguments."""
        assert Operation.LEN.arity == 0
        assert Operation.FIND.arity == 1
        assert Operation.SUBSTRING.arity == 2
        assert Operation.JOIN.arity is None

    def test_wrong_argument_count(self) -> None:
        """A wrong number of arguments is rejected."""
        with pytest.raises(ValueError, match="expects 1 argument"):
            _apply(Operation.FIND, "abc")

    @pytest.mark.parametrize(
        ("operation", "text", "args", "expected"),
        [
            (Operation.LEN, "클레이튼", (), 4),
            (Operation.EMPTY, "", (), True),
            (Operation.ORD, "€", (), 0x20AC),
            (Operation.COMPARE, "abc", ("abc",), 0),
            (Operation.EQUALS, "abc", ("abd",), False),
            (Operation.STARTS_WITH, "abc", ("ab",), True),
            (Operation.ENDS_WITH, "abc", ("ab",), False),
            (Operation.COUNT, "a,b,c", (",",), 2),
            (Operation.CONTAINS, "abc", ("z",), False),
            (Operation.TOKENIZE, "a,,b", (",",), [b"a", b"", b"b"]),
            (Operation.CONCAT, "ab", ("cd",), b"abcd"),
            (Operation.JOIN, "-", ("a", "b", "c"), b"a-b-c"),
            (Operation.PAD_START, "123123", ("10", "x"), b"xxxx123123"),
            (Operation.PAD_END, "123123", ("10", "0"), b"1231230000"),
            (Operation.SUBSTRING, "Mozilla", ("7", "4"), b"lla"),
        ],
    )
    def test_apply(self, operation: Operation, text: str, args: tuple[str, ...], expected: Any) -> None:
        """Operations return the result of the matching function."""
        assert _apply(operation, text, *args) == expected

    def test_slice_results(self) -> None:
        """In-place operations return the narrowed slice."""
        assert _apply(Operation.RFIND, "I will be", "will").to_string() == b"I will"
        assert _apply(Operation.BEYOND, "foobar", "foo").to_string() == b"bar"
        assert _apply(Operation.UNTIL, "foobar", "bar").to_string() == b"foo"
        assert _apply(Operation.FIND, "foobar", "ob").to_string() == b"obar"

    def test_invalid_integer(self) -> None:
        """Non numeric bounds are rejected."""
        with pytest.raises(ValueError, match="invalid literal"):
            _apply(Operation.SUBSTRING, "Mozilla", "one", "2")

    def test_compare_chunk_width(self) -> None:
        """compare and equals follow the chunk width of the strategy."""
        narrow = SearchStrategy(chunk_width=1)
        assert Operation.COMPARE.apply(to_slice("abc"), [b"abd"], narrow) == -1
        assert Operation.EQUALS.apply(to_slice("abc"), [b"abc"], narrow)

    def test_word(self) -> None:
        """A hex encoded word gives back the string it holds."""
        word = b"Klaytn".ljust(32, b"\x00").hex()
        assert Operation.WORD.arity == 0
        assert _apply(Operation.WORD, word) == b"Klaytn"

    def test_invalid_word(self) -> None:
        """Words must be 32 bytes of valid hex."""
        with pytest.raises(ValueError, match="fromhex"):
            _apply(Operation.WORD, "zz")
        with pytest.raises(ValueError, match="32 bytes"):
            _apply(Operation.WORD, "6869")


class TestOperationReport:
    """Tests for the JSON report."""

    def test_split_report(self) -> None:
        """Split reports both the token and the remainder."""
        report = _report(Operation.SPLIT, "www.google.com", ".")

        assert report["Operation"] == "split"
        assert report["Input"] == {"Text": "www.google.com", "Hex": b"www.google.com".hex()}
        assert report["Arguments"] == [{"Text": ".", "Hex": "2e"}]
        assert report["Result"]["Token"]["Text"] == "www"
        assert report["Result"]["Remainder"]["Text"] == "google.com"
        assert report["Result"]["Remainder"]["Offset"] == 4

    def test_rsplit_report(self) -> None:
        """Rsplit reports the last token."""
        report = _report(Operation.RSPLIT, "www.google.com", ".")
        assert report["Result"]["Token"]["Text"] == "com"
        assert report["Result"]["Remainder"]["Text"] == "www.google"

    def test_runes_report(self) -> None:
        """Runes are reported with their decoded codepoint."""
        report = _report(Operation.RUNES, "a€\xff")
        runes = report["Result"]

        assert [rune["Rune"]["Text"] for rune in runes] == ["a", "€", "\xff"]
        assert runes[1]["Decoded"] == {"Codepoint": 0x20AC, "Width": 3}

    def test_invalid_bytes(self) -> None:
        """Undecodable bytes are escaped in the text and kept in the hex."""
        result = b"\xe2\x82"
        report = json.loads(OperationReport(Operation.CONCAT, b"\xe2", [b"\x82"], result).to_json())

        assert report["Result"] == {"Text": "\\xe2\\x82", "Hex": "e282"}
        assert report["Input"]["Hex"] == "e2"

    def test_hash_report(self) -> None:
        """Digests are reported as hex."""
        report = _report(Operation.HASH, "abc")
        assert report["Result"]["Hex"] == to_slice("abc").content_hash(ContentHash.SHA3_256).hex()

    def test_pretty(self) -> None:
        """The pretty report is indented."""
        result = _apply(Operation.LEN, "abc")
        assert "\n    " in OperationReport(Operation.LEN, b"abc", [], result).to_json(pretty=True)


class TestRunCli:
    """Tests for the console entry point."""

    def test_writes_report(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """The report is written to the output path."""
        output = tmp_path / "report.json"
        monkeypatch.setattr(sys, "argv", ["strutils", "tokenize", "a b c", " ", "-q", "-o", str(output)])

        run_cli()

        report = json.loads(output.read_text())
        assert [token["Text"] for token in report["Result"]] == ["a", "b", "c"]

    def test_reads_input_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """The text can be read from a file."""
        source = tmp_path / "input.txt"
        source.write_bytes(b"x,y,z")
        output = tmp_path / "report.json"
        monkeypatch.setattr(sys, "argv", ["strutils", "count", ",", "-i", str(source), "-q", "-o", str(output)])

        run_cli()

        assert json.loads(output.read_text())["Result"] == 2

    def test_prints_report(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Without --quiet the colorized report is printed."""
        monkeypatch.setattr(sys, "argv", ["strutils", "len", "I love Klaytn!!"])

        run_cli()

        out = capsys.readouterr().out
        assert out.startswith("Report: ")
        assert "15" in out

    def test_invalid_arguments_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid operation arguments exit with an error status."""
        monkeypatch.setattr(sys, "argv", ["strutils", "find", "abc", "-q"])

        with pytest.raises(SystemExit) as excinfo:
            run_cli()
        assert excinfo.value.code == 1

    def test_invalid_chunk_width_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An invalid chunk width exits with an error status."""
        monkeypatch.setattr(sys, "argv", ["strutils", "find", "abc", "b", "-w", "0", "-q"])

        with pytest.raises(SystemExit) as excinfo:
            run_cli()
        assert excinfo.value.code == 1
