"""Unit tests for the buffer level functions of klaytn.strutils.strings."""

import pytest

from klaytn.strutils.core.search import SearchStrategy
from klaytn.strutils.strings import contains, count, find, join, rfind, split, to_buffer, to_slice

SPLIT_CASES: list[tuple[str, str]] = [
    ("Smells like teen spirit", " "),
    ("a,,b", ","),
    (",a,", ","),
    ("no delimiter", "|"),
    ("", ","),
    ("a--b----c", "--"),
    ("클레이튼,블록체인", ","),
]


class TestBuffers:
    """Tests for buffer conversion."""

    def test_to_buffer(self) -> None:
        """Bytes are kept and text is encoded."""
        buffer = b"abc"
        assert to_buffer(buffer) is buffer
        assert to_buffer("é") == b"\xc3\xa9"

    def test_to_buffer_rejects_other_types(self) -> None:
        """Only bytes and text are buffers."""
        with pytest.raises(TypeError, match="Expected bytes or str"):
            to_buffer(["a"])  # type: ignore[arg-type]

    def test_to_slice_copies_slices(self) -> None:
        """A slice given to to_slice is copied, not shared."""
        original = to_slice("abc")
        duplicate = to_slice(original)
        duplicate.beyond(to_slice("a"))

        assert original.to_string() == b"abc"
        assert duplicate.to_string() == b"bc"


class TestSearch:
    """Tests for the buffer level search functions."""

    def test_find(self) -> None:
        """find returns the tail from the match."""
        assert find("I will be", "will") == b"will be"
        assert find("I will be", "nope") == b""

    def test_rfind(self) -> None:
        """rfind returns the head up to the end of the match."""
        assert rfind("I will be", "will") == b"I will"
        assert rfind("I will be", "nope") == b""

    def test_count_and_contains(self) -> None:
        """Occurrences are counted and detected."""
        assert count("Smells like teen spirit", "e") == 4
        assert contains("Smells like teen spirit", "like")
        assert not contains("Smells like teen spirit", "nevermind")

    def test_strategy(self) -> None:
        """A custom strategy gives the same results."""
        strategy = SearchStrategy(chunk_width=1)
        assert find("I will be", "will", strategy) == b"will be"
        assert count("a--b----c", "--", strategy) == 3


class TestSplit:
    """Tests for splitting a buffer into owned tokens."""

    def test_words(self) -> None:
        """Words are split on spaces."""
        assert split("Smells like teen spirit", " ") == [b"Smells", b"like", b"teen", b"spirit"]

    def test_empty_tokens(self) -> None:
        """Consecutive and surrounding delimiters produce empty tokens."""
        assert split("a,,b", ",") == [b"a", b"", b"b"]
        assert split(",a,", ",") == [b"", b"a", b""]

    def test_absent_delimiter(self) -> None:
        """Without a delimiter there is a single token."""
        assert split("no delimiter", "|") == [b"no delimiter"]
        assert split("", ",") == [b""]

    def test_empty_delimiter(self) -> None:
        """An empty delimiter never splits."""
        assert split("abc", "") == [b"abc"]

    def test_long_delimiter(self) -> None:
        """Delimiters longer than a chunk split as well."""
        delimiter = "=" * 40
        assert split(f"a{delimiter}b{delimiter}", delimiter) == [b"a", b"b", b""]

    @pytest.mark.parametrize(("text", "delimiter"), SPLIT_CASES)
    def test_count_law(self, text: str, delimiter: str) -> None:
        """There is always one more token than delimiters."""
        assert count(text, delimiter) + 1 == len(split(text, delimiter))

    @pytest.mark.parametrize(("text", "delimiter"), SPLIT_CASES)
    def test_join_law(self, text: str, delimiter: str) -> None:
        """Joining the tokens with the delimiter restores the text."""
        assert join(delimiter, split(text, delimiter)) == text.encode()

    def test_tokens_are_owned(self) -> None:
        """Tokens are independent buffers."""
        tokens = split("a b", " ")
        assert all(type(token) is bytes for token in tokens)
