"""Tests for core domain models."""

import pytest
from pydantic import ValidationError

from forgelink.core.exceptions import (
    ConfigurationError,
    MalformedExtraArgumentsError,
    UntrackedFileError,
)
from forgelink.core.models.forge import ForgeEntry, ForgeKind
from forgelink.core.models.link import LinkRequest, Selection
from tests.factories import LinkRequestFactory, SelectionFactory


@pytest.mark.unit
class TestSelection:
    """Tests for Selection model."""

    def test_single_line(self) -> None:
        selection = Selection(start=5)
        assert selection.line_start == 5
        assert selection.line_end is None
        assert selection.is_range is False

    def test_range(self) -> None:
        selection = SelectionFactory()
        assert selection.line_start == 10
        assert selection.line_end == 20
        assert selection.is_range is True

    def test_same_start_and_end_is_single_line(self) -> None:
        selection = Selection(start=3, end=3)
        assert selection.is_range is False
        assert selection.line_end is None

    def test_reversed_range_is_normalized(self) -> None:
        selection = Selection(start=20, end=10)
        assert (selection.line_start, selection.line_end) == (10, 20)

    def test_digit_strings_are_normalized(self) -> None:
        selection = Selection(start="20", end="10")
        assert (selection.line_start, selection.line_end) == (10, 20)
        assert Selection(start="5", end="5").is_range is False

    def test_zero_line_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Selection(start=0)

    def test_parse_single(self) -> None:
        assert Selection.parse("7") == Selection(start=7)

    def test_parse_range(self) -> None:
        assert Selection.parse("10:20") == Selection(start=10, end=20)

    @pytest.mark.parametrize("value", ["", "a", "3:x", "0", "1:2:3"])
    def test_parse_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            Selection.parse(value)

    def test_frozen(self) -> None:
        selection = Selection(start=1)
        with pytest.raises(ValidationError):
            selection.start = 2


@pytest.mark.unit
class TestLinkRequest:
    """Tests for LinkRequest model."""

    def test_defaults(self) -> None:
        request = LinkRequest(remote_url="git@github.com:a/b.git", path="x.py", revision="abc")
        assert request.selection is None

    def test_factory(self) -> None:
        request = LinkRequestFactory(selection=Selection(start=1, end=2))
        assert request.remote_url == "https://github.com/octocat/hello.git"
        assert request.selection.is_range


@pytest.mark.unit
class TestForgeEntry:
    """Tests for ForgeEntry model."""

    def test_from_row(self) -> None:
        entry = ForgeEntry.from_row(("github.com", "github", "https"))
        assert entry.host_domain == "github.com"
        assert entry.kind == ForgeKind.GITHUB
        assert entry.protocol == "https"
        assert entry.extra == {}

    def test_from_row_default_protocol(self) -> None:
        entry = ForgeEntry.from_row(("gitlab.com", ForgeKind.GITLAB))
        assert entry.protocol == "https"

    def test_from_row_with_extras(self) -> None:
        entry = ForgeEntry.from_row(
            ("git.example.com", "gitlab", "http", "host", "gitlab.example.com")
        )
        assert entry.protocol == "http"
        assert entry.extra == {"host": "gitlab.example.com"}

    def test_from_row_odd_extras(self) -> None:
        with pytest.raises(MalformedExtraArgumentsError):
            ForgeEntry.from_row(("git.example.com", "gitlab", "https", "host"))

    def test_odd_extras_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            ForgeEntry.from_row(("git.example.com", "gitlab", "https", "a", "b", "c"))

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ForgeEntry.from_row(("example.com", "svn-web"))
        assert "svn-web" in str(exc_info.value)

    def test_short_row(self) -> None:
        with pytest.raises(ConfigurationError):
            ForgeEntry.from_row(("example.com",))


@pytest.mark.unit
class TestExceptions:
    """Tests for exception messages."""

    def test_untracked_names_file_and_backend(self) -> None:
        error = UntrackedFileError("notes.txt", "git")
        assert "notes.txt" in str(error)
        assert "git" in str(error)
        assert error.details == {"path": "notes.txt", "backend": "git"}

