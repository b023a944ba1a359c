"""Tests for forge templates and pattern builders."""

import pytest

from forgelink.core.models.forge import ForgeEntry, ForgeKind
from forgelink.forges.templates import (
    GITHUB_TEMPLATE,
    SAVANNAH_TEMPLATE,
    build_rule,
    builders_for,
    quote_path,
    render,
    substitute,
)

CONTEXT = {
    "protocol": "https",
    "host": "github.com",
    "namespace": "octocat/hello",
    "revision": "abc123",
    "path": "src/main.txt",
}


@pytest.mark.unit
class TestSubstitute:
    """Tests for placeholder substitution."""

    def test_replaces_placeholders(self) -> None:
        assert substitute("{protocol}://{host}", CONTEXT) == "https://github.com"

    def test_leaves_plain_text(self) -> None:
        assert substitute("no placeholders", CONTEXT) == "no placeholders"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            substitute("{line_start}", CONTEXT)

    def test_non_string_values(self) -> None:
        assert substitute("#L{line_start}", {"line_start": 12}) == "#L12"


@pytest.mark.unit
class TestRender:
    """Tests for conditional line fragments."""

    def test_no_lines(self) -> None:
        assert render(GITHUB_TEMPLATE, CONTEXT) == (
            "https://github.com/octocat/hello/blob/abc123/src/main.txt"
        )

    def test_single_line(self) -> None:
        url = render(GITHUB_TEMPLATE, {**CONTEXT, "line_start": 5})
        assert url.endswith("/src/main.txt#L5")

    def test_range(self) -> None:
        url = render(GITHUB_TEMPLATE, {**CONTEXT, "line_start": 10, "line_end": 20})
        assert url.endswith("/src/main.txt#L10-L20")

    def test_end_without_start_is_ignored(self) -> None:
        url = render(GITHUB_TEMPLATE, {**CONTEXT, "line_end": 20})
        assert "#" not in url

    def test_template_without_range_support(self) -> None:
        context = {**CONTEXT, "namespace": "emacs.git", "line_start": 10, "line_end": 20}
        assert render(SAVANNAH_TEMPLATE, context).endswith("?id=abc123#n10")


@pytest.mark.unit
class TestBuilders:
    """Tests for per-kind pattern builders."""

    @pytest.mark.parametrize("kind", list(ForgeKind))
    def test_every_kind_has_builders(self, kind: ForgeKind) -> None:
        pattern_builder, formatter = builders_for(kind)
        assert callable(pattern_builder)
        assert callable(formatter)

    def test_build_rule_keeps_entry_fields(self) -> None:
        entry = ForgeEntry(host_domain="gitlab.com", kind=ForgeKind.GITLAB, extra={"a": "b"})
        rule = build_rule(entry)
        assert rule.host_domain == "gitlab.com"
        assert rule.kind == ForgeKind.GITLAB
        assert rule.protocol == "https"
        assert rule.extra == {"a": "b"}

    def test_host_is_escaped(self) -> None:
        rule = build_rule(ForgeEntry(host_domain="github.com", kind=ForgeKind.GITHUB))
        assert rule.match("https://githubxcom/org/repo") is None

    def test_match_returns_namespace(self) -> None:
        rule = build_rule(ForgeEntry(host_domain="github.com", kind=ForgeKind.GITHUB))
        assert rule.match("git@github.com:org/repo.git") == {"namespace": "org/repo"}

    def test_sourcehut_captures_sub_host(self) -> None:
        rule = build_rule(ForgeEntry(host_domain="sr.ht", kind=ForgeKind.SOURCEHUT))
        assert rule.match("https://hg.sr.ht/~user/repo") == {
            "host": "hg.sr.ht",
            "namespace": "~user/repo",
        }

    def test_sourcehut_requires_tilde_namespace(self) -> None:
        rule = build_rule(ForgeEntry(host_domain="sr.ht", kind=ForgeKind.SOURCEHUT))
        assert rule.match("https://git.sr.ht/user/repo") is None

    def test_savannah_requires_git_suffix(self) -> None:
        rule = build_rule(ForgeEntry(host_domain="git.savannah.gnu.org", kind=ForgeKind.SAVANNAH))
        assert rule.match("https://git.savannah.gnu.org/git/emacs") is None
        assert rule.match("https://git.savannah.gnu.org/git/emacs.git") == {
            "namespace": "emacs.git"
        }


@pytest.mark.unit
class TestQuotePath:
    """Tests for path quoting."""

    def test_plain_path_unchanged(self) -> None:
        assert quote_path("src/main.txt") == "src/main.txt"

    def test_spaces_quoted(self) -> None:
        assert quote_path("docs/my file.md") == "docs/my%20file.md"
