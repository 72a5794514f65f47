"""Tests for conventional commit parsing."""

from __future__ import annotations

from release_helper.core.commits import (
    DEFAULT_SKIP_RELEASE_PATTERNS,
    KNOWN_TYPES,
    ParsedCommit,
    RawCommit,
    filter_skip_release_commits,
    get_breaking_changes,
    is_known_type,
    parse_commit,
    parse_commits,
)


class TestParsedCommit:
    """Tests for ParsedCommit.from_commit()."""

    def test_parse_simple_feat(self):
        """Parse a simple feat commit."""
        commit = RawCommit("abc1234def", "feat: add new feature", "Test")
        pc = ParsedCommit.from_commit(commit)

        assert pc.commit_type == "feat"
        assert pc.scope == ""
        assert pc.description == "add new feature"
        assert pc.body == ""
        assert not pc.is_breaking
        assert pc.author == "Test"
        assert pc.is_conventional

    def test_parse_with_scope_and_body(self):
        """Parse commit with scope and body."""
        commit = RawCommit(
            "1234567890abcdef1234567890abcdef12345678",
            "feat(auth): add OAuth 2.0 support\n\nImplemented full OAuth 2.0 flow with refresh tokens",
            "John Doe",
        )
        pc = ParsedCommit.from_commit(commit)

        assert pc.sha == "1234567"
        assert pc.commit_type == "feat"
        assert pc.scope == "auth"
        assert pc.description == "add OAuth 2.0 support"
        assert pc.body == "Implemented full OAuth 2.0 flow with refresh tokens"
        assert pc.full_message == commit.message
        assert not pc.is_breaking

    def test_parse_breaking_with_exclamation(self):
        """Parse breaking change with ! indicator."""
        pc = parse_commit("feat!: redesign user authentication system", sha="fedcba0987")

        assert pc.is_breaking
        assert pc.commit_type == "feat"
        assert pc.scope == ""
        assert pc.description == "redesign user authentication system"

    def test_parse_breaking_with_scope_and_exclamation(self):
        """Parse breaking change with scope and ! indicator."""
        pc = parse_commit("feat(core)!: rework API")

        assert pc.is_breaking
        assert pc.commit_type == "feat"
        assert pc.scope == "core"
        assert pc.description == "rework API"

    def test_parse_breaking_in_body(self):
        """A BREAKING CHANGE marker in the body makes a fix breaking."""
        pc = parse_commit("fix: patch thing\n\nBREAKING CHANGE: removes endpoint")

        assert pc.is_breaking
        assert pc.commit_type == "fix"
        assert pc.body == "BREAKING CHANGE: removes endpoint"

    def test_body_marker_keeps_header_breaking(self):
        """A body marker never downgrades a header-detected breaking flag."""
        pc = parse_commit("fix!: drop legacy mode\n\nBREAKING CHANGE: legacy mode removed")

        assert pc.is_breaking

    def test_parse_nested_scope_and_multiline_body(self):
        """Path-like scopes and multi-line bodies are kept intact."""
        message = (
            "feat(api/v2/auth/oauth): add complex nested scope\n\n"
            "Line 1 of body\nLine 2 of body\n\n"
            "BREAKING CHANGE: This breaks things\nMore breaking info"
        )
        pc = parse_commit(message)

        assert pc.commit_type == "feat"
        assert pc.scope == "api/v2/auth/oauth"
        assert pc.description == "add complex nested scope"
        assert pc.body == (
            "Line 1 of body\nLine 2 of body\n\nBREAKING CHANGE: This breaks things\nMore breaking info"
        )
        assert pc.is_breaking

    def test_parse_unknown_type_passes_through(self):
        """Unknown identifiers are kept verbatim."""
        pc = parse_commit("wip(parser): half done")

        assert pc.commit_type == "wip"
        assert pc.scope == "parser"
        assert not pc.is_conventional

    def test_parse_non_conventional(self):
        """Parse non-conventional commit."""
        pc = parse_commit("Update README with new installation instructions", sha="1111222233334444")

        assert pc.sha == "1111222"
        assert pc.commit_type == "other"
        assert pc.scope == ""
        assert pc.description == "Update README with new installation instructions"
        assert pc.body == ""
        assert not pc.is_breaking

    def test_parse_missing_colon(self):
        """A header without the colon is not conventional."""
        pc = parse_commit("fix(api) missing colon after type")

        assert pc.commit_type == "other"
        assert pc.scope == ""
        assert pc.description == "fix(api) missing colon after type"
        assert not pc.is_breaking

    def test_parse_empty_message(self):
        """An empty message degrades to an empty other commit."""
        pc = parse_commit("", sha="2222333344445555")

        assert pc.commit_type == "other"
        assert pc.description == ""
        assert pc.body == ""
        assert not pc.is_breaking

    def test_non_conventional_with_breaking_body(self):
        """The body marker applies even when the header does not match."""
        pc = parse_commit("Rewrite storage\n\nBREAKING CHANGE: new on-disk format")

        assert pc.commit_type == "other"
        assert pc.is_breaking

    def test_short_sha_passes_through(self):
        """Identifiers shorter than seven characters are not padded."""
        assert parse_commit("fix: x", sha="abc").sha == "abc"


class TestParseCommits:
    """Tests for parse_commits()."""

    def test_parse_multiple_commits(self, sample_commits: list[RawCommit]):
        """Parse multiple commits keeping their order."""
        parsed = parse_commits(sample_commits)

        assert len(parsed) == len(sample_commits)
        assert all(isinstance(pc, ParsedCommit) for pc in parsed)
        assert [pc.commit_type for pc in parsed] == ["feat", "fix", "docs", "chore", "refactor"]

    def test_parse_empty(self):
        """Parsing nothing gives nothing."""
        assert parse_commits([]) == []


class TestKnownTypes:
    """Tests for the commit type vocabulary."""

    def test_vocabulary(self):
        """All conventional types are known."""
        vocabulary = ("feat", "fix", "perf", "docs", "build", "ci", "test", "refactor", "style", "chore")
        for commit_type in vocabulary:
            assert is_known_type(commit_type)

        assert len(KNOWN_TYPES) == 10

    def test_other_is_not_known(self):
        """The fallback type is outside the vocabulary."""
        assert not is_known_type("other")
        assert not is_known_type("Feat")


class TestGetBreakingChanges:
    """Tests for get_breaking_changes()."""

    def test_get_breaking_changes(self, sample_commits: list[RawCommit]):
        """Get only breaking change commits."""
        breaking = get_breaking_changes(parse_commits(sample_commits))

        assert len(breaking) == 1
        assert breaking[0].commit_type == "refactor"


class TestFilterSkipReleaseCommits:
    """Tests for filter_skip_release_commits()."""

    def test_filter_with_skip_release_marker(self):
        """Commits with [skip release] are filtered out."""
        commits = [
            RawCommit("a", "feat: add feature"),
            RawCommit("b", "fix: bug fix [skip release]"),
            RawCommit("c", "docs: update readme"),
        ]
        filtered = filter_skip_release_commits(commits, ["[skip release]"])

        assert [c.sha for c in filtered] == ["a", "c"]

    def test_filter_case_insensitive(self):
        """Skip markers are matched case-insensitively."""
        commits = [
            RawCommit("a", "feat: add feature [SKIP RELEASE]"),
            RawCommit("b", "fix: bug fix [Skip Release]"),
            RawCommit("c", "docs: update readme"),
        ]
        filtered = filter_skip_release_commits(commits, ["[skip release]"])

        assert [c.sha for c in filtered] == ["c"]

    def test_filter_marker_in_body(self):
        """Skip markers in commit body are also detected."""
        commits = [
            RawCommit("a", "feat: add feature\n\nSome details [no release]"),
            RawCommit("b", "fix: bug fix"),
        ]
        filtered = filter_skip_release_commits(commits, DEFAULT_SKIP_RELEASE_PATTERNS)

        assert [c.sha for c in filtered] == ["b"]

    def test_filter_empty_patterns_returns_all(self):
        """Empty patterns list returns all commits."""
        commits = [RawCommit("a", "feat: add feature [skip release]")]

        assert filter_skip_release_commits(commits, []) == commits
