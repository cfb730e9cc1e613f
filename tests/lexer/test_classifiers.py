"""Tests for the pure line recognizers."""

from __future__ import annotations

import pytest

from pepino.lexer.classifiers import (
    is_background,
    is_examples,
    is_shared_examples,
    match_and,
    match_bullet,
    match_but,
    match_doc_marker,
    match_given,
    match_scenario,
    match_shared_examples_of,
    match_table_row,
    match_tags,
    match_then,
    match_when,
)


class TestHeaderRecognizers:
    """Block and examples headers."""

    def test_scenario_returns_trimmed_line(self) -> None:
        assert match_scenario("  Scenario: Login  ") == "Scenario: Login"

    def test_story_and_case_insensitive(self) -> None:
        assert match_scenario("story: checkout") == "story: checkout"
        assert match_scenario("SCENARIO OUTLINE: x") == "SCENARIO OUTLINE: x"

    def test_scenario_must_be_prefix(self) -> None:
        assert match_scenario("Given a scenario") is None

    @pytest.mark.parametrize("line", ["Background:", "  background", "Background of it"])
    def test_background(self, line: str) -> None:
        assert is_background(line)

    def test_background_must_be_prefix(self) -> None:
        assert not is_background("The Background")

    def test_shared_examples_of_strips_colon(self) -> None:
        assert match_shared_examples_of("Shared Examples Of @login:") == "login"

    def test_shared_examples_of_case_and_spacing(self) -> None:
        assert match_shared_examples_of("  shared   examples of @login") == "login"

    def test_shared_examples_of_ignores_trailing_whitespace(self) -> None:
        assert match_shared_examples_of("Shared Examples Of @login:   ") == "login"

    def test_shared_examples_of_requires_tag(self) -> None:
        assert match_shared_examples_of("Shared Examples") is None
        assert match_shared_examples_of("Shared Examples Of login") is None

    def test_plain_shared_examples(self) -> None:
        assert is_shared_examples("Shared Examples:")
        assert is_shared_examples("  shared examples")

    def test_plain_shared_examples_excludes_tagged_form(self) -> None:
        assert not is_shared_examples("Shared Examples Of @login")

    def test_examples(self) -> None:
        assert is_examples("  Examples:")
        assert is_examples("examples")
        assert not is_examples("Shared Examples")


class TestStepRecognizers:
    """Given/When/Then/And/But keyword lines."""

    def test_given_payload(self) -> None:
        assert match_given("Given a user") == "a user"

    def test_leading_whitespace_case_and_trimming(self) -> None:
        assert match_given("   GIVEN   a user  ") == "a user"

    def test_keyword_needs_whitespace_after_it(self) -> None:
        assert match_given("Givenness") is None
        assert match_when("Whenever it rains") is None
        assert match_given("Given") is None

    def test_keyword_with_empty_text(self) -> None:
        assert match_given("Given ") == ""

    def test_other_keywords(self) -> None:
        assert match_when("When they log in") == "they log in"
        assert match_then("then it works") == "it works"
        assert match_and("And more") == "more"
        assert match_but("but not this") == "not this"

    def test_keywords_do_not_cross_match(self) -> None:
        assert match_then("Given a user") is None
        assert match_and("Then done") is None

    def test_recognizer_names(self) -> None:
        assert match_but.__name__ == "match_but"


class TestItemRecognizers:
    """Table rows, bullets and doc-string markers."""

    def test_table_row_cells(self) -> None:
        assert match_table_row("| id | name |") == ("id", "name")

    def test_table_row_drops_empty_fragments(self) -> None:
        assert match_table_row("|a||b|") == ("a", "b")

    def test_table_row_keeps_blank_cells(self) -> None:
        assert match_table_row("| a |   | b |") == ("a", "", "b")

    def test_table_row_indented_without_closing_pipe(self) -> None:
        assert match_table_row("    | x | y") == ("x", "y")

    def test_not_a_table_row(self) -> None:
        assert match_table_row("id | name") is None

    def test_bullet_text(self) -> None:
        assert match_bullet("  * first item ") == "first item"

    def test_bullet_splits_on_first_star(self) -> None:
        assert match_bullet("* a * b") == "a * b"
        assert match_bullet("*") == ""

    def test_not_a_bullet(self) -> None:
        assert match_bullet("- item") is None

    def test_doc_marker_returns_raw_line(self) -> None:
        assert match_doc_marker('    """  ') == '    """  '

    def test_doc_marker_must_be_exact(self) -> None:
        assert match_doc_marker('"""json') is None
        assert match_doc_marker('""') is None


class TestTagRecognizer:
    """@tag lines."""

    def test_tags_in_order(self) -> None:
        assert match_tags("@smoke @slow") == ("smoke", "slow")

    def test_duplicates_preserved(self) -> None:
        assert match_tags("@a @b @a") == ("a", "b", "a")

    def test_word_boundaries(self) -> None:
        assert match_tags("  @wip, @db-migration") == ("wip", "db")

    def test_must_start_with_at(self) -> None:
        assert match_tags("Scenario: @x") is None
