"""Tests for QueryState and LabelVocabulary."""

from sdgdash.tui.data.types import LabelVocabulary, QueryState


def test_empty_query_is_inactive() -> None:
    query = QueryState.empty()
    assert query.search_text == ""
    assert query.selected_policies == frozenset()
    assert query.selected_sdgs == frozenset()
    assert not query.is_active


def test_with_search_text_returns_new_state() -> None:
    """Updating search text leaves the original snapshot untouched."""
    original = QueryState.empty()
    updated = original.with_search_text("river")
    assert updated.search_text == "river"
    assert original.search_text == ""
    assert updated.is_active


def test_whitespace_search_is_inactive() -> None:
    assert not QueryState.empty().with_search_text("   ").is_active


def test_toggle_policy_and_sdg_are_independent() -> None:
    query = QueryState.empty().toggle_policy("Policy 2").toggle_sdg("SDG 3")
    assert query.selected_policies == frozenset({"Policy 2"})
    assert query.selected_sdgs == frozenset({"SDG 3"})


def test_toggle_policy_twice_restores_state() -> None:
    query = QueryState.empty().toggle_sdg("SDG 1")
    assert query.toggle_policy("Policy 3").toggle_policy("Policy 3") == query


def test_cleared_removes_everything() -> None:
    query = (
        QueryState.empty().with_search_text("grid").toggle_policy("Policy 2").toggle_sdg("SDG 2")
    )
    assert query.cleared() == QueryState.empty()


def test_default_vocabulary() -> None:
    vocabulary = LabelVocabulary.default()
    assert vocabulary.policies == ("Water Conservation", "Policy 2", "Policy 3")
    assert vocabulary.sdgs == ("SDG 1", "SDG 2", "SDG 3")


def test_extended_with_appends_only_new_labels() -> None:
    """Known labels keep their position; unknown ones are appended."""
    vocabulary = LabelVocabulary.default().extended_with(
        ("Policy 2", "Clean Energy"), ("SDG 7", "SDG 1")
    )
    assert vocabulary.policies == ("Water Conservation", "Policy 2", "Policy 3", "Clean Energy")
    assert vocabulary.sdgs == ("SDG 1", "SDG 2", "SDG 3", "SDG 7")


def test_extended_with_known_labels_is_equal() -> None:
    vocabulary = LabelVocabulary.default()
    assert vocabulary.extended_with(("Policy 3",), ("SDG 2",)) == vocabulary
