"""Data types for TUI components."""

from __future__ import annotations

from dataclasses import dataclass, replace

from sdgdash.tui.filtering.labels import toggle


@dataclass(frozen=True)
class Project:
    """A catalog entry tagged with policy and SDG labels.

    Immutable so a filter pass can never alter the catalog it reads.

    Attributes:
        id: Unique project identifier
        name: Project name
        description: Free-form project description
        policies: Policy labels, in display order
        sdgs: Sustainable Development Goal labels, in display order
    """

    id: int
    name: str
    description: str
    policies: tuple[str, ...]
    sdgs: tuple[str, ...]


@dataclass(frozen=True)
class QueryState:
    """Snapshot of the user's current search text and label selections.

    Every change produces a new QueryState; the dashboard re-filters the
    full project list from each snapshot.

    Attributes:
        search_text: Raw text from the search input, possibly empty
        selected_policies: Active policy filter (empty means admit all)
        selected_sdgs: Active SDG filter (empty means admit all)
    """

    search_text: str
    selected_policies: frozenset[str]
    selected_sdgs: frozenset[str]

    @staticmethod
    def empty() -> QueryState:
        """Create the initial state with no filters applied."""
        return QueryState(search_text="", selected_policies=frozenset(), selected_sdgs=frozenset())

    def with_search_text(self, text: str) -> QueryState:
        """Return a new state with the given search text."""
        return replace(self, search_text=text)

    def toggle_policy(self, label: str) -> QueryState:
        """Return a new state with the policy label selected or deselected."""
        return replace(self, selected_policies=toggle(self.selected_policies, label))

    def toggle_sdg(self, label: str) -> QueryState:
        """Return a new state with the SDG label selected or deselected."""
        return replace(self, selected_sdgs=toggle(self.selected_sdgs, label))

    def cleared(self) -> QueryState:
        """Return a state with all filters removed."""
        return QueryState.empty()

    @property
    def is_active(self) -> bool:
        """Whether any filter component is set."""
        return bool(self.search_text.strip() or self.selected_policies or self.selected_sdgs)


@dataclass(frozen=True)
class LabelVocabulary:
    """Selectable labels offered by the filter controls.

    Attributes:
        policies: Policy labels, in display order
        sdgs: SDG labels, in display order
    """

    policies: tuple[str, ...]
    sdgs: tuple[str, ...]

    @staticmethod
    def default() -> LabelVocabulary:
        """Create the built-in vocabulary used when no config overrides it."""
        return LabelVocabulary(
            policies=("Water Conservation", "Policy 2", "Policy 3"),
            sdgs=("SDG 1", "SDG 2", "SDG 3"),
        )

    def extended_with(self, policies: tuple[str, ...], sdgs: tuple[str, ...]) -> LabelVocabulary:
        """Return a vocabulary that also lists any labels not already present.

        Known labels keep their position; new labels are appended in the
        order given.
        """
        return LabelVocabulary(
            policies=_append_missing(self.policies, policies),
            sdgs=_append_missing(self.sdgs, sdgs),
        )


def _append_missing(known: tuple[str, ...], extra: tuple[str, ...]) -> tuple[str, ...]:
    result = list(known)
    for label in extra:
        if label not in result:
            result.append(label)
    return tuple(result)
