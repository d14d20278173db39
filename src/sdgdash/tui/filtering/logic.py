"""Pure filtering logic for TUI dashboard."""

from sdgdash.tui.data.types import Project, QueryState


def tokenize_search_text(text: str) -> list[str]:
    """Split search text into lowercase, non-empty terms.

    Any run of whitespace separates terms.
    """
    return [term.lower() for term in text.split()]


def matches_search_terms(project: Project, terms: list[str]) -> bool:
    """Check that every term occurs in some searchable field of the project.

    Each term is matched as a case-insensitive substring against:
    - Project name
    - Project description
    - Each policy label
    - Each SDG label

    Different terms may match different fields. No terms always matches.
    """
    if not terms:
        return True

    fields = [project.name.lower(), project.description.lower()]
    fields.extend(policy.lower() for policy in project.policies)
    fields.extend(sdg.lower() for sdg in project.sdgs)

    return all(any(term in field for field in fields) for term in terms)


def matches_selected_labels(labels: tuple[str, ...], selected: frozenset[str]) -> bool:
    """Check a project's labels against a selection.

    An empty selection admits everything; otherwise at least one label
    must be selected.
    """
    if not selected:
        return True
    return any(label in selected for label in labels)


def filter_projects(projects: list[Project], query: QueryState) -> list[Project]:
    """Filter projects by search text and selected policy/SDG labels.

    A project is kept only when the search text, policy selection, and
    SDG selection all match it.

    Args:
        projects: Full project list to filter
        query: Current query state

    Returns:
        Matching projects in their original order.
        Returns a copy of all projects if no filter is active.
    """
    terms = tokenize_search_text(query.search_text)

    result: list[Project] = []
    for project in projects:
        if not matches_selected_labels(project.policies, query.selected_policies):
            continue
        if not matches_selected_labels(project.sdgs, query.selected_sdgs):
            continue
        if not matches_search_terms(project, terms):
            continue
        result.append(project)

    return result


def collect_labels(projects: list[Project]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Collect the policy and SDG labels used by projects.

    Returns:
        Tuple of (policies, sdgs), each in first-seen order without duplicates
    """
    policies: dict[str, None] = {}
    sdgs: dict[str, None] = {}
    for project in projects:
        for policy in project.policies:
            policies.setdefault(policy, None)
        for sdg in project.sdgs:
            sdgs.setdefault(sdg, None)
    return tuple(policies), tuple(sdgs)
