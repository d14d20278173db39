"""Label selection helpers shared by policy and SDG filters."""


def toggle(labels: frozenset[str], item: str) -> frozenset[str]:
    """Remove item if selected, otherwise add it.

    Args:
        labels: Currently selected labels
        item: Label the user toggled

    Returns:
        New selection set. Toggling the same item twice restores the input.
    """
    if item in labels:
        return labels - {item}
    return labels | {item}
