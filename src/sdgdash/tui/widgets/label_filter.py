"""Checkbox panel for selecting policy or SDG labels."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Checkbox, Label

from sdgdash.tui.filtering.types import LabelKind


class LabelCheckbox(Checkbox):
    """Checkbox that remembers which label it controls."""

    def __init__(self, filter_label: str) -> None:
        super().__init__(Text(filter_label), value=False)
        self.filter_label = filter_label


class LabelFilterPanel(Vertical):
    """Titled column of checkboxes, one per selectable label.

    Emits LabelToggled whenever a checkbox changes, whether by the user
    or by set_selected().
    """

    DEFAULT_CSS = """
    LabelFilterPanel {
        width: 1fr;
        height: auto;
        padding: 0 1;
    }

    LabelFilterPanel > .label-filter-title {
        text-style: bold;
        color: $primary;
    }
    """

    class LabelToggled(Message):
        """Posted when a label's checkbox changes."""

        def __init__(self, kind: LabelKind, label: str, selected: bool) -> None:
            super().__init__()
            self.kind = kind
            self.label = label
            self.selected = selected

    def __init__(self, *, kind: LabelKind, title: str, labels: tuple[str, ...]) -> None:
        """Initialize the panel.

        Args:
            kind: Which label category this panel controls
            title: Heading shown above the checkboxes
            labels: Labels to offer, in display order
        """
        super().__init__(id=f"{kind.value}-filter")
        self.kind = kind
        self._title = title
        self._labels = labels

    def compose(self) -> ComposeResult:
        yield Label(self._title, classes="label-filter-title")
        for label in self._labels:
            yield LabelCheckbox(label)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Translate checkbox changes into LabelToggled messages."""
        event.stop()
        checkbox = event.checkbox
        if isinstance(checkbox, LabelCheckbox):
            self.post_message(self.LabelToggled(self.kind, checkbox.filter_label, event.value))

    def set_selected(self, selected: frozenset[str]) -> None:
        """Check exactly the given labels."""
        for checkbox in self.query(LabelCheckbox):
            checkbox.value = checkbox.filter_label in selected

    def add_labels(self, labels: tuple[str, ...]) -> None:
        """Mount checkboxes for any labels the panel does not offer yet."""
        missing = [label for label in labels if label not in self._labels]
        if not missing:
            return
        self._labels = self._labels + tuple(missing)
        self.mount_all(LabelCheckbox(label) for label in missing)

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels offered, in display order."""
        return self._labels

    def checkbox_for(self, label: str) -> LabelCheckbox | None:
        """Find the checkbox controlling a label."""
        for checkbox in self.query(LabelCheckbox):
            if checkbox.filter_label == label:
                return checkbox
        return None
