"""ConfirmModal - yes/no gate in front of a destructive action."""

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmModal(ModalScreen[bool]):
    """Returns True on confirm, False on cancel or escape."""

    CSS_PATH = "../../styles/modal_base.tcss"

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
        background: black 50%;
    }
    """

    AUTO_FOCUS = "#cancel-btn"

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, title: str, body: str, confirm_label: str) -> None:
        super().__init__()
        self._title = title
        self._body = body
        self._confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="container"):
            yield Static(self._title, classes="modal-title")
            yield Static(self._body, id="confirm-body")
            with Horizontal(classes="button-row"):
                yield Button("Cancel", id="cancel-btn", variant="default")
                yield Button(self._confirm_label, id="confirm-btn", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm-btn")

    def action_cancel(self) -> None:
        self.dismiss(False)
