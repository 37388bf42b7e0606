"""Modal dialogs for the Claimboard TUI.

All modals follow Textual's ModalScreen pattern:
- Inherit from ModalScreen[ReturnType] for typed return values
- Use push_screen() to display with automatic backdrop overlay
- Dismiss with dismiss(value) to return data to caller

Which modal may open is decided by the controller's DialogCoordinator;
the main screen only pushes a modal after the coordinator accepts it.
"""

from .scripts.add_player_modal import AddPlayerModal
from .scripts.confirm_modal import ConfirmModal
from .scripts.delete_player_modal import DeletePlayerModal

__all__ = [
    "AddPlayerModal",
    "ConfirmModal",
    "DeletePlayerModal",
]
