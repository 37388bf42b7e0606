"""Flash widget - the operator's status line.

The message and its expiry are owned by the controller's Notifier; this
widget only mirrors whatever message is current.

Key concepts:
- CSS classes for variants (success, error)
- Visibility driven by the presence of a message
"""

from rich.markup import escape
from textual.widgets import Static

ERROR_PREFIXES = ("Error", "Network Error", "Failed", "Please")


def message_variant(message: str) -> str:
    """Pick the style variant for a notification message."""
    return "error" if message.startswith(ERROR_PREFIXES) else "success"


class Flash(Static):
    """Notification line that is visible while there is a message.

    Usage:
        flash.show_message("Operation complete!")
        flash.show_message("")  # hide
    """

    DEFAULT_CSS = """
    Flash {
        height: 1;
        background: $primary 10%;
        dock: bottom;
        padding: 0 1;
        opacity: 0;
        offset-y: 1;
        transition: opacity 300ms out_cubic, offset-y 300ms out_cubic;
    }

    Flash.-visible {
        opacity: 1;
        offset-y: 0;
    }

    Flash.-success {
        background: $success 20%;
    }

    Flash.-error {
        background: $error 20%;
    }
    """

    def show_message(self, message: str) -> None:
        """Display ``message``, or hide the line when it is empty."""
        self.remove_class("-success", "-error")
        if not message:
            self.remove_class("-visible")
            return
        self.update(escape(message))
        self.add_class(f"-{message_variant(message)}")
        self.add_class("-visible")
