"""Claimboard - Textual client for a remote leaderboard service.

This is the main application entry point. It:
- Loads client settings from the environment and an optional .env file
- Builds the HTTP client and the controller that owns all client state
- Pushes the main screen and tears everything down on exit
"""

import argparse
import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from claimboard import __version__
from claimboard.screens.main import MainScreen
from claimboard.services.config import ClientSettings, SettingsError, load_settings
from claimboard.services.leaderboard import LeaderboardClient, LeaderboardController

_log = logging.getLogger(__name__)


class ClaimboardApp(App):
    """Main application - a single dashboard screen plus modal dialogs.

    Key patterns:
    - CSS_PATH: Load styles from a .tcss file
    - on_mount: Push the initial screen once the app is ready
    - on_unmount: Drop in-flight results and close the HTTP client
    """

    CSS_PATH = "main.tcss"
    TITLE = f"Claimboard v{__version__}"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("f1", "toggle_help", "Help"),
    ]

    def __init__(
        self,
        settings: ClientSettings | None = None,
        client: LeaderboardClient | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or ClientSettings()
        self.client = client or LeaderboardClient(
            self.settings.api_url, timeout=self.settings.timeout
        )
        self.controller = LeaderboardController(
            self.client,
            notification_seconds=self.settings.notification_seconds,
            batch_size=self.settings.batch_size,
            set_timer=self.set_timer,
        )

    def on_mount(self) -> None:
        """Push the main screen when the app mounts."""
        _log.info("Connecting to %s", self.settings.api_url)
        self.push_screen(MainScreen(self.controller))

    async def on_unmount(self) -> None:
        """Discard outstanding results and release the HTTP client."""
        self.controller.close()
        await self.client.aclose()

    def action_toggle_help(self) -> None:
        """Show keyboard shortcuts."""
        self.notify(
            "c: Claim points for the selected player\n"
            "a: Add a player\n"
            "d: Delete a player\n"
            "m: Actions menu (generate, reset, delete all)\n"
            "r: Refresh rankings\n"
            "Escape: Close dialog\n"
            "q: Quit",
            title="Keyboard Shortcuts",
        )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="claimboard", description="Terminal client for a leaderboard service."
    )
    parser.add_argument("--api-url", help="Base URL of the leaderboard API")
    parser.add_argument(
        "--env-file", type=Path, help="Path to a .env file (default: ./.env)"
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Route stdlib logging to the Textual devtools console."""
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the application."""
    args = _parse_args(argv)
    try:
        settings = load_settings(args.env_file).with_overrides(api_url=args.api_url)
    except SettingsError as exc:
        raise SystemExit(f"claimboard: {exc}") from exc

    configure_logging(settings.log_level)
    app = ClaimboardApp(settings)
    app.run()


if __name__ == "__main__":
    main()
