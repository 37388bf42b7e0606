"""Main screen - the leaderboard dashboard.

Layout:
+---------------------------------------------+
|            Leaderboard Challenge            |
|  [ Select a player ...        v] [Claim]    |
+---------------------------------------------+
|      +------+  +------+  +------+           |
|      |  2   |  |  1   |  |  3   |           |
|      +------+  +------+  +------+           |
|  Full Rankings                              |
|  Rank | Name            | Points            |
|  ...                                        |
+---------------------------------------------+
|  You claimed 7 points for Ann!              |
+---------------------------------------------+

All state lives in the LeaderboardController; this screen renders it and
forwards operator input. Network calls run in async workers so the UI
stays responsive.
"""

from typing import ClassVar

from rich.markup import escape
from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    LoadingIndicator,
    Select,
    Static,
)

from claimboard.modals import AddPlayerModal, ConfirmModal, DeletePlayerModal
from claimboard.services.leaderboard import (
    ConfirmDeleteAllPlayers,
    ConfirmDeletePlayer,
    ConfirmResetScores,
    Dialog,
    LeaderboardController,
    Player,
)
from claimboard.widgets import ActionsMenu, Flash, Podium

EMPTY_RANKINGS_MESSAGE = "No players found. Add one with 'a' or generate some from the actions menu."


def confirm_text(dialog: Dialog) -> tuple[str, str, str]:
    """Title, body and confirm label for a confirmation dialog."""
    match dialog:
        case ConfirmResetScores():
            return (
                "Reset All Scores",
                "This will reset all scores to 0. This action cannot be undone.",
                "Confirm Reset",
            )
        case ConfirmDeleteAllPlayers():
            return (
                "Delete All Players",
                "This will permanently delete all players and scores. Are you sure?",
                "Confirm Delete All",
            )
        case ConfirmDeletePlayer(player=player):
            return (
                "Confirm Deletion",
                f"Are you sure you want to delete [bold]{escape(player.name)}[/bold]? "
                "This cannot be undone.",
                "Delete",
            )
    raise ValueError(f"Not a confirmation dialog: {dialog!r}")


class MainScreen(Screen):
    """Leaderboard dashboard: claim row, podium, rankings and status line."""

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("c", "claim", "Claim"),
        Binding("a", "add_player", "Add"),
        Binding("d", "delete_player", "Delete"),
        Binding("m", "toggle_actions_menu", "Actions"),
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, controller: LeaderboardController) -> None:
        super().__init__()
        self._controller = controller
        self._select_options: list[tuple[str, str]] = []
        self._table_rows: tuple[Player, ...] | None = None

    def compose(self) -> ComposeResult:
        yield Static("Leaderboard Challenge", id="title")
        with Horizontal(id="claim-row"):
            yield Select(
                [],
                prompt="-- Select a player to claim points --",
                id="player-select",
            )
            yield Button("Claim Points", id="claim-btn", variant="primary")
        yield ActionsMenu(self._controller.batch_size, id="actions-menu")
        yield Static("", id="error-banner")
        yield LoadingIndicator(id="loading")
        yield Podium(id="podium")
        yield Static("Full Rankings", id="rankings-heading")
        yield DataTable(id="rankings", cursor_type="row", zebra_stripes=True)
        yield Static(EMPTY_RANKINGS_MESSAGE, id="empty-rankings")
        yield Flash("", id="flash")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#rankings", DataTable)
        table.add_column("Rank", key="rank", width=6)
        table.add_column("Name", key="name", width=30)
        table.add_column("Points", key="points", width=10)

        self._controller.subscribe(self._render_state)
        self._render_state()
        self._refresh()

    # ── rendering ────────────────────────────────────────────────────

    def _render_state(self) -> None:
        """Mirror the controller's state into the widgets."""
        if not self.is_mounted:
            return
        controller = self._controller
        store = controller.store
        players = controller.players
        settled = not store.loading and store.error is None

        self._render_select(players, controller.selection.player_id)
        self.query_one("#claim-btn", Button).disabled = (
            controller.selection.player_id is None
        )

        banner = self.query_one("#error-banner", Static)
        banner.display = store.error is not None
        banner.update(escape(store.error or ""))

        self.query_one("#loading", LoadingIndicator).display = store.loading

        podium = self.query_one("#podium", Podium)
        podium.display = settled and bool(players)
        podium.update_players(players)

        self.query_one("#rankings-heading").display = settled and bool(players)
        table = self.query_one("#rankings", DataTable)
        table.display = settled and bool(players)
        self._render_table(table, players)
        self.query_one("#empty-rankings").display = settled and not players

        menu = self.query_one("#actions-menu", ActionsMenu)
        menu.display = controller.dialogs.actions_menu_open
        menu.set_state(
            can_generate=controller.can_generate, has_players=bool(players)
        )

        self.query_one("#flash", Flash).show_message(controller.notifier.message)

    def _render_select(
        self, players: tuple[Player, ...], selected_id: str | None
    ) -> None:
        select = self.query_one("#player-select", Select)
        options = [(p.name, p.id) for p in players]
        if options != self._select_options:
            self._select_options = options
            select.set_options(options)
        select.disabled = not players
        if selected_id is None:
            if not select.is_blank():
                select.clear()
        elif select.value != selected_id:
            select.value = selected_id

    def _render_table(self, table: DataTable, players: tuple[Player, ...]) -> None:
        if players == self._table_rows:
            return
        self._table_rows = players
        table.clear()
        for player in players:
            table.add_row(
                str(player.rank), escape(player.name), str(player.points), key=player.id
            )

    # ── workers ──────────────────────────────────────────────────────

    @work(group="refresh")
    async def _refresh(self) -> None:
        await self._controller.refresh()

    @work(exclusive=True, group="claim")
    async def _claim(self) -> None:
        await self._controller.claim_points()

    @work(exclusive=True, group="generate")
    async def _generate(self) -> None:
        await self._controller.generate_players()

    @work(exclusive=True, group="confirm")
    async def _confirm(self) -> None:
        await self._controller.confirm_dialog()

    # ── input ────────────────────────────────────────────────────────

    @on(Select.Changed, "#player-select")
    def _on_player_selected(self, event: Select.Changed) -> None:
        # Player ids are strings; anything else is the blank prompt.
        if isinstance(event.value, str):
            self._controller.select_player(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "claim-btn":
                self.action_claim()
            case "generate-btn":
                self._controller.dialogs.close_actions_menu()
                if self._controller.can_generate:
                    self._generate()
            case "reset-btn":
                self._open_confirmation(self._controller.open_reset_scores())
            case "delete-all-btn":
                self._open_confirmation(self._controller.open_delete_all())

    @on(ActionsMenu.CloseRequested)
    def _on_actions_menu_close(self) -> None:
        self._controller.dialogs.close_actions_menu()

    def _open_confirmation(self, opened: bool) -> None:
        if not opened:
            return
        title, body, label = confirm_text(self._controller.dialogs.current)
        self.app.push_screen(
            ConfirmModal(title, body, label), callback=self._on_confirmation_closed
        )

    def _on_confirmation_closed(self, confirmed: bool | None) -> None:
        if confirmed:
            self._confirm()
        else:
            self._controller.cancel_dialog()

    def _on_delete_target_chosen(self, player: Player | None) -> None:
        if player is None:
            self._controller.cancel_dialog()
            return
        self._open_confirmation(self._controller.choose_player_to_delete(player))

    def action_claim(self) -> None:
        self._claim()

    def action_add_player(self) -> None:
        if self._controller.open_add_player():
            self.app.push_screen(AddPlayerModal(self._controller))

    def action_delete_player(self) -> None:
        if self._controller.open_delete_player():
            self.app.push_screen(
                DeletePlayerModal(self._controller.players),
                callback=self._on_delete_target_chosen,
            )

    def action_toggle_actions_menu(self) -> None:
        if self._controller.toggle_actions_menu():
            self.query_one("#actions-menu", ActionsMenu).focus()

    def action_refresh(self) -> None:
        self._refresh()

    def action_quit(self) -> None:
        self.app.exit()
