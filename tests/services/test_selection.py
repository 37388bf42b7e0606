"""Tests for the Selection invariant."""

from claimboard.services.leaderboard import Player, Selection

ANN = Player(id="a", name="Ann", points=50, rank=1)
BO = Player(id="b", name="Bo", points=30, rank=2)
CY = Player(id="c", name="Cy", points=10, rank=3)


class TestReconcile:
    def test_snaps_to_first_when_absent(self) -> None:
        selection = Selection()
        selection.reconcile((ANN, BO))
        assert selection.player_id == "a"

    def test_keeps_selection_still_in_list(self) -> None:
        selection = Selection()
        selection.reconcile((ANN, BO))
        selection.select("b")

        selection.reconcile((BO, ANN))

        assert selection.player_id == "b"

    def test_snaps_to_first_when_selected_player_removed(self) -> None:
        selection = Selection()
        selection.reconcile((ANN, BO))
        selection.select("b")

        selection.reconcile((CY, ANN))

        assert selection.player_id == "c"

    def test_empty_list_clears_selection(self) -> None:
        selection = Selection()
        selection.reconcile((ANN,))
        selection.reconcile(())
        assert selection.player_id is None
        assert selection.player is None


class TestSelect:
    def test_select_known_player(self) -> None:
        selection = Selection()
        selection.reconcile((ANN, BO))

        assert selection.select("b") is True
        assert selection.player == BO

    def test_unknown_id_leaves_selection_unchanged(self) -> None:
        selection = Selection()
        selection.reconcile((ANN, BO))

        assert selection.select("zzz") is False
        assert selection.player_id == "a"

    def test_stale_id_from_previous_list_is_ignored(self) -> None:
        selection = Selection()
        selection.reconcile((ANN, BO))
        selection.reconcile((CY,))

        assert selection.select("a") is False
        assert selection.player_id == "c"

    def test_select_on_empty_list_is_noop(self) -> None:
        selection = Selection()
        assert selection.select("a") is False
        assert selection.player_id is None
