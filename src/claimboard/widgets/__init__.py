"""Widgets package - custom widgets for claimboard.

Leaderboard widgets:
- podium.py: Top three players in 2nd, 1st, 3rd order
- podium_step.py: One podium place

Utility widgets:
- flash.py: Notification line mirroring the controller's Notifier
- actions_menu.py: Popup with bulk administrative actions
"""

from claimboard.widgets.podium import Podium
from claimboard.widgets.podium_step import PodiumStep
from claimboard.widgets.flash import Flash
from claimboard.widgets.actions_menu import ActionsMenu

__all__ = [
    "Podium",
    "PodiumStep",
    "Flash",
    "ActionsMenu",
]
