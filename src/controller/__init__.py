"""Controller layer: screen state machines and the navigation coordinator.

This package contains:
- base / category: the shared browse/edit/choose state machine
- one controller per screen (menu, sections, icons, mascot, display, notifications)
- navigation: NavigationCoordinator, which routes keys and owns the dirty flag
"""

from controller.base import KeyResult, ScreenController
from controller.category import Category, CategoryLayout
from controller.edit_session import ChoicePicker, EditSession
from controller.menu import MenuController
from controller.sections import SectionsController
from controller.icons import IconsController
from controller.mascot import MascotController
from controller.display import DisplayController
from controller.notifications import NotificationsController
from controller.navigation import NavigationCoordinator, Screen

__all__ = [
    "KeyResult",
    "ScreenController",
    "Category",
    "CategoryLayout",
    "ChoicePicker",
    "EditSession",
    "MenuController",
    "SectionsController",
    "IconsController",
    "MascotController",
    "DisplayController",
    "NotificationsController",
    "NavigationCoordinator",
    "Screen",
]
