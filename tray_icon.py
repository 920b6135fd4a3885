"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import Menu, MenuItem


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_clear: Callable[[], None] | None = None,
    title: str = "Trip Date Picker",
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Pick Dates", lambda _icon, _item: on_show(), default=True),
    ]
    if on_clear is not None:
        items.append(MenuItem("Clear Selection", lambda _icon, _item: on_clear()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return pystray.Icon("trip-date-picker", icon_image, title, Menu(*items))
