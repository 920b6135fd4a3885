"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import sys
import threading

from loguru import logger

from date_picker_window import DatePickerWindow
from icon_gen import create_icon_image
from tray_icon import create_tray


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level="INFO")

    if sys.platform == "win32":
        # Crisp fonts on Hi-DPI monitors
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError) as exc:
            logger.debug("DPI awareness unavailable: {}", exc)

    picker = DatePickerWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        picker.root.after(0, picker.toggle)

    def on_clear() -> None:
        picker.root.after(0, picker.clear_selection)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            picker.root.destroy()
        picker.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit, on_clear=on_clear)

    # Run pystray in a daemon thread so it doesn't block tkinter
    threading.Thread(target=tray.run, daemon=True).start()

    picker.root.mainloop()


if __name__ == "__main__":
    main()
