"""Departure/return date picker window (tkinter).

The window only renders: every tap goes through ``selection.select_date``
and every cell colour comes from ``selection.role_of``.
"""

from datetime import date, datetime, time
from tkinter import font as tkfont
from typing import Callable
import tkinter as tk

from loguru import logger

from calendar_logic import DAY_ABBR, Day, add_months, build_month, grid_rows, months_from
from endpoint_times import NotAnEndpoint, attach_time, combine, prune_times
from formatting import format_display, format_time, month_label, selection_summary
from selection import EMPTY, DayRole, SelectionState, materialize, role_of, select_date, trip_endpoints
from settings import load_settings, save_settings

# Colours
ACCENT = "#DA4501"
RANGE_BG = "#FDE3D3"
GRID_BG = "white"
BOX_BG = "#F2F2F7"
TEXT_FG = "#1C2B4A"
PAST_FG = "#BBBBBB"

VISIBLE_MONTHS = 3

ApplyCallback = Callable[[date | None, date | None, dict[date, time]], None]


class _MonthPanel:
    """Pre-allocated labels for one month: a title plus 6 rows of 7 days."""

    __slots__ = ("frame", "title", "cells")

    def __init__(self, parent: tk.Frame, fonts: dict, on_click) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.title = tk.Label(self.frame, font=fonts["title"], bg=GRID_BG, fg=TEXT_FG)
        self.title.grid(row=0, column=0, columnspan=7, sticky="e", pady=(0, 6))

        for col, abbr in enumerate(DAY_ABBR):
            tk.Label(
                self.frame, text=abbr, font=fonts["caption"], bg=GRID_BG,
                fg=TEXT_FG, width=4,
            ).grid(row=1, column=col)

        self.cells: list[list[tk.Label]] = []
        for r in range(6):
            row: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(
                    self.frame, font=fonts["day"], bg=GRID_BG, width=4, height=2,
                )
                cell.grid(row=r + 2, column=c, padx=1, pady=1)
                cell.bind("<Button-1>", on_click)
                row.append(cell)
            self.cells.append(row)


class DatePickerWindow:
    """Paged month grids with tap-to-select departure and return dates."""

    def __init__(self, today_fn: Callable[[], date] = date.today,
                 on_apply: ApplyCallback | None = None,
                 settings_path: str | None = None) -> None:
        self._today_fn = today_fn
        self._on_apply = on_apply
        self._settings_path = settings_path

        settings = load_settings(settings_path)
        self.showing_months: int = settings["showing_months"]
        self._filter_single: bool = settings["uniform_past_filter"]
        self._with_times: bool = settings["endpoint_times"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        # The one mutable slot for the selection; replaced on every tap
        self.selection: SelectionState = EMPTY
        self.times: dict[date, time] = {}
        self._offset = 0

        self.root = tk.Tk()
        self.root.title("Select Date")
        self.root.configure(bg=GRID_BG)
        self.root.resizable(False, False)

        family = "Segoe UI" if "Segoe UI" in tkfont.families(self.root) else "TkDefaultFont"
        self._fonts = {
            "title": tkfont.Font(family=family, size=13, weight="bold"),
            "caption": tkfont.Font(family=family, size=8),
            "day": tkfont.Font(family=family, size=9),
            "day_bold": tkfont.Font(family=family, size=9, weight="bold"),
            "nav": tkfont.Font(family=family, size=12, weight="bold"),
            "box": tkfont.Font(family=family, size=10, weight="bold"),
        }

        self._widget_dates: dict[int, date] = {}
        self._panels: list[_MonthPanel] = []
        self._build_shell()
        self.refresh()

        self.root.bind("<Escape>", lambda _e: self.clear_selection())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=10, pady=8)

        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 8))
        self._btn_prev = tk.Label(nav, text="◀", font=self._fonts["nav"],
                                  bg=GRID_BG, fg=ACCENT, cursor="hand2")
        self._btn_prev.pack(side="left", padx=6)
        self._btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))
        tk.Label(nav, text="Select Date", font=self._fonts["title"],
                 bg=GRID_BG, fg=TEXT_FG).pack(side="left", padx=6)
        self._btn_next = tk.Label(nav, text="▶", font=self._fonts["nav"],
                                  bg=GRID_BG, fg=ACCENT, cursor="hand2")
        self._btn_next.pack(side="right", padx=6)
        self._btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        months = tk.Frame(outer, bg=GRID_BG)
        months.pack()
        for i in range(min(VISIBLE_MONTHS, self.showing_months)):
            panel = _MonthPanel(months, self._fonts, self._on_click)
            panel.frame.grid(row=0, column=i, padx=8, sticky="n")
            self._panels.append(panel)

        boxes = tk.Frame(outer, bg=GRID_BG)
        boxes.pack(fill="x", pady=(10, 0))
        self._departure_lbl, self._departure_time = self._date_box(boxes, "Departure")
        self._return_lbl, self._return_time = self._date_box(boxes, "Return")

        self._summary = tk.Label(outer, font=self._fonts["caption"], bg=GRID_BG, fg="#555555")
        self._summary.pack(pady=(6, 0))

        tk.Button(outer, text="Apply", font=self._fonts["box"], bg=ACCENT, fg="white",
                  relief="flat", command=self.apply).pack(fill="x", pady=(8, 0))

    def _date_box(self, parent: tk.Frame, caption: str) -> tuple[tk.Label, tk.Entry | None]:
        box = tk.Frame(parent, bg=BOX_BG, padx=10, pady=6)
        box.pack(side="left", expand=True, fill="x", padx=4)
        tk.Label(box, text=caption, font=self._fonts["caption"], bg=BOX_BG, fg="gray").pack(anchor="w")
        value = tk.Label(box, font=self._fonts["box"], bg=BOX_BG, fg=TEXT_FG)
        value.pack(anchor="w")
        entry = None
        if self._with_times:
            entry = tk.Entry(box, width=6, font=self._fonts["day"])
            entry.pack(anchor="w", pady=(4, 0))
        return value, entry

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _materialized(self, today: date) -> list[date]:
        return materialize(self.selection, today, filter_single=self._filter_single)

    def refresh(self) -> None:
        """Redraw every visible cell from the current selection."""
        today = self._today_fn()
        selected = self._materialized(today)
        self._widget_dates.clear()

        first = add_months(today, self._offset)
        for panel, month in zip(self._panels, months_from(first, len(self._panels))):
            grid = build_month(month)
            panel.title.configure(text=month_label(grid))
            rows = grid_rows(grid)
            for r, row_cells in enumerate(panel.cells):
                for c, cell in enumerate(row_cells):
                    item = rows[r][c] if r < len(rows) else None
                    if isinstance(item, Day):
                        self._paint(cell, item.date, role_of(item.date, selected, today))
                    else:
                        cell.configure(text="", bg=GRID_BG, cursor="")

        self._btn_prev.configure(fg=ACCENT if self._offset > 0 else PAST_FG)
        last_page = self._offset + len(self._panels) >= self.showing_months
        self._btn_next.configure(fg=PAST_FG if last_page else ACCENT)

        departure, ret = trip_endpoints(selected)
        self._departure_lbl.configure(text=format_display(departure))
        self._return_lbl.configure(text=format_display(ret))
        self._summary.configure(text=selection_summary(selected, today))

    def _paint(self, cell: tk.Label, d: date, role: DayRole) -> None:
        bg, fg, font = GRID_BG, TEXT_FG, self._fonts["day"]
        if role is DayRole.PAST:
            fg = PAST_FG
        elif role is DayRole.ENDPOINT:
            bg, fg, font = ACCENT, "white", self._fonts["day_bold"]
        elif role is DayRole.IN_RANGE:
            bg = RANGE_BG
        cell.configure(text=str(d.day), bg=bg, fg=fg, font=font,
                       cursor="" if role is DayRole.PAST else "hand2")
        # Past days are not tappable
        if role is not DayRole.PAST:
            self._widget_dates[id(cell)] = d

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def _on_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is not None:
            self.tap(d)

    def tap(self, d: date) -> None:
        today = self._today_fn()
        new = select_date(self.selection, d, today)
        if new is self.selection:
            return
        self.selection = new
        selected = self._materialized(today)
        self.times = prune_times(self.times, selected)
        self._fill_time_entries(selected)
        self.refresh()

    def clear_selection(self) -> None:
        self.selection = EMPTY
        self.times = {}
        self._fill_time_entries([])
        self.refresh()

    def _time_entries(self, selected: list[date]) -> list[tuple[date | None, tk.Entry | None]]:
        departure, ret = trip_endpoints(selected)
        return [(departure, self._departure_time), (ret, self._return_time)]

    def _fill_time_entries(self, selected: list[date]) -> None:
        """Show the stored time of each current endpoint, blank otherwise."""
        for d, entry in self._time_entries(selected):
            if entry is None:
                continue
            entry.delete(0, "end")
            if d is not None and d in self.times:
                entry.insert(0, format_time(self.times[d]))

    def apply(self) -> None:
        today = self._today_fn()
        selected = self._materialized(today)
        departure, ret = trip_endpoints(selected)
        try:
            self.times = self._read_times(selected)
        except ValueError as exc:
            self._summary.configure(text=str(exc))
            return

        logger.info("Applied dates: departure={} return={}",
                    combine(departure, self.times) or departure,
                    combine(ret, self.times) or ret)
        if self._on_apply is not None:
            self._on_apply(departure, ret, dict(self.times))
        self.hide()

    def _read_times(self, selected: list[date]) -> dict[date, time]:
        """Build the endpoint times from the entries; an empty entry means no time."""
        times: dict[date, time] = {}
        for d, entry in self._time_entries(selected):
            if entry is None or d is None:
                continue
            text = entry.get().strip()
            if not text:
                continue
            try:
                at = datetime.strptime(text, "%H:%M").time()
            except ValueError:
                raise ValueError(f"Invalid time {text!r}, use HH:MM") from None
            try:
                times = attach_time(times, d, at, selected)
            except NotAnEndpoint as exc:
                raise ValueError(str(exc)) from exc
        return times

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        offset = self._offset + direction * len(self._panels)
        offset = max(0, min(offset, self.showing_months - len(self._panels)))
        if offset != self._offset:
            self._offset = offset
            self.refresh()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._offset = 0
        self.refresh()
        self.root.deiconify()
        if self._saved_width is not None and self._saved_height is not None:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._persist_size()
        self.root.withdraw()

    def _persist_size(self) -> None:
        if not self.root.winfo_viewable():
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()
        settings = load_settings(self._settings_path)
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings, self._settings_path)
