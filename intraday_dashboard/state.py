from dataclasses import dataclass, field, replace

from intraday_dashboard.transform import to_chart_points


@dataclass(frozen=True)
class DisplayState:
    """What the page shows. Rows and chart points only ever change together."""

    rows: tuple = field(default_factory=tuple)
    chart_points: tuple = field(default_factory=tuple)
    show_chart: bool = True
    scrollable: bool = True
    striped: bool = True
    dark_mode: bool = False

    def with_rows(self, rows) -> "DisplayState":
        rows = tuple(rows)
        return replace(self, rows=rows, chart_points=tuple(to_chart_points(list(rows))))

    def toggle_chart(self) -> "DisplayState":
        return replace(self, show_chart=not self.show_chart)

    def toggle_scrollable(self) -> "DisplayState":
        return replace(self, scrollable=not self.scrollable)

    def toggle_striped(self) -> "DisplayState":
        return replace(self, striped=not self.striped)

    def toggle_dark_mode(self) -> "DisplayState":
        return replace(self, dark_mode=not self.dark_mode)

    @property
    def view(self) -> str:
        if self.show_chart:
            return "chart"
        return "table" if self.rows else "loading"


TOGGLES = {
    "chart": DisplayState.toggle_chart,
    "scrollable": DisplayState.toggle_scrollable,
    "striped": DisplayState.toggle_striped,
    "dark_mode": DisplayState.toggle_dark_mode,
}
