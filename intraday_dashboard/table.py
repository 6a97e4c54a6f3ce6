"""
HTML table rendering driven by column descriptors.

A column names a label and a row attribute; optional `render(value, row)`
and `header_render()` hooks replace the default escaped text. The output is
meant for `st.markdown(..., unsafe_allow_html=True)` together with
`table_css(dark_mode)`.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Callable, Optional

Renderer = Callable[[object, object], str]


@dataclass(frozen=True)
class Column:
    label: str
    key: str
    render: Optional[Renderer] = None
    header_render: Optional[Callable[[], str]] = None
    th_attributes: dict = field(default_factory=dict)
    td_attributes: dict = field(default_factory=dict)


DEFAULT_COLUMNS = [
    Column("Timestamp", "timestamp"),
    Column("Open", "open"),
    Column("High", "high"),
    Column("Low", "low"),
    Column("Close", "close"),
    Column("Volume", "volume"),
]


def _class_name(*parts) -> str:
    return " ".join(p for p in parts if p).strip()


def _attrs(attributes: Optional[dict], class_name: str, style: str = "") -> str:
    """Serialize attributes; a caller supplied `class` is appended to ours."""
    attributes = dict(attributes or {})
    class_name = _class_name(class_name, attributes.pop("class", ""))
    if style:
        attributes["style"] = _class_name(style, attributes.get("style", ""))
    if class_name:
        attributes = {"class": class_name, **attributes}
    return "".join(f' {escape(str(k))}="{escape(str(v))}"' for k, v in attributes.items())


def _header_cell(col: Column, scrollable: bool) -> str:
    css = _class_name("idt-th", "idt-sticky" if scrollable else "")
    content = col.header_render() if col.header_render else escape(col.label)
    return f"<th{_attrs(col.th_attributes, css)}>{content}</th>"


def _data_cell(row, col: Column) -> str:
    value = getattr(row, col.key)
    content = col.render(value, row) if col.render else escape(str(value))
    return f"<td{_attrs(col.td_attributes, 'idt-td')}>{content}</td>"


def render_table(rows, columns=None, striped: bool = False, scrollable: bool = False,
                 scroll_height: str = "300px", table_attributes: Optional[dict] = None) -> str:
    columns = columns or DEFAULT_COLUMNS

    container_style = f"max-height: {scroll_height};" if scrollable else "max-height: initial;"
    container_class = _class_name("idt-container", "idt-scroll-y" if scrollable else "")
    table_class = _class_name("idt-table", "" if scrollable else "idt-bordered")

    header = "".join(_header_cell(col, scrollable) for col in columns)
    body = []
    for index, row in enumerate(rows):
        row_class = "idt-stripe" if striped and index % 2 == 1 else ""
        cells = "".join(_data_cell(row, col) for col in columns)
        body.append(f"<tr{_attrs(None, row_class)}>{cells}</tr>")

    return (
        f'<div class="{container_class}" style="{container_style}">'
        f"<table{_attrs(table_attributes, table_class)}>"
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{''.join(body)}</tbody>"
        "</table></div>"
    )


_PALETTES = {
    False: {"bg": "#ffffff", "fg": "#111827", "border": "#e5e7eb", "stripe": "#f3f4f6"},
    True: {"bg": "#1f2937", "fg": "#e5e7eb", "border": "#374151", "stripe": "#374151"},
}


def table_css(dark_mode: bool = False) -> str:
    p = _PALETTES[bool(dark_mode)]
    return f"""
<style>
.idt-container {{ overflow-x: auto; }}
.idt-scroll-y {{ overflow-y: auto; }}
.idt-table {{ min-width: 100%; border-collapse: collapse; background: {p['bg']}; color: {p['fg']}; }}
.idt-bordered {{ border: 1px solid {p['border']}; }}
.idt-th {{ padding: 0.5rem 1rem; text-align: start; background: {p['bg']};
          box-shadow: inset 0 1px 0 {p['border']}, inset 0 -1px 0 {p['border']}; }}
.idt-sticky {{ position: sticky; top: 0; }}
.idt-td {{ padding: 0.5rem 1rem; border-bottom: 1px solid {p['border']}; }}
.idt-stripe {{ background: {p['stripe']}; }}
</style>
"""
