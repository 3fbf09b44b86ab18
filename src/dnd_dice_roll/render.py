from __future__ import annotations

from .models import RollReport


HEADERS = ("Die", "Roll")


def table_rows(report: RollReport) -> list[tuple[str, str]]:
    """Body rows: one per logical die, a Modifier row per modified token, then Total."""
    rows: list[tuple[str, str]] = []
    for group in report.groups:
        rows.extend((r.label, r.display) for r in group.results)
        if group.spec.modifier is not None:
            rows.append(("Modifier", f"{group.modifier:+d}"))
    rows.append(("Total", str(report.total)))
    return rows


def render_table(report: RollReport) -> str:
    """Bordered Die / Roll table.

    Besides one row per logical die and the final Total row, every token that
    carries a modifier gets a signed ``Modifier`` row after its dice, so the
    Total can be read off the table.
    """
    rows = table_rows(report)
    widths = [max(len(row[i]) for row in (HEADERS, *rows)) for i in range(len(HEADERS))]

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    header_rule = "+" + "+".join("=" * (w + 2) for w in widths) + "+"

    def line(cells: tuple[str, str]) -> str:
        return "|" + "|".join(f" {c.ljust(w)} " for c, w in zip(cells, widths)) + "|"

    out = [border, line(HEADERS), header_rule]
    for row in rows:
        out.append(line(row))
        out.append(border)
    return "\n".join(out)
