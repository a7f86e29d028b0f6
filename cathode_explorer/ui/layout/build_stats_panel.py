from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import html

from cathode_explorer.analysis.statistics import Stats
from cathode_explorer.ui.ids import IDs

# (label, display key, unit)
_CARDS = (
    ("Compounds", "count", ""),
    ("Avg. Voltage", "avg_voltage", " V"),
    ("Avg. Energy", "avg_energy", " Wh/kg"),
    ("Max Cycles", "max_cycles", ""),
    ("Avg. Conductivity", "avg_conductivity", " mS/cm"),
)


def render_stats_cards(stats: Optional[Stats]):
    """Stats header; an explicit empty state when the selection is empty."""
    if stats is None:
        return dbc.Alert(
            "No compounds match your filters. Try adjusting the search criteria.",
            color="warning",
            className="mb-0",
        )

    values = stats.to_display_dict()
    return dbc.Row(
        [
            dbc.Col(
                dbc.Card(
                    dbc.CardBody(
                        [
                            html.Small(label, className="text-muted"),
                            html.H4(f"{values[key]}{unit}", className="mb-0"),
                        ]
                    ),
                    className="ce-stat-card",
                ),
            )
            for label, key, unit in _CARDS
        ],
        className="g-2",
    )


def build_stats_panel() -> html.Div:
    return html.Div(id=IDs.Control.STATS_CARDS, className="mb-3")
