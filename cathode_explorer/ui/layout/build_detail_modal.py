from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from cathode_explorer.analysis.inspector import DetailSection
from cathode_explorer.ui.ids import IDs


def render_detail_sections(sections: List[DetailSection]):
    return dbc.Row(
        [
            dbc.Col(
                [
                    html.H6(section.title, className="fw-semibold"),
                    html.Table(
                        [
                            html.Tr([html.Td(label, className="text-muted pe-3"), html.Td(value)])
                            for label, value in section.rows
                        ],
                        className="table table-sm",
                    ),
                ],
                md=4,
            )
            for section in sections
        ]
    )


def build_detail_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.DETAIL_TITLE)),
            dbc.ModalBody(id=IDs.Control.DETAIL_BODY),
            dbc.ModalFooter(
                dbc.Button("Close", id=IDs.Control.DETAIL_CLOSE_BTN, color="secondary", size="sm")
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="xl",
        scrollable=True,
    )
