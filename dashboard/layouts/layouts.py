from dash import html

from dashboard.components.filters import create_user_filters_section
from dashboard.components.stats import SELECT_USER_MESSAGE, create_message


def create_layout(user_ids: list[str]) -> html.Div:
    return html.Div(
        [
            # Header
            html.Div(
                [
                    html.Div(
                        [html.H1("Music Listening Tracker", className="dashboard-title")],
                        className="container",
                    )
                ],
                className="dashboard-header",
            ),
            # Main content
            html.Div(
                [
                    html.Div([create_user_filters_section(user_ids)], className="card"),
                    html.Div(
                        [
                            html.H3("Listening Statistics", className="card-title"),
                            html.Div(
                                [create_message(SELECT_USER_MESSAGE)],
                                id="user-data-display",
                            ),
                        ],
                        className="card",
                    ),
                ],
                className="container",
            ),
        ]
    )
