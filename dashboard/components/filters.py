from dash import dcc, html


def create_user_dropdown(user_ids: list[str]) -> html.Div:
    """Create a dropdown for selecting a user.

    Args:
        user_ids (list[str]): User ids to offer, in display order.

    Returns:
        html.Div: Div containing the label and user selection dropdown.
    """
    return html.Div(
        [
            html.Label("Select User", htmlFor="user-select", className="filter-label"),
            dcc.Dropdown(
                id="user-select",
                options=[{"label": f"User {user_id}", "value": user_id} for user_id in user_ids],
                value=None,
                placeholder="Please choose a user",
                clearable=True,
                className="dropdown",
            ),
        ],
        className="filter-item",
    )


def create_user_filters_section(user_ids: list[str]) -> html.Div:
    """Wrap the user dropdown in a titled filters section."""
    return html.Div(
        [
            html.H3("Listener", className="card-title"),
            html.Div([create_user_dropdown(user_ids)], className="filters-section"),
        ]
    )
