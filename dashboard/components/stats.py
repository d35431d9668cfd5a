from dash import html

SELECT_USER_MESSAGE = (
    "Please select a user from the dropdown above to view their music listening data."
)
NO_MUSIC_MESSAGE = "No music for this user"


def create_message(text: str) -> html.P:
    """Create a placeholder paragraph for the stats section."""
    return html.P(text, className="stats-message")


def create_stats_table(rows: list[tuple[str, str | None]]) -> html.Table:
    """Create a Dash HTML table of listening questions and answers.

    Rows whose answer is None are left out.

    Args:
        rows (list[tuple[str, str | None]]): (question, answer) pairs as
            returned by get_listening_summary().

    Returns:
        html.Table: Dash HTML Table component with Question and Answer columns.
    """
    return html.Table(
        [
            html.Thead(html.Tr([html.Th("Question"), html.Th("Answer")])),
            html.Tbody(
                [
                    html.Tr([html.Td(question), html.Td(answer)])
                    for question, answer in rows
                    if answer is not None
                ]
            ),
        ],
        className="stats-table",
    )
