"""HTML card renderer for the two display strings.

Produces markup for st.markdown(..., unsafe_allow_html=True). Styling for
the .sky-card classes lives in the page CSS in app.py.
"""

import html


def _body_html(text: str) -> str:
    return "<br>".join(html.escape(line) for line in text.split("\n"))


def render_card_html(heading: str, body: str) -> str:
    """Return one card: a heading line over the body text.

    Args:
        heading: Card title, e.g. "Your Location".
        body: Display text. Escaped; newlines become <br>.

    Returns:
        HTML string.
    """
    return (
        "<div class='sky-card'>"
        f"<div class='sky-card-heading'>{html.escape(heading)}</div>"
        f"<div class='sky-card-body'>{_body_html(body)}</div>"
        "</div>"
    )


def render_title_html(title: str) -> str:
    return f"<h1 class='sky-title'>{html.escape(title)}</h1>"
