"""Streamlit UI for scoring a Sea Salt & Paper hand."""

from __future__ import annotations

import streamlit as st

from seasalt.cards import CARD_NAMES, COLORS
from seasalt.service import ScoringService


def get_service() -> ScoringService:
    if "scoring_service" not in st.session_state:
        st.session_state["scoring_service"] = ScoringService()
    return st.session_state["scoring_service"]


def get_rows(key: str) -> list[tuple[str, str]]:
    if key not in st.session_state:
        st.session_state[key] = []
    return st.session_state[key]


def rerun() -> None:
    try:
        st.rerun()
    except AttributeError:
        st.experimental_rerun()


def render_card_picker(key: str, title: str) -> None:
    st.subheader(title)
    rows = get_rows(key)
    cols = st.columns(3)
    name = cols[0].selectbox("Card", CARD_NAMES, key=f"{key}_name")
    color = cols[1].selectbox("Color", COLORS, key=f"{key}_color")
    if cols[2].button("Add", key=f"{key}_add"):
        rows.append((name, color))
        rerun()

    for idx, (card_name, card_color) in enumerate(rows):
        row_cols = st.columns([4, 1])
        row_cols[0].write(f"{card_color} {card_name}")
        if row_cols[1].button("Remove", key=f"{key}_remove_{idx}"):
            rows.pop(idx)
            rerun()


def render_summary(service: ScoringService) -> None:
    view = service.score_tokens(get_rows("hand_rows"), get_rows("played_rows"))
    st.subheader("Summary")
    points = int(view.points) if view.is_whole else view.points
    st.metric("Points", points)

    if view.effects:
        st.write("Available effects:")
        for effect in view.effects:
            st.info(effect)
    else:
        st.write("No effects available.")

    if view.color_frequency:
        st.write("Colors:")
        st.bar_chart(view.color_frequency)

    with st.expander("Breakdown by card"):
        for item in view.breakdown:
            st.write(f"{item.name}: {item.points}")


def main() -> None:
    st.title("Sea Salt & Paper Scorer")
    service = get_service()

    left, right = st.columns(2)
    with left:
        render_card_picker("hand_rows", "Hand")
    with right:
        render_card_picker("played_rows", "Played")

    if st.button("Clear all"):
        st.session_state["hand_rows"] = []
        st.session_state["played_rows"] = []
        rerun()

    render_summary(service)


if __name__ == "__main__":
    main()
