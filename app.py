"""
US Lottery Statistics -- Streamlit Web Application

Renders the statistics engine's output per game: frequency, hot/cold
momentum, gaps, combinations, recommendation sets, a ticket checker and
the odds table.
"""
import os
import sys

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lottostats import analysis
from lottostats.config import configure_logging
from lottostats.draws import draws_to_frame
from lottostats.games import Game
from lottostats.models.weighted_scoring import STRATEGIES
from lottostats.odds import jackpot_odds, odds_table
from lottostats.predictor import generate_all_strategies
from lottostats.schedule import next_draw
from lottostats.scraper import load_draws
from lottostats.tickets import check_ticket

configure_logging()

DISCLAIMER = (
    "For entertainment purposes only. Lottery outcomes are random and past results "
    "do not influence future drawings. Hot, cold and overdue describe history only. "
    "Results sourced from NY Open Data (data.ny.gov); always verify with your official "
    "state lottery."
)
CLASS_COLORS = {"hot": "#E74C3C", "warm": "#F39C12", "cold": "#3498DB"}

# -- Page Config ----------------------------------------------------------

st.set_page_config(
    page_title="My Lotto Stats",
    page_icon="🎱",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -- Data Loading (Cached) ------------------------------------------------

@st.cache_data(ttl=3600)
def get_draws(slug):
    return load_draws(Game.from_slug(slug))


@st.cache_data(ttl=3600)
def get_analysis(slug):
    return analysis.get_full_analysis(get_draws(slug), Game.from_slug(slug))


@st.cache_data(ttl=3600)
def get_recommendations(slug):
    return generate_all_strategies(get_draws(slug), Game.from_slug(slug))


def _ball_row(numbers, bonus=None):
    text = "  ".join(f"**{n}**" for n in numbers)
    if bonus is not None:
        text += f"  +  **{bonus}**"
    return text


# -- Sidebar --------------------------------------------------------------

st.sidebar.markdown("## My Lotto Stats")

game = st.sidebar.selectbox("Game", list(Game), format_func=lambda g: g.schema.name)
schema = game.schema

page = st.sidebar.radio(
    "Navigate",
    ["Dashboard", "Combinations", "Recommendations", "Results & Ticket Checker", "Odds & Methodology"],
)

st.sidebar.markdown("---")
st.sidebar.markdown(f"**Disclaimer:** {DISCLAIMER}")


# -- Load Data ------------------------------------------------------------

draws = get_draws(game.slug)
ana = get_analysis(game.slug)

if not draws:
    st.warning(f"No stored {schema.name} history yet. Run `python scripts/update_data.py {game.slug}`.")


# ==========================================================================
# PAGE 1: DASHBOARD
# ==========================================================================

if page == "Dashboard":
    st.title(f"{schema.name} Statistics")

    upcoming = next_draw(game)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Draws", len(draws))
    with col2:
        span = f"{draws[-1].date} -> {draws[0].date}" if draws else "n/a"
        st.metric("Date Range", span)
    with col3:
        if upcoming.is_retired:
            st.metric("Retired", upcoming.when.strftime("%b %d, %Y"))
        else:
            st.metric("Next Draw", upcoming.when.strftime("%a %b %d, %I:%M %p ET"),
                      "Tonight" if upcoming.is_tonight else None)

    st.markdown("---")

    # -- 1. Frequency Bar Chart -------------------------------------------
    st.subheader("Number Frequency")
    summary = ana["main_summary"]
    if len(summary):
        fig = go.Figure(go.Bar(
            x=summary["number"],
            y=summary["count"],
            marker_color=[CLASS_COLORS[c] for c in summary["classification"]],
            hovertemplate="Number %{x}<br>Count: %{y}<extra></extra>",
        ))
        fig.update_layout(
            title=f"Main Number Frequency (expected {100 * schema.main_count / schema.main_max:.2f}% per draw)",
            xaxis_title="Number",
            yaxis_title="Frequency",
            template="plotly_dark",
            height=400,
        )
        fig.add_annotation(x=0.02, y=0.98, xref="paper", yref="paper",
                           text="Red=Hot | Orange=Warm | Blue=Cold",
                           showarrow=False, font=dict(size=11))
        st.plotly_chart(fig, use_container_width=True)

    # -- 2. Hot / Cold ----------------------------------------------------
    st.subheader("Hot, Warm & Cold")
    cols = st.columns(3)
    for col, label in zip(cols, ("hot", "warm", "cold")):
        with col:
            nums = [h.number for h in ana["main_hot_cold"] if h.classification == label]
            st.markdown(f"**{label.capitalize()}** ({len(nums)})")
            st.write(", ".join(str(n) for n in nums) or "-")

    # -- 3. Gap Tracker ---------------------------------------------------
    st.subheader("Gap & Overdue Analysis")
    if len(summary):
        fig = go.Figure()
        fig.add_trace(go.Bar(x=summary["number"], y=summary["draws_since_last_drawn"],
                             name="Current Gap", marker_color="#3498DB"))
        fig.add_trace(go.Scatter(x=summary["number"], y=summary["avg_gap"],
                                 mode="lines", name="Average Gap",
                                 line=dict(color="#FFE66D", width=2)))
        fig.add_hline(y=schema.expected_interval, line_dash="dash",
                      annotation_text=f"Expected interval {schema.expected_interval:.1f}")
        fig.update_layout(title="Current Gap vs Average Gap per Number",
                          xaxis_title="Number", yaxis_title="Draws",
                          template="plotly_dark", height=400, barmode="overlay")
        st.plotly_chart(fig, use_container_width=True)

        st.dataframe(summary, use_container_width=True, height=400)

    # -- 4. Bonus Pool ----------------------------------------------------
    if schema.has_bonus and ana["bonus_summary"] is not None:
        st.subheader(f"{schema.bonus_label} Frequency")
        bonus = ana["bonus_summary"]
        fig = px.bar(bonus, x="number", y="count", color="classification",
                     color_discrete_map=CLASS_COLORS, template="plotly_dark")
        fig.update_layout(height=350)
        st.plotly_chart(fig, use_container_width=True)


# ==========================================================================
# PAGE 2: COMBINATIONS
# ==========================================================================

elif page == "Combinations":
    st.title(f"{schema.name} Pairs, Triplets & Quadruplets")

    for key, title in (("pairs", f"Top Pairs (last {analysis.PAIR_WINDOW} draws)"),
                       ("triplets", "Top Triplets"),
                       ("quadruplets", "Top Quadruplets")):
        st.subheader(title)
        frame = analysis.combinations_frame(ana[key][:30])
        if len(frame):
            fig = px.bar(frame, x="combination", y="count", template="plotly_dark",
                         color="count", color_continuous_scale="YlOrRd")
            fig.update_layout(height=350)
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.info("No data")

    st.subheader("Companions of a Number")
    number = st.number_input("Number", min_value=1, max_value=schema.main_max, value=1)
    companions = analysis.pairings_for(int(number), ana["pairs"])
    st.write(", ".join(f"{n} ({c}x)" for n, c in companions) or "No pairings in window")


# ==========================================================================
# PAGE 3: RECOMMENDATIONS
# ==========================================================================

elif page == "Recommendations":
    st.title(f"{schema.name} Recommendation Sets")
    st.markdown(
        "> Each strategy blends frequency, hot/cold momentum, overdue ratio and pair "
        "co-occurrence into one score per number, then builds sets greedily."
    )

    for name, sets in get_recommendations(game.slug).items():
        strategy = STRATEGIES[name]
        w = strategy.weights
        st.subheader(f"{strategy.label} Strategy")
        st.caption(f"{strategy.description} (frequency {w.frequency:.0%}, hot/cold {w.hot:.0%}, "
                   f"overdue {w.overdue:.0%}, pair bonus {w.pairs:.0%})")
        for s in sets:
            st.markdown(f"{_ball_row(s.numbers, s.bonus_number)}  &nbsp; score {s.score:.3f}")


# ==========================================================================
# PAGE 4: RESULTS & TICKET CHECKER
# ==========================================================================

elif page == "Results & Ticket Checker":
    st.title(f"{schema.name} Results")

    st.dataframe(draws_to_frame(draws[:50]), use_container_width=True)

    st.subheader("Ticket Checker")
    if draws:
        selected = st.selectbox("Draw", draws[:200], format_func=lambda d: d.label)
        picks = st.text_input(f"Your {schema.main_count} numbers (comma-separated)")
        bonus = None
        if schema.has_bonus and not schema.bonus_from_main:
            bonus = st.number_input(schema.bonus_label, min_value=1, max_value=schema.bonus_max, value=1)

        if st.button("Check"):
            try:
                numbers = [int(p) for p in picks.replace(" ", "").split(",") if p]
                result = check_ticket(numbers, int(bonus) if bonus is not None else None, selected, game)
            except ValueError as e:
                st.error(str(e))
            else:
                st.success(f"{result.match_count} main matches: {list(result.main_matches)}"
                           + (f" | {schema.bonus_label} matched" if result.bonus_match else ""))


# ==========================================================================
# PAGE 5: ODDS & METHODOLOGY
# ==========================================================================

elif page == "Odds & Methodology":
    st.title("Odds & Methodology")

    st.subheader(f"{schema.name} Odds")
    st.metric("Jackpot odds", f"1 in {jackpot_odds(game):,}")
    st.dataframe(odds_table(game), use_container_width=True)

    st.subheader("Methodology")
    st.markdown(f"""
- **Frequency:** appearances of each number divided by total draws.
- **Hot/Cold:** score = 3 x frequency in the last {analysis.RECENT_WINDOW} draws
  + 2 x frequency in the last {analysis.MEDIUM_WINDOW} + 1 x all-time frequency.
  The top third is hot when above the pool average, the bottom third cold when below it.
- **Overdue ratio:** draws since last seen / expected interval
  ({schema.main_max} / {schema.main_count} = {schema.expected_interval:.1f} draws for {schema.name}).
- **Combinations:** every 2-, 3- and 4-number subset of each draw, counted and ranked.
""")
    st.warning(DISCLAIMER)

    st.subheader("All Games")
    st.dataframe(pd.DataFrame([
        {"Game": g.schema.name, "Format": f"{g.schema.main_count}/{g.schema.main_max}"
         + (f" + 1/{g.schema.bonus_max}" if g.schema.has_bonus else ""),
         "Jackpot odds": f"1 in {jackpot_odds(g):,}", "Ticket": f"${g.schema.ticket_price}"}
        for g in Game
    ]), use_container_width=True)
