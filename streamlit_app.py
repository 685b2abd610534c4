"""Streamlit frontend for the Daily Macro Calculator.

Collects a profile, shows the running macro split total while it is being
edited and renders the computed result.
"""

import streamlit as st

from macro_planner.config import (
    ACTIVITY_DESCRIPTIONS,
    ACTIVITY_MULTIPLIERS,
    DEFAULT_ACTIVITY_LEVEL,
    DEFAULT_GENDER,
    DEFAULT_GOAL,
    DEFAULT_HEIGHT_UNIT,
    DEFAULT_MACRO_SPLIT,
    DEFAULT_WEIGHT_UNIT,
    DISCLAIMER,
    GOAL_CALORIE_ADJUSTMENTS,
)
from macro_planner.errors import ConstraintError, MacroPlannerError
from macro_planner.log import configure_logging
from macro_planner.macro_calculator import compute_breakdown
from macro_planner.models import Gender, HeightUnit, WeightUnit
from macro_planner.recommendations import recommended_split
from macro_planner.validation import macro_split_warning, parse_profile
from pages.components.macro_display import render_recommendation, render_result

st.set_page_config(
    page_title="Daily Macro Calculator",
    page_icon="💪",
    layout="centered",
)

if 'logging_configured' not in st.session_state:
    configure_logging()
    st.session_state.logging_configured = True

if 'breakdown' not in st.session_state:
    st.session_state.breakdown = None

st.title("Daily Macro Calculator")
st.markdown("Calculate your daily macros for your fitness goals")

activity_levels = list(ACTIVITY_MULTIPLIERS.keys())
goals = list(GOAL_CALORIE_ADJUSTMENTS.keys())
weight_units = [u.value for u in WeightUnit]
genders = [g.value for g in Gender]

# --- Weight ---
col1, col2 = st.columns([3, 1])
with col1:
    weight = st.number_input("Weight*", min_value=0.0, value=None, step=0.01,
                             placeholder="Enter your weight")
with col2:
    weight_unit = st.selectbox("Unit", weight_units, index=weight_units.index(DEFAULT_WEIGHT_UNIT))

# --- Height ---
height_unit = st.radio(
    "Height*",
    [HeightUnit.CM.value, HeightUnit.FT.value],
    index=[HeightUnit.CM.value, HeightUnit.FT.value].index(DEFAULT_HEIGHT_UNIT),
    format_func=lambda u: "Centimeters" if u == HeightUnit.CM.value else "Feet & Inches",
    horizontal=True,
)
height_cm = height_feet = height_inches = None
if height_unit == HeightUnit.CM.value:
    height_cm = st.number_input("Height (cm)", min_value=0.0, value=None, step=0.1,
                                placeholder="Enter height in cm")
else:
    ft_col, in_col = st.columns(2)
    with ft_col:
        height_feet = st.number_input("Feet", min_value=0, value=None, step=1, placeholder="Feet")
    with in_col:
        height_inches = st.number_input("Inches", min_value=0.0, value=None, step=1.0,
                                        placeholder="Inches")

# --- Gender & age ---
col1, col2 = st.columns(2)
with col1:
    gender = st.selectbox("Gender", genders, index=genders.index(DEFAULT_GENDER),
                          format_func=str.capitalize)
with col2:
    age = st.number_input("Age*", min_value=0, value=None, step=1, placeholder="Enter your age")

# --- Activity & goal ---
activity = st.selectbox(
    "Activity Level",
    activity_levels,
    index=activity_levels.index(DEFAULT_ACTIVITY_LEVEL),
    format_func=lambda a: a.replace('_', ' ').title(),
)
st.caption(ACTIVITY_DESCRIPTIONS.get(activity, ""))

goal = st.selectbox(
    "Goal",
    goals,
    index=goals.index(DEFAULT_GOAL),
    format_func=lambda g: g.replace('_', ' ').title(),
)

# --- Macro split ---
st.markdown("#### Macro Split (%)")
col1, col2, col3 = st.columns(3)
protein_pct = col1.number_input("Protein %", min_value=0.0, value=float(DEFAULT_MACRO_SPLIT["protein"]))
carbs_pct = col2.number_input("Carbs %", min_value=0.0, value=float(DEFAULT_MACRO_SPLIT["carbs"]))
fat_pct = col3.number_input("Fats %", min_value=0.0, value=float(DEFAULT_MACRO_SPLIT["fat"]))

warning = macro_split_warning(protein_pct, carbs_pct, fat_pct)
if warning:
    st.warning(warning)

with st.container(border=True):
    render_recommendation(recommended_split(gender, goal))

if st.button("Calculate Macros", type="primary", use_container_width=True):
    request = {
        "weight": weight,
        "weight_unit": weight_unit,
        "height_unit": height_unit,
        "height_cm": height_cm,
        "height_feet": height_feet,
        "height_inches": height_inches,
        "age": age,
        "gender": gender,
        "activity_level": activity,
        "goal": goal,
        "protein_pct": protein_pct,
        "carbs_pct": carbs_pct,
        "fat_pct": fat_pct,
    }
    try:
        st.session_state.breakdown = compute_breakdown(parse_profile(request))
    except ConstraintError as e:
        st.session_state.breakdown = None
        st.error(f"⚠️ {e}")
    except MacroPlannerError as e:
        st.session_state.breakdown = None
        st.error(f"❌ {e}")

if st.session_state.breakdown:
    breakdown = st.session_state.breakdown
    render_result(breakdown.result, breakdown)

st.markdown("---")
with st.expander("View Disclaimer"):
    st.caption(DISCLAIMER)
