"""Result display components for the Streamlit page."""

import streamlit as st

from macro_planner.models import MacroBreakdown, MacroResult
from macro_planner.recommendations import MacroRecommendation, format_range, recommendation_title
from pages.components.charts import create_macro_grams_bar, create_macro_pie_chart, macro_breakdown_frame


def render_recommendation(rec: MacroRecommendation):
    """Render the recommended split ranges for the selected gender and goal."""
    st.markdown(f"**💪 {recommendation_title(rec)}:**")
    cols = st.columns(3)
    cols[0].metric("Protein", format_range(rec.protein))
    cols[1].metric("Carbs", format_range(rec.carbs))
    cols[2].metric("Fat", format_range(rec.fat))
    st.caption("💡 Tip: For ranges, select a value within the recommended range "
               "based on your preferences and activity level.")


def render_result(result: MacroResult, breakdown: MacroBreakdown = None):
    """Render daily calories, per-macro metrics, charts and a table.

    Args:
        result: Rounded result to show
        breakdown: Optional intermediates; adds BMR and TDEE metrics
    """
    st.markdown("### Your Daily Macros")
    st.metric("Daily Calories", f"{result.daily_calories} kcal")

    cols = st.columns(3)
    cols[0].metric("Protein", f"{result.protein}g", delta=f"{result.protein_pct:g}%", delta_color="off")
    cols[1].metric("Carbs", f"{result.carbs}g", delta=f"{result.carbs_pct:g}%", delta_color="off")
    cols[2].metric("Fat", f"{result.fat}g", delta=f"{result.fat_pct:g}%", delta_color="off")

    if breakdown is not None:
        col1, col2 = st.columns(2)
        col1.metric("BMR", f"{breakdown.bmr:.0f} kcal")
        col2.metric("TDEE", f"{breakdown.tdee:.0f} kcal")

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_macro_pie_chart(result), use_container_width=True)
    with col2:
        st.plotly_chart(create_macro_grams_bar(result), use_container_width=True)

    st.dataframe(macro_breakdown_frame(result), hide_index=True, use_container_width=True)
