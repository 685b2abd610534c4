"""Chart components using Plotly for data visualization."""

import pandas as pd
import plotly.express as px

from macro_planner.config import CALORIES_PER_GRAM
from macro_planner.models import MacroResult

MACRO_COLORS = ['#FF6B6B', '#4ECDC4', '#FFE66D']


def macro_breakdown_frame(result: MacroResult) -> pd.DataFrame:
    """Tabulate grams, percentages and calories per macro.

    Args:
        result: MacroResult from compute_macros

    Returns:
        DataFrame with columns Macro, Grams, Percent, Calories
    """
    rows = [
        ("Protein", result.protein, result.protein_pct, result.protein * CALORIES_PER_GRAM["protein"]),
        ("Carbs", result.carbs, result.carbs_pct, result.carbs * CALORIES_PER_GRAM["carbs"]),
        ("Fat", result.fat, result.fat_pct, result.fat * CALORIES_PER_GRAM["fat"]),
    ]
    df = pd.DataFrame(rows, columns=['Macro', 'Grams', 'Percent', 'Calories'])
    df['Calories'] = df['Calories'].round(1)
    return df


def create_macro_pie_chart(result: MacroResult):
    """Create pie chart of macro calorie distribution.

    Returns:
        Plotly figure
    """
    df = macro_breakdown_frame(result)

    fig = px.pie(
        df,
        names='Macro',
        values='Calories',
        title="Macro Calorie Distribution",
        color_discrete_sequence=MACRO_COLORS,
    )

    fig.update_traces(textposition='inside', textinfo='percent+label')

    return fig


def create_macro_grams_bar(result: MacroResult):
    """Create bar chart of daily grams per macro."""
    df = macro_breakdown_frame(result)

    fig = px.bar(
        df,
        x='Macro',
        y='Grams',
        text='Grams',
        title='Daily Macro Grams',
        color='Macro',
        color_discrete_sequence=MACRO_COLORS,
    )

    fig.update_layout(
        xaxis_title="",
        yaxis_title="Grams",
        showlegend=False,
    )

    return fig
