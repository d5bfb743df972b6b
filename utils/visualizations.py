"""Visualization utilities for the pricing assistant."""

import plotly.graph_objects as go
from plotly.subplots import make_subplots


def create_price_calendar_chart(days_df):
    """Recommended price (bars) and simulated occupancy (line) per day."""
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Bar(
        x=days_df['Date'],
        y=days_df['Price'],
        name='Recommended Price',
        marker_color=['orange' if r else 'steelblue' for r in days_df['Reason']]
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=days_df['Date'],
        y=days_df['Occupancy %'],
        mode='lines+markers',
        name='Occupancy % (sim.)',
        line=dict(color='green', width=2)
    ), secondary_y=True)
    fig.update_layout(
        title='30-Day Price Recommendation',
        xaxis_title='Date',
        height=400
    )
    fig.update_yaxes(title_text='Price (R$)', secondary_y=False)
    fig.update_yaxes(title_text='Occupancy (%)', range=[0, 100], secondary_y=True)
    return fig


def create_sensitivity_chart(sens_df, current_base=None):
    """Potential revenue across candidate base prices."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=sens_df['Base'],
        y=sens_df['Potential Revenue'],
        mode='lines+markers',
        name='Potential Revenue 30d',
        line=dict(color='blue', width=2)
    ))
    if current_base is not None:
        fig.add_vline(x=current_base, line_dash="dash", line_color="gray", annotation_text="Current base")
    fig.update_layout(
        title='Base Price vs Revenue Potential',
        xaxis_title='Base Price (R$)',
        yaxis_title='Revenue (R$)',
        height=350
    )
    return fig
