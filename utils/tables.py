"""Tabular views of pricing results for display and export."""

import pandas as pd

from rental_engine.numeric import round_half_away


PRICED_COLUMNS = ['Date', 'Status', 'Price', 'Occupancy %', 'Reason', 'Boost']


def priced_days_frame(rows):
    """One row per priced day, probability shown as a whole percentage."""
    if not rows:
        return pd.DataFrame(columns=PRICED_COLUMNS)
    return pd.DataFrame([
        {
            'Date': r.date.isoformat(),
            'Status': r.status,
            'Price': r.price,
            'Occupancy %': round_half_away(r.probability * 100),
            'Reason': r.reason,
            'Boost': r.boost,
        }
        for r in rows
    ], columns=PRICED_COLUMNS)


def sensitivity_frame(points):
    """Base price sweep as a DataFrame (Base, Occupancy %, Potential Revenue)."""
    df = pd.DataFrame(points, columns=['base', 'occupancy_rate', 'potential_revenue'])
    df['occupancy_rate'] = df['occupancy_rate'] * 100
    return df.rename(columns={
        'base': 'Base',
        'occupancy_rate': 'Occupancy %',
        'potential_revenue': 'Potential Revenue',
    })
