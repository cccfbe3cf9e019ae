"""Month x year fatality counts across several FARS years."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import altair as alt
import pandas as pd

from . import config
from .errors import NoValidDataError
from .years import read_years

logger = logging.getLogger(__name__)


def summarize_years(years: Iterable, data_dir: str | Path | None = None) -> pd.DataFrame:
    """Count accidents per month for each loadable year.

    Returns a table indexed by MONTH with one column per year. Column labels
    are int years (``summary[2013]``, not ``summary["2013"]``). Year/month
    combinations without records are missing (<NA>), not zero. Raises
    NoValidDataError when no requested year could be loaded.
    """
    years = list(years)
    tables = [result.table for result in read_years(years, data_dir) if result.ok]
    if not tables:
        raise NoValidDataError(years)

    combined = pd.concat(tables, ignore_index=True)
    counts = (
        combined.groupby([config.YEAR_COLUMN, config.MONTH_COLUMN])
        .size()
        .reset_index(name='n')
    )
    pivot = counts.pivot(index=config.MONTH_COLUMN, columns=config.YEAR_COLUMN, values='n')
    pivot = pivot.sort_index().sort_index(axis=1).astype('Int64')
    logger.info("Summarized %d year(s) into %d month rows", pivot.shape[1], pivot.shape[0])
    return pivot


def summary_chart(summary: pd.DataFrame, title: str = "FARS accidents per month") -> alt.Chart:
    """Build a line chart of monthly accident counts with one line per year."""
    tidy = (
        summary.reset_index()
        .melt(id_vars=config.MONTH_COLUMN, var_name='Year', value_name='Accidents')
        .dropna()
    )
    tidy['Year'] = tidy['Year'].astype(int)
    tidy['Month'] = tidy[config.MONTH_COLUMN].astype(int)
    tidy['Accidents'] = tidy['Accidents'].astype(int)
    tidy['MonthLabel'] = tidy['Month'].apply(lambda idx: config.MONTH_LABELS[idx - 1])
    tidy = tidy[['Year', 'Month', 'MonthLabel', 'Accidents']]

    base = alt.Chart(tidy).encode(
        x=alt.X(
            'Month:Q',
            title='Month',
            scale=alt.Scale(domain=[1, 12]),
            axis=alt.Axis(
                values=list(range(1, 13)),
                labelExpr="['Jan','Feb','Mar','Apr','May','Jun','Jul','Aug','Sep','Oct','Nov','Dec'][datum.value - 1]",
                labelColor='#000',
                tickColor='#000',
                titleColor='#000',
            ),
        ),
        y=alt.Y(
            'Accidents:Q',
            title='Fatal accidents',
            axis=alt.Axis(labelColor='#000', tickColor='#000', titleColor='#000'),
        ),
        color=alt.Color(
            'Year:N',
            legend=alt.Legend(title='Year', labelColor='#000', titleColor='#000', columns=2),
            scale=alt.Scale(scheme='tableau10'),
        ),
        tooltip=[
            alt.Tooltip('Year:N'),
            alt.Tooltip('MonthLabel:N', title='Month'),
            alt.Tooltip('Accidents:Q', title='Accidents', format=','),
        ],
    )
    line = base.mark_line(size=1.5)
    points = base.mark_point(filled=True, size=60, stroke='white', strokeWidth=0.8)

    chart = alt.layer(line, points).properties(
        width=min(config.CHART_WIDTH, 850),
        height=min(config.CHART_HEIGHT, 520),
        title=alt.TitleParams(text=title, color='#000', fontSize=20, anchor='start'),
    ).configure_view(
        stroke='transparent',
    ).configure_axis(
        gridColor='#d0d0d0',
        gridDash=[3, 3],
        labelColor='#000',
        titleColor='#000',
        tickColor='#000',
        domainColor='#000',
    ).configure(background='white')
    return chart
