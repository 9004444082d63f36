"""Example: monthly admissions per ward, with footer and captioned title."""

import numpy as np

import bfh_plots as bp

months = np.arange(1, 13)
rng = np.random.default_rng(7)
wards = {
    "Cardiology": 420 + 15 * np.sin(months / 2) + rng.normal(0, 8, 12),
    "Emergency": 610 + 30 * np.cos(months / 3) + rng.normal(0, 12, 12),
}

fig, ax = bp.line(months, wards)
bp.labs(
    ax,
    title="Admissions per ward",
    subtitle="2024, all sites",
    x="month",
    y="patients",
    caption="source: BFH business intelligence",
)
bp.add_footer(fig)
bp.save(fig, "admissions-report.png", preset="report_full")
