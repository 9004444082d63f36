"""Example: swatches of every BFH palette, and a grouped bar in the contrast palette."""

import numpy as np

import bfh_plots as bp

bp.save(bp.show_palettes(), "palettes.png", preset="poster", dpi=150)

bp.apply("bfh_presentation", palette="contrast")
quarters = np.arange(4)
fig, ax = bp.bar(
    quarters,
    {"Planned": [120, 135, 128, 140], "Acute": [310, 290, 335, 325]},
    ylabel="Procedures",
)
ax.set_xticks(quarters, ["Q1", "Q2", "Q3", "Q4"])
bp.save(fig, "procedures.png", preset="presentation")
