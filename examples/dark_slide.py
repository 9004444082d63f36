"""Example: a one-off dark slide that leaves the global style untouched."""

import matplotlib.pyplot as plt
import numpy as np

import bfh_plots as bp

hours = np.arange(24)
waiting = 25 + 20 * np.exp(-((hours - 14) ** 2) / 18)

with bp.theme_context("bfh_dark", palette="blues"):
    fig, ax = plt.subplots(figsize=bp.get_dimensions("presentation", "wide"))
    ax.plot(hours, waiting)
    bp.title_block(ax, "Emergency waiting time", subtitle="Minutes, median per hour")
    fig.savefig("waiting-time-dark.png")
