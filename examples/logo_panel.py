"""Example: two panels with a shared legend and a logo from an approved directory.

Usage: python logo_panel.py /path/to/approved/logos/bfh_logo.png
"""

import os
import sys

import numpy as np

import bfh_plots as bp

logo = sys.argv[1]
bp.set_logo_root(os.path.dirname(os.path.abspath(logo)))

days = np.arange(30)
fig, (left, right) = bp.combine(2, ncols=2, figsize=(10, 4))
left.plot(days, 40 + days * 0.5, label="Occupied beds")
left.plot(days, 60 - days * 0.2, label="Free beds")
left.set_title("Bispebjerg")
right.plot(days, 55 + np.sin(days / 4) * 5, label="Occupied beds")
right.plot(days, 45 - np.sin(days / 4) * 5, label="Free beds")
right.set_title("Frederiksberg")

bp.shared_legend(fig, [left, right], position="bottom")
bp.add_color_bar(fig, position="top")
bp.add_logo(fig, logo, position="topright", size=0.08)
bp.save(fig, "bed-capacity.png", preset="presentation_wide")
