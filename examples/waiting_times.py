"""Example: two panels sharing one legend, footer and color bar."""

import numpy as np

import bfh_theme as bt

weeks = np.arange(1, 27)
rng = np.random.default_rng(3)


def outpatient(ax):
    ax.plot(weeks, 30 - 0.3 * weeks + rng.normal(0, 1, 26), label="Ambulant")
    ax.plot(weeks, 24 - 0.1 * weeks + rng.normal(0, 1, 26), label="Indlagt")
    bt.bfh_labs(ax, title="Medicinsk", x="uge", y="dage")


def surgical(ax):
    ax.plot(weeks, 40 - 0.5 * weeks + rng.normal(0, 1.5, 26), label="Ambulant")
    ax.plot(weeks, 35 - 0.2 * weeks + rng.normal(0, 1.5, 26), label="Indlagt")
    bt.bfh_labs(ax, title="Kirurgisk", x="uge")


dims = bt.get_dimensions("presentation", "wide")
fig, _ = bt.combine_plots([outpatient, surgical], ncol=2, figsize=(dims["width"], dims["height"]))

branded = bt.add_footer(bt.add_color_bar(fig, position="top"))
bt.save(branded, "waiting-times.png", preset="presentation_wide", dpi=150)
