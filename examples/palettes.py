"""Example: palette swatches and a continuous BFH colormap."""

import matplotlib.pyplot as plt
import numpy as np

import bfh_theme as bt

bt.save(bt.show_palettes(), "palettes.png", width=6, height=7.5)

bt.register_colormaps()
with bt.theme_context(theme="bfh_minimal"):
    fig, ax = plt.subplots(figsize=(5, 4))
    occupancy = np.random.default_rng(11).uniform(0.6, 1.0, (7, 24))
    image = ax.imshow(occupancy, cmap="bfh_blues_r", aspect="auto")
    fig.colorbar(image, ax=ax, label="BELÆGNING")
    bt.bfh_labs(ax, title="Belægning pr. time", x="time", y="ugedag")
    bt.save(bt.add_logo(fig, variant="full", resolution="web"), "occupancy.png", preset="square")
