"""Example: monthly admissions per department, logo in the corner."""

import numpy as np

import bfh_theme as bt

months = np.arange(1, 13)
rng = np.random.default_rng(7)

fig, ax = bt.figure(preset="report_full")
for department in ["Akutmodtagelsen", "Medicinsk afdeling", "Kirurgisk afdeling"]:
    ax.plot(months, 400 + rng.normal(0, 40, 12).cumsum(), label=department)

bt.bfh_labs(
    ax,
    title="Indlæggelser pr. måned",
    subtitle="2024",
    caption="Kilde: LPR",
    x="måned",
    y="antal indlæggelser",
    color="afdeling",
)

branded = bt.overlay_logo(fig, alpha=0.9)
bt.save(branded, "admissions.png", preset="report_full")
