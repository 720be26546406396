"""Shared style, helpers, and constants for normplot figures."""

import os

import matplotlib.pyplot as plt

# ---------------------------------------------------------------------------
# Output settings
# ---------------------------------------------------------------------------

DPI = 200
FIGSIZE = (7, 4.5)

# ---------------------------------------------------------------------------
# Light theme style (plain statistics-textbook look)
# ---------------------------------------------------------------------------

STYLE = {
    "bg": "#ffffff",  # Paper white background
    "curve": "#000000",  # Density curve and baseline
    "axis": "#333333",  # Axis lines and tick labels
    "text": "#000000",  # Captions
    "marker": "#000000",  # Dashed boundary markers
    "shade": "grey",  # Hatched highlight region
}

# Base font size that cex multiplies
FONT_SIZE = 10


def setup_figure(figsize=FIGSIZE):
    """Create a figure with a single axes styled for a density plot."""
    fig = plt.figure(figsize=figsize, facecolor=STYLE["bg"])
    ax = fig.add_subplot(111)
    ax.set_facecolor(STYLE["bg"])
    return fig, ax


def save(fig, out_dir, filename):
    """Save a figure to out_dir (created automatically) and close it."""
    os.makedirs(out_dir, exist_ok=True)
    out = os.path.join(out_dir, filename)
    fig.savefig(
        out,
        dpi=DPI,
        bbox_inches="tight",
        facecolor=STYLE["bg"],
        pad_inches=0.2,
    )
    plt.close(fig)
    print(f"  {os.path.relpath(out)}")
    return out
