"""Galaxy chart for debugging and balance analysis."""

from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import numpy as np

EXPLORED_COLOR = 'teal'
UNEXPLORED_COLOR = 'silver'
SELECTED_EDGE = 'gold'
PLANET_COLOR = 'turquoise'
COLONY_COLOR = 'orange'


def planet_positions(center_x, center_y, count, radius):
    """Evenly spaced points on a circle around a system."""
    if count == 0:
        return np.empty(0), np.empty(0)
    angles = np.linspace(0, 2 * np.pi, count, endpoint=False) + np.pi / 2
    return center_x + radius * np.cos(angles), center_y + radius * np.sin(angles)


def chart_limits(coords, margin):
    """Axis limits covering every system plus a margin."""
    if len(coords) == 0:
        return (-margin, margin), (-margin, margin)
    low = coords.min(axis=0) - margin
    high = coords.max(axis=0) + margin
    return (low[0], high[0]), (low[1], high[1])


def plot_galaxy(snapshot, path: Optional[Union[str, Path]] = None, show: bool = False):
    """Draw every star system at its coordinates.

    Explored systems are teal and unexplored ones silver; the selected system
    gets a gold ring. Planets orbit their star, with developed planets
    (colonies) in orange. Returns the matplotlib figure; saves it when
    ``path`` is given.
    """
    systems = snapshot.star_systems
    coords = np.array([[s.coordinates.x, s.coordinates.y] for s in systems], dtype=float)
    spread = np.ptp(coords, axis=0).max() if len(coords) > 1 else 100.0
    star_radius = max(spread * 0.03, 1.0)
    orbit_radius = star_radius * 2.2

    fig, ax = plt.subplots(figsize=(10, 10))
    ax.set_aspect('equal')
    ax.axis('off')

    for system, (x, y) in zip(systems, coords):
        color = EXPLORED_COLOR if system.is_explored else UNEXPLORED_COLOR
        edge = SELECTED_EDGE if system.name == snapshot.selected_system else color
        ax.add_patch(plt.Circle((x, y), star_radius, facecolor=color, edgecolor=edge, linewidth=2))

        label = system.name
        if system.is_explored:
            px, py = planet_positions(x, y, len(system.planets), orbit_radius)
            colors = [COLONY_COLOR if p.developed else PLANET_COLOR for p in system.planets]
            ax.scatter(px, py, c=colors, s=30, zorder=3)
            colonies = len(system.developed_planets)
            if colonies:
                label = f"{label} ({colonies} {'colony' if colonies == 1 else 'colonies'})"
        ax.text(x, y + orbit_radius + star_radius, label, ha='center', va='bottom',
                fontsize=8, color=color, weight="bold")

    xlim, ylim = chart_limits(coords, orbit_radius * 2 + star_radius)
    ax.set_xlim(*xlim)
    ax.set_ylim(*ylim)

    if path is not None:
        fig.savefig(path, transparent=True)
    if show:
        plt.show()
    return fig
