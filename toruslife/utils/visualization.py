"""
Render sinks for Game of Life grids: plain text and matplotlib.
"""
import logging
import sys
from typing import Optional, TextIO

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter

logger = logging.getLogger(__name__)


def format_grid(grid, alive: str = '1', dead: str = '0', sep: str = ' ') -> str:
    """
    Map a grid to text, one line per row.

    Args:
        grid: State array (H x W)
        alive: Glyph for live cells
        dead: Glyph for dead cells
        sep: Separator placed between cells of a row

    Returns:
        The rendered rows joined by newlines
    """
    state = np.asarray(grid)
    return '\n'.join(sep.join(alive if cell else dead for cell in row) for row in state)


def print_grid(grid,
               stream: Optional[TextIO] = None,
               alive: str = '1',
               dead: str = '0',
               sep: str = ' ') -> None:
    """Write the grid followed by a blank line to stream (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    stream.write(format_grid(grid, alive=alive, dead=dead, sep=sep) + '\n\n')


def _draw_cells(ax, state: np.ndarray, show_grid: bool, **imshow_kwargs):
    im = ax.imshow(state, cmap='binary', interpolation='nearest', vmin=0, vmax=1,
                   **imshow_kwargs)
    if show_grid:
        h, w = state.shape
        ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
        ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)
    ax.set_xticks([])
    ax.set_yticks([])
    return im


def _save_or_show(fig, save_path, what):
    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
        logger.info("Saved %s to %s", what, save_path)
    else:
        plt.show()
    plt.close(fig)


def visualize_state(state: np.ndarray,
                    title: str = "Game of Life",
                    save_path: Optional[str] = None,
                    figsize: tuple = (8, 8),
                    show_grid: bool = True) -> None:
    """
    Visualize a single Game of Life state.

    Args:
        state: State array (H x W)
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)
    _draw_cells(ax, np.asarray(state), show_grid)
    ax.set_title(title, fontsize=16, pad=10)
    fig.tight_layout()
    _save_or_show(fig, save_path, "state")


def visualize_trajectory(trajectory: np.ndarray,
                         pattern_name: str = "Pattern",
                         save_path: Optional[str] = None,
                         figsize: tuple = (16, 4),
                         num_frames_to_show: int = 8,
                         show_grid: bool = True) -> None:
    """
    Visualize evenly spaced frames from a trajectory (T, H, W).
    """
    num_steps = len(trajectory)
    num_frames_to_show = max(1, min(num_frames_to_show, num_steps))
    indices = np.linspace(0, num_steps - 1, num_frames_to_show, dtype=int)

    fig, axes = plt.subplots(1, num_frames_to_show, figsize=figsize)
    axes = np.atleast_1d(axes)

    for ax, idx in zip(axes, indices):
        _draw_cells(ax, trajectory[idx], show_grid)
        ax.set_title(f"t={idx}", fontsize=12)

    fig.suptitle(f"{pattern_name} Evolution", fontsize=16)
    fig.tight_layout()
    _save_or_show(fig, save_path, "trajectory")


def create_animation(trajectory: np.ndarray,
                     pattern_name: str = "Pattern",
                     save_path: Optional[str] = None,
                     fps: int = 10,
                     figsize: tuple = (8, 8),
                     show_grid: bool = True) -> None:
    """
    Create animated GIF from trajectory.

    Args:
        trajectory: Trajectory array (T, H, W)
        pattern_name: Pattern name for title
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)
    im = _draw_cells(ax, trajectory[0], show_grid, animated=True)
    title = ax.set_title(f"{pattern_name} - Step 0", fontsize=16)

    def update(frame):
        im.set_array(trajectory[frame])
        title.set_text(f"{pattern_name} - Step {frame}")
        return [im, title]

    anim = FuncAnimation(fig, update, frames=len(trajectory),
                         interval=1000 // fps, blit=True, repeat=True)

    if save_path:
        anim.save(save_path, writer=PillowWriter(fps=fps))
        logger.info("Saved animation to %s", save_path)
    else:
        plt.show()

    plt.close(fig)
