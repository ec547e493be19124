"""
Matplotlib output for GoL histories (lists of 2D 0/1 arrays).
"""
import math

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation


def save_history_grid(history, path, cols=4):
    """One panel per generation, labelled with its index."""
    if not history:
        raise ValueError("history is empty")
    n = len(history)
    cols = max(1, min(cols, n))
    rows = math.ceil(n / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(cols*2, rows*2))
    # ensure axes is a 2D array for consistent indexing
    axes = np.array(axes).reshape(rows, cols)
    for i in range(rows*cols):
        ax = axes[i//cols, i%cols]
        if i < n:
            ax.imshow(history[i], cmap='gray_r', vmin=0, vmax=1)
            ax.text(0.05, 0.9, str(i), color='red', fontsize=8, transform=ax.transAxes)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(True)
            spine.set_edgecolor('black')
            spine.set_linewidth(1)
    plt.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def save_animation(history, path, interval=200):
    """Animated GIF of the history, written with the pillow writer."""
    if not history:
        raise ValueError("history is empty")
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    fig, ax = plt.subplots()
    ax.axis('off')
    im = ax.imshow(history[0], cmap='gray_r', vmin=0, vmax=1)

    def update(i):
        im.set_data(history[i])
        return [im]

    anim = animation.FuncAnimation(fig, update, frames=len(history), interval=interval, blit=True)
    anim.save(path, writer='pillow', fps=max(1, round(1000 / interval)))
    plt.close(fig)
