"""
Metrics for simulated GoL histories: period detection and outcome labels.
"""
import numpy as np

from .simulator import step_grid


def detect_period(history):
    """Given a history list of grids, return period (1 for still life, >1 if oscillator), or None if no repeat."""
    # detect period relative to final state
    if len(history) <= 1:
        return None
    last = history[-1]
    for p in range(1, len(history)):
        if np.array_equal(history[-1-p], last):
            return p
    return None


def classify_history(history):
    """
    Label the outcome of a history produced by simulator.simulate().
    simulate() stops before recording a repeated state, so the state that
    would follow the last frame is appended by stepping it once.
    """
    if not history or history[-1].sum() == 0:
        return 'died_out'
    per = detect_period(list(history) + [step_grid(history[-1])])
    if per == 1:
        return 'still_life'
    elif per and per > 1:
        return f'oscillator_p{per}'
    return 'survived_unknown'
