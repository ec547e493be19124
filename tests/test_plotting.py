import pytest

from gol.board import Board
from gol.patterns import PATTERNS, offset
from gol.plotting import save_animation, save_history_grid
from gol.simulator import simulate


@pytest.fixture
def glider_history():
    board = Board.new_with(10, 10, offset(PATTERNS['glider'], 1, 1))
    return simulate(board, steps=5)


def test_save_history_grid(tmp_path, glider_history):
    path = tmp_path / 'history.png'
    save_history_grid(glider_history, path, cols=3)
    assert path.exists()
    assert path.stat().st_size > 0


def test_save_history_grid_single_frame(tmp_path):
    path = tmp_path / 'one.png'
    save_history_grid(simulate(Board.new_with(4, 4, PATTERNS['block'])), path)
    assert path.exists()


def test_save_animation(tmp_path, glider_history):
    path = tmp_path / 'glider.gif'
    save_animation(glider_history, str(path))
    assert path.read_bytes()[:3] == b'GIF'


def test_empty_history_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_history_grid([], tmp_path / 'x.png')
    with pytest.raises(ValueError):
        save_animation([], str(tmp_path / 'x.gif'))


def test_save_animation_rejects_non_positive_interval(tmp_path, glider_history):
    for interval in (0, -100):
        with pytest.raises(ValueError, match='interval'):
            save_animation(glider_history, str(tmp_path / 'x.gif'), interval=interval)
    assert not (tmp_path / 'x.gif').exists()


def test_import_leaves_backend_alone(monkeypatch):
    import importlib
    import matplotlib
    import gol.plotting

    calls = []
    monkeypatch.setattr(matplotlib, 'use', lambda *a, **kw: calls.append(a))
    importlib.reload(gol.plotting)
    assert calls == []
