import pytest

import run
from gol.cell import ALIVE_GLYPH


def test_runs_until_empty(capsys):
    history = run.main(['--width', '10', '--height', '10', '--pattern', 'blinker',
                        '--origin_x', '20', '--origin_y', '20', '--delay', '0'])
    out = capsys.readouterr().out
    # seed lies off the board, so nothing is printed before the summary
    assert len(history) == 1
    assert 'Ran 0 generations: died_out' in out


def test_prints_each_generation_with_separator(capsys):
    run.main(['--width', '5', '--height', '5', '--pattern', 'blinker',
              '--origin_x', '1', '--origin_y', '1', '--delay', '0',
              '--max_generations', '3', '--separator', '~~~'])
    out = capsys.readouterr().out
    assert out.count('~~~\n') == 3
    assert out.count(ALIVE_GLYPH) == 9
    assert 'Ran 3 generations: oscillator_p2' in out


def test_random_seed_is_reproducible(capsys):
    argv = ['--width', '12', '--height', '8', '--random', '--seed', '3',
            '--delay', '0', '--max_generations', '2']
    first = run.main(argv)
    second = run.main(argv)
    assert [g.tolist() for g in first] == [g.tolist() for g in second]


def test_saves_outputs(tmp_path, capsys):
    png = tmp_path / 'gens.png'
    gif = tmp_path / 'gens.gif'
    run.main(['--width', '6', '--height', '6', '--pattern', 'block',
              '--origin_x', '2', '--origin_y', '2', '--delay', '0',
              '--max_generations', '2', '--save_plot', str(png), '--save_gif', str(gif)])
    out = capsys.readouterr().out
    assert png.exists() and gif.exists()
    assert 'still_life' in out
    assert f'Saved plot: {png}' in out


@pytest.mark.parametrize('argv', [
    ['--width', '-1'],
    ['--delay', '-0.5'],
    ['--max_generations', '-2'],
    ['--threshold', '2'],
    ['--pattern', 'nope'],
])
def test_bad_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc:
        run.parse_args(argv)
    assert exc.value.code == 2


def test_history_is_bounded_without_save_flags(capsys):
    history = run.main(['--width', '6', '--height', '6', '--pattern', 'block',
                        '--origin_x', '2', '--origin_y', '2', '--delay', '0',
                        '--max_generations', '500'])
    out = capsys.readouterr().out
    assert len(history) <= run.HISTORY_WINDOW
    assert 'Ran 500 generations: still_life' in out


def test_full_history_kept_when_saving(tmp_path, capsys):
    history = run.main(['--width', '6', '--height', '6', '--pattern', 'blinker',
                        '--origin_x', '1', '--origin_y', '1', '--delay', '0',
                        '--max_generations', str(run.HISTORY_WINDOW + 10),
                        '--save_plot', str(tmp_path / 'all.png')])
    assert len(history) == run.HISTORY_WINDOW + 11
    assert 'oscillator_p2' in capsys.readouterr().out
