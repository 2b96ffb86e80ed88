"""
CLI Integration Tests

Runs the 'parbreak break' subcommand end to end on item tables.
"""
import pandas as pd
import pytest

from parbreak.__main__ import main
from parbreak.io import write_items
from parbreak.items import Box, Glue, Penalty


@pytest.fixture
def golden_table(tmp_path, golden_items):
    path = tmp_path / "golden.tsv"
    write_items(golden_items, path)
    return path


@pytest.fixture
def rigid_table(tmp_path):
    """Paragraph with rigid glue that cannot be broken at width 4 under a finite threshold"""
    path = tmp_path / "rigid.tsv"
    write_items([Box(3), Glue(1, 0, 0), Box(3), Glue(1, 0, 0), Box(3), Penalty.forced()], path)
    return path


@pytest.mark.integration
def test_break_writes_table(tmp_path, golden_table):
    output = tmp_path / "breaks.tsv"

    main(['break', '--items', str(golden_table), '--width', '80', '--output', str(output)])

    result = pd.read_csv(output, sep='\t')
    assert result['break_at'].tolist() == [77, 152, 230, 303, 375]
    assert result['line'].tolist() == [1, 2, 3, 4, 5]


@pytest.mark.integration
def test_break_prints_to_stdout(golden_table, capsys):
    main(['break', '-i', str(golden_table), '-w', '80', '--threshold', '100'])

    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert lines[0].split('\t') == ['line', 'break_at', 'adjustment_ratio', 'fitness_class']
    assert len(lines) == 6


@pytest.mark.integration
def test_looseness_option(tmp_path, golden_table):
    output = tmp_path / "loose.tsv"

    main(['break', '-i', str(golden_table), '-w', '80', '-q', '1', '-o', str(output)])

    assert len(pd.read_csv(output, sep='\t')) == 6


@pytest.mark.integration
def test_infeasible_exits_with_error(rigid_table):
    with pytest.raises(SystemExit) as excinfo:
        main(['break', '-i', str(rigid_table), '-w', '4', '-t', '100'])
    assert excinfo.value.code == 1


@pytest.mark.integration
def test_fallback_relaxes_threshold(tmp_path, rigid_table):
    output = tmp_path / "rigid_breaks.tsv"

    main(['break', '-i', str(rigid_table), '-w', '4', '-t', '100', '--fallback', '-o', str(output)])

    result = pd.read_csv(output, sep='\t')
    assert result['break_at'].iloc[-1] == 5


@pytest.mark.integration
def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
    assert 'parbreak' in capsys.readouterr().out
