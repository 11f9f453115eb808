import pytest

from nibbles.__main__ import main


def test_cell_size_out_of_range_is_rejected():
    with pytest.raises(SystemExit) as exc:
        main(["--cell-size", "40"])
    assert exc.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--seed" in capsys.readouterr().out
