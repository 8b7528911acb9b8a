import io

import pytest

from arraykit.cli import main


def run(argv, capsys):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_max_product_command(capsys):
    code, out, _ = run(["max-product", "-2", "6", "-3", "-10", "0", "2"], capsys)
    assert code == 0
    assert out.strip() == "THE MAXIMUM PRODUCT SUBARRAY IS: 180"


def test_equilibrium_found(capsys):
    code, out, _ = run(["equilibrium", "1", "2", "0", "3"], capsys)
    assert code == 0
    assert out.strip() == "The equilibrium index is: 2"


def test_equilibrium_missing(capsys):
    code, out, _ = run(["equilibrium", "1", "1", "1", "1"], capsys)
    assert code == 0
    assert out.strip() == "There is no equilibrium index in the array."


def test_largest_command(capsys):
    _, out, _ = run(["largest", "3", "9", "2"], capsys)
    assert out.strip() == "MAXIMUM ELEMENT=9"


def test_sum_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    code, out, _ = run(["sum"], capsys)
    assert code == 0
    assert out.strip() == "SUM OF THE ELEMENTS OF THE ARRAY: 7"


def test_rotate_by_length_keeps_order(capsys):
    _, out, _ = run(["rotate", "3", "4", "5", "6"], capsys)
    assert out.strip() == "4 5 6"


def test_sort_freq_command(capsys):
    _, out, _ = run(["sort-freq", "5", "5", "4", "6", "4"], capsys)
    assert out.splitlines()[-1] == "4 4 5 5 6"


def test_symmetric_command(capsys):
    argv = ["symmetric", "10", "20", "30", "40", "20", "10", "50", "60"]
    _, out, _ = run(argv, capsys)
    assert out.strip() == "Symmetric Pairs are: [20, 10]"


def test_symmetric_odd_count_fails(capsys):
    code, out, err = run(["symmetric", "1", "2", "3"], capsys)
    assert code == 1
    assert out == ""
    assert "even number" in err


def test_empty_input_fails(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    code, _, err = run(["largest"], capsys)
    assert code == 1
    assert "empty" in err


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2