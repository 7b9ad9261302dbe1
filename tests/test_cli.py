import math

import pytest

from algodrills.cli import DEFAULT_VALUES, main


def test_hello(capsys):
    assert main(["hello"]) == 0
    assert capsys.readouterr().out == "Hello world\n"


def test_count_digits(capsys):
    assert main(["count-digits", "987654"]) == 0
    assert capsys.readouterr().out.strip() == str(len("987654"))


def test_count_digits_default(capsys):
    main(["count-digits"])
    assert capsys.readouterr().out.strip() == str(len("12345"))


def test_gcd_default(capsys):
    assert main(["gcd"]) == 0
    assert capsys.readouterr().out.strip() == f"GCD is {math.gcd(52, 10)}"


def test_gcd_given(capsys):
    main(["gcd", "18", "48"])
    assert capsys.readouterr().out.strip() == f"GCD is {math.gcd(18, 48)}"


def test_gcd_negative_exits():
    with pytest.raises(SystemExit):
        main(["gcd", "-4", "2"])


@pytest.mark.parametrize("algorithm", ["insertion", "merge"])
def test_sort_default_values(capsys, algorithm):
    assert main(["sort", algorithm]) == 0
    out = capsys.readouterr().out.split()
    assert [int(x) for x in out] == sorted(DEFAULT_VALUES)


@pytest.mark.parametrize("algorithm", ["insertion", "merge"])
def test_sort_given_values(capsys, algorithm):
    main(["sort", algorithm, "3", "1", "2"])
    assert [int(x) for x in capsys.readouterr().out.split()] == sorted([3, 1, 2])


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        main(["nope"])


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        main([])