import io

import pytest

from autolab.calculator import Calculator, main


def test_integer_division_truncates_toward_zero():
    assert Calculator(int).divide(-7, 2) == -3


def test_integer_mod_takes_sign_of_dividend():
    assert Calculator(int).mod(-7, 2) == -1


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (100, 7)])
def test_integer_division_identity(a, b):
    calc = Calculator(int)
    assert calc.divide(a, b) * b + calc.mod(a, b) == a


@pytest.mark.parametrize("a,b", [(5.5, 2.0), (-5.5, 2.0), (9.25, -4.0)])
def test_float_mod_properties(a, b):
    result = Calculator(float).mod(a, b)
    assert abs(result) < abs(b)
    assert result == 0 or (result > 0) == (a > 0)


@pytest.mark.parametrize("number_type", [int, float])
def test_divide_by_zero_raises(number_type):
    with pytest.raises(ValueError, match="Cannot divide by zero!"):
        Calculator(number_type).divide(3, 0)


@pytest.mark.parametrize("number_type", [int, float])
def test_mod_by_zero_raises(number_type):
    with pytest.raises(ValueError, match="The modulus can not be zero!"):
        Calculator(number_type).mod(3, 0)


@pytest.mark.parametrize("a", [0, 3, -4, 12])
def test_square_equals_multiply(a):
    calc = Calculator(int)
    assert calc.square(a) == calc.multiply(a, a)
    assert calc.exp(a, 2) == calc.square(a)


@pytest.mark.parametrize("a,b", [(3, 9), (-2, 5), (1.5, 2.25)])
def test_add_subtract_round_trip(a, b):
    calc = Calculator(float)
    assert calc.subtract(calc.add(a, b), b) == pytest.approx(a)


def test_integer_exponent_truncates():
    assert Calculator(int).exp(2, -1) == 0


def test_float_divide_returns_float():
    calc = Calculator(float)
    assert calc.multiply(calc.divide(1.0, 4.0), 4.0) == pytest.approx(1.0)


def test_rejects_unknown_type():
    with pytest.raises(TypeError):
        Calculator(str)


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main()
    return code, capsys.readouterr().out


def test_main_addition(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n1 2 3\nn\n")
    assert code == 0
    assert "Integer Calculator choosen!" in out
    assert "The result is: " + str(Calculator(int).add(2, 3)) in out
    assert "Thank you for using the calculator!" in out


def test_main_divide_by_zero(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "3\n4 1 0\nn\n")
    assert "Double Calculator choosen!" in out
    assert "Cannot divide by zero!" in out


def test_main_invalid_type(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "9\n")
    assert "Invalid choice!" in out
    assert "Welcome to the calculator!" not in out


def test_main_invalid_operation(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n8\nn\n")
    assert "Invalid choice!" in out
    assert "Thank you for using the calculator!" in out