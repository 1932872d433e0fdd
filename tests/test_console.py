import io

import pytest

from emsystem.console import Console, is_digits


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("0", True), ("", False), ("12a", False), ("-1", False),
     ("1.5", False), ("١٢", False)],
)
def test_is_digits(text, expected):
    assert is_digits(text) is expected


def test_read_text_returns_line():
    console, out = make_console("Ana Souza\n")
    assert console.read_text("| Nome: ") == "Ana Souza"
    assert out.getvalue() == "| Nome: "


def test_read_text_empty_warns():
    console, out = make_console("\n")
    assert console.read_text("| Nome: ") is None
    assert "| AVISO: A entrada nao pode ser vazia." in out.getvalue()


def test_read_line_eof():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_line()


def test_read_number_retries_on_invalid():
    console, out = make_console("abc\n42\n")
    assert console.read_number("| Id: ", "I") == 42
    text = out.getvalue()
    assert text.count("| ERROR: Entrada invalida. Por favor, insira apenas numeros.") == 1
    assert text.count("| Id: ") == 2


def test_read_number_float_kind():
    console, _ = make_console("7\n")
    value = console.read_number("| Salario Base: ", "f")
    assert value == 7.0 and isinstance(value, float)


def test_read_number_takes_first_word_and_drops_rest_of_line():
    console, out = make_console("\n   15 extra\nnext\n")
    assert console.read_number("> ", "I") == 15
    assert console.read_line() == "next"
    assert out.getvalue().count("> ") == 1


def test_read_number_unknown_kind():
    console, _ = make_console("1\n")
    with pytest.raises(ValueError):
        console.read_number("> ", "X")


def test_read_number_eof():
    console, _ = make_console("abc\n")
    with pytest.raises(EOFError):
        console.read_number("> ", "I")


def test_print_menu():
    console, out = make_console()
    console.print_menu()
    assert out.getvalue() == (
        "| MENU \n|\n| ( 1 ) - Criar novo Funcionario \n| ( 2 ) - Deletar Funcionario \n"
        "| ( 3 ) - Exibir todos os funcionarios \n| ( 0 ) - Encerrar \n"
    )


def test_print_head():
    console, out = make_console()
    console.print_head()
    assert out.getvalue() == (
        "\n\n|  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *  *\n\n\n"
    )


def test_print_logo():
    console, out = make_console()
    console.print_logo()
    lines = out.getvalue().splitlines()
    assert len(lines) == 11
    assert lines[0].startswith("$$$$$$$$\\ $$\\")