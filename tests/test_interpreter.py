import pytest

from patternkit.interpreter import (
    Number,
    Operator,
    Parser,
    SimpleParser,
    Variable,
    main,
)


def test_number_interprets_to_itself():
    assert Number(7).interpret({}) == 7


def test_unknown_variable_reads_zero_and_is_stored():
    variables = {}
    assert Variable("x").interpret(variables) == 0
    assert variables == {"x": 0}


def test_known_variable():
    assert Variable("a").interpret({"a": 42}) == 42


def test_division_truncates_toward_zero():
    positive = Operator("/", Number(7), Number(2)).interpret({})
    negative = Operator("/", Number(-7), Number(2)).interpret({})
    assert negative == -positive


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Operator("/", Number(1), Number(0)).interpret({})


def test_unknown_operator_is_zero():
    assert Operator("%", Number(7), Number(2)).interpret({}) == 0


def test_top_of_stack_is_left_operand():
    variables = {"a": 5, "b": 3}
    assert SimpleParser().evaluate("ab-", variables) == -SimpleParser().evaluate("ba-", variables)


def test_addition():
    assert SimpleParser().evaluate("ab+", {"a": 5, "b": 10}) == 15


def test_other_characters_are_ignored():
    variables = {"a": 4, "b": 6}
    assert SimpleParser().evaluate(" a b * ", variables) == SimpleParser().evaluate("ab*", variables)


def test_digit_expression():
    assert SimpleParser().evaluate("9", {}) == 9


def test_operand_underflow_raises():
    with pytest.raises(ValueError):
        SimpleParser().evaluate("a+b", {"a": 1, "b": 2})


def test_empty_parser_cannot_evaluate():
    with pytest.raises(ValueError):
        Parser().evaluate({})


def test_stack_persists_between_parses():
    parser = Parser()
    parser.parse("a")
    parser.parse("b+")
    assert parser.evaluate({"a": 2, "b": 2}) == Operator("+", Number(2), Number(2)).interpret({})


def test_main_reports_malformed_sample(capsys):
    assert main([]) == 1
    assert "error" in capsys.readouterr().err