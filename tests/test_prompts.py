"""
Tests for the `prompts.py` module.
"""

import pytest

from prompts import Field, FieldType, Prompter, PromptError, parse_number


@pytest.fixture
def printed():
    return []


@pytest.fixture
def quiet_prompter(answers, printed):
    return Prompter(input_func=answers, output_func=printed.append)


def test_parse_number():
    assert parse_number("42") == 42
    assert isinstance(parse_number("42"), int)
    assert parse_number("-3") == -3
    assert parse_number("80000.50") == 80000.5
    with pytest.raises(ValueError):
        parse_number("lots")


def test_field_constructors():
    assert Field.text("name", "Name:").field_type is FieldType.TEXT
    assert Field.number("salary", "Salary:").field_type is FieldType.NUMBER
    assert Field.choice("who", "Who?", [("Ann", 1)]).choices == [("Ann", 1)]


def test_number_field_defaults():
    assert not Field.number("role_id", "Role:").has_default
    assert Field.number("manager_id", "Manager:", default=None).has_default


def test_ask_returns_mapping_in_field_order(answers, quiet_prompter):
    answers.feed("  Analyst  ", "55000", "3")
    result = quiet_prompter.ask([
        Field.text("title", "Title:"),
        Field.number("salary", "Salary:"),
        Field.number("department_id", "Department:"),
    ])
    assert result == {"title": "Analyst", "salary": 55000, "department_id": 3}
    assert answers.prompts == ["Title: ", "Salary: ", "Department: "]


def test_text_may_be_blank(answers, quiet_prompter):
    answers.feed("")
    assert quiet_prompter.ask([Field.text("name", "Name:")]) == {"name": ""}


def test_number_reprompts_until_valid(answers, printed, quiet_prompter):
    answers.feed("abc", "12x", "12")
    assert quiet_prompter.ask([Field.number("role_id", "Role:")]) == {"role_id": 12}
    assert printed == ["Please enter a valid number", "Please enter a valid number"]


def test_required_number_reprompts_on_blank(answers, printed, quiet_prompter):
    answers.feed("", "7")
    assert quiet_prompter.ask([Field.number("role_id", "Role:")]) == {"role_id": 7}
    assert printed == ["Please enter a valid number"]


def test_blank_number_takes_none_default(answers, quiet_prompter):
    answers.feed("")
    result = quiet_prompter.ask([Field.number("manager_id", "Manager:", default=None)])
    assert result == {"manager_id": None}


def test_number_given_overrides_default(answers, quiet_prompter):
    answers.feed("4")
    result = quiet_prompter.ask([Field.number("manager_id", "Manager:", default=None)])
    assert result == {"manager_id": 4}


def test_choice_lists_labels_and_returns_value(answers, printed, quiet_prompter):
    answers.feed("2")
    field = Field.choice("employee_id", "Select the employee:", [("Ann Lee", 10), ("Bo Kim", 20)])

    assert quiet_prompter.ask([field]) == {"employee_id": 20}
    assert printed == ["Select the employee:", "1. Ann Lee", "2. Bo Kim"]
    assert answers.prompts == ["Select option (1-2): "]


@pytest.mark.parametrize("bad", ["0", "3", "-1", "one", "", "²", "1.5"])
def test_choice_reprompts_out_of_range(answers, printed, quiet_prompter, bad):
    answers.feed(bad, "1")
    field = Field.choice("employee_id", "Select:", [("Ann Lee", 10), ("Bo Kim", 20)])

    assert quiet_prompter.ask([field]) == {"employee_id": 10}
    assert printed[-1] == "Invalid choice! Please enter 1-2"


def test_choice_without_options_raises(quiet_prompter):
    with pytest.raises(PromptError, match="employee_id"):
        quiet_prompter.ask([Field.choice("employee_id", "Select:", [])])


def test_end_of_input_propagates(quiet_prompter):
    with pytest.raises(EOFError):
        quiet_prompter.ask([Field.text("name", "Name:")])


def test_defaults_to_builtin_input(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "Marketing")
    assert Prompter().ask([Field.text("name", "Name:")]) == {"name": "Marketing"}
