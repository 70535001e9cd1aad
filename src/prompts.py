'''
This module collects typed answers from the user for the add/update operations.
'''

from enum import Enum

# marks a field that has no default and must be answered
REQUIRED = object()


class PromptError(Exception):
    """Raised when a prompt cannot be answered at all."""


class FieldType(Enum):
    TEXT = "text"
    NUMBER = "number"
    CHOICE = "choice"


class Field:
    """One question; the answer is stored under ``name``.

    ``choices`` is a sequence of ``(label, value)`` pairs used by CHOICE
    fields. A NUMBER field left blank returns ``default`` when one is given,
    ``None`` included.
    """

    def __init__(self, name, message, field_type=FieldType.TEXT, default=REQUIRED, choices=()):
        self.name = name
        self.message = message
        self.field_type = field_type
        self.default = default
        self.choices = list(choices)

    @classmethod
    def text(cls, name, message):
        return cls(name, message, FieldType.TEXT)

    @classmethod
    def number(cls, name, message, default=REQUIRED):
        return cls(name, message, FieldType.NUMBER, default=default)

    @classmethod
    def choice(cls, name, message, choices):
        return cls(name, message, FieldType.CHOICE, choices=choices)

    @property
    def has_default(self):
        return self.default is not REQUIRED

    def __repr__(self):
        return f"Field({self.name!r}, type={self.field_type.value})"


def parse_number(raw):
    """Coerce ``raw`` to an int when it is an integer literal, else a float."""
    try:
        return int(raw)
    except ValueError:
        return float(raw)


class Prompter:
    """Asks questions through ``input_func`` and reports problems through ``output_func``."""

    def __init__(self, input_func=None, output_func=None):
        self.input = input_func or input
        self.output = output_func or print

    def ask(self, fields):
        """Ask every field in order and return ``{field.name: value}``."""
        answers = {}
        for field in fields:
            if field.field_type is FieldType.TEXT:
                answers[field.name] = self._ask_text(field)
            elif field.field_type is FieldType.NUMBER:
                answers[field.name] = self._ask_number(field)
            else:
                answers[field.name] = self._ask_choice(field)
        return answers

    def _ask_text(self, field):
        return self.input(f"{field.message} ").strip()

    def _ask_number(self, field):
        while True:
            raw = self.input(f"{field.message} ").strip()
            if not raw and field.has_default:
                return field.default
            try:
                return parse_number(raw)
            except ValueError:
                self.output("Please enter a valid number")

    def _ask_choice(self, field):
        if not field.choices:
            raise PromptError(f"no options available for '{field.name}'")

        self.output(field.message)
        for position, (label, _) in enumerate(field.choices, start=1):
            self.output(f"{position}. {label}")

        last = len(field.choices)
        while True:
            raw = self.input(f"Select option (1-{last}): ").strip()
            if raw.isdecimal() and 1 <= int(raw) <= last:
                return field.choices[int(raw) - 1][1]
            self.output(f"Invalid choice! Please enter 1-{last}")
