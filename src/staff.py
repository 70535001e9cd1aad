'''
This module defines the records the user can add: departments, roles and employees.
Each record knows which questions to ask and which values it binds to its INSERT.
'''

from prompts import Field


class Record:
    """Base class for a row that is created through the add operations"""

    table = ""
    columns = ()

    @classmethod
    def fields(cls):
        """Questions asked before the record is inserted"""
        return []

    @classmethod
    def from_input(cls, prompter):
        """Ask the record's questions and build it from the answers"""
        return cls(**prompter.ask(cls.fields()))

    def get_info(self):
        """Return the column values as a dictionary"""
        return {column: getattr(self, column) for column in self.columns}

    def insert_query(self):
        placeholders = ", ".join(["?"] * len(self.columns))
        return (
            f"INSERT INTO {self.table} ({', '.join(self.columns)}) "
            f"VALUES ({placeholders}) RETURNING *"
        )

    def insert(self, db):
        """Insert the record and return the id the database generated"""
        rows = db.execute(self.insert_query(), tuple(self.get_info().values()))
        return rows[0]["id"]


class Department(Record):
    table = "department"
    columns = ("name",)

    def __init__(self, name):
        self.name = name

    @classmethod
    def fields(cls):
        return [Field.text("name", "Enter the name of the department:")]

    def describe(self):
        return f"Department '{self.name}'"


class Role(Record):
    table = "role"
    columns = ("title", "salary", "department_id")

    def __init__(self, title, salary, department_id):
        self.title = title
        self.salary = salary
        self.department_id = department_id

    @classmethod
    def fields(cls):
        return [
            Field.text("title", "Enter the title of the role:"),
            Field.number("salary", "Enter the salary for the role:"),
            Field.number("department_id", "Enter the department ID for the role:"),
        ]

    def describe(self):
        return f"Role '{self.title}'"


class Employee(Record):
    table = "employee"
    columns = ("first_name", "last_name", "role_id", "manager_id")

    def __init__(self, first_name, last_name, role_id, manager_id=None):
        self.first_name = first_name
        self.last_name = last_name
        self.role_id = role_id
        self.manager_id = manager_id  # None means no manager

    @classmethod
    def fields(cls):
        return [
            Field.text("first_name", "Enter the employee's first name:"),
            Field.text("last_name", "Enter the employee's last name:"),
            Field.number("role_id", "Enter employee's role ID:"),
            Field.number(
                "manager_id",
                "Enter the employee's manager's ID (optional, leave blank if none):",
                default=None,
            ),
        ]

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def describe(self):
        return f"Employee '{self.full_name}'"
