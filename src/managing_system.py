import functools

from display import print_table
from prompts import Field, Prompter
from staff import Department, Employee, Role

VIEW_DEPARTMENTS_QUERY = "SELECT id, name FROM department"

VIEW_ROLES_QUERY = """
SELECT
    role.id,
    role.title,
    role.salary,
    department.name AS department
FROM role
INNER JOIN department ON role.department_id = department.id
"""

VIEW_EMPLOYEES_QUERY = """
SELECT
    e.id,
    e.first_name,
    e.last_name,
    r.title AS role,
    d.name AS department,
    r.salary,
    m.first_name || ' ' || m.last_name AS manager
FROM employee AS e
LEFT JOIN role AS r ON e.role_id = r.id
LEFT JOIN department AS d ON r.department_id = d.id
LEFT JOIN employee AS m ON e.manager_id = m.id
"""

EMPLOYEE_CHOICES_QUERY = "SELECT id, first_name, last_name FROM employee"

UPDATE_EMPLOYEE_ROLE_QUERY = "UPDATE employee SET role_id = ? WHERE id = ?"


def operation(context):
    """Report any failure as ``Error <context>: <message>`` and return normally.

    End of input is not a failure of the operation and is re-raised.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except EOFError:
                raise
            except Exception as e:
                print(f"Error {context}: {e}")
                return None
        return wrapper
    return decorator


class ManagingSystem:
    """Query operations over departments, roles and employees"""

    def __init__(self, db, prompter=None):
        self.db = db
        self.prompter = prompter or Prompter()

    @operation("viewing all departments")
    def view_all_departments(self):
        print_table(self.db.execute(VIEW_DEPARTMENTS_QUERY))

    @operation("viewing all roles")
    def view_all_roles(self):
        print_table(self.db.execute(VIEW_ROLES_QUERY))

    @operation("viewing all employees")
    def view_all_employees(self):
        print_table(self.db.execute(VIEW_EMPLOYEES_QUERY))

    @operation("adding department")
    def add_department(self):
        return self._add(Department)

    @operation("adding role")
    def add_role(self):
        return self._add(Role)

    @operation("adding employee")
    def add_employee(self):
        return self._add(Employee)

    @operation("updating employee role")
    def update_employee_role(self):
        """Reassign the role of an employee picked from the current list"""
        employees = self.db.execute(EMPLOYEE_CHOICES_QUERY)
        choices = [(f"{row['first_name']} {row['last_name']}", row["id"]) for row in employees]

        answers = self.prompter.ask([
            Field.choice("employee_id", "Select the employee to update:", choices),
            Field.number("role_id", "Enter the new role ID for the employee:"),
        ])
        self.db.execute(UPDATE_EMPLOYEE_ROLE_QUERY, (answers["role_id"], answers["employee_id"]))
        print("Employee's role updated successfully")

    def _add(self, record_class):
        record = record_class.from_input(self.prompter)
        new_id = record.insert(self.db)
        print(f"{record.describe()} added successfully with ID {new_id}")
        return new_id
