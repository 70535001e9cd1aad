from enum import Enum

from config import load_config
from database import Database
from managing_system import ManagingSystem
from prompts import Field, Prompter


class MenuAction(Enum):
    """Main menu entries; the value is the label shown to the user"""

    VIEW_DEPARTMENTS = "View all departments"
    VIEW_ROLES = "View all roles"
    VIEW_EMPLOYEES = "View all employees"
    ADD_DEPARTMENT = "Add a department"
    ADD_ROLE = "Add a role"
    ADD_EMPLOYEE = "Add an employee"
    UPDATE_EMPLOYEE_ROLE = "Update an employee role"
    EXIT = "Exit"


HANDLERS = {
    MenuAction.VIEW_DEPARTMENTS: ManagingSystem.view_all_departments,
    MenuAction.VIEW_ROLES: ManagingSystem.view_all_roles,
    MenuAction.VIEW_EMPLOYEES: ManagingSystem.view_all_employees,
    MenuAction.ADD_DEPARTMENT: ManagingSystem.add_department,
    MenuAction.ADD_ROLE: ManagingSystem.add_role,
    MenuAction.ADD_EMPLOYEE: ManagingSystem.add_employee,
    MenuAction.UPDATE_EMPLOYEE_ROLE: ManagingSystem.update_employee_role,
}

MENU_FIELD = Field.choice(
    "action",
    "What would you like to do?",
    [(action.value, action) for action in MenuAction],
)


def run_menu(system, prompter):
    """Show the menu and dispatch until the user picks Exit"""
    while True:
        print("\n" + "=" * 50)
        action = prompter.ask([MENU_FIELD])["action"]

        if action is MenuAction.EXIT:
            print("Goodbye!")
            return
        HANDLERS[action](system)


def main():
    """Main application entry point"""
    config = load_config()
    prompter = Prompter()
    try:
        with Database(config.db_name) as db:
            run_menu(ManagingSystem(db, prompter), prompter)
    except (KeyboardInterrupt, EOFError):
        print("\nExiting system...")
    except Exception as e:
        print(f"An error occurred: {e}")


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    main()
