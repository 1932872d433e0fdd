"""Menu loop of the employee management program."""

from __future__ import annotations

from emsystem.console import Console
from emsystem.employees import Employee
from emsystem.factory import EmployeeFactory


def run(console: Console) -> list[Employee]:
    """Run the menu until the user quits; return the remaining employees."""
    employees: list[Employee] = []
    factory = EmployeeFactory(console)
    choice = ""

    console.print_head()
    console.print_logo()

    while True:
        console.print_head()
        console.print_menu()
        entered = console.read_text("| Escolha: ")
        if entered is not None:
            choice = entered
        if len(choice) != 1:
            continue
        if choice == "1":
            employee = factory.create_employee()
            console.print_head()
            console.write(employee.describe() + "\n")
            employees.append(employee)
        elif choice == "2":
            console.print_head()
            factory.delete_one(employees)
        elif choice == "3":
            console.print_head()
            factory.show_all(employees)
        elif choice == "0":
            console.write("\n| Finalizando... \n")
            return employees
        else:
            console.write("| Entrada incorreta\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    try:
        run(Console())
    except (EOFError, KeyboardInterrupt):
        pass
    return 0