"""Interactive creation, listing and removal of employees."""

from __future__ import annotations

import re

from emsystem.console import Console
from emsystem.employees import Developer, Employee, Intern, Manager, Role

_ROLE_CHOICES = {1: Role.DEVELOPER, 2: Role.MANAGER, 3: Role.INTERN}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

EMPTY_LIST_MESSAGE = "| Lita de Funcionarios vazia\n"


class EmployeeFactory:
    """Builds employees from console answers and manages a list of them."""

    def __init__(self, console: Console):
        self.console = console

    def choose_role(self) -> Role:
        """Ask for a role until 1, 2 or 3 is entered."""
        console = self.console
        console.write("\n| Selecione o cargo do Funcionario:\n")
        console.write("\n|\n| ( 1 ) - Desenvolvedor\n")
        console.write("| ( 2 ) - Gerente\n")
        console.write("| ( 3 ) - Estagiario\n")
        console.write("| Escolha: ")
        while True:
            line = console.read_line()
            if not line.strip():
                continue
            match = _LEADING_INT.match(line)
            if match and int(match.group(1)) in _ROLE_CHOICES:
                return _ROLE_CHOICES[int(match.group(1))]
            console.write("| Escolha invalida. Tente novamente: ")

    def create_employee(self) -> Employee:
        """Ask for an employee's data and build the matching record."""
        console = self.console
        console.print_head()
        console.write("|  CADASTRO DE NOVO FUNCIONARIO  |\n\n")

        name = console.read_text("| Nome: ") or ""
        employee_id = console.read_number("| Id: ", "I")
        base_salary = console.read_number("| Salario Base: ", "F")

        role = self.choose_role()
        if role is Role.DEVELOPER:
            projects = console.read_number("| Quantidade de projetos: ", "I")
            return Developer(name, employee_id, base_salary, projects)
        if role is Role.MANAGER:
            bonus = console.read_number("| Bonus Mensal: ", "F")
            return Manager(name, employee_id, base_salary, bonus)
        hours = console.read_number("| Horas Trabalhadas: ", "I")
        return Intern(name, employee_id, base_salary, hours)

    def show_all(self, employees: list[Employee]) -> None:
        """List every employee with its position number."""
        if not employees:
            self.console.write(EMPTY_LIST_MESSAGE)
            return
        for position, employee in enumerate(employees):
            self.console.write(f" ( {position} ) - ")
            self.console.write(employee.describe() + "\n")

    def delete_one(self, employees: list[Employee]) -> Employee | None:
        """Ask for a position and remove that employee; return it."""
        if not employees:
            self.console.write(EMPTY_LIST_MESSAGE)
            return None
        self.show_all(employees)
        while True:
            position = self.console.read_number("\n| Digite o numero: ", "I")
            if 0 <= position < len(employees):
                return employees.pop(position)
            self.console.write("| Quantitade invalida \n")