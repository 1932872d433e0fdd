"""Employee records and their salary rules."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

DEVELOPER_PROJECT_BONUS = 500
INTERN_FULL_MONTH_HOURS = 160


class Role(enum.Enum):
    """Job role of an employee."""

    DEVELOPER = "Desenvolvedor"
    MANAGER = "Gerente"
    INTERN = "Estagiario"


def _fmt(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


@dataclass
class Employee(ABC):
    """Common data shared by every kind of employee."""

    name: str
    employee_id: int
    base_salary: float

    role: ClassVar[Role]

    @abstractmethod
    def final_salary(self) -> float:
        """Salary after the role's own rules are applied."""

    def describe(self) -> str:
        """Generic multi-line summary of the employee."""
        return (
            f"| Nome: {self.name}\n"
            f"| ID: {self.employee_id}\n"
            f"| Salário Base: {_fmt(self.base_salary)}"
        )

    def _summary(self, detail: str) -> str:
        return (
            f"| Cargo: {self.role.value} | Nome: {self.name} | ID: {self.employee_id}"
            f" | Salario Base: {_fmt(self.base_salary)} R$ | {detail}"
            f" | Salario Final: {_fmt(self.final_salary())} R$ "
        )


@dataclass
class Developer(Employee):
    """Developer paid a fixed bonus for every project."""

    projects: int = 0

    role: ClassVar[Role] = Role.DEVELOPER

    def final_salary(self) -> float:
        return self.base_salary + DEVELOPER_PROJECT_BONUS * self.projects

    def describe(self) -> str:
        return self._summary(f"Quantidade de projetos: {self.projects}")


@dataclass
class Manager(Employee):
    """Manager receiving a monthly bonus on top of the base salary."""

    monthly_bonus: float = 0.0

    role: ClassVar[Role] = Role.MANAGER

    def final_salary(self) -> float:
        return self.base_salary + self.monthly_bonus

    def describe(self) -> str:
        return self._summary(f"Bonus Mensal: {int(self.monthly_bonus)}")


@dataclass
class Intern(Employee):
    """Intern paid per completed block of full-month hours."""

    hours_worked: int = 0

    role: ClassVar[Role] = Role.INTERN

    def final_salary(self) -> float:
        return self.base_salary * (self.hours_worked // INTERN_FULL_MONTH_HOURS)

    def describe(self) -> str:
        return self._summary(f"Horas Trabalhadas: {self.hours_worked}")