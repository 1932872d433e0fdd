# emsystem

A small interactive console program for keeping a list of employees and
working out what each one is paid. The prompts and messages are in
Portuguese.

## Installing

```
pip install .
```

## Running

```
emsystem
```

The main menu offers:

- `1` – register a new employee (Criar novo Funcionario)
- `2` – delete an employee (Deletar Funcionario)
- `3` – list all employees (Exibir todos os funcionarios)
- `0` – quit (Encerrar)

An empty answer at the menu repeats the previous choice. The program also
stops quietly at end of input or on Ctrl-C.

When you register an employee you are asked for a name, a numeric id and a
base salary. Then you pick one of three roles (`1`, `2` or `3`), and each
one needs one more value:

| Role          | Extra value         | Final salary                                   |
|---------------|---------------------|------------------------------------------------|
| Desenvolvedor | number of projects  | base + 500 × projects                          |
| Gerente       | monthly bonus       | base + bonus                                   |
| Estagiario    | hours worked        | base × (hours // 160), integer division        |

Numeric prompts take the first word of the line and accept it only if it
is made of digits; otherwise an error is shown and you are asked again.
When a manager is listed, the monthly bonus is shown truncated to a whole
number, while the final salary uses the full value.

Deleting lists the employees with their position numbers and asks for the
position to remove, repeating the question until it is in range.

## Using it from Python

The employee types live in `emsystem.employees`: `Developer`, `Manager`
and `Intern`, all subclasses of `Employee`, each with a `role` (a `Role`
member), `final_salary()` and `describe()`.

```python
from emsystem.employees import Developer, Manager, Intern

dev = Developer("Ana", 1, 3000.0, 2)
print(dev.final_salary())   # 4000.0
print(dev.describe())
```

`emsystem.console.Console` wraps an input and an output stream (standard
input and output by default). `emsystem.factory.EmployeeFactory` uses it to
ask for a new employee (`create_employee`), list a list of employees
(`show_all`) and remove one from it (`delete_one`, which returns the removed
employee).

To run the menu against other streams, for example in tests or scripts, pass
a `Console` to `emsystem.app.run`; it returns the employees left when the
user quits:

```python
import io
from emsystem.console import Console
from emsystem.app import run

out = io.StringIO()
run(Console(io.StringIO("3\n0\n"), out))
print(out.getvalue())
```

## What it does not do

Employees are kept in memory only. Nothing is saved to a file or database,
so the list is empty every time the program starts. Employees cannot be
edited after they are registered.

## Tests

```
pip install .[test]
pytest
```