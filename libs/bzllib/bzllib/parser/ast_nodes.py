"""AST node types for the Starlark parser.

Only the ``load`` statement is recognized so far.  :data:`Statement` is a
union so that further statement kinds can be added alongside
:class:`LoadStmt` without changing :class:`Program`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = [
    "LoadStmt",
    "Statement",
    "Program",
]


@dataclass(frozen=True)
class LoadStmt:
    """``load("module", "sym", alias = "sym", ...)``.

    ``symbols`` holds ``(local_name, exported_name)`` pairs in source order.
    A bare string binding has the same local and exported name.
    """

    module_name: str
    symbols: tuple[tuple[str, str], ...]

    def __str__(self) -> str:
        args = [f'"{self.module_name}"']
        for local, exported in self.symbols:
            if local == exported:
                args.append(f'"{exported}"')
            else:
                args.append(f'{local} = "{exported}"')
        return f"load({', '.join(args)})"


# Statement union
Statement = Union[LoadStmt]

STATEMENT_TYPES: tuple[type, ...] = (LoadStmt,)


@dataclass(frozen=True)
class Program:
    """A fully parsed source unit."""

    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return "\n".join(str(stmt) for stmt in self.statements)
