from __future__ import annotations

from typing import Union

from logzero import logger

from nestset.objects.expressions import Declaration, Statement
from nestset.objects.multiset import MultiSet


class Program(object):
    def __init__(self, statements: list[Statement] = None) -> None:
        super().__init__()
        self.statements: list[Statement] = statements
        if self.statements is None:
            self.statements = list()
        self.env: dict[str, MultiSet] = dict()

    def add_statement(self, statement: Statement) -> None:
        self.statements.append(statement)

    @property
    def declared_names(self) -> list[str]:
        return list(
            s.name for s in self.statements if isinstance(s, Declaration)
        )

    def run(self) -> list[tuple[Statement, Union[MultiSet, int, bool]]]:
        """
        Execute the statements in order, the declared multisets are kept in `env`

        :return: the statements with their results
        """
        self.env = dict()
        results = []
        for statement in self.statements:
            value = statement.execute(self.env)
            logger.debug(f"{statement} => {value}")
            results.append((statement, value))
        return results

    def __str__(self) -> str:
        return '\n'.join(str(s) for s in self.statements)

    def __repr__(self) -> str:
        return str(self)
