from __future__ import annotations

from typing import Union

from nestset.objects.boolean import boolean
from nestset.objects.multiset import MultiSet
from nestset.utils import UndefinedNameError


Env = dict[str, MultiSet]


class Expression(object):
    """
    Base class for the expressions that evaluate to a multiset
    """
    def evaluate(self, env: Env) -> MultiSet:
        raise NotImplementedError

    def __repr__(self) -> str:
        return str(self)


class Literal(Expression):
    def __init__(self, notation: str) -> None:
        super().__init__()
        self.notation: str = notation

    def evaluate(self, env: Env) -> MultiSet:
        return MultiSet(self.notation)

    def __str__(self) -> str:
        return self.notation


class Reference(Expression):
    def __init__(self, name: str) -> None:
        super().__init__()
        self.name: str = name

    def evaluate(self, env: Env) -> MultiSet:
        if self.name not in env:
            raise UndefinedNameError(self.name)
        # never hand out the bound multiset itself
        return env[self.name].copy()

    def __str__(self) -> str:
        return self.name


class BinaryOperation(Expression):
    OPERATORS = {
        '+': lambda a, b: a + b,
        '*': lambda a, b: a * b,
        '-': lambda a, b: a - b,
    }

    def __init__(self, left: Expression, op: str, right: Expression) -> None:
        super().__init__()
        if op not in self.OPERATORS:
            raise ValueError(f"Unknown operator: {op}")
        self.left: Expression = left
        self.op: str = op
        self.right: Expression = right

    def evaluate(self, env: Env) -> MultiSet:
        return self.OPERATORS[self.op](
            self.left.evaluate(env), self.right.evaluate(env)
        )

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


class BooleanOperation(Expression):
    def __init__(self, obj: Expression) -> None:
        super().__init__()
        self.obj: Expression = obj

    def evaluate(self, env: Env) -> MultiSet:
        return boolean(self.obj.evaluate(env))

    def __str__(self) -> str:
        return f"boolean({self.obj})"


class Statement(object):
    def execute(self, env: Env) -> Union[MultiSet, int, bool]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return str(self)


class Declaration(Statement):
    def __init__(self, name: str, expr: Expression) -> None:
        super().__init__()
        self.name: str = name
        self.expr: Expression = expr

    def execute(self, env: Env) -> MultiSet:
        env[self.name] = self.expr.evaluate(env)
        return env[self.name]

    def __str__(self) -> str:
        return f"{self.name} = {self.expr}"


class ExpressionQuery(Statement):
    def __init__(self, expr: Expression) -> None:
        super().__init__()
        self.expr: Expression = expr

    def execute(self, env: Env) -> MultiSet:
        return self.expr.evaluate(env)

    def __str__(self) -> str:
        return str(self.expr)


class SizeQuery(ExpressionQuery):
    def execute(self, env: Env) -> int:
        return self.expr.evaluate(env).cardinality()

    def __str__(self) -> str:
        return f"|{self.expr}|"


class DistinctQuery(ExpressionQuery):
    def execute(self, env: Env) -> int:
        return self.expr.evaluate(env).distinct_count()

    def __str__(self) -> str:
        return f"distinct({self.expr})"


class CountQuery(ExpressionQuery):
    def __init__(self, expr: Expression, element: str) -> None:
        super().__init__(expr)
        self.element: str = element

    def execute(self, env: Env) -> int:
        return self.expr.evaluate(env).count(self.element)

    def __str__(self) -> str:
        return f"{self.expr}.count({self.element})"


class MembershipQuery(ExpressionQuery):
    def __init__(self, element: str, expr: Expression,
                 positive: bool = True) -> None:
        super().__init__(expr)
        self.element: str = element
        self.positive: bool = positive

    def execute(self, env: Env) -> bool:
        return self.expr.evaluate(env).contains(self.element) == self.positive

    def __str__(self) -> str:
        op = 'in' if self.positive else 'not in'
        return f"{self.element} {op} {self.expr}"


class EqualityQuery(Statement):
    def __init__(self, left: Expression, comparator: str,
                 right: Expression) -> None:
        super().__init__()
        self.left: Expression = left
        self.comparator: str = comparator
        self.right: Expression = right

    def execute(self, env: Env) -> bool:
        eq = self.left.evaluate(env) == self.right.evaluate(env)
        return eq if self.comparator == '==' else not eq

    def __str__(self) -> str:
        return f"{self.left} {self.comparator} {self.right}"
