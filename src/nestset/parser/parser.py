from __future__ import annotations

from lark import Lark
from lark.exceptions import LarkError, VisitError
from logzero import logger

from nestset.objects.expressions import BinaryOperation, BooleanOperation, \
    CountQuery, Declaration, DistinctQuery, EqualityQuery, Expression, \
    ExpressionQuery, Literal, MembershipQuery, Reference, SizeQuery
from nestset.parser.common import CommonTransformer
from nestset.parser.grammar import grammar
from nestset.program import Program
from nestset.utils import RESERVED_KEYWORDS, NestsetError, \
    ScriptParsingError, ScriptTypeError, UndefinedNameError


class NestsetTransformer(CommonTransformer):
    def __init__(self, visit_tokens: bool = True) -> None:
        super().__init__(visit_tokens)
        self.program: Program = Program()
        # names declared so far, a name must be declared before it is used
        self.declared: set[str] = set()

    def script(self, args):
        for statement in args:
            self.program.add_statement(statement)
        return self.program

    def left_identity(self, args):
        name = str(args[0].value)
        if name in RESERVED_KEYWORDS:
            raise ScriptParsingError(f"The name {name} is reserved.")
        return name

    def declaration(self, args):
        name, expr = args
        self._check_expr(expr)
        # the right-hand side is resolved before the name is bound
        self.declared.add(name)
        return Declaration(name, expr)

    def expr_query(self, args):
        return ExpressionQuery(self._check_expr(args[0]))

    def size_query(self, args):
        return SizeQuery(self._check_expr(args[0]))

    def distinct_query(self, args):
        return DistinctQuery(self._check_expr(args[2]))

    def count_query(self, args):
        expr, element = args[0], args[3]
        return CountQuery(self._check_expr(expr), self._element_text(element))

    def membership_query(self, args):
        element, positive, expr = args
        return MembershipQuery(
            self._element_text(element), self._check_expr(expr), positive
        )

    def equality_query(self, args):
        left, comparator, right = args
        return EqualityQuery(
            self._check_expr(left), str(comparator), self._check_expr(right)
        )

    def binary_operation(self, args):
        left, op, right = args
        return BinaryOperation(
            self._check_expr(left), str(op), self._check_expr(right)
        )

    def boolean_operation(self, args):
        return BooleanOperation(self._check_expr(args[2]))

    def identity(self, args):
        name = str(args[0].value)
        if name not in self.declared:
            raise UndefinedNameError(name)
        return Reference(name)

    def literal(self, args):
        return Literal('{' + ','.join(
            self._element_text(arg) for arg in args if arg is not None
        ) + '}')

    def _element_text(self, element) -> str:
        if isinstance(element, Literal):
            return element.notation
        if isinstance(element, str):
            return element
        raise ScriptTypeError('multiset element', element)

    def _check_expr(self, expr) -> Expression:
        if not isinstance(expr, Expression):
            raise ScriptTypeError('multiset expression', expr)
        return expr


def parse(text: str) -> Program:
    """
    Parse a multiset script

    :param text: the script
    :return: the program, call `run` to evaluate it
    :raises ScriptParsingError: if the script is malformed
    """
    parser = Lark(grammar, start='script')
    try:
        tree = parser.parse(text)
        return NestsetTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, NestsetError):
            raise e.orig_exc
        raise
    except LarkError as e:
        logger.debug(f"Failed to parse the script: {e}")
        raise ScriptParsingError(str(e)) from e
