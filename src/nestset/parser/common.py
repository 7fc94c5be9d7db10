from __future__ import annotations

from lark import Transformer


common_grammar = r"""
    left_parenthesis: "("
    right_parenthesis: ")"
    ?comparator: EQUALITY | NEQUALITY
    EQUALITY: "=="
    NEQUALITY: "!="
    NOT: "not"
    IN: "in"
    in_or_not: IN | NOT IN
    SCALAR: (LETTER | DIGIT)+
    _NL: /(\r?\n[\t ]*)+/

    %import common.CNAME
    %import common.LETTER
    %import common.DIGIT
    %import common.WS_INLINE
    %import common.SH_COMMENT
    %ignore WS_INLINE
    %ignore SH_COMMENT
"""


class CommonTransformer(Transformer):
    def __init__(self, visit_tokens: bool = True) -> None:
        super().__init__(visit_tokens)

    def parenthesis(self, args):
        return args[1]

    def in_or_not(self, args):
        # `in` or `not in`
        return len(args) == 1

    def SCALAR(self, args):
        return str(args)
