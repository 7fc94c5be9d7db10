from nestset.parser.common import common_grammar


nestset_grammar = r"""
    script: _NL* (statement (_NL+ statement)*)? _NL*
    ?statement: declaration | query

    declaration: left_identity expr
    left_identity: CNAME "="

    ?query: expr -> expr_query
        | size_query
        | distinct_query
        | count_query
        | membership_query
        | equality_query
    size_query: "|" expr "|"
    distinct_query: DISTINCT left_parenthesis expr right_parenthesis
    count_query: expr "." COUNT left_parenthesis element right_parenthesis
    membership_query: element in_or_not expr
    equality_query: expr comparator expr

    ?expr: term
        | expr (UNION_OP | DIFFERENCE_OP) term -> binary_operation
    ?term: atom
        | term INTERSECTION_OP atom -> binary_operation
    ?atom: left_parenthesis expr right_parenthesis -> parenthesis
        | literal
        | identity
        | boolean_operation
    boolean_operation: BOOLEAN left_parenthesis expr right_parenthesis
    identity: CNAME

    literal: "{" (element ("," element)*)? "}"
    ?element: literal | SCALAR

    BOOLEAN: "boolean"
    DISTINCT: "distinct"
    COUNT: "count"
    UNION_OP: "+"
    INTERSECTION_OP: "*"
    DIFFERENCE_OP: "-"
"""

grammar = nestset_grammar + common_grammar
