EXPRESSION_GRAMMAR = r"""
    // -------------------------
    // Entry points
    // -------------------------

    scalar: sum
    vector: "(" sum "," sum "," sum ")"
    plane: "r" vector COMPARATOR sum

    // -------------------------
    // Arithmetic
    // -------------------------

    ?sum: product
        | sum "+" product       -> add
        | sum "-" product       -> sub

    ?product: unary
        | product "*" unary     -> mul
        | product "/" unary     -> div

    ?unary: power
        | "-" unary             -> neg
        | "+" unary

    ?power: atom
        | atom "^" unary        -> pow

    ?atom: NUMBER               -> number
         | NAME "(" arguments ")" -> call
         | NAME                 -> symbol
         | "(" sum ")"

    arguments: sum ("," sum)*

    COMPARATOR: "<=" | ">=" | "<" | ">"
    NAME: /[a-zA-Z_][a-zA-Z0-9_]*/

    %import common.NUMBER
    %import common.WS
    %ignore WS
"""
