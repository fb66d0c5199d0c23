"""Expression tree for lox. A tree is finite and acyclic, and every node exclusively owns its children.

```
<Expr> ::= Literal(value)                   ; float, str, bool or None
         | Unary(operator, operand)         ; operator is a "!" or "-" Token
         | Binary(left, operator, right)
         | Grouping(expression)             ; parenthesized expression
```

The set of node kinds is closed: code that walks a tree dispatches on the node type with isinstance instead of asking
the nodes to do the work.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, eq=False)
class Literal:
    value: object

    def __eq__(self, other):
        # True == 1.0 in Python, but not in lox
        return (isinstance(other, Literal) and type(self.value) is type(other.value)
                and self.value == other.value)

    def __hash__(self):
        return hash((type(self.value), self.value))


@dataclass(frozen=True)
class Unary:
    operator: object
    operand: "Expr"


@dataclass(frozen=True)
class Binary:
    left: "Expr"
    operator: object
    right: "Expr"


@dataclass(frozen=True)
class Grouping:
    expression: "Expr"


Expr = Union[Literal, Unary, Binary, Grouping]
