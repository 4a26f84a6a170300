"""Symbolic operands — a deferred expression graph.

Composing or decomposing with a ``Variable`` anywhere in the input builds a
graph instead of numbers. The graph is evaluated later, once per frame or for
a whole array of frames at once, without re-running the matrix logic:

    t = variable("t")
    m = compose([rotate(t)])
    evaluate(m, {"t": np.linspace(0, np.pi, 60)})
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from matrix2d.engine.arithmetic import Arithmetic, Operand, get_arithmetic
from matrix2d.engine.concrete import is_array

logger = logging.getLogger(__name__)

CONST = "const"
VAR = "var"
SELECT = "select"


class UnboundVariableError(KeyError):
    """A graph was evaluated without a binding for one of its variables."""


@dataclasses.dataclass(frozen=True, eq=False, repr=False)
class Node:
    """One immutable node: an operation name and its argument nodes."""

    op: str
    args: tuple[Any, ...] = ()

    # numpy must defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __repr__(self) -> str:
        if self.op == CONST:
            return f"Constant({self.args[0]!r})"
        if self.op == VAR:
            return f"Variable({self.args[0]!r})"
        return f"Node({self.op}, {len(self.args)} args)"

    def __add__(self, other: Operand) -> Node:
        return SYMBOLIC.add(self, other)

    def __radd__(self, other: Operand) -> Node:
        return SYMBOLIC.add(other, self)

    def __sub__(self, other: Operand) -> Node:
        return SYMBOLIC.subtract(self, other)

    def __rsub__(self, other: Operand) -> Node:
        return SYMBOLIC.subtract(other, self)

    def __mul__(self, other: Operand) -> Node:
        return SYMBOLIC.multiply(self, other)

    def __rmul__(self, other: Operand) -> Node:
        return SYMBOLIC.multiply(other, self)

    def __truediv__(self, other: Operand) -> Node:
        return SYMBOLIC.divide(self, other)

    def __rtruediv__(self, other: Operand) -> Node:
        return SYMBOLIC.divide(other, self)

    def __pow__(self, other: Operand) -> Node:
        return SYMBOLIC.power(self, other)

    def __neg__(self) -> Node:
        return SYMBOLIC.negate(self)


def constant(value: Any) -> Node:
    return Node(CONST, (value,))


def variable(name: str) -> Node:
    return Node(VAR, (name,))


class SymbolicArithmetic(Arithmetic):
    """Builds graph nodes. Plain numbers become constant leaves."""

    name = "symbolic"

    @staticmethod
    def _wrap(x: Operand) -> Node:
        return x if isinstance(x, Node) else constant(x)

    def _node(self, op: str, *xs: Operand) -> Node:
        return Node(op, tuple(self._wrap(x) for x in xs))

    def add(self, *xs: Operand) -> Node:
        return self._node("add", *xs)

    def multiply(self, *xs: Operand) -> Node:
        return self._node("multiply", *xs)

    def subtract(self, a: Operand, b: Operand) -> Node:
        return self._node("subtract", a, b)

    def divide(self, a: Operand, b: Operand) -> Node:
        return self._node("divide", a, b)

    def power(self, base: Operand, exponent: Operand) -> Node:
        return self._node("power", base, exponent)

    def sqrt(self, x: Operand) -> Node:
        return self._node("sqrt", x)

    def sin(self, x: Operand) -> Node:
        return self._node("sin", x)

    def cos(self, x: Operand) -> Node:
        return self._node("cos", x)

    def tan(self, x: Operand) -> Node:
        return self._node("tan", x)

    def atan2(self, y: Operand, x: Operand) -> Node:
        return self._node("atan2", y, x)

    def equals(self, a: Operand, b: Operand) -> Node:
        return self._node("equals", a, b)

    def select(self, cond: Operand, if_true: Operand, if_false: Operand) -> Node:
        return self._node(SELECT, cond, if_true, if_false)


SYMBOLIC = SymbolicArithmetic()


def _walk(root: Node) -> Iterator[Node]:
    """Each distinct node reachable from ``root``, once."""
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        if node.op not in (CONST, VAR):
            stack.extend(node.args)


def free_variables(target: Any) -> set[str]:
    """Names of all variables the target (node or nested structure) depends on."""
    names: set[str] = set()
    for node in _nodes_in(target):
        for n in _walk(node):
            if n.op == VAR:
                names.add(n.args[0])
    return names


def graph_size(target: Any) -> int:
    """Number of distinct nodes in the target's graph."""
    seen: set[int] = set()
    for node in _nodes_in(target):
        for n in _walk(node):
            seen.add(id(n))
    return len(seen)


def _nodes_in(target: Any) -> Iterator[Node]:
    if isinstance(target, Node):
        yield target
    elif isinstance(target, (tuple, list)):
        for item in target:
            yield from _nodes_in(item)
    elif dataclasses.is_dataclass(target) and not isinstance(target, type):
        for f in dataclasses.fields(target):
            yield from _nodes_in(getattr(target, f.name))


class _Evaluator:
    """Iterative post-order evaluation with a memo shared across one call."""

    def __init__(self, bindings: Mapping[str, Any], ops: Arithmetic) -> None:
        self.bindings = bindings
        self.ops = ops
        self.memo: dict[int, Any] = {}

    def value(self, root: Node) -> Any:
        memo = self.memo
        stack: list[tuple[Node, int]] = [(root, 0)]
        while stack:
            node, state = stack.pop()
            key = id(node)
            if key in memo:
                continue
            if node.op == CONST:
                memo[key] = node.args[0]
            elif node.op == VAR:
                name = node.args[0]
                if name not in self.bindings:
                    raise UnboundVariableError(name)
                memo[key] = self.bindings[name]
            elif node.op == SELECT:
                self._select(node, state, stack)
            elif state == 0:
                stack.append((node, 1))
                stack.extend((arg, 0) for arg in node.args if id(arg) not in memo)
            else:
                values = [memo[id(arg)] for arg in node.args]
                memo[key] = getattr(self.ops, node.op)(*values)
        return memo[id(root)]

    def _select(self, node: Node, state: int, stack: list[tuple[Node, int]]) -> None:
        """Condition first; a single-valued condition evaluates only the taken branch."""
        memo = self.memo
        cond, if_true, if_false = node.args
        if state == 0:
            stack.append((node, 1))
            stack.append((cond, 0))
            return
        c = memo[id(cond)]
        needed = [if_true, if_false] if is_array(c) else [if_true if bool(c) else if_false]
        pending = [n for n in needed if id(n) not in memo]
        if pending:
            stack.append((node, 1))
            stack.extend((n, 0) for n in pending)
        elif is_array(c):
            memo[id(node)] = self.ops.select(c, memo[id(if_true)], memo[id(if_false)])
        else:
            memo[id(node)] = memo[id(needed[0])]

    def evaluate(self, target: Any) -> Any:
        if isinstance(target, Node):
            return self.value(target)
        if isinstance(target, tuple):
            return tuple(self.evaluate(item) for item in target)
        if isinstance(target, list):
            return [self.evaluate(item) for item in target]
        if dataclasses.is_dataclass(target) and not isinstance(target, type):
            changes = {f.name: self.evaluate(getattr(target, f.name)) for f in dataclasses.fields(target)}
            return dataclasses.replace(target, **changes)
        return target


def evaluate(target: Any, bindings: Mapping[str, Any] | None = None, arithmetic: Arithmetic | None = None) -> Any:
    """Evaluate a node, or a nested tuple/list/dataclass of nodes, under ``bindings``.

    Concrete values in the structure pass through unchanged. Bindings may be
    floats or numpy arrays; without an explicit ``arithmetic`` each operation
    dispatches on its evaluated operands. A conditional whose condition is a
    single value never evaluates its other branch.
    """
    bindings = bindings or {}
    arithmetic = get_arithmetic(arithmetic)
    evaluator = _Evaluator(bindings, arithmetic)
    result = evaluator.evaluate(target)
    logger.debug("Evaluated %d graph nodes with %s arithmetic", len(evaluator.memo), arithmetic.name)
    return result
