"""Rule-based tree transformation.

``rules`` maps an element type (or ``"default"``) to a rule:
  True       keep the element, transform its children with the same rules
  False      drop the element and its whole subtree
  content    a string, Element or list of them, spliced in place verbatim
  callable   ``rule(element, index, siblings)`` returning one of the above

transform() evaluates siblings strictly in order. transform_async() accepts
callables that return awaitables and runs every sibling and every child
subtree concurrently; output order always follows input order. When one rule
fails, siblings still in flight are cancelled and the failure is re-raised.

Both variants share rule lookup and normalization (resolve_rule/settle), so
they only differ in how they wait.
"""

import asyncio
import enum
import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Union

from .element import Content, Element, to_elements
from .parser import parse

logger = logging.getLogger("chatmarkup.transform")

RuleResult = Union[bool, Content]
Rule = Union[RuleResult, Callable[[Element, int, list[Element]], RuleResult]]
AsyncRule = Union[RuleResult, Callable[[Element, int, list[Element]], Union[RuleResult, Awaitable[RuleResult]]]]


class Action(enum.Enum):
    KEEP = "keep"
    DROP = "drop"
    REPLACE = "replace"


def resolve_rule(rules: Mapping[str, Any], element: Element) -> Any:
    """Rule for ``element``: by type, then ``"default"``, then keep."""
    rule = rules.get(element.type)
    if rule is None:
        rule = rules.get("default")
    if rule is None:
        rule = True
    return rule


def evaluate(rules: Mapping[str, Any], element: Element, index: int, siblings: list[Element]) -> Any:
    rule = resolve_rule(rules, element)
    if callable(rule):
        return rule(element, index, siblings)
    return rule


def settle(result: RuleResult) -> tuple[Action, list[Element]]:
    if result is True:
        return Action.KEEP, []
    if result is False:
        return Action.DROP, []
    return Action.REPLACE, to_elements(result)


def _elements(source: Union[str, list[Element]]) -> list[Element]:
    return parse(source) if isinstance(source, str) else source


def transform(source: Union[str, list[Element]], rules: Mapping[str, Rule]) -> list[Element]:
    elements = _elements(source)
    output: list[Element] = []
    for index, element in enumerate(elements):
        result = evaluate(rules, element, index, elements)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise TypeError(f"Rule for <{element.type}> returned an awaitable; use transform_async()")
        action, content = settle(result)
        if action is Action.KEEP:
            output.append(Element(element.type, dict(element.attrs), transform(element.children, rules)))
        elif action is Action.REPLACE:
            output.extend(content)
        else:
            logger.debug("Dropped <%s> at index %d", element.type, index)
    return output


async def transform_async(source: Union[str, list[Element]], rules: Mapping[str, AsyncRule]) -> list[Element]:
    elements = _elements(source)

    async def visit(index: int, element: Element) -> list[Element]:
        result = evaluate(rules, element, index, elements)
        if inspect.isawaitable(result):
            result = await result
        action, content = settle(result)
        if action is Action.KEEP:
            children = await transform_async(element.children, rules)
            return [Element(element.type, dict(element.attrs), children)]
        if action is Action.DROP:
            logger.debug("Dropped <%s> at index %d", element.type, index)
        return content

    tasks = [asyncio.ensure_future(visit(index, element)) for index, element in enumerate(elements)]
    try:
        results = await asyncio.gather(*tasks)
    except Exception:
        # First failure wins: stop the siblings still running and collect their outcome
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return [element for chunk in results for element in chunk]
