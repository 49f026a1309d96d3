"""
Tolerant extraction of test step lists from free-form model replies.

Models rarely honour "return only a JSON array", so the reply is run through
an ordered chain of strategies, from strict to loose. Each strategy returns
None when it does not apply; the first non-None result wins.
"""

from __future__ import annotations

import json
import re
from typing import Any, Callable, List, Optional, Sequence

StepParser = Callable[[str], Optional[List[Any]]]

_FENCED_BLOCK = re.compile(r"```(?:json|javascript|typescript|js|ts)?[ \t]*\r?\n(.*?)\r?\n[ \t]*```", re.DOTALL)


def split_nonblank_lines(text: str) -> List[str]:
    lines = (line[:-1] if line.endswith("\r") else line for line in text.split("\n"))
    return [line for line in lines if line.strip()]


def parse_json_array(reply: str) -> Optional[List[Any]]:
    """Whole reply as JSON. Non-array JSON wraps the raw reply, not the parsed value."""
    try:
        parsed = json.loads(reply)
    except (ValueError, RecursionError):
        return None
    if isinstance(parsed, list):
        return parsed
    return [reply]


def parse_fenced_block(reply: str) -> Optional[List[Any]]:
    """First ``` fenced block: a JSON array inside it, or else its non-blank lines."""
    match = _FENCED_BLOCK.search(reply)
    if not match:
        return None
    body = match.group(1)
    try:
        parsed = json.loads(body)
    except (ValueError, RecursionError):
        return split_nonblank_lines(body)
    if isinstance(parsed, list):
        return parsed
    return split_nonblank_lines(body)


STEP_PARSERS: Sequence[StepParser] = (parse_json_array, parse_fenced_block)


def parse_test_steps(reply: str, parsers: Sequence[StepParser] = STEP_PARSERS) -> List[Any]:
    """
    Turn a model reply into an ordered list of test steps.

    Args:
        reply: Raw assistant text
        parsers: Strategies tried in order before falling back to line splitting

    Returns:
        The first strategy result, or the reply's non-blank lines. Never None.
    """
    for parser in parsers:
        steps = parser(reply)
        if steps is not None:
            return steps
    return split_nonblank_lines(reply)
