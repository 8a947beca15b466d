"""Split free-text descriptions into annotated tasks.

A description is a run of sentences ended by a stop marker ("."). Each
sentence may start with a bracketed reference:

    [123] Fix login form. [456] Review pull request.

yields two tasks with references "123" and "456".
"""

from enum import Enum
from typing import List

from tabtimetrack.models.timesheet import Task

DEFAULT_STOP = "."


class StopPolicy(Enum):
    """How the trailing stop marker of a task description is normalized."""

    ENSURE_STOP = "ensure_stop"
    ENSURE_NO_STOP = "ensure_no_stop"
    IGNORE_STOP = "ignore_stop"


def _split_after(text: str, stop: str) -> List[str]:
    """Split text after each stop marker, keeping the marker."""
    segments = []
    start = 0
    while True:
        index = text.find(stop, start)
        if index < 0:
            segments.append(text[start:])
            return segments
        end = index + len(stop)
        segments.append(text[start:end])
        start = end


def _apply_policy(text: str, stop: str, policy: StopPolicy) -> str:
    if policy is StopPolicy.ENSURE_STOP:
        return text if text.endswith(stop) else text + stop
    if policy is StopPolicy.ENSURE_NO_STOP:
        while text.endswith(stop):
            text = text[: -len(stop)]
        return text
    return text


def split_description(
    text: str,
    stop: str = DEFAULT_STOP,
    policy: StopPolicy = StopPolicy.ENSURE_STOP,
) -> List[Task]:
    """Split a description into tasks.

    Segments are cut after each stop marker and trimmed; empty segments are
    dropped. A segment starting with "[" takes the text up to the first "]"
    as its reference. The policy then normalizes the trailing stop marker of
    the remaining text. Output order matches the input.

    Args:
        text: Free-text description
        stop: Sentence stop marker
        policy: Trailing stop marker normalization

    Returns:
        List of tasks in order of appearance

    Example:
        >>> [t.description for t in split_description("abc. def")]
        ['abc.', 'def.']
        >>> split_description("[123] abc.")[0].reference
        '123'
    """
    tasks = []
    for segment in _split_after(text, stop):
        segment = segment.strip()
        if not segment:
            continue

        reference = ""
        if segment.startswith("["):
            close = segment.find("]")
            if close >= 0:
                reference = segment[1:close]
                segment = segment[close + 1 :].strip()

        if segment:
            segment = _apply_policy(segment, stop, policy)

        if not reference and not segment:
            continue
        tasks.append(Task(reference=reference, description=segment))

    return tasks
