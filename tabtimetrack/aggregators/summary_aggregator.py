"""Summary aggregator for grouping time lines into buckets.

This module sums line durations per bucket code chosen by a Coder, gathers
the task references and descriptions seen in each bucket, and returns the
buckets sorted by (type, value).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from tabtimetrack.coders.base import Coder
from tabtimetrack.models.summary import Code, SumLine
from tabtimetrack.models.timesheet import Line
from tabtimetrack.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


@dataclass
class SummaryResult:
    """Container for aggregation output.

    Attributes:
        sum_lines: Buckets sorted by (code.type, code.value)
        report: Non-fatal coding issues, one per affected line

    Example:
        >>> result = sum_lines(parsed.file.lines, CalendarCoder())
        >>> result.sum_lines[0].name
        '2023-08-01'
    """

    sum_lines: List[SumLine] = field(default_factory=list)
    report: ValidationReport = field(default_factory=ValidationReport)


def sort_deduplicate(values: Iterable[str]) -> List[str]:
    """Sort strings and drop duplicates and empty strings.

    Example:
        >>> sort_deduplicate(["def", "abc", "abc", ""])
        ['abc', 'def']
    """
    return sorted({value for value in values if value})


def sum_lines(lines: Sequence[Line], coder: Coder) -> SummaryResult:
    """Aggregate lines into buckets chosen by the coder.

    For each line the coder returns the bucket codes it contributes to. A
    bucket is created on first use, its name taken from coder.describe().
    The line duration is added to every returned bucket, together with the
    non-empty task references and descriptions. Coder errors are recorded in
    the report and processing continues.

    Args:
        lines: Parsed time lines
        coder: Classification strategy

    Returns:
        SummaryResult with sorted buckets and the coding report
    """
    sums: Dict[Code, SumLine] = {}
    report = ValidationReport()

    for line in lines:
        result = coder.split(line.date, line.task_list)
        if result.error:
            report.add_error(
                "breakout",
                f"sum line {line.number}: {result.error}",
                line.description,
                context={"line": line.number},
            )

        for code in result.codes:
            bucket = sums.get(code)
            if bucket is None:
                bucket = SumLine(code=code, name=coder.describe(code))
                sums[code] = bucket
            bucket.duration += line.duration
            for task in line.task_list:
                if task.description:
                    bucket.description.append(task.description)
                if task.reference:
                    bucket.reference.append(task.reference)

    for bucket in sums.values():
        bucket.description = sort_deduplicate(bucket.description)
        bucket.reference = sort_deduplicate(bucket.reference)

    ordered = sorted(sums.values(), key=lambda bucket: bucket.code.sort_key)

    logger.info(f"Aggregated {len(lines)} lines into {len(ordered)} buckets")
    if report.has_errors():
        logger.warning(f"Found {report.error_count} coding issue(s)")
    return SummaryResult(sum_lines=ordered, report=report)
