"""Report writer for rendering aggregated buckets.

This module converts SumLine buckets into display rows and renders them as
an aligned text table, TSV or CSV through a pandas DataFrame, which keeps
quoting and column handling consistent across formats.
"""

import logging
from dataclasses import asdict, dataclass
from fractions import Fraction
from typing import List, Optional, Sequence

import pandas as pd

from tabtimetrack.calculators.time_utils import format_duration, format_fraction
from tabtimetrack.models.summary import SumLine

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["Name", "Duration", "Hours", "Amount", "Description"]
OUTPUT_FORMATS = ("table", "tsv", "csv")
DEFAULT_DESCRIPTION_LIMIT = 50


@dataclass
class ReportRow:
    """One rendered report row.

    Attributes:
        name: Bucket label
        duration: Duration text ("1h30m0s")
        hours: Rounded hours with two decimals
        amount: Billing amount with two decimals, empty without a rate
        description: Task descriptions joined by spaces, truncated
    """

    name: str
    duration: str
    hours: str
    amount: str
    description: str


def truncate(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with "...".

    A limit of zero or less disables truncation.

    Example:
        >>> truncate("abcdef", 3)
        'abc...'
    """
    if limit <= 0 or len(text) <= limit:
        return text
    return text[:limit] + "..."


def build_report_rows(
    sum_lines: Sequence[SumLine],
    rate: Optional[Fraction] = None,
    description_limit: int = DEFAULT_DESCRIPTION_LIMIT,
) -> List[ReportRow]:
    """Compute hours (and amounts when a rate is given) and build rows.

    Args:
        sum_lines: Aggregated buckets in report order
        rate: Hourly rate, or None to leave the amount column empty
        description_limit: Maximum description length before truncation

    Returns:
        One ReportRow per bucket
    """
    rows = []
    for sum_line in sum_lines:
        hours = sum_line.compute_hours()
        amount = ""
        if rate is not None:
            amount = format_fraction(sum_line.compute_amount(rate))
        rows.append(
            ReportRow(
                name=sum_line.name,
                duration=format_duration(sum_line.duration),
                hours=format_fraction(hours),
                amount=amount,
                description=truncate(
                    " ".join(sum_line.description), description_limit
                ),
            )
        )
    return rows


class ReportWriter:
    """Render report rows in one of the supported output formats.

    Example:
        >>> writer = ReportWriter("tsv")
        >>> print(writer.render("Client work", rows))
        Report:	Client work
        2023-08-01	1h0m0s	1.00		Fix login form.
    """

    def __init__(self, output_format: str = "table"):
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format: {output_format}. "
                f"Must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        self.output_format = output_format

    def to_dataframe(self, rows: Sequence[ReportRow]) -> pd.DataFrame:
        """Convert rows into a DataFrame with the report columns."""
        df = pd.DataFrame([asdict(row) for row in rows], dtype=str)
        if df.empty:
            return pd.DataFrame(columns=REPORT_COLUMNS)
        df.columns = REPORT_COLUMNS
        return df

    def render(self, title: str, rows: Sequence[ReportRow]) -> str:
        """Render the report title and rows as text."""
        df = self.to_dataframe(rows)
        logger.debug(f"Rendering {len(df)} report rows as {self.output_format}")

        if self.output_format == "csv":
            heading = pd.DataFrame([["Report:", title]]).to_csv(
                index=False, header=False, lineterminator="\n"
            )
            return heading + df.to_csv(index=False, lineterminator="\n")

        if self.output_format == "tsv":
            body = df.to_csv(sep="\t", index=False, header=False, lineterminator="\n")
            return f"Report:\t{title}\n{body}"

        if df.empty:
            return f"Report: {title}\n"
        table = df.to_string(index=False, justify="left")
        return f"Report: {title}\n{table}\n"
