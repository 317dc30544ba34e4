import time
from dataclasses import dataclass
from enum import StrEnum

from rich.console import Console, Group, RenderableType
from rich.text import Text

from ..analyzer import AnalysisResult, BatchReport, Tier

__all__ = ("ReportRenderer", "create_console", "render_plain")

PASS_MARK, FAIL_MARK = "✓", "✗"

# seconds the spinner is shown for each password
ANIMATION_DELAY = 0.6


class RecordStyle(StrEnum):
    HEADER = "bold cyan"
    PASS_MARK = "bold green"
    FAIL_MARK = "bold red"
    PASS = "green"
    FAIL = "red"
    NOTICE = "yellow"


SUMMARY_TEMPLATES: dict[Tier, tuple[str, RecordStyle]] = {
    Tier.EXCELLENT: (
        "🎉 Excellent! All {total} passwords are strong!",
        RecordStyle.PASS,
    ),
    Tier.GOOD: (
        "👍 Good! {fraction} passwords meet criteria",
        RecordStyle.NOTICE,
    ),
    Tier.WARNING: (
        "⚠️  Warning! Only {fraction} passwords meet criteria",
        RecordStyle.FAIL,
    ),
}
PLAIN_SUMMARY_TEMPLATE = "Summary: {fraction} passwords meet all criteria"


def create_console(color: bool) -> Console:
    # soft wrap keeps long lines (e.g. file paths) intact when piped
    return Console(
        highlight=False, soft_wrap=True, color_system="auto" if color else None
    )


@dataclass(slots=True)
class ReportRenderer:
    console: Console
    color: bool = True
    animation: bool = True

    def announce(self, index: int) -> None:
        """Shows that password number ``index`` is being analyzed."""
        if not self.animation:
            self.console.print("Analyzing password %d..." % index)
            return

        with self.console.status(
            Text("Analyzing password %d..." % index, style=RecordStyle.HEADER),
            spinner="dots",
        ):
            time.sleep(ANIMATION_DELAY)

    def compose_result(self, index: int, result: AnalysisResult) -> RenderableType:
        if result.passed:
            status = Text.assemble(
                ("STRONG", RecordStyle.PASS), " ", (PASS_MARK, RecordStyle.PASS_MARK)
            )
        else:
            status = Text.assemble(
                ("WEAK", RecordStyle.FAIL), " ", (FAIL_MARK, RecordStyle.FAIL_MARK)
            )

        return Group(
            Text.assemble(("Password", RecordStyle.HEADER), " %d: " % index, status),
            *(
                Text.assemble(
                    "  ",
                    (PASS_MARK, RecordStyle.PASS_MARK)
                    if check.satisfied
                    else (FAIL_MARK, RecordStyle.FAIL_MARK),
                    " ",
                    check.label,
                )
                for check in result.checks
            ),
            Text(""),
        )

    def compose_summary(self, report: BatchReport) -> RenderableType:
        if not self.color:
            return Text(PLAIN_SUMMARY_TEMPLATE.format(fraction=report.fraction))

        template, style = SUMMARY_TEMPLATES[report.tier]
        return Text(
            template.format(total=report.total, fraction=report.fraction),
            style=style,
        )

    def render_result(self, index: int, result: AnalysisResult) -> None:
        self.console.print(self.compose_result(index, result))

    def render_summary(self, report: BatchReport) -> None:
        self.console.print(self.compose_summary(report))


def render_plain(report: BatchReport) -> str:
    """Renders ``report`` as plain text, suitable for writing to a file."""
    chunks: list[str] = []

    for index, result in enumerate(report.results, start=1):
        chunks.append(
            "Password %d: %s\n"
            % (
                index,
                "STRONG %s" % PASS_MARK if result.passed else "WEAK %s" % FAIL_MARK,
            )
        )
        chunks.extend(
            "  %s %s\n" % (PASS_MARK if check.satisfied else FAIL_MARK, check.label)
            for check in result.checks
        )
        chunks.append("\n")

    chunks.append(PLAIN_SUMMARY_TEMPLATE.format(fraction=report.fraction) + "\n")
    return "".join(chunks)
