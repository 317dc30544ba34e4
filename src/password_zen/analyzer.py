import logging
import string
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .charset import SYMBOLS
from .dto import AnalysisCriteria
from .exc import InputUnavailableError

__all__ = (
    "Criterion",
    "Tier",
    "Check",
    "AnalysisResult",
    "BatchReport",
    "analyze",
    "analyze_batch",
    "summarize",
)

logger = logging.getLogger(__name__)


class Criterion(StrEnum):
    LENGTH = "length"
    SYMBOLS = "symbols"
    DIGITS = "digits"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


class Tier(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"


# criterion => (character class, description used in check labels)
_CHARACTER_CLASSES: dict[Criterion, tuple[str, str]] = {
    Criterion.SYMBOLS: (SYMBOLS, "special characters"),
    Criterion.DIGITS: (string.digits, "digits"),
    Criterion.UPPERCASE: (string.ascii_uppercase, "uppercase letters"),
    Criterion.LOWERCASE: (string.ascii_lowercase, "lowercase letters"),
}


@dataclass(slots=True, frozen=True)
class Check:
    criterion: Criterion
    satisfied: bool
    label: str


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    length: int
    checks: tuple[Check, ...]

    @property
    def passed(self) -> bool:
        return all(check.satisfied for check in self.checks)


@dataclass(slots=True, frozen=True)
class BatchReport:
    results: tuple[AnalysisResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def pass_count(self) -> int:
        return sum(1 for res in self.results if res.passed)

    @property
    def fraction(self) -> str:
        return "%d/%d" % (self.pass_count, self.total)

    @property
    def tier(self) -> Tier:
        return summarize(self.pass_count, self.total)


def _check_length(password: str, min_length: int) -> Check:
    length = len(password)
    if length < min_length:
        return Check(
            Criterion.LENGTH,
            False,
            "Too short (%d < %d characters)" % (length, min_length),
        )
    return Check(Criterion.LENGTH, True, "Length: %d characters" % length)


def _check_class(password: str, criterion: Criterion) -> Check:
    chars, description = _CHARACTER_CLASSES[criterion]
    if any(ch in chars for ch in password):
        return Check(criterion, True, "Contains %s" % description)
    return Check(criterion, False, "Missing %s" % description)


def analyze(password: str, criteria: AnalysisCriteria) -> AnalysisResult:
    """
    Evaluates ``password`` against ``criteria``.

    The length check is always part of the result. Every other check is included
    only when the matching ``require_*`` flag is set; disabled criteria count as
    satisfied and are left out of :attr:`AnalysisResult.checks`. Character classes
    are matched by ASCII ranges only.
    """
    checks = [_check_length(password, criteria.min_length)]

    for criterion, enabled in (
        (Criterion.SYMBOLS, criteria.require_symbols),
        (Criterion.DIGITS, criteria.require_digits),
        (Criterion.UPPERCASE, criteria.require_uppercase),
        (Criterion.LOWERCASE, criteria.require_lowercase),
    ):
        if enabled:
            checks.append(_check_class(password, criterion))

    return AnalysisResult(length=len(password), checks=tuple(checks))


def analyze_batch(passwords: Iterable[str], criteria: AnalysisCriteria) -> BatchReport:
    """
    Analyzes each password in input order. Identical passwords are analyzed (and
    reported) once per occurrence.

    Raises:
        InputUnavailableError: If ``passwords`` is empty.
    """
    results = tuple(analyze(pwd, criteria) for pwd in passwords)
    if not results:
        raise InputUnavailableError("No passwords to analyze")

    report = BatchReport(results)
    logger.debug("%s passwords meet all criteria", report.fraction)
    return report


def summarize(pass_count: int, total: int) -> Tier:
    if pass_count == total:
        return Tier.EXCELLENT
    if pass_count > total // 2:
        return Tier.GOOD
    return Tier.WARNING
