"""Classification of zero-byte counts and reporting of the verdicts."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, replace
from typing import TextIO

from .constants import DEFAULT_LOWER, DEFAULT_UPPER, INT_MAX

logger = logging.getLogger(__name__)

STDIN_LABEL = "stdin"


@dataclass(frozen=True)
class Thresholds:
    upper: int = DEFAULT_UPPER
    lower: int = DEFAULT_LOWER

    def clamped(self) -> Thresholds:
        """A file cannot be required to hold more zero bytes than the scanner counts."""
        if self.upper != 0 and self.lower > self.upper:
            return replace(self, lower=self.upper)
        return self


@dataclass(frozen=True)
class Verdict:
    label: str
    zero_count: int
    suspicious: bool
    is_stdin: bool = False

    @property
    def message(self) -> str:
        if self.is_stdin:
            if self.suspicious:
                return f"data in stdin seems corrupted, {self.zero_count} zero-bytes counted"
            return f"{self.zero_count} zero-bytes in stdin counted"
        if self.suspicious:
            return f"{self.label}: seems corrupted, {self.zero_count} zero-bytes counted"
        return f"{self.label}: {self.zero_count} zero-bytes counted"


def is_suspicious(zero_count: int, thresholds: Thresholds) -> bool:
    return zero_count >= thresholds.clamped().lower


def evaluate(
    zero_count: int,
    thresholds: Thresholds,
    verbosity: int,
    label: str,
    is_stdin: bool = False,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> Verdict:
    """Classify one input and print its report line according to ``verbosity``.

    0 prints nothing, 1 prints suspicious inputs to stderr, 2 and above print
    every input: suspicious ones to stderr, clean ones to stdout.
    """
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    verdict = Verdict(
        label=label,
        zero_count=zero_count,
        suspicious=is_suspicious(zero_count, thresholds),
        is_stdin=is_stdin,
    )
    logger.debug("%s: %d zero-bytes, suspicious=%s", verdict.label, zero_count, verdict.suspicious)

    if verdict.suspicious:
        if verbosity >= 1:
            stderr.write(f"{verdict.message}\n")
    elif verbosity >= 2:
        stdout.write(f"{verdict.message}\n")

    return verdict


def saturating_increment(value: int, maximum: int) -> int:
    return value + 1 if value < maximum else maximum


def update_tally(tally: int, verdict: Verdict) -> int:
    """Return the suspicious-input tally after accounting for ``verdict``."""
    if verdict.suspicious:
        return saturating_increment(tally, INT_MAX)
    return tally
