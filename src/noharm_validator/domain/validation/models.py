# validation/models.py

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValidationSettings:
    """
    Configuration values bounding the validation output.
    """

    # Issues kept per file before the remainder is cut off
    max_issues: int = 200
    # Maximum duplicate key values listed in the duplicate-key issue
    duplicate_sample_limit: int = 5


def default_settings() -> ValidationSettings:
    """
    Return default validation limits.

    Returns:
        ValidationSettings: Default configuration values.
    """
    return ValidationSettings()


class Status(Enum):
    """
    Verdict for a file or a whole run, ordered by severity.
    """

    OK = "ok"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class FileValidation:
    """
    Validation outcome for one file category.

    `issues` block the file from being imported; `warnings` do not.
    """

    status: Status
    issues: tuple[str, ...]
    warnings: tuple[str, ...]
    record_count: int = 0
    column_count: int = 0


def derive_status(issues: tuple[str, ...], warnings: tuple[str, ...]) -> Status:
    """
    Classify a file from its findings.

    Returns:
        Status: ERROR with any issue, WARN with only warnings, OK otherwise.
    """
    if issues:
        return Status.ERROR
    if warnings:
        return Status.WARN
    return Status.OK


class IssueLog:
    """
    Bounded buffer of issue messages for one file.

    Issues are pulled lazily from iterables; once the buffer is full the
    producing checks are no longer consumed, so scanning stops early while the
    retained issues stay the first ones in scan order.
    """

    __slots__ = ("_capacity", "_issues", "_overflowed")

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._issues: list[str] = []
        self._overflowed = False

    @property
    def full(self) -> bool:
        return len(self._issues) >= self._capacity

    @property
    def overflowed(self) -> bool:
        return self._overflowed

    def extend(self, issues: Iterable[str]) -> None:
        """
        Append issues until the buffer is full.

        Pulls at most one issue beyond capacity, only to learn that the output
        is being cut off.
        """
        if self._overflowed:
            return

        for issue in issues:
            if self.full:
                self._overflowed = True
                return
            self._issues.append(issue)

    def finalise(self) -> tuple[str, ...]:
        """
        Return the retained issues, closed by a marker if any were cut off.

        Returns:
            tuple[str, ...]: At most `capacity` issues, plus the marker.
        """
        if self._overflowed:
            marker = f"Too many errors, showing only the first {self._capacity}."
            return (*self._issues, marker)
        return tuple(self._issues)
