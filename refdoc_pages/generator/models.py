"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class PageGenerationError(RuntimeError):
    """Raised when no entity page could be written."""

    def __init__(self, failures: list[PageFailure]) -> None:
        self.failures = failures
        ids = ", ".join(failure.node_id for failure in failures)
        super().__init__(f"Every page failed to render: {ids}")


class GenerationCancelledError(RuntimeError):
    """Raised after a cancelled run has finished its in-flight pages."""

    def __init__(self, report: GenerationReport) -> None:
        self.report = report
        super().__init__(
            f"Generation cancelled; {len(report.skipped)} page(s) were not rendered."
        )


@dc.dataclass(slots=True, frozen=True)
class PageFailure:
    """A page that failed to render or write.

    Attributes
    ----------
    node_id : str
        Identifier of the node whose page failed.
    error : BaseException
        Exception raised by the render or the write.
    """

    node_id: str
    error: BaseException


@dc.dataclass(slots=True)
class GenerationReport:
    """Outcome of the concurrent page fan-out.

    Attributes
    ----------
    written : list[Path]
        Pages written to disk, in node order.
    failures : list[PageFailure]
        Pages that raised while rendering or writing, in node order.
    skipped : list[str]
        Node ids never submitted because the run was cancelled.
    """

    written: list[Path] = dc.field(default_factory=list)
    failures: list[PageFailure] = dc.field(default_factory=list)
    skipped: list[str] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every node produced a page."""
        return not self.failures and not self.skipped


__all__ = [
    "GenerationCancelledError",
    "GenerationReport",
    "PageFailure",
    "PageGenerationError",
]
