"""Batch orchestrator that parses every line of a blob and isolates failures."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple, Union

from ..config import DEFAULT_SETTINGS, ParserSettings
from ..models import BatchParseResult, LineError, ParsedContact
from ..normalize import split_lines
from ..parser import LineParser

LOGGER = logging.getLogger(__name__)

LineParseFunction = Callable[[str, int], Optional[ParsedContact]]
_Outcome = Union[ParsedContact, LineError, None]


class BatchOrchestrator:
    """Runs the line parser for each candidate line and aggregates the outcome."""

    def __init__(
        self,
        settings: ParserSettings = DEFAULT_SETTINGS,
        *,
        line_parser: Optional[LineParseFunction] = None,
        concurrent: bool = False,
        max_workers: Optional[int] = None,
        raise_on_error: bool = False,
    ) -> None:
        self._settings = settings
        self._parse_line = line_parser or LineParser(settings).parse_line
        self._concurrent = concurrent
        self._max_workers = max_workers
        self._raise_on_error = raise_on_error

    @property
    def settings(self) -> ParserSettings:
        return self._settings

    def parse(self, blob: str) -> BatchParseResult:
        """Parse every non-blank line of ``blob``; partial results are always returned."""

        lines = split_lines(blob)
        numbered = list(enumerate(lines, start=1))

        if not self._concurrent or len(lines) <= 1:
            outcomes = [self._execute_line(item) for item in numbered]
        else:
            # map() yields in submission order, so contacts keep the input order.
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                outcomes = list(executor.map(self._execute_line, numbered))

        result = BatchParseResult(total_lines=len(lines))
        for (line_number, _), outcome in zip(numbered, outcomes):
            if isinstance(outcome, ParsedContact):
                result.contacts.append(outcome)
            elif isinstance(outcome, LineError):
                result.errors.append(outcome)
            else:
                result.skipped_lines.append(line_number)

        LOGGER.info(
            "Parsed %s of %s lines (%s skipped, %s errors)",
            result.successfully_parsed,
            result.total_lines,
            len(result.skipped_lines),
            len(result.errors),
        )
        return result

    def _execute_line(self, item: Tuple[int, str]) -> _Outcome:
        line_number, line = item
        try:
            return self._parse_line(line, line_number)
        except Exception as exc:
            LOGGER.exception("Line %s could not be parsed: %r", line_number, line)
            if self._raise_on_error:
                raise
            return LineError(line_number=line_number, message=str(exc), raw_text=line)


def parse_text(blob: str, settings: ParserSettings = DEFAULT_SETTINGS) -> BatchParseResult:
    """Parse a pasted blob with the default sequential orchestrator."""

    return BatchOrchestrator(settings).parse(blob)
