"""Line based processing of pasted credits."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field

from credit_resolver.entities.cache import FunctionCache
from credit_resolver.entities.resolver import ResolutionOrchestrator
from credit_resolver.entities.types import ResolvedEntity
from credit_resolver.parsing.notice import NoticeParser

logger = logging.getLogger(__name__)

LineHandler = Callable[[str], "bool | Awaitable[bool]"]


@dataclass
class CreditParseResult:
    """Lines which were handled successfully and lines which were skipped."""

    parsed_lines: list[str] = field(default_factory=list)
    skipped_lines: list[str] = field(default_factory=list)

    @property
    def remaining_text(self) -> str:
        """The input without the parsed lines."""
        return "\n".join(self.skipped_lines)


async def process_credit_lines(text: str, handler: LineHandler) -> CreditParseResult:
    """Pass each non-empty line of the credits to the handler, one at a time."""
    result = CreditParseResult()

    for line in (line.strip() for line in text.split("\n")):
        # keep empty lines, they are part of the remaining text
        if not line:
            result.skipped_lines.append(line)
            continue

        succeeded = handler(line)
        if inspect.isawaitable(succeeded):
            succeeded = await succeeded
        if succeeded:
            result.parsed_lines.append(line)
        else:
            result.skipped_lines.append(line)

    logger.info(
        "Parsed %d lines, skipped %d", len(result.parsed_lines), len(result.skipped_lines)
    )
    return result


class CopyrightNoticeWorkflow:
    """Parses copyright notices and creates the relationships for them.

    The learned name mappings are persisted after each handled line.
    """

    def __init__(
        self,
        orchestrator: ResolutionOrchestrator,
        name_cache: FunctionCache[str],
        parser: NoticeParser | None = None,
    ) -> None:
        self.orchestrator = orchestrator
        self.name_cache = name_cache
        self.parser = parser or NoticeParser()

    def load(self) -> None:
        """Load the name mappings of previous sessions."""
        self.name_cache.load()

    async def handle_line(
        self,
        line: str,
        automatic_mode: bool = False,
        recordings: Iterable[ResolvedEntity] = (),
    ) -> bool:
        statements = self.parser.parse(line)
        if not statements:
            return False
        try:
            return await self.orchestrator.resolve_and_create(
                statements, automatic_mode, recordings
            )
        finally:
            # keep what was learned before a failure
            self.name_cache.store()

    async def run(
        self,
        text: str,
        automatic_mode: bool = False,
        recordings: Iterable[ResolvedEntity] = (),
    ) -> CreditParseResult:
        recordings = tuple(recordings)
        return await process_credit_lines(
            text, lambda line: self.handle_line(line, automatic_mode, recordings)
        )
