"""Confirmation of target entities on the terminal."""

from __future__ import annotations

import asyncio
import logging
import re
import sys
from collections.abc import Awaitable, Callable

from credit_resolver.entities.types import Relationship, ResolvedEntity

logger = logging.getLogger(__name__)

MBID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def extract_mbid(text: str) -> str | None:
    """Extract an MBID from a plain MBID or an entity URL."""
    m = MBID_PATTERN.search(text)
    return m.group(0).lower() if m else None


# the credits may have been piped in on stdin
TTY_PATH = "/dev/tty"


def ask_terminal(prompt: str) -> str:
    """Ask the user on the controlling terminal.

    Raises EOFError if there is no terminal to ask on.
    """
    sys.stderr.write(prompt)
    sys.stderr.flush()
    if sys.stdin is not None and sys.stdin.isatty():
        return input()

    try:
        with open(TTY_PATH, encoding="utf-8") as tty:
            answer = tty.readline()
    except OSError as e:
        raise EOFError(f"No terminal available: {e}") from e
    if not answer:
        raise EOFError("End of terminal input")
    return answer.rstrip("\n")


class TerminalConfirmation:
    """Asks the user for the MBID of the target entity of a relationship.

    An empty answer or the end of the input dismisses the relationship.
    """

    def __init__(
        self,
        draft: Relationship,
        lookup: Callable[[str], Awaitable[ResolvedEntity | None]] | None = None,
        ask: Callable[[str], str] = ask_terminal,
    ) -> None:
        self.draft = draft
        self._lookup = lookup
        self._ask = ask
        self._answer: asyncio.Future[str] | None = None
        self._target: ResolvedEntity | None = None

    @property
    def prompt(self) -> str:
        target = self.draft.target
        year = f" ({self.draft.begin_year})" if self.draft.begin_year else ""
        return f"MBID or URL of {target.entity_type} {target.name!r}{year}, empty to skip: "

    def open(self) -> None:
        self._answer = asyncio.ensure_future(asyncio.to_thread(self._ask, self.prompt))

    async def closed(self) -> None:
        if self._answer is None:
            return
        try:
            answer = (await self._answer).strip()
        except EOFError as e:
            logger.warning("No answer for %r: %s", self.draft.target.name, e)
            return
        if not answer:
            return

        mbid = extract_mbid(answer)
        if mbid is None:
            logger.warning("Not an MBID: %r", answer)
            return

        if self._lookup is not None:
            self._target = await self._lookup(mbid)
        else:
            target = self.draft.target
            self._target = ResolvedEntity(name=target.name, entity_type=target.entity_type, id=mbid)

    @property
    def target_entity(self) -> ResolvedEntity | None:
        return self._target
