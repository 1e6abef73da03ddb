"""
Batch scrape of every configured language.

Languages are processed strictly one after another with a fixed pause in
between, so the source server never sees more than one request at a time.
A failure in one language is recorded and logged; the batch always moves on
to the next language.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence

from vimsheet.errors import FetchError
from vimsheet.fetcher import LanguageFetcher
from vimsheet.languages import DEFAULT_DELAY, Language
from vimsheet.writer import DatasetWriter

logger = logging.getLogger(__name__)


class LanguageState(str, Enum):
    PENDING = "pending"
    FETCHING = "fetching"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class LanguageOutcome:
    """What happened to one language during a batch run."""
    language: Language
    state: LanguageState = LanguageState.PENDING
    command_count: int = 0
    path: Optional[Path] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.state is LanguageState.DONE


@dataclass
class BatchReport:
    outcomes: list[LanguageOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[LanguageOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[LanguageOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        """True only when every language was written."""
        return all(o.ok for o in self.outcomes)


class BatchOrchestrator:
    """Runs fetch-then-write for each language in order."""

    def __init__(
        self,
        languages: Sequence[Language],
        fetcher: LanguageFetcher,
        writer: DatasetWriter,
        *,
        delay: float = DEFAULT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
        on_outcome: Callable[[int, int, LanguageOutcome], None] | None = None,
    ):
        self.languages = list(languages)
        self.fetcher = fetcher
        self.writer = writer
        self.delay = delay
        self.sleep = sleep
        self.on_outcome = on_outcome

    def run_language(self, language: Language) -> LanguageOutcome:
        """Fetch and write a single language, capturing any failure."""
        outcome = LanguageOutcome(language=language)

        outcome.state = LanguageState.FETCHING
        try:
            dataset = self.fetcher.fetch_and_parse(language.code)
        except FetchError as e:
            outcome.state = LanguageState.FAILED
            outcome.error = e
            logger.error(f"Failed to scrape {language.name}: {e}")
            return outcome

        outcome.state = LanguageState.WRITING
        try:
            outcome.path = self.writer.write(language.filename, dataset)
        except OSError as e:
            outcome.state = LanguageState.FAILED
            outcome.error = e
            logger.error(f"Failed to save {language.name}: {e}")
            return outcome

        outcome.state = LanguageState.DONE
        outcome.command_count = len(dataset.commands)
        logger.info(f"{language.name} saved: {outcome.command_count} commands")
        return outcome

    def run_all(self) -> BatchReport:
        """Process every language; never stops early on a failure."""
        report = BatchReport()
        total = len(self.languages)

        logger.info(f"Scraping {total} languages")

        for i, language in enumerate(self.languages, 1):
            logger.info(f"[{i}/{total}] Scraping {language.name}...")
            outcome = self.run_language(language)
            report.outcomes.append(outcome)

            if self.on_outcome:
                self.on_outcome(i, total, outcome)

            # Be nice to the server, even after a failure
            if i < total and self.delay > 0:
                self.sleep(self.delay)

        if report.ok:
            logger.info(f"All {total} languages scraped successfully")
        else:
            names = ", ".join(o.language.name for o in report.failed)
            logger.warning(f"{len(report.failed)} of {total} languages failed: {names}")

        return report
