"""Word list loader: reads one word per line into a Trie."""

from __future__ import annotations

import http.client
import io
import logging
import urllib.request
from typing import TextIO

from wordtrie.constants import DEFAULT_ENCODING, DEFAULT_SOURCE_URL, DEFAULT_TIMEOUT, URL_SCHEMES
from wordtrie.errors import InvalidCharacter, SourceReadError
from wordtrie.trie import Trie

log = logging.getLogger("wordtrie.loader")


class LoadReport:
    """Outcome of a single :meth:`WordLoader.load` call."""

    __slots__ = ("source", "lines", "inserted", "rejected", "error")

    def __init__(self, source: str):
        self.source = source
        self.lines = 0
        self.inserted = 0
        self.rejected = 0
        self.error: SourceReadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        status = "ok" if self.ok else f"error={self.error}"
        return (
            f"LoadReport({self.source!r}, lines={self.lines}, inserted={self.inserted}, "
            f"rejected={self.rejected}, {status})"
        )


class WordLoader:
    """Populates a Trie from a line-oriented word list.

    *source* is either a URL (http, https or file scheme) or a local path.
    With *uppercase* set, each line is upper-cased before insertion so that
    ordinary lowercase word lists fit the A-Z alphabet.
    """

    def __init__(
        self,
        source: str = DEFAULT_SOURCE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        uppercase: bool = True,
        encoding: str = DEFAULT_ENCODING,
    ):
        self.source = source
        self.timeout = timeout
        self.uppercase = uppercase
        self.encoding = encoding

    @property
    def is_url(self) -> bool:
        return self.source.lower().startswith(URL_SCHEMES)

    def load(self, trie: Trie) -> LoadReport:
        """Insert every word from the source into *trie*.

        Read failures are logged and recorded on the returned report rather
        than raised; words inserted before the failure stay in the trie.
        """
        report = LoadReport(self.source)
        try:
            self._read_into(trie, report)
        except SourceReadError as exc:
            report.error = exc
            log.error("Load aborted: %s", exc)
            return report

        log.info(
            "Loaded %s words from %s (%s lines)",
            f"{report.inserted:,}", self.source, f"{report.lines:,}",
        )
        if report.rejected:
            log.warning("Skipped %d line(s) that are not A-Z words", report.rejected)
        return report

    def _read_into(self, trie: Trie, report: LoadReport) -> None:
        try:
            with self._open() as stream:
                for record in stream:
                    report.lines += 1
                    log.debug("%d: %s", report.lines, record.rstrip("\r\n"))
                    word = record.strip()
                    if not word:
                        continue
                    if self.uppercase:
                        upper = word.upper()
                        # upper() can expand a letter ("ß" -> "SS")
                        if len(upper) != len(word):
                            report.rejected += 1
                            log.debug("Line %d rejected: %r changes length when upper-cased",
                                      report.lines, word)
                            continue
                        word = upper
                    try:
                        trie.insert(word)
                    except InvalidCharacter as exc:
                        report.rejected += 1
                        log.debug("Line %d rejected: %s", report.lines, exc)
                        continue
                    report.inserted += 1
                self._check_complete(stream)
        except (OSError, UnicodeDecodeError, http.client.HTTPException) as exc:
            raise SourceReadError(self.source, report.lines, exc) from exc

    @staticmethod
    def _check_complete(stream: TextIO) -> None:
        # An HTTP body cut short reads as a plain EOF; the response still
        # expects the rest of its Content-Length.
        remaining = getattr(getattr(stream, "buffer", None), "length", None)
        if isinstance(remaining, int) and remaining > 0:
            raise http.client.IncompleteRead(b"", remaining)

    def _open(self) -> TextIO:
        if self.is_url:
            log.info("Fetching word list from %s", self.source)
            response = urllib.request.urlopen(self.source, timeout=self.timeout)
            return io.TextIOWrapper(response, encoding=self.encoding)
        log.info("Reading word list from %s", self.source)
        return open(self.source, "r", encoding=self.encoding)


def load_trie(source: str = DEFAULT_SOURCE_URL, **kwargs) -> tuple[Trie, LoadReport]:
    """Build a fresh Trie from *source*; keyword arguments go to WordLoader."""
    trie = Trie()
    report = WordLoader(source, **kwargs).load(trie)
    return trie, report
