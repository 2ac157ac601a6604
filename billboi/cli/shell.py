from __future__ import annotations
import re
import sys
from enum import Enum
from typing import Any, Callable, TextIO

from billboi.core.logging import get_logger
from billboi.fetchers.adapters.archive import DEFAULT_MONTH, DEFAULT_YEAR
from billboi.fetchers.adapters.bestsellers import DEFAULT_LIST
from billboi.fetchers.adapters.most_popular import DEFAULT_PERIOD
from billboi.printing.base import PrinterBackend
from billboi.printing.masthead import MASTHEAD
from billboi.services.font_test import cpi_for_size, parse_size, print_font_test
from billboi.services.print_service import JobResult, run_print_job

logger = get_logger()

MENU = """\
billboi-print is running. Available commands:
  print [section]      - Print top stories (e.g., print science, print arts)
  popular [days]       - Print most popular stories (days: 1, 7, or 30)
  books                - Print latest book reviews
  movies               - Print movie reviews
  best [list]          - Print bestseller list (e.g., best hardcover-fiction)
  history [year] [month] [keyword] - Print historical articles
  search <query>       - Search for articles by topic
  test                 - Test different font sizes
  help                 - Show detailed help for commands
  clear                - Clear the screen and show this menu
  quit                 - Exit the application"""

DETAILED_HELP = """\
DETAILED COMMAND HELP
====================

PRINTING COMMANDS:
  print [section]      - Print top stories from NYT
    Available sections: home, arts, automobiles, books, business, fashion,
    food, health, insider, magazine, movies, nyregion, obituaries,
    opinion, politics, realestate, science, sports, sundayreview,
    technology, theater, t-magazine, travel, upshot, us, world

  popular [days]       - Print most popular stories
    days: 1 (yesterday), 7 (week), 30 (month)

  books                - Print latest book reviews

  movies               - Print movie reviews (critics' picks)

  best [list]          - Print bestseller list
    Popular lists: hardcover-fiction, hardcover-nonfiction,
    paperback-fiction, paperback-nonfiction, young-adult

  history [year] [month] [keyword]
    - Print historical articles from NYT archive
    - Example: history 1969 7 moon (moon landing articles)

  search <query>       - Search for articles by topic
    - Example: search climate change

UTILITY COMMANDS:
  test                 - Test different font sizes
  clear                - Clear screen and show main menu
  help                 - Show this detailed help
  quit                 - Exit the application
"""

_CLEAR_SCREEN = "\033[2J\033[H"


class ShellState(Enum):
    AWAITING_COMMAND = "awaiting_command"
    STOPPED = "stopped"


def parse_int(text: str) -> int:
    """Leading-integer parse; anything unparseable is 0 so callers can fall back with ``or``."""
    match = re.match(r"\s*([+-]?\d+)", text or "")
    return int(match.group(1)) if match else 0


class Shell:
    """Line-oriented command loop. One state, re-entered after every command until quit."""

    def __init__(
        self,
        printer: PrinterBackend,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        job_runner: Callable[..., JobResult] = run_print_job,
    ):
        self.printer = printer
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.job_runner = job_runner
        self.state = ShellState.AWAITING_COMMAND
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "print": self._print,
            "popular": self._popular,
            "books": self._books,
            "movies": self._movies,
            "best": self._best,
            "history": self._history,
            "search": self._search,
            "test": self._font_test,
            "help": self._help,
            "clear": lambda _args: self.show_menu(),
            "quit": self._quit,
            "exit": self._quit,
        }

    def run(self) -> int:
        self.show_menu()
        while self.state is ShellState.AWAITING_COMMAND:
            line = self._read("> ")
            if line is None:
                self._stop()
                break
            self.handle_line(line)
        return 0

    def handle_line(self, line: str) -> ShellState:
        parts = line.strip().lower().split()
        if not parts:
            return self.state

        command, args = parts[0], parts[1:]
        handler = self.commands.get(command)
        if handler is None:
            self.say(f"Unknown command: {command}")
            self.say('Type "help" for available commands')
            self.show_menu()
            return self.state

        handler(args)
        return self.state

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout, flush=True)

    def show_menu(self) -> None:
        if getattr(self.stdout, "isatty", lambda: False)():
            self.stdout.write(_CLEAR_SCREEN)
        self.say(MASTHEAD)
        self.say(MENU)

    def _read(self, prompt: str) -> str | None:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _run_job(self, source: str, *args: Any) -> JobResult:
        self.say("Fetching stories from NYT API...")
        result = self.job_runner(self.printer, source, *args)
        if result.ok:
            self.say(f"Printed {result.story_count} stories. Print job completed successfully!")
        else:
            self.say(f"Error in print job: {result.error}")
        self.show_menu()
        return result

    def _print(self, args: list[str]) -> None:
        self.say("Starting on-demand print job for top stories...")
        self._run_job("top_stories", args[0] if args else "home")

    def _popular(self, args: list[str]) -> None:
        self.say("Printing most popular stories...")
        self._run_job("most_popular", args[0] if args else DEFAULT_PERIOD)

    def _books(self, _args: list[str]) -> None:
        self.say("Printing latest book reviews...")
        self._run_job("book_reviews")

    def _movies(self, _args: list[str]) -> None:
        self.say("Printing movie reviews...")
        self._run_job("movie_reviews")

    def _best(self, args: list[str]) -> None:
        self.say("Printing bestseller list...")
        self._run_job("bestsellers", args[0] if args else DEFAULT_LIST)

    def _history(self, args: list[str]) -> None:
        self.say("Printing historical articles...")
        year = parse_int(args[0]) if args else 0
        month = parse_int(args[1]) if len(args) > 1 else 0
        keyword = " ".join(args[2:])
        self._run_job("archive", year or DEFAULT_YEAR, month or DEFAULT_MONTH, keyword)

    def _search(self, args: list[str]) -> None:
        if not args:
            self.say("Please provide a search term. Example: search technology")
            self.show_menu()
            return
        query = " ".join(args)
        self.say(f'Searching for articles about "{query}"...')
        self._run_job("article_search", query)

    def _font_test(self, _args: list[str]) -> None:
        self.say()
        self.say("Font Size Test")
        self.say("=================")
        self.say("Size 1 = Small (12 CPI), Size 5 = Extra Large (5 CPI)")
        self.say("Regular print jobs use size 5 (5 CPI)")
        while True:
            answer = self._read('\nEnter font size to test (1-5) or "q" to return to main menu: ')
            if answer is None or answer.strip().lower() == "q":
                self.say("Returning to main menu...")
                break
            size = parse_size(answer)
            if size is None:
                self.say("Please enter a valid size between 1 and 5")
                continue
            self.say(f"Printing test with font size {size} (CPI={cpi_for_size(size)})...")
            result = print_font_test(self.printer, size)
            if result.ok:
                self.say("Font test printed successfully!")
            else:
                self.say(f"Test failed: {result.error}")
        self.show_menu()

    def _help(self, _args: list[str]) -> None:
        if getattr(self.stdout, "isatty", lambda: False)():
            self.stdout.write(_CLEAR_SCREEN)
        self.say(DETAILED_HELP)
        if self._read("Press Enter to return to the main menu...") is None:
            self._stop()
            return
        self.show_menu()

    def _quit(self, _args: list[str]) -> None:
        self.say("Shutting down billboi-print...")
        self._stop()

    def _stop(self) -> None:
        self.state = ShellState.STOPPED
        if self.stdin is not sys.stdin:
            self.stdin.close()
        logger.info("shell_stopped")
