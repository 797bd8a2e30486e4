"""Interactive console session: login, then a numbered menu over the registries.

Input is read through a rich ``Console``. Bad input is re-prompted and
business errors from the registries are printed, never raised, so one
mistake does not end the session.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import TextIO

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from daybook.authors import Author, AuthorRegistry
from daybook.core.exceptions import DaybookError
from daybook.entries import TIMESTAMP_FORMAT, AccessFilter, DiaryEntry, EntryRegistry

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_PATTERN = "yyyy-MM-dd HH:mm"
DATE_PATTERN = "yyyy-MM-dd"

ADD_ENTRY = 1
LIST_ALL = 2
SEARCH_BY_DATE = 3
DELETE_ENTRY = 4
EDIT_ENTRY = 5
TODAY_ENTRIES = 6
SEARCH_BY_KEYWORD = 7
SEARCH_BETWEEN = 8
STATISTICS = 9
LIST_BY_AUTHOR = 10
GLOBAL_STATISTICS = 11
SYSTEM_RESET = 12
RENAME_ACCOUNT = 13
EXIT_PROGRAM = 0

ADMIN_OPTIONS = {LIST_BY_AUTHOR, GLOBAL_STATISTICS, SYSTEM_RESET}


class DiarySession:
    """One logged-in user working against the two registries.

    Args:
        entries: Entry registry to operate on.
        authors: Author registry used for login and admin views.
        console: Output console. Defaults to a fresh ``Console()``.
        stream: Read input lines from this stream instead of stdin.
        clock: Source of "now", used for new entries and "today".
    """

    def __init__(
        self,
        entries: EntryRegistry,
        authors: AuthorRegistry,
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.entries = entries
        self.authors = authors
        self.console = console or Console()
        self._stream = stream
        self._clock = clock
        self.current_user: Author | None = None

    @property
    def is_admin(self) -> bool:
        return self.current_user is not None and self.current_user.is_admin

    # -- Main loop ----------------------------------------------------------

    def start(self) -> None:
        """Log in, then process menu choices until the user exits."""
        self.console.print(Panel("Diary application. Log in or create a user to begin.", title="Daybook"))
        try:
            self.login_or_register()
            self.console.print(f"\nWelcome, {escape(self.current_user.display_name)}!\n")
            while self.handle_choice(self._show_menu()):
                pass
        except (EOFError, KeyboardInterrupt):
            self.console.print("\nGoodbye!")

    def handle_choice(self, choice: int) -> bool:
        """Run one menu action. Returns False when the session should end."""
        if choice in ADMIN_OPTIONS and not self.is_admin:
            self.console.print("Invalid option.")
            return True

        actions: dict[int, Callable[[], None]] = {
            ADD_ENTRY: self.add_entry,
            LIST_ALL: self.list_all,
            SEARCH_BY_DATE: self.search_by_date,
            DELETE_ENTRY: self.delete_entry,
            EDIT_ENTRY: self.edit_entry,
            TODAY_ENTRIES: self.today_entries,
            SEARCH_BY_KEYWORD: self.search_by_keyword,
            SEARCH_BETWEEN: self.search_between,
            STATISTICS: self.show_statistics,
            LIST_BY_AUTHOR: self.list_by_author,
            GLOBAL_STATISTICS: self.show_global_statistics,
            SYSTEM_RESET: self.reset_system,
            RENAME_ACCOUNT: self.rename_account,
        }
        if choice == EXIT_PROGRAM:
            self.console.print("Exiting program")
            return False
        action = actions.get(choice)
        if action is None:
            self.console.print("Invalid option.")
            return True
        try:
            action()
        except DaybookError as e:
            logger.debug(f"Menu action {choice} failed: {e}")
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")
        return True

    def _show_menu(self) -> int:
        lines = [
            "1. Add diary entry",
            "2. List all entries",
            "3. Search by date",
            "4. Delete diary entry",
            "5. Edit diary entry (title/text)",
            "6. Show today's diary entries",
            "7. Search by keyword/phrase",
            "8. View by date range",
            "9. View diary statistics",
        ]
        if self.is_admin:
            lines += [
                "10. List entries by author (Admin)",
                "11. View global statistics (Admin)",
                "12. Reset system (Admin)",
            ]
        lines += ["13. Change display name", "0. Exit program"]
        self.console.print(Panel("\n".join(lines), title="Diary"))
        return self.read_int("Pick option: ")

    # -- Login --------------------------------------------------------------

    def login_or_register(self) -> None:
        while self.current_user is None:
            self.console.print("1. Login\n2. New user")
            choice = self.read_int("Choose option: ")
            if choice == 1:
                self._login()
            elif choice == 2:
                self._register()
            else:
                self.console.print("Invalid choice.")

    def _login(self) -> None:
        name = self.read_line("Username: ")
        password = self.read_line("Password: ", password=True)
        try:
            author = self.authors.authenticate(name, password)
        except DaybookError as e:
            self.console.print(f"Login failed: {escape(str(e))}")
            return
        if author is None:
            self.console.print("Unknown user or incorrect password.")
            return
        logger.debug(f"Author {author.id} logged in")
        self.current_user = author

    def _register(self) -> None:
        name = self.read_line("Choose username: ")
        try:
            if self.authors.find_by_name(name) is not None:
                self.console.print("User already exists.")
                return
            password = self.read_line("Choose password: ", password=True)
            self.current_user = self.authors.add_author(name, password)
        except DaybookError as e:
            self.console.print(f"Could not create user: {escape(str(e))}")
            return
        self.console.print("User successfully created.")

    # -- Entry actions ------------------------------------------------------

    def add_entry(self) -> None:
        self.console.print(f"Creating entry as: {escape(self.current_user.display_name)}")
        title = self.read_line("Title: ")
        text = self.read_line("Text: ")
        now = self._clock()
        if self.read_yes_no(f"Use current time ({now.strftime(TIMESTAMP_FORMAT)})? (y/n): "):
            timestamp = now
        else:
            timestamp = self.read_datetime(f"Enter date/time ({TIMESTAMP_PATTERN}): ")
        self.entries.add_entry(DiaryEntry(self.current_user, title, text, timestamp))
        self.console.print("Entry successfully added")

    def list_all(self) -> None:
        if self.is_admin:
            self.console.print("--- ADMIN ACCESS: all entries visible ---")
            self.show_entries(self.entries.get_all())
        else:
            self.console.print(f"--- All entries for {escape(self.current_user.display_name)} ---")
            self.show_entries(self.entries.find_by_author(self.current_user.id))

    def search_by_date(self) -> None:
        day = self.read_date(f"Date ({DATE_PATTERN}): ")
        visible = self._visible(self.entries.find_by_date(day))
        if not visible:
            self.console.print("No diary entries from this date")
        else:
            self.show_entries(visible)

    def today_entries(self) -> None:
        self.show_entries(self._visible(self.entries.find_by_date(self._clock().date())))

    def search_by_keyword(self) -> None:
        keyword = self.read_line("Search for word/phrase: ")
        visible = self._visible(self.entries.search_by_keyword(keyword))
        if not visible:
            self.console.print(f"No entries found containing keyword: {escape(keyword)}")
        else:
            self.console.print(f"Found {len(visible)} matches in diary entries:")
            self.show_entries(visible)

    def search_between(self) -> None:
        self.console.print("--- Search by time range ---")
        start = self.read_datetime(f"From date/time ({TIMESTAMP_PATTERN}): ")
        end = self.read_datetime(f"To date/time ({TIMESTAMP_PATTERN}): ")
        visible = self._visible(self.entries.find_between(start, end))
        if not visible:
            self.console.print("No entries found in this interval")
        else:
            self.console.print(f"Found {len(visible)} entries:")
            self.show_entries(visible)

    def edit_entry(self) -> None:
        entry = self._pick_entry("edit")
        if entry is None:
            return
        self.console.print("--- Entry to edit ---")
        self.show_entry(entry)
        if self.read_yes_no("Do you want to edit the title? (y/n): "):
            try:
                entry.title = self.read_line("New title: ")
            except DaybookError as e:
                self.console.print(f"Error updating title: {escape(str(e))}")
        else:
            self.console.print("Entry title not edited")
        if self.read_yes_no("Do you want to edit the text? (y/n): "):
            try:
                entry.text = self.read_line("New text: ")
            except DaybookError as e:
                self.console.print(f"Error updating text: {escape(str(e))}")
        else:
            self.console.print("Entry text not edited")

    def delete_entry(self) -> None:
        entry = self._pick_entry("delete")
        if entry is None:
            return
        self.console.print("*** Entry selected for deletion ***")
        self.show_entry(entry)
        if not self.read_yes_no("Are you certain you want to delete this entry? (y/n): "):
            self.console.print("Entry not deleted")
            return
        if self.entries.remove_entry(entry.id):
            self.console.print("Diary entry deleted")
        else:
            self.console.print("Error: entry not deleted")

    def show_statistics(self) -> None:
        self.console.print(escape(self.entries.get_statistics(self.current_user.id)))

    def rename_account(self) -> None:
        new_name = self.read_line("New display name: ")
        self.authors.rename(self.current_user.id, new_name)
        self.console.print(f"Display name changed to {escape(self.current_user.display_name)}")

    # -- Admin actions ------------------------------------------------------

    def list_by_author(self) -> None:
        name = self.read_line("Author's name: ")
        author = self.authors.find_by_name(name)
        if author is None:
            self.console.print("No author found by that name.")
            return
        self.show_entries(self.entries.find_by_author(author.id))

    def show_global_statistics(self) -> None:
        table = Table(title="Global statistics (Admin only)")
        table.add_column("Author")
        table.add_column("Created")
        table.add_column("Entries", justify="right")
        total = 0
        for author in self.authors.get_all():
            count = self.entries.count_by_author(author.id)
            total += count
            table.add_row(escape(author.display_name), author.created_at.strftime(DATE_FORMAT), str(count))
        self.console.print(table)
        self.console.print(f"Total entries in system: {total}")

    def reset_system(self) -> None:
        self.console.print("[bold red]WARNING: this deletes every entry and every non-admin author[/bold red]")
        if not self.read_yes_no("Are you certain you want to delete all entries and authors? (y/n): "):
            self.console.print("System reset cancelled.")
            return
        self.entries.clear_diary_entry_register()
        removed = self.authors.clear_except_admin()
        logger.info(f"System reset by {self.current_user.id}: {removed} author(s) removed")
        self.console.print("System reset successful. All entries and non-admin authors deleted.")

    # -- Rendering ----------------------------------------------------------

    def show_entry(self, entry: DiaryEntry) -> None:
        stamp = escape(f"[{entry.timestamp.strftime(TIMESTAMP_FORMAT)}]")
        self.console.print(f"[bold]{stamp}[/bold] {escape(entry.author.display_name)}")
        self.console.print(escape(entry.title), style="cyan")
        self.console.print(escape(entry.text))

    def show_entries(self, entries: Sequence[DiaryEntry]) -> None:
        if not entries:
            self.console.print("No entries found")
            return
        for entry in entries:
            self.show_entry(entry)
            self.console.print()

    def _visible(self, entries: Sequence[DiaryEntry]) -> Sequence[DiaryEntry]:
        return AccessFilter(self.current_user)(entries)

    def _pick_entry(self, verb: str) -> DiaryEntry | None:
        day = self.read_date(f"What is the date of the entry? ({DATE_PATTERN}): ")
        candidates = self._visible(self.entries.find_by_date(day))
        if not candidates:
            self.console.print("No diary entries found for this date")
            return None
        self.console.print(f"Which entry would you like to {verb}?")
        for i, entry in enumerate(candidates, start=1):
            self.console.print(
                f"{i}: {escape(entry.title)} ({entry.timestamp.strftime(TIMESTAMP_FORMAT)}) "
                f"- {escape(entry.author.display_name)}"
            )
        choice = self.read_int("Write the number of the entry: ")
        if not 1 <= choice <= len(candidates):
            self.console.print("Invalid choice")
            return None
        return candidates[choice - 1]

    # -- Input helpers ------------------------------------------------------

    def _ask(self, prompt: str, *, password: bool = False) -> str:
        # mask only on a real terminal
        masked = password and self._stream is None and sys.stdin.isatty()
        raw = self.console.input(prompt, password=masked, stream=self._stream)
        if self._stream is not None:
            if raw == "":
                raise EOFError
            raw = raw.rstrip("\n")
        return raw

    def read_line(self, prompt: str, *, password: bool = False) -> str:
        """Read a non-blank line, trimmed."""
        while True:
            value = self._ask(prompt, password=password).strip()
            if value:
                return value
            self.console.print("Cannot be empty.")

    def read_int(self, prompt: str) -> int:
        while True:
            value = self._ask(prompt).strip()
            try:
                return int(value)
            except ValueError:
                self.console.print("Input must be a number")

    def read_yes_no(self, prompt: str) -> bool:
        while True:
            value = self._ask(prompt).strip().lower()
            if value == "y":
                return True
            if value == "n":
                return False
            self.console.print("Type y or n")

    def read_date(self, prompt: str) -> date:
        while True:
            value = self._ask(prompt).strip()
            try:
                return datetime.strptime(value, DATE_FORMAT).date()
            except ValueError:
                self.console.print(f"Invalid date format. Use {DATE_PATTERN}")

    def read_datetime(self, prompt: str) -> datetime:
        while True:
            value = self._ask(prompt).strip()
            try:
                return datetime.strptime(value, TIMESTAMP_FORMAT)
            except ValueError:
                self.console.print(f"Invalid format. Use {TIMESTAMP_PATTERN}")
