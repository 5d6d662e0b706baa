"""Interactive terminal front end: main menu, registration and login."""

from __future__ import annotations

import sys
from collections.abc import Callable

from .users import User, UserType, create_user

_ESCAPE = "\x1b"
_INDENT = "\t\t\t\t  "
_YELLOW = "\033[93m"
_HIGHLIGHT = "\x1b[33m"
_RESET = "\033[0m"

_BANNER_LINES = (
    r"  /$$$$$$  /$$                           /$$ /$$",
    r" /$$__  $$| $$                          |__/|__/",
    r"| $$  \__/| $$$$$$$   /$$$$$$   /$$$$$$  /$$ /$$",
    r"|  $$$$$$ | $$__  $$ /$$__  $$ /$$__  $$| $$| $$",
    r" \____  $$| $$  \ $$| $$  \ $$| $$  \ $$| $$| $$",
    r" /$$  \ $$| $$  | $$| $$  | $$| $$  | $$| $$| $$",
    r"|  $$$$$$/| $$  | $$|  $$$$$$/| $$$$$$$/| $$| $$",
    r" \______/ |__/  |__/ \______/ | $$____/ |__/|__/",
    r"                              | $$               ",
    r"                              | $$               ",
    r"                              |__/               ",
)

BANNER = (
    "\n\n"
    + "".join(f"{_INDENT}{_YELLOW}{line}{_RESET}\n" for line in _BANNER_LINES)
    + "\n\n\n"
)

_MENU_ENTRIES = (
    ("  -*  LOGIN  *-", "       LOGIN"),
    ("  -* REGISTER *-", "      REGISTER"),
    ("  -*  QUIT  *-", "       QUIT"),
)
_MENU_RULE = "\t\t\t\t\t -----------====***====-----------"

_CHOICE_TYPES = {1: UserType.CUSTOMER, 2: UserType.SELLER}


class RegistrationError(ValueError):
    """Raised when an account cannot be registered."""


def _read_key_from_terminal() -> str:
    """Read a single key press without waiting for Enter."""
    try:
        import msvcrt
    except ImportError:
        import termios
        import tty

        fd = sys.stdin.fileno()
        if not sys.stdin.isatty():
            char = sys.stdin.read(1)
            if not char:
                raise EOFError
            return char
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            char = sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        if char == "\x03":
            raise KeyboardInterrupt
        return char
    return msvcrt.getwch()


def _read_line_from_terminal() -> str:
    return input()


def _write_to_terminal(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class ApplicationController:
    """Runs the shop's menus against injectable input and output callables."""

    def __init__(
        self,
        read_line: Callable[[], str] | None = None,
        read_key: Callable[[], str] | None = None,
        write: Callable[[str], None] | None = None,
        clear: Callable[[], None] | None = None,
        pause: Callable[[], None] | None = None,
    ) -> None:
        self._read_line = read_line or _read_line_from_terminal
        self._read_key = read_key or _read_key_from_terminal
        self._write = write or _write_to_terminal
        self._clear = clear or self._clear_screen
        self._pause = pause or self._wait_for_key
        self._users: dict[str, User] = {}

    @property
    def users(self) -> list[User]:
        return list(self._users.values())

    def _clear_screen(self) -> None:
        self._write("\033[2J\033[H")

    def _wait_for_key(self) -> None:
        self._write("Press any key to continue . . . ")
        self._read_key()
        self._write("\n")

    def _check_credentials(self, username: str, password: str) -> None:
        if " " in username or " " in password:
            raise RegistrationError("Username and password cannot contain spaces. Please try again.")
        if not username or not password:
            raise RegistrationError("Username and password cannot be empty. Please try again.")
        if username in self._users:
            raise RegistrationError("Username already exists. Please choose a different username.")

    def register(self, username: str, password: str, user_type: UserType | str) -> User:
        """Create and store a new account, raising RegistrationError if refused."""
        self._check_credentials(username, password)
        try:
            user = create_user(user_type, username, password)
        except ValueError:
            raise RegistrationError("Invalid choice. Please try again.") from None
        self._users[username] = user
        return user

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the account matching the credentials, or None."""
        user = self._users.get(username)
        if user is not None and user.check_password(password):
            return user
        return None

    def _show_banner(self) -> None:
        self._clear()
        self._write(BANNER)

    def _prompt(self, label: str) -> str:
        self._write(f"\t\t\t\t\t\t   {label}: ")
        return self._read_line()

    def handle_register(self) -> User:
        """Ask for credentials and an account type until registration succeeds."""
        while True:
            self._show_banner()
            self._write("\t\t\t     Please enter your desired username and password to register.\n\n\n")
            username = self._prompt("Username")
            password = self._prompt("Password")
            try:
                self._check_credentials(username, password)
            except RegistrationError as error:
                self._write(f"\t\t\t     {error}\n")
                self._pause()
                continue

            self._show_banner()
            self._write("\t\t\t\t          Please choose your user type:\n\n")
            self._write("\t\t\t\t\t\t   1. Customer\n")
            self._write("\t\t\t\t\t\t   2. Seller\n")
            self._write("\t\t\t\t          Enter your choice (1 or 2): ")
            choice = self._read_line().strip()
            user_type = _CHOICE_TYPES.get(int(choice)) if choice.isdigit() else None
            if user_type is None:
                self._write("\t\t\t     Invalid choice. Please try again.\n")
                self._pause()
                continue

            user = self.register(username, password, user_type)
            self._write(f"\t\t\t\t     Registration successful! Welcome, {username}!\n")
            self._write("\t\t\t\t     You can now log in with your new account.\n")
            self._pause()
            return user

    def handle_login(self) -> User | None:
        """Ask for credentials until they match; Escape after a failure gives up."""
        while True:
            self._show_banner()
            self._write("\t\t\t          Please enter your username and password to log in.\n\n\n")
            username_words = self._prompt("Username").split()
            password_words = self._prompt("Password").split()
            username = username_words[0] if username_words else ""
            password = password_words[0] if password_words else ""

            if not username or not password:
                self._write("\t\t\t          Username and password cannot be empty. Please try again.\n")
                self._pause()
                continue

            user = self.authenticate(username, password)
            if user is not None:
                self._write("\t\t\t\t\t\t  Login successful!\n")
                self._pause()
                return user

            self._write("\t\t\t          Invalid username or password. Please try again.\n")
            if self._read_key() == _ESCAPE:
                return None

    def _show_main_menu(self, option: int) -> None:
        self._show_banner()
        self._write(f"{_MENU_RULE}\n\n")
        for number, (selected, plain) in enumerate(_MENU_ENTRIES, start=1):
            if number == option:
                self._write(f"\t\t\t\t\t\t {_HIGHLIGHT}{selected}{_RESET}\n\n")
            else:
                self._write(f"\t\t\t\t\t\t{plain}\n\n")
        self._write(f"{_MENU_RULE}\n")

    def run(self) -> None:
        """Show the main menu: 'w' and 's' move, space selects."""
        option = 1
        while True:
            self._show_main_menu(option)
            key = self._read_key()
            if key == "w" and option > 1:
                option -= 1
            elif key == "s" and option < len(_MENU_ENTRIES):
                option += 1
            elif key == " ":
                if option == 1:
                    self.handle_login()
                elif option == 2:
                    self.handle_register()
                else:
                    self._write("Exiting the application. Goodbye!\n")
                    self._pause()
                    break
        self._clear()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shop in the terminal."""
    controller = ApplicationController()
    try:
        controller.run()
    except (KeyboardInterrupt, EOFError):
        _write_to_terminal("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())