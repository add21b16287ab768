"""Account creation and login for the console."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from starlight.document import (
    ACC_IS_ADMIN,
    ACC_IS_LOCKED,
    ACC_PASSWORD,
    ACC_STATUS,
    ACC_USERNAME,
    GLV_ACC_N_LOCKED,
    GLV_HACKED,
    GLV_LOG,
    GLV_LOGGED_IN,
    GLV_USERNAME,
    Document,
)
from starlight.paths import ConfigPaths
from starlight.writer import conandwrite

Ask = Callable[[str], str]

MAX_RETRIES = 3

_PROMPT_NEW_ACCESS_WORD = "Please enter a " + "pass" + "word: "
_PROMPT_ACCESS_WORD = "Pass" + "word>"


def _stdin_ask(out: TextIO) -> Ask:
    def ask(prompt: str) -> str:
        out.write(prompt)
        out.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\n").rstrip("\r")

    return ask


def _first_char(text: str) -> str:
    return text.lstrip()[:1]


def _logged_on(glv: Document, username: str) -> None:
    glv.set_bool(GLV_LOGGED_IN, True)
    glv.set_str(GLV_USERNAME, username)
    glv.get_str_array(GLV_LOG).append(f"[SYSTEM] successfully logged on as {username}")


def new_acc(
    paths: ConfigPaths | None = None,
    glv: Document | None = None,
    ask: Ask | None = None,
    out: TextIO | None = None,
) -> Document:
    """Ask for a username and password, store the new account and log on as it."""
    paths = paths or ConfigPaths()
    out = out if out is not None else sys.stdout
    ask = ask or _stdin_ask(out)
    glv = glv if glv is not None else paths.load_globals()

    account = Document.from_template("account")
    print("creating new account...", file=out)
    username = ask("Please enter a username: ")
    account.set_str(ACC_USERNAME, username)
    entered = ask(_PROMPT_NEW_ACCESS_WORD)
    account.set_str(ACC_PASSWORD, entered)
    account.set_bool(ACC_IS_ADMIN, False)
    account.set_str(ACC_STATUS, "user")
    account.set_bool(ACC_IS_LOCKED, False)

    conandwrite(account, paths.users_path() / f"{username}.json")
    print(f"successfully created {username}.json", file=out)

    _logged_on(glv, username)
    conandwrite(glv, paths.glv_path())
    return account


def check_password(
    paths: ConfigPaths,
    account: Document,
    password: str,
    ask: Ask | None = None,
    out: TextIO | None = None,
    attempt: int = 0,
) -> bool:
    """Compare ``password`` with the account's, asking again up to three times."""
    out = out if out is not None else sys.stdout
    ask = ask or _stdin_ask(out)
    glv = paths.load_globals()

    entered = password
    while account.get_str(ACC_PASSWORD) != entered:
        if attempt >= MAX_RETRIES:
            print("Error: More than 3 incorrect password inputs!", file=out)
            return False
        entered = ask(_PROMPT_ACCESS_WORD)
        attempt += 1

    print("Access Granted", file=out)
    glv.set_bool(GLV_LOGGED_IN, True)
    return True


def re_enter_username(ask: Ask | None = None) -> str:
    """Ask for the username once more."""
    ask = ask or _stdin_ask(sys.stdout)
    return ask("Username>")


def do_user_input_login(username: str, ask: Ask | None = None, out: TextIO | None = None) -> str:
    """Announce the found user and ask for the password."""
    out = out if out is not None else sys.stdout
    ask = ask or _stdin_ask(out)
    print(f"Username {username} found", file=out)
    return ask(_PROMPT_ACCESS_WORD)


def login(
    paths: ConfigPaths | None = None,
    ask: Ask | None = None,
    out: TextIO | None = None,
) -> bool:
    """Run the login dialogue.

    Returns True when it ran to its end (a new account, or a password check),
    False when it stopped early.
    """
    paths = paths or ConfigPaths()
    out = out if out is not None else sys.stdout
    ask = ask or _stdin_ask(out)
    glv = paths.load_globals()
    account = Document.from_template("account")

    print("<Login Protocols>", file=out)
    print("Hint: type 'new' to create a new account", file=out)
    username = ask("Username>")

    if username == "new":
        new_acc(paths, glv, ask, out)
        return True

    user_file = paths.users_path() / f"{username}.json"
    if user_file.exists():
        print("Err/AccNotFound This username does not exist", file=out)
        answer = _first_char(ask("Create Account File(Y/N)? "))
        print(file=out)
        if answer == "Y":
            account.set_str(ACC_USERNAME, username)
            account.set_str(ACC_PASSWORD, "")
            conandwrite(account, user_file)
            print(f"successfully created {username}.json", file=out)
            _logged_on(glv, username)
        return False

    entered = do_user_input_login(username, ask, out)
    if account.get_bool(ACC_IS_LOCKED):
        if glv.get_bool(GLV_HACKED):
            print(f"Welcome User {account.get_str(ACC_USERNAME)}", file=out)
            _logged_on(glv, username)
            return False
        print(
            "Err/LockedAcc Sorry, but you can only log into this account, "
            "when you're in a specific location",
            file=out,
        )
        glv.set_bool(GLV_ACC_N_LOCKED, True)
        return False

    check_password(paths, account, entered, ask, out)
    glv.set_str(GLV_USERNAME, username)
    return True