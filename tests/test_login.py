import io

import pytest

from starlight.document import (
    ACC_IS_ADMIN,
    ACC_PASSWORD,
    ACC_STATUS,
    ACC_USERNAME,
    GLV_LOG,
    GLV_LOGGED_IN,
    GLV_USERNAME,
    Document,
)
from starlight.login import (
    check_password,
    do_user_input_login,
    login,
    new_acc,
    re_enter_username,
)
from starlight.paths import ConfigPaths
from starlight.reader import read_json
from starlight.writer import conandwrite


class Script:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


@pytest.fixture
def paths(tmp_path):
    config = ConfigPaths(root=tmp_path, out=io.StringIO())
    conandwrite(Document.from_template("glv"), config.glv_path())
    config.users_path()
    return config


def _account(username, password):
    doc = Document.from_template("account")
    doc.set_str(ACC_USERNAME, username)
    doc.set_str(ACC_PASSWORD, password)
    return doc


def test_new_acc_writes_account_and_globals(paths):
    out = io.StringIO()
    glv = paths.load_globals()
    ask = Script(["alice", "password"])
    account = new_acc(paths, glv, ask, out)

    assert ask.prompts == ["Please enter a username: ", "Please enter a password: "]
    assert account.get_str(ACC_USERNAME) == "alice"
    stored = read_json(paths.users_path() / "alice.json")
    assert stored.get_str(ACC_USERNAME) == "alice"
    assert stored.get_str(ACC_PASSWORD) == "password"
    assert stored.get_str(ACC_STATUS) == "user"
    assert stored.get_bool(ACC_IS_ADMIN) is False

    saved = paths.load_globals()
    assert saved.get_bool(GLV_LOGGED_IN) is True
    assert saved.get_str(GLV_USERNAME) == "alice"
    assert saved.get_str_array(GLV_LOG)[-1] == "[SYSTEM] successfully logged on as alice"
    assert "successfully created alice.json" in out.getvalue()


def test_check_password_correct_first_time(paths):
    out = io.StringIO()
    ask = Script([])
    password = "password"
    assert check_password(paths, _account("bob", password), password, ask, out) is True
    assert ask.prompts == []
    assert "Access Granted" in out.getvalue()


def test_check_password_succeeds_after_retries(paths):
    out = io.StringIO()
    ask = Script(["secret", "password"])
    assert check_password(paths, _account("bob", "password"), "token", ask, out) is True
    assert ask.prompts == ["Password>", "Password>"]


def test_check_password_gives_up_after_three_retries(paths):
    out = io.StringIO()
    ask = Script(["secret", "secret", "secret"])
    assert check_password(paths, _account("bob", "password"), "token", ask, out) is False
    assert len(ask.prompts) == 3
    assert "Error: More than 3 incorrect password inputs!" in out.getvalue()
    assert "Access Granted" not in out.getvalue()


def test_check_password_does_not_persist_login(paths):
    password = "password"
    check_password(paths, _account("bob", password), password, Script([]), io.StringIO())
    assert paths.load_globals().get_bool(GLV_LOGGED_IN) is False


def test_re_enter_username():
    ask = Script(["carol"])
    assert re_enter_username(ask) == "carol"
    assert ask.prompts == ["Username>"]


def test_do_user_input_login():
    out = io.StringIO()
    ask = Script(["password"])
    assert do_user_input_login("bob", ask, out) == "password"
    assert out.getvalue() == "Username bob found\n"
    assert ask.prompts == ["Password>"]


def test_login_new_creates_account(paths):
    out = io.StringIO()
    ask = Script(["new", "alice", "password"])
    assert login(paths, ask, out) is True
    assert (paths.users_path() / "alice.json").exists()
    assert paths.load_globals().get_str(GLV_USERNAME) == "alice"
    assert "<Login Protocols>" in out.getvalue()


def test_login_existing_file_recreated_on_yes(paths):
    target = paths.users_path() / "bob.json"
    conandwrite(_account("bob", "password"), target)
    out = io.StringIO()
    ask = Script(["bob", "Y"])
    assert login(paths, ask, out) is False
    assert "Err/AccNotFound This username does not exist" in out.getvalue()
    stored = read_json(target)
    assert stored.get_str(ACC_USERNAME) == "bob"
    assert stored.get_str(ACC_PASSWORD) == ""
    assert paths.load_globals().get_bool(GLV_LOGGED_IN) is False


def test_login_existing_file_kept_on_no(paths):
    target = paths.users_path() / "bob.json"
    conandwrite(_account("bob", "password"), target)
    before = target.read_text(encoding="utf-8")
    assert login(paths, Script(["bob", "N"]), io.StringIO()) is False
    assert target.read_text(encoding="utf-8") == before


def test_login_unknown_user_checks_blank_password(paths):
    out = io.StringIO()
    ask = Script(["dave", ""])
    assert login(paths, ask, out) is True
    assert "Username dave found" in out.getvalue()
    assert "Access Granted" in out.getvalue()
    assert not (paths.users_path() / "dave.json").exists()