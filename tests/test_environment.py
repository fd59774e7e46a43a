import pytest

from cobfield.environment import (
    DATADIR_VARIABLE,
    DEFAULT_DATADIR,
    DEFAULT_TOPDIR,
    DEFAULT_USER_SHELL,
    TOPDIR_VARIABLE,
    USER_SHELL_VARIABLE,
    Environment,
    PathnameTruncated,
)


def make_env(**values):
    return Environment(dict(values), create_dirs=False)


def test_plain_variable_lookup():
    env = make_env(FOO="bar")
    assert env.get("FOO") == "bar"
    assert env.get("MISSING") is None


def test_directory_defaults():
    env = make_env()
    assert env.get(TOPDIR_VARIABLE) == DEFAULT_TOPDIR
    assert env.get(DATADIR_VARIABLE) == DEFAULT_DATADIR


def test_directory_value_is_remembered():
    environ = {TOPDIR_VARIABLE: "first"}
    env = Environment(environ, create_dirs=False)
    assert env.get(TOPDIR_VARIABLE) == "first"
    environ[TOPDIR_VARIABLE] = "second"
    assert env.get(TOPDIR_VARIABLE) == "first"


def test_set_updates_remembered_value():
    env = make_env()
    env.get(TOPDIR_VARIABLE)
    env.set(TOPDIR_VARIABLE, "elsewhere")
    assert env.get(TOPDIR_VARIABLE) == "elsewhere"


def test_user_shell_defined_on_first_lookup():
    environ = {}
    env = Environment(environ, create_dirs=False)
    env.get("ANYTHING")
    assert environ[USER_SHELL_VARIABLE] == DEFAULT_USER_SHELL


def test_user_shell_kept_when_present():
    environ = {USER_SHELL_VARIABLE: "myshell"}
    Environment(environ, create_dirs=False).get("X")
    assert environ[USER_SHELL_VARIABLE] == "myshell"


def test_substitute_defined_variable():
    value = "alpha"
    env = make_env(A=value)
    assert env.substitute("${A}/file") == f"{value}/file"


def test_substitute_leaves_undefined():
    env = make_env()
    text = "${NOPE}/file"
    assert env.substitute(text) == text


def test_substitute_empty_name_kept():
    env = make_env(A="x")
    assert env.substitute("${}${A}") == "${}x"


def test_substitute_nested():
    env = make_env(A="${B}/inner", B="root")
    assert env.substitute("${A}") == "root/inner"


def test_substitute_trims_trailing_blanks():
    env = make_env()
    assert env.substitute("path   ") == "path"


def test_substitute_unterminated_reference():
    env = make_env(A="x")
    text = "${A"
    assert env.substitute(text) == text


def test_default_datadir_expands_through_topdir(tmp_path):
    env = make_env(HOME=str(tmp_path))
    expanded = env.substitute("${COBCURSES_DATADIR}")
    assert expanded == f"{tmp_path}/cobcurses/data"


def test_expand_pathname_pads():
    env = make_env(A="dir")
    result = env.expand_pathname("${A}/f", 12)
    assert len(result) == 12
    assert result.rstrip(" ") == "dir/f"


def test_expand_pathname_truncates():
    env = make_env(A="longdirectory")
    with pytest.raises(PathnameTruncated) as info:
        env.expand_pathname("${A}", 4)
    assert info.value.value == "long"


def test_create_dirs_for_default_topdir(tmp_path):
    env = Environment({"HOME": str(tmp_path)}, create_dirs=True)
    env.get("X")
    assert (tmp_path / "cobcurses").is_dir()
    assert (tmp_path / "cobcurses" / "data").is_dir()


def test_no_dirs_when_topdir_moved(tmp_path):
    target = tmp_path / "moved"
    env = Environment({"HOME": str(tmp_path), TOPDIR_VARIABLE: str(target)}, create_dirs=True)
    env.get("X")
    assert not target.exists()
    assert not (tmp_path / "cobcurses").exists()