import socket

from minishell.history import History
from minishell.state import ShellState, init_shell


def test_init_reads_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = init_shell({"USER": "alice", "PATH": "/usr/bin::/bin"})
    assert state.user == "alice"
    assert state.bin_paths == ["/usr/bin", "/bin"]
    assert state.cwd == tmp_path.name
    assert state.exit_status == 0
    assert len(state.history) == 0


def test_init_hostname_matches_system():
    state = init_shell({})
    assert state.hostname == socket.gethostname()[:127]


def test_init_without_path_or_user():
    state = init_shell({})
    assert state.user is None
    assert state.bin_paths == []


def test_refresh_cwd(tmp_path, monkeypatch):
    sub = tmp_path / "inner"
    sub.mkdir()
    monkeypatch.chdir(tmp_path)
    state = init_shell({})
    monkeypatch.chdir(sub)
    state.refresh_cwd()
    assert state.cwd == "inner"


def test_prompt_text_layout():
    state = ShellState(cwd="dir", user="alice", hostname="host", bin_paths=[])
    assert state.prompt_text() == (
        "\033[0;32malice@host\x1b[0m:\033[31;1mdir\x1b[0m$ "
    )


def test_prompt_text_without_user():
    state = ShellState(cwd="d", user=None, hostname="h", bin_paths=[])
    assert "(null)@h" in state.prompt_text()
    assert state.prompt_text().endswith("$ ")


def test_states_get_separate_histories():
    a = ShellState(cwd="a", user="u", hostname="h", bin_paths=[])
    b = ShellState(cwd="b", user="u", hostname="h", bin_paths=[])
    a.history.add("ls")
    assert isinstance(b.history, History)
    assert len(b.history) == 0
    assert len(a.history) == 1