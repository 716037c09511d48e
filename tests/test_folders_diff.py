from pathlib import Path

from _fakes import NOT_A_REPO, FakeExecutor, launch_failure, output

from tree_diff.errors import GitCommandError, GitError, InsideGitDirError
from tree_diff.folders_diff import DiffRunConfig, FoldersDiff


def test_diff_run_config_builders_return_new_values():
    base = DiffRunConfig()
    configured = base.with_z_option().with_name_status().with_no_renames()

    assert base == DiffRunConfig(False, False, False, False)
    assert configured == DiffRunConfig(
        name_status=True, no_renames=True, z_option=True, no_index=False
    )
    assert base.with_no_index().no_index is True
    assert base.no_index is False


def test_diff_run_config_flag_order():
    assert DiffRunConfig().git_args() == ["--no-color"]
    full = DiffRunConfig(name_status=True, no_renames=True, z_option=True)
    assert full.git_args() == ["--no-color", "--name-status", "--no-renames", "-z"]


def test_run_builds_git_diff_command_from_common_parent(tmp_path):
    executor = FakeExecutor(NOT_A_REPO, output(0))
    config = DiffRunConfig().with_name_status().with_no_renames().with_z_option()
    env = {"GIT_EXEC_PATH": "/opt/git"}

    result = FoldersDiff(verbose=True, environment=env, config=config, executor=executor).run(
        tmp_path / "one", tmp_path / "other"
    )

    assert result == b""
    guard, diff_call = executor.calls
    assert guard["args"] == ["/opt/git/git", "rev-parse", "--git-dir"]
    assert guard["cwd"] == tmp_path / "one"
    assert diff_call["args"] == [
        "/opt/git/git",
        "diff",
        "--no-color",
        "--name-status",
        "--no-renames",
        "-z",
        "--",
        "one",
        "other",
    ]
    assert diff_call["cwd"] == tmp_path
    assert diff_call["env"] == env
    assert diff_call["verbose"] is True


def test_run_returns_stdout_when_trees_differ(tmp_path):
    patch = b"diff --git a/one/f b/other/f\n+hello\n"
    executor = FakeExecutor(NOT_A_REPO, output(1, stdout=patch))

    result = FoldersDiff(executor=executor).run(tmp_path / "one", tmp_path / "other")

    assert result == patch


def test_run_keeps_argument_order(tmp_path):
    executor = FakeExecutor(NOT_A_REPO, output(0))

    FoldersDiff(executor=executor).run(str(tmp_path / "b"), str(tmp_path / "a"))

    assert executor.calls[1]["args"][-3:] == ["--", "b", "a"]


def test_run_raises_when_git_reports_an_error(tmp_path):
    executor = FakeExecutor(
        NOT_A_REPO, output(128, stdout=b"partial", stderr=b"fatal: bad revision\n")
    )

    try:
        FoldersDiff(executor=executor).run(tmp_path / "one", tmp_path / "other")
    except GitCommandError as exc:
        assert exc.returncode == 128
        assert "fatal: bad revision" in exc.stderr
        assert "Error executing 'git diff'" in str(exc)
        assert "fatal: bad revision" in str(exc)
    else:
        raise AssertionError("expected GitCommandError to be raised")


def test_run_wraps_launch_failures(tmp_path):
    executor = FakeExecutor(NOT_A_REPO, launch_failure())

    try:
        FoldersDiff(executor=executor).run(tmp_path / "one", tmp_path / "other")
    except GitError as exc:
        assert not isinstance(exc, GitCommandError)
        assert "Error executing 'git diff'" in str(exc)
    else:
        raise AssertionError("expected GitError to be raised")


def test_run_rejects_non_sibling_paths_before_running_git(tmp_path):
    executor = FakeExecutor()

    try:
        FoldersDiff(executor=executor).run(tmp_path / "one", tmp_path / "nested" / "other")
    except ValueError as exc:
        assert "sibling" in str(exc)
    else:
        raise AssertionError("expected ValueError to be raised")
    assert executor.calls == []


def test_run_stops_when_inside_git_repo(tmp_path):
    executor = FakeExecutor(output(0, stdout=b".git\n"))

    try:
        FoldersDiff(executor=executor).run(tmp_path / "one", tmp_path / "other")
    except InsideGitDirError as exc:
        assert exc.git_dir == ".git"
        assert exc.path == tmp_path / "one"
    else:
        raise AssertionError("expected InsideGitDirError to be raised")
    assert len(executor.calls) == 1


def test_run_with_no_index_skips_repository_check(tmp_path):
    executor = FakeExecutor(output(0))
    config = DiffRunConfig().with_no_index()

    FoldersDiff(config=config, executor=executor).run(tmp_path / "one", tmp_path / "other")

    (call,) = executor.calls
    assert call["args"] == ["git", "diff", "--no-color", "--no-index", "--", "one", "other"]


def test_relative_sibling_paths_are_accepted():
    executor = FakeExecutor(NOT_A_REPO, output(0))

    FoldersDiff(executor=executor).run("one", "other")

    assert executor.calls[1]["cwd"] == Path(".")
    assert executor.calls[1]["args"][-2:] == ["one", "other"]
