import errno
import os

import pytest

from pipex.cli import PipelineError, main, run_pipeline

NOT_FOUND = f"Error: {os.strerror(errno.ENOENT)}"


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello world\nsecond line\n")
    return path


def test_cat_through_cat_copies_file(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "cat", str(outfile))
    assert status == 0
    assert outfile.read_text() == infile.read_text()


def test_second_command_transforms(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    run_pipeline(str(infile), "cat", "tr a-z A-Z", str(outfile))
    assert outfile.read_text() == infile.read_text().upper()


def test_outfile_is_truncated(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    outfile.write_text("x" * 500)
    run_pipeline(str(infile), "cat", "cat", str(outfile))
    assert outfile.read_text() == infile.read_text()


def test_outfile_permissions(infile, tmp_path):
    outfile = tmp_path / "new.txt"
    old = os.umask(0)
    try:
        run_pipeline(str(infile), "cat", "cat", str(outfile))
    finally:
        os.umask(old)
    assert outfile.stat().st_mode & 0o777 == 0o644


def test_missing_infile_raises(tmp_path):
    with pytest.raises(PipelineError) as info:
        run_pipeline(str(tmp_path / "absent"), "cat", "cat", str(tmp_path / "o"))
    assert info.value.errno == errno.ENOENT


def test_missing_second_command_raises_after_creating_outfile(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    with pytest.raises(PipelineError) as info:
        run_pipeline(str(infile), "cat", "no-such-tool-xyz", str(outfile))
    assert info.value.errno == errno.ENOENT
    assert outfile.exists()


def test_missing_first_command_feeds_empty_input(infile, tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "no-such-tool-xyz", "cat", str(outfile))
    assert status == 0
    assert outfile.read_text() == ""
    assert NOT_FOUND in capsys.readouterr().err


def test_status_of_second_command_returned(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "cat", "false", str(outfile)) == 1


def test_status_of_grep_without_match_returned(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "grep zzz-no-match", str(outfile))
    assert status == 1
    assert outfile.read_text() == ""


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 0
    assert f"Error: {os.strerror(errno.EINVAL)}" in capsys.readouterr().err


def test_main_runs_pipeline(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == infile.read_text()


def test_main_reports_missing_infile(tmp_path, capsys):
    result = main([str(tmp_path / "absent"), "cat", "cat", str(tmp_path / "o")])
    assert result == 0
    assert NOT_FOUND in capsys.readouterr().err