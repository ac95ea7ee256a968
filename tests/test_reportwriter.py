"""ReportWriter: compact JSON, one newline, whole file replaced."""

import collections
import os
import stat

import pytest

from sessionstats.reportwriter import ReportWriter


def test_serialize_is_compact_with_newline(output_file):
    report = collections.OrderedDict([("totalUsers", 1), ("usersStats", {"A B": {"usedIE": False}})])
    text = ReportWriter(str(output_file)).serialize(report)
    assert text == '{"totalUsers":1,"usersStats":{"A B":{"usedIE":false}}}\n'


def test_serialize_keeps_non_ascii():
    text = ReportWriter("unused.json").serialize({"usersStats": {"José Núñez": {}}})
    assert "José Núñez" in text


def test_write_replaces_previous_content(output_file):
    output_file.write_text("x" * 1000)
    ReportWriter(str(output_file)).write({"totalUsers": 0})
    assert output_file.read_text(encoding="utf-8") == '{"totalUsers":0}\n'


def test_write_leaves_no_temporary_files(output_file):
    ReportWriter(str(output_file)).write({"totalUsers": 0})
    assert os.listdir(str(output_file.parent)) == [output_file.name]


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


def test_new_report_follows_umask(output_file, umask_022):
    ReportWriter(str(output_file)).write({"totalUsers": 0})
    assert stat.S_IMODE(os.stat(str(output_file)).st_mode) == 0o644


def test_existing_report_keeps_its_mode(output_file, umask_022):
    output_file.write_text("old\n")
    os.chmod(str(output_file), 0o640)
    ReportWriter(str(output_file)).write({"totalUsers": 0})
    assert stat.S_IMODE(os.stat(str(output_file)).st_mode) == 0o640


def test_symlinked_report_is_written_through(tmp_path):
    real = tmp_path / "real.json"
    real.write_text("old\n")
    link = tmp_path / "link.json"
    link.symlink_to(real)
    ReportWriter(str(link)).write({"totalUsers": 0})
    assert link.is_symlink()
    assert real.read_text(encoding="utf-8") == '{"totalUsers":0}\n'


def test_cleanup_failure_keeps_original_error(output_file, monkeypatch):
    def fail_replace(src, dst):
        raise PermissionError("replace refused")

    def fail_unlink(path):
        raise FileNotFoundError("already gone")

    monkeypatch.setattr(os, "replace", fail_replace)
    monkeypatch.setattr(os, "unlink", fail_unlink)
    with pytest.raises(PermissionError, match="replace refused"):
        ReportWriter(str(output_file)).write({"totalUsers": 0})
