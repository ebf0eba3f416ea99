"""
Tests for exporter.output.sequence_writer
"""

from unittest.mock import patch

import pytest

from report_pager.core.models import Page
from report_pager.exporter.errors import EncodingFailure
from report_pager.exporter.output import EncodedPage, write_sequence, write_snapshot
from report_pager.exporter.output.sequence_writer import write_temp


def _encoded(count):
    return [
        EncodedPage(
            page=Page(index=i, source_y_start=i * 10, slice_height=10, top_margin_px=0 if i == 0 else 2),
            data=f"page-{i}".encode(),
        )
        for i in range(count)
    ]


def test_writes_one_file_per_page(tmp_path):
    paths = write_sequence(
        _encoded(3), tmp_path, kind="Report", subject="Jane Doe", iso_date="2026-10-19"
    )

    assert [p.name for p in paths] == [
        "Report_Jane_Doe_2026-10-19_Page01.png",
        "Report_Jane_Doe_2026-10-19_Page02.png",
        "Report_Jane_Doe_2026-10-19_Page03.png",
    ]
    assert [p.read_bytes() for p in paths] == [b"page-0", b"page-1", b"page-2"]


def test_creates_output_directory(tmp_path):
    out = tmp_path / "nested" / "exports"

    paths = write_sequence(_encoded(1), out, kind="Report", subject="A", iso_date="2026-10-19")

    assert paths[0].parent == out
    assert paths[0].exists()


def test_no_temp_files_left(tmp_path):
    write_sequence(_encoded(2), tmp_path, kind="Report", subject="A", iso_date="2026-10-19")

    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "Report_A_2026-10-19_Page01.png",
        "Report_A_2026-10-19_Page02.png",
    ]


def _flaky_temp_writes(fail_on):
    """write_temp replacement that raises OSError on the `fail_on`-th call."""
    calls = []

    def flaky(directory, data, *, suffix=""):
        calls.append(data)
        if len(calls) == fail_on:
            raise OSError("disk full")
        return write_temp(directory, data, suffix=suffix)

    return flaky


def test_failed_write_leaves_no_files(tmp_path):
    with patch(
        "report_pager.exporter.output.sequence_writer.write_temp",
        side_effect=_flaky_temp_writes(fail_on=2),
    ):
        with pytest.raises(EncodingFailure):
            write_sequence(_encoded(3), tmp_path, kind="Report", subject="A", iso_date="2026-10-19")

    assert list(tmp_path.iterdir()) == []


def test_failed_write_keeps_previous_export(tmp_path):
    names = [f"Report_A_2026-10-19_Page0{n}.png" for n in (1, 2, 3)]
    for name in names:
        (tmp_path / name).write_bytes(b"old")

    with patch(
        "report_pager.exporter.output.sequence_writer.write_temp",
        side_effect=_flaky_temp_writes(fail_on=2),
    ):
        with pytest.raises(EncodingFailure):
            write_sequence(_encoded(3), tmp_path, kind="Report", subject="A", iso_date="2026-10-19")

    assert sorted((p.name, p.read_bytes()) for p in tmp_path.iterdir()) == [
        (name, b"old") for name in names
    ]


def test_output_dir_under_a_file(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("not a directory")

    with pytest.raises(EncodingFailure):
        write_sequence(
            _encoded(1), blocker / "sub", kind="Report", subject="A", iso_date="2026-10-19"
        )


def test_write_temp_removes_file_when_write_fails(tmp_path):
    with pytest.raises(TypeError):
        write_temp(tmp_path, "not bytes", suffix=".png")

    assert list(tmp_path.iterdir()) == []


def test_write_temp_stays_in_directory(tmp_path):
    temp_path = write_temp(tmp_path, b"data", suffix=".png")

    assert temp_path.parent == tmp_path
    assert temp_path.suffix == ".png"
    assert temp_path.read_bytes() == b"data"


def test_overwrites_existing_file(tmp_path):
    target = tmp_path / "Report_A_2026-10-19_Page01.png"
    target.write_bytes(b"old")

    write_sequence(_encoded(1), tmp_path, kind="Report", subject="A", iso_date="2026-10-19")

    assert target.read_bytes() == b"page-0"


def test_write_snapshot(tmp_path):
    path = write_snapshot(b"snapshot", tmp_path / "Dashboard_A_2026-10-19.png")

    assert path.read_bytes() == b"snapshot"


def test_write_snapshot_failure(tmp_path):
    with patch(
        "report_pager.exporter.output.sequence_writer.write_atomic",
        side_effect=OSError("read-only"),
    ):
        with pytest.raises(EncodingFailure, match="snapshot"):
            write_snapshot(b"x", tmp_path / "x.png")
