import dataclasses

import pytest

pytest.importorskip("PySide6")

from PySide6.QtWidgets import QApplication

from rena.core import Configuration, OutcomeKind, TargetKind
from rena.gui.gui_workers import BatchWorker

pytestmark = pytest.mark.gui


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def test_worker_preview_emits_report(qapp, tmp_path, make_files, listing):
    make_files(tmp_path, ["a.txt", "b.txt"])
    reports, errors = [], []

    worker = BatchWorker(Configuration(folder=tmp_path, padding_width=1, dry_run=True))
    worker.finished.connect(reports.append)
    worker.error.connect(errors.append)
    worker.run()  # synchronous, same thread

    assert errors == []
    assert len(reports) == 1
    assert [o.kind for o in reports[0].outcomes] == [OutcomeKind.SKIPPED_DRY_RUN] * 2
    assert listing(tmp_path) == ["a.txt", "b.txt"]


def test_worker_emits_error_for_bad_folder(qapp, tmp_path):
    reports, errors = [], []

    worker = BatchWorker(Configuration(folder=tmp_path / "missing"))
    worker.finished.connect(reports.append)
    worker.error.connect(errors.append)
    worker.run()

    assert reports == []
    assert len(errors) == 1
    assert "does not exist" in errors[0]


def test_panel_builds_configuration(qapp, tmp_path):
    from rena.gui.gui_mainwindow import RenamePanel

    panel = RenamePanel()
    panel.dir_edit.setText(str(tmp_path))
    panel.kind_combo.setCurrentIndex(1)
    panel.match_edit.setText(r"(\d+)")
    panel.template_edit.setText("ep$1")
    panel.start_spin.setValue(4)

    config = panel.build_config(dry_run=True)

    assert config.folder == tmp_path
    assert config.target_kind == TargetKind.DIRECTORY
    assert config.filter_pattern.pattern == r"(\d+)"
    assert config.rename_template == "ep$1"
    assert config.origin == 4
    assert config.dry_run


def test_panel_shows_report_rows(qapp, tmp_path, make_files):
    from rena.gui.gui_mainwindow import RenamePanel
    from rena.core import run

    make_files(tmp_path, ["a.txt"])
    report = run(Configuration(folder=tmp_path, dry_run=True, padding_width=1))

    panel = RenamePanel()
    panel.show_report(report)

    assert panel.table.rowCount() == 1
    assert panel.table.item(0, 1).text() == "item_0.txt"
    assert panel.table.item(0, 2).text() == "Will Rename"


def test_worker_emits_error_for_unexpected_exception(qapp, tmp_path, monkeypatch):
    import rena.gui.gui_workers as gui_workers

    def broken_run(config, progress_callback=None):
        raise RuntimeError("disk went away")

    monkeypatch.setattr(gui_workers, "run_batch", broken_run)
    reports, errors = [], []

    worker = BatchWorker(Configuration(folder=tmp_path, dry_run=True))
    worker.finished.connect(reports.append)
    worker.error.connect(errors.append)
    worker.run()

    assert reports == []
    assert errors == ["disk went away"]


def test_panel_executes_previewed_configuration(qapp, tmp_path, make_files, listing):
    from rena.gui.gui_mainwindow import RenamePanel

    make_files(tmp_path, ["a.txt"])
    panel = RenamePanel()
    panel.dir_edit.setText(str(tmp_path))
    panel.prefix_edit.setText("shot")
    panel.padding_spin.setValue(2)

    assert panel.execute_config() is None

    previewed = panel.build_config(dry_run=True)
    panel.preview_config = previewed
    # Edits after the preview must not leak into the live run
    panel.prefix_edit.setText("other")
    panel.dir_edit.setText(str(tmp_path / "elsewhere"))

    config = panel.execute_config()

    assert config == dataclasses.replace(previewed, dry_run=False)
    assert config.prefix == "shot"
    assert config.folder == tmp_path
    assert not config.dry_run

    reports = []
    worker = BatchWorker(config)
    worker.finished.connect(reports.append)
    worker.run()

    assert reports[0].renamed_count == 1
    assert listing(tmp_path) == ["shot_00.txt"]


def test_panel_error_clears_preview(qapp, tmp_path, monkeypatch):
    from rena.gui.gui_mainwindow import RenamePanel
    from rena.gui import gui_mainwindow

    panel = RenamePanel()
    panel.dir_edit.setText(str(tmp_path))
    panel.preview_config = panel.build_config(dry_run=True)

    shown = []
    monkeypatch.setattr(gui_mainwindow.QMessageBox, "critical", lambda *args: shown.append(args[-1]))
    panel._on_error("boom")

    assert shown == ["boom"]
    assert panel.preview_config is None
    assert panel.execute_config() is None
