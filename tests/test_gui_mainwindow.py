"""
Tests for the rename panel (offscreen, workers driven by hand)
"""

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets")

from core import RenameOptions, RenameStyle, rename_recursive  # noqa: E402
from gui.gui_mainwindow import StyleRenamePanel  # noqa: E402
from gui.gui_workers import RenameWorker  # noqa: E402


def select_style(panel: StyleRenamePanel, style: RenameStyle):
    panel.style_combo.setCurrentIndex(list(RenameStyle).index(style))


@pytest.fixture
def panel(qt_app, mixed_tree):
    panel = StyleRenamePanel()
    panel.dir_edit.setText(str(mixed_tree))
    select_style(panel, RenameStyle.KEBAB)
    return panel


def start_preview(panel: StyleRenamePanel):
    """Preview worker for the current settings, as _do_preview builds it"""
    panel.preview_worker = RenameWorker(
        Path(panel.dir_edit.text()), panel.style_combo.currentData(), panel._options(dry_run=True)
    )
    panel._set_busy(True)
    return rename_recursive(panel.preview_worker.directory, panel.preview_worker.style,
                            panel.preview_worker.options)


class TestBusyState:
    """Controls while a worker runs"""

    def test_settings_locked_while_busy(self, panel):
        settings = (panel.dir_edit, panel.browse_btn, panel.style_combo,
                    panel.ignore_edit, panel.hidden_check, panel.preview_btn)

        panel._set_busy(True)
        assert not any(w.isEnabled() for w in settings)
        assert not panel.execute_btn.isEnabled()

        panel._set_busy(False)
        assert all(w.isEnabled() for w in settings)


class TestPreview:
    """Preview results and stale settings"""

    def test_preview_enables_execute(self, panel):
        planned = start_preview(panel)

        panel._on_preview_finished(planned)

        assert len(panel.planned) == 5
        assert panel.table.rowCount() == 5
        assert panel.execute_btn.isEnabled()

    def test_preview_with_changed_style_is_dropped(self, panel):
        planned = start_preview(panel)
        select_style(panel, RenameStyle.SNAKE)

        panel._on_preview_finished(planned)

        assert panel.planned == []
        assert panel.table.rowCount() == 0
        assert not panel.execute_btn.isEnabled()
        assert "run Preview again" in panel.status_label.text()

    def test_preview_with_changed_filters_is_dropped(self, panel):
        planned = start_preview(panel)
        panel.ignore_edit.setText("Nested Dir")

        panel._on_preview_finished(planned)

        assert panel.planned == []
        assert not panel.execute_btn.isEnabled()

    def test_settings_match_worker(self, panel, mixed_tree):
        worker = RenameWorker(mixed_tree, RenameStyle.KEBAB, RenameOptions(dry_run=True))
        assert panel._matches_settings(worker)

        panel.hidden_check.setChecked(True)
        assert not panel._matches_settings(worker)
        assert not panel._matches_settings(None)
