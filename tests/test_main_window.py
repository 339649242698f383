import time

import pytest

from core.config import Config
from core.metadata_extractor import ExtractionState
from services.PDFMetadataService import PDFMetadataService
from ui.main_window import MainWindow


@pytest.fixture
def window(qtbot):
    win = MainWindow(PDFMetadataService())
    qtbot.addWidget(win)
    yield win
    win.close()


def _wait_idle(qtbot, window):
    qtbot.waitUntil(lambda: not window._workers and window.extractor.state not in (
        ExtractionState.READING, ExtractionState.PARSING), timeout=10000)


def test_main_window_initial_state(window):
    """Nothing is loading, failing or displayed before a file arrives."""
    assert window.extractor.state == ExtractionState.IDLE
    assert window.loading_label.isHidden()
    assert window.error_panel.isHidden()
    assert window.metadata_panel.basic_grid.isHidden()
    assert window.windowTitle() == Config.APP_NAME


def test_main_window_loads_unencrypted_pdf(qtbot, window, make_pdf):
    path = make_pdf(name="plain.pdf", pages=3, metadata={"title": "Plain"})
    window.load_file(str(path))
    _wait_idle(qtbot, window)

    assert window.extractor.state == ExtractionState.DONE
    assert window.metadata_panel.basic_grid.rows["File Name"] == "plain.pdf"
    assert window.metadata_panel.info_grid.rows["Page Count"] == "3 pages"
    assert window.metadata_panel.info_grid.rows["Title"] == "Plain"
    assert window.error_panel.isHidden()
    assert window.windowTitle() == f"{Config.APP_NAME} - plain.pdf"


def test_main_window_shows_terminal_error(qtbot, window, tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"definitely not a pdf")
    window.load_file(str(path))
    _wait_idle(qtbot, window)

    assert window.extractor.state == ExtractionState.FAILED
    assert not window.error_panel.isHidden()
    assert window.error_label.text().startswith("Error processing PDF: ")
    assert window.metadata_panel.basic_grid.isHidden()


def test_main_window_password_flow(qtbot, window, make_pdf):
    path = make_pdf(name="locked.pdf", pages=2, user_pw="secret")
    window.load_file(str(path))
    _wait_idle(qtbot, window)

    dialog = window.password_dialog
    assert window.extractor.state == ExtractionState.AWAITING_PASSWORD
    assert dialog.isVisible()
    assert dialog.error_label.isHidden()
    # Prompts are not errors
    assert window.error_panel.isHidden()

    dialog.password_input.setText("wrong")
    dialog.submit()
    _wait_idle(qtbot, window)
    assert dialog.isVisible()
    assert dialog.error_label.text() == Config.INVALID_PASSWORD_MESSAGE
    assert dialog.password_input.text() == ""
    assert window.extractor.retry.attempts == 1

    dialog.password_input.setText("secret")
    dialog.submit()
    _wait_idle(qtbot, window)
    assert window.extractor.state == ExtractionState.DONE
    assert not dialog.isVisible()
    assert window.extractor.retry.is_empty
    assert window.metadata_panel.info_grid.rows["Page Count"] == "2 pages"
    assert window.metadata_panel.info_grid.rows["Security Status"] == Config.SECURITY_ENCRYPTED


def test_main_window_cancel_password(qtbot, window, make_pdf):
    window.load_file(str(make_pdf(name="locked.pdf", user_pw="secret")))
    _wait_idle(qtbot, window)

    window.password_dialog.cancel_button.click()

    assert not window.password_dialog.isVisible()
    assert window.extractor.retry.is_empty
    assert window.extractor.state == ExtractionState.IDLE
    assert window.metadata_panel.basic_grid.isHidden()


def test_main_window_new_file_supersedes_previous(qtbot, window, make_pdf):
    first = make_pdf(name="first.pdf", metadata={"title": "First"})
    second = make_pdf(name="second.pdf", metadata={"title": "Second"})
    window.load_file(str(first))
    window.load_file(str(second))
    _wait_idle(qtbot, window)

    assert window.extractor.result.file_name == "second.pdf"
    assert window.metadata_panel.info_grid.rows["Title"] == "Second"


def test_main_window_timeout_surfaces_error(qtbot, window, monkeypatch, make_pdf):
    """An attempt outliving the timeout fails, and its late outcome is dropped."""
    monkeypatch.setattr(Config, "EXTRACTION_TIMEOUT_MS", 1)

    def _slow_run_file(path):
        time.sleep(0.3)
        return None

    monkeypatch.setattr(window.extractor, "run_file", _slow_run_file)
    window.load_file(str(make_pdf()))
    qtbot.waitUntil(lambda: window.extractor.state == ExtractionState.FAILED, timeout=5000)
    assert window.error_label.text().startswith("Timed out processing PDF")
    _wait_idle(qtbot, window)
    assert window.extractor.state == ExtractionState.FAILED
