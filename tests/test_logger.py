from datetime import datetime

import pytest

from skullrunner.logger import Logger

STAMP = datetime(2024, 5, 6, 7, 8, 9)


def test_file_name_follows_timestamp_format(tmp_path):
    with Logger("scene", directory=tmp_path, now=STAMP) as logger:
        path = logger.path
    assert path == tmp_path / "scene" / "20240506_07.08.09.log"
    assert path.exists()


def test_first_entry_is_process_started(tmp_path):
    with Logger("master", directory=tmp_path, now=STAMP) as logger:
        path = logger.path
    assert path.read_text(encoding="utf-8") == "Process started.\n\n"


def test_messages_are_appended_line_by_line(tmp_path):
    with Logger("master", directory=tmp_path, now=STAMP) as logger:
        logger.log("Camera Complete")
        logger.log("Player Update Complete")
        path = logger.path
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[-2:] == ["Camera Complete", "Player Update Complete"]


def test_messages_are_visible_before_close(tmp_path):
    logger = Logger("live", directory=tmp_path, now=STAMP)
    logger.log("frame")
    try:
        assert "frame\n" in logger.path.read_text(encoding="utf-8")
    finally:
        logger.close()


def test_log_after_close_raises(tmp_path):
    logger = Logger("closed", directory=tmp_path, now=STAMP)
    logger.close()
    with pytest.raises(ValueError):
        logger.log("too late")