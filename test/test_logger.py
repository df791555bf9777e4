import logging

from utils import logger as gitgre_logger


def test_setup_logger_writes_one_file_per_run(tmp_path, monkeypatch):
    monkeypatch.setattr(gitgre_logger, "_logging_initialized", False)
    monkeypatch.setattr(gitgre_logger, "_log_file_path", None)
    handlers_before = list(logging.root.handlers)
    level_before = logging.root.level

    try:
        gitgre_logger.setup_logger(log_dir=str(tmp_path), log_level="INFO")
        gitgre_logger.setup_logger(log_dir=str(tmp_path), log_level="INFO")

        log_file = gitgre_logger.get_log_file_path()
        assert log_file is not None
        assert log_file.startswith(str(tmp_path))
        assert [p.name for p in tmp_path.iterdir()] == [log_file.split("/")[-1]]

        gitgre_logger.get_logger("picker.test").info("reranked 3 candidates")
        for handler in logging.root.handlers:
            handler.flush()
        content = (tmp_path / log_file.split("/")[-1]).read_text(encoding="utf-8")
        assert "gitgre logging to" in content
        assert "picker.test - INFO - reranked 3 candidates" in content
    finally:
        for handler in list(logging.root.handlers):
            if handler not in handlers_before:
                logging.root.removeHandler(handler)
                handler.close()
        logging.root.setLevel(level_before)
