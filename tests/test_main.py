from pathlib import Path

from loguru import logger

from post_excerpt import main as main_module
from post_excerpt.tools.logger import setup_logging


def test_main_renders_demo_excerpt(monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)
    messages = []
    sink_id = logger.add(messages.append, level="SUCCESS", format="{message}")
    try:
        main_module.main()
    finally:
        logger.remove(sink_id)
    assert any("<p>Hello <b>world</b></p>\n<p>Second paragraph.</p>" in m for m in messages)


def test_setup_logging_writes_to_log_dir(tmp_path):
    setup_logging(level="DEBUG", log_path=Path("logs"), root=tmp_path)
    logger.debug("hello from test")
    logger.complete()
    logger.remove()
    files = list((tmp_path / "logs").glob("post_excerpt_*.log"))
    assert files and "hello from test" in files[0].read_text(encoding="utf-8")
