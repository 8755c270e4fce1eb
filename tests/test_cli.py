import json
import logging

import pytest

from forbildshapes.__main__ import main
from forbildshapes.config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_prints_one_json_line_per_descriptor(capsys):
    code = main(["Cylinder: r=5; l=10", "Cylinder_x: r=3; l=1; x<0.5"])
    out = capsys.readouterr().out.strip().splitlines()

    assert code == 0
    assert len(out) == 2
    first, second = (json.loads(line) for line in out)
    assert first["dx"] == 5.0
    assert first["bounds"] == []
    assert second["axis"] == [1.0, 0.0, 0.0]
    assert len(second["bounds"]) == 1


def test_malformed_descriptor_exits_with_error(capsys):
    assert main(["Cylinder r=5"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot compile" in captured.err


def test_strict_rejects_unknown_clause(capsys):
    assert main(["Cylinder: r=1; colour=red"]) == 0
    assert main(["--strict", "Cylinder: r=1; colour=red"]) == 1


def test_log_file_receives_debug_output(tmp_path, capsys):
    log_file = tmp_path / "compile.log"
    assert main(["-v", "--log-file", str(log_file), "Cylinder: r=1; l=2; foo=3"]) == 0
    text = log_file.read_text(encoding="utf-8")
    assert "Skipping unknown clause 'foo=3'" in text
