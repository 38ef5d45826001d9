# -*- coding: utf-8 -*-
# Copyright (c) 2023-present tandemdude
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
import pathlib

import msgspec
import pytest

from slashkit import config

JSON_SAMPLE = """
{
    "token": "${BOT_TOKEN}",
    "guilds": [123, 456],
    "log_level": "${LOG_LEVEL:DEBUG}"
}
"""


def test_load_bot_config(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOT_TOKEN", "secret")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    file = tmp_path / "config.json"
    file.write_text(JSON_SAMPLE)

    cfg = config.load(str(file), cls=config.BotConfig)
    assert cfg.token == "secret"
    assert cfg.guilds == [123, 456]
    assert cfg.sync_commands is True
    assert cfg.log_level == "DEBUG"


def test_load_bot_config_defaults(tmp_path: pathlib.Path) -> None:
    file = tmp_path / "config.json"
    file.write_text('{"token": "secret"}')

    cfg = config.load(str(file), cls=config.BotConfig)
    assert cfg.guilds == []
    assert cfg.sync_commands is True
    assert cfg.log_level == "INFO"


def test_bot_config_requires_token() -> None:
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert({"guilds": [123]}, type=config.BotConfig)
