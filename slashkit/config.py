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
"""
This module contains utilities for loading your bot's configuration from a ``yaml``, ``toml`` or ``json`` file.
Loading is provided by the ``confspec`` library (`PyPI <https://pypi.org/project/confspec/>`_), which supports
environment variable substitution within the configuration:

.. code-block:: yaml

    token: ${BOT_TOKEN}
    guilds: [123456789]
    log_level: ${LOG_LEVEL:INFO}

``${NAME}`` is replaced with the value of the environment variable ``NAME``, and ``${NAME:default}`` falls back
to ``default`` when the variable is not set. Use ``$${NAME}`` to include the text ``${NAME}`` without substitution.

Usage
-----

.. code-block:: python

    import hikari
    import slashkit

    cfg = slashkit.config.load("config.yaml", cls=slashkit.config.BotConfig)

    bot = hikari.GatewayBot(cfg.token, logs=cfg.log_level)
    registry = slashkit.CommandRegistry(bot, cfg.guilds, cfg.sync_commands)

You may define your own :obj:`msgspec.Struct` to load configuration for your bot's other features instead of
:obj:`~BotConfig`.
"""

from __future__ import annotations

__all__ = ["BotConfig", "load", "loads"]

import msgspec
from confspec import load
from confspec import loads


class BotConfig(msgspec.Struct):
    """Configuration required to create a bot and a :obj:`~slashkit.registry.CommandRegistry` for it."""

    token: str
    """The bot's token."""
    guilds: list[int] = msgspec.field(default_factory=list)
    """The guilds that commands should be created in. If empty, commands are created globally."""
    sync_commands: bool = True
    """Whether commands should be created with discord when the registry is started."""
    log_level: str = "INFO"
    """The logging level passed to hikari."""
