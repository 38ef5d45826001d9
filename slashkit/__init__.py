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
A thin, typed layer over hikari's slash command builders. Declare a command's name, description, options
and subcommands, implement a single handler, and register the command to a registry which creates it with discord
and dispatches interactions to it.
"""

__all__ = [
    "MAX_OPTIONS",
    "BotConfig",
    "CommandAlreadyExistsException",
    "CommandCallback",
    "CommandDefinition",
    "CommandInvocationFailedException",
    "CommandRegistry",
    "Interaction",
    "InvalidArgumentException",
    "InvalidCommandStructureException",
    "MissingValueException",
    "OptionData",
    "SlashkitException",
    "commands",
    "config",
    "exceptions",
    "interaction",
    "registry",
    "utils",
]

from slashkit import commands
from slashkit import config
from slashkit import exceptions
from slashkit import interaction
from slashkit import registry
from slashkit import utils
from slashkit.commands import *
from slashkit.config import BotConfig
from slashkit.exceptions import *
from slashkit.interaction import *
from slashkit.registry import CommandRegistry

__version__ = "1.0.0"
