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
Module containing exceptions raised by slashkit. Construction-time validation failures also subclass
the matching builtin exception type so that they can be caught as such.
"""

from __future__ import annotations

__all__ = [
    "CommandAlreadyExistsException",
    "CommandInvocationFailedException",
    "InvalidArgumentException",
    "InvalidCommandStructureException",
    "MissingValueException",
    "SlashkitException",
]

import typing as t

if t.TYPE_CHECKING:
    from slashkit import commands
    from slashkit import interaction as interaction_


class SlashkitException(Exception):
    """Base class for all exceptions used by slashkit."""


class MissingValueException(SlashkitException, TypeError):
    """Exception raised when a required argument was passed as :obj:`None`."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument!r} - a value is required")

        self.argument: str = argument
        """The name of the argument that was missing."""


class InvalidArgumentException(SlashkitException, ValueError):
    """Exception raised when a command or option name or description does not meet discord's constraints."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"{argument!r} - {reason}")

        self.argument: str = argument
        """The name of the argument that was invalid."""
        self.reason: str = reason
        """Why the argument was rejected."""


class InvalidCommandStructureException(SlashkitException):
    """
    Exception raised when a command definition cannot be registered because its structure would
    be rejected by discord. For example, when a command has both options and subcommands.
    """

    def __init__(self, command: commands.CommandDefinition[t.Any], reason: str) -> None:
        super().__init__(f"command {command.qualified_name!r} is invalid - {reason}")

        self.command: commands.CommandDefinition[t.Any] = command
        """The command definition that failed validation."""
        self.reason: str = reason
        """Why the structure was rejected."""


class CommandAlreadyExistsException(SlashkitException):
    """Exception raised when a command is registered with the same name as an existing command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"a command with the name {name!r} is already registered")

        self.name: str = name
        """The name of the duplicated command."""


class CommandInvocationFailedException(SlashkitException):
    """
    Exception raised when a command's handler raises during dispatch. This is the
    exception type passed to all error handlers. The original exception is available
    through the ``__cause__`` attribute.
    """

    def __init__(
        self,
        command: commands.CommandDefinition[t.Any],
        interaction: interaction_.Interaction[t.Any],
        cause: Exception,
    ) -> None:
        super().__init__(f"invocation of command {command.qualified_name!r} failed")

        self.command: commands.CommandDefinition[t.Any] = command
        """The command definition whose handler failed."""
        self.interaction: interaction_.Interaction[t.Any] = interaction
        """The interaction that the handler was invoked with."""
        self.__cause__: BaseException | None = cause
