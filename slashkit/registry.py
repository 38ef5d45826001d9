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
from __future__ import annotations

__all__ = ["CommandRegistry", "ErrorHandler", "GatewayAppT"]

import logging
import typing as t

import hikari

from slashkit import exceptions
from slashkit import utils

if t.TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Mapping
    from collections.abc import Sequence

    from slashkit import commands as commands_

ErrorHandler: t.TypeAlias = t.Callable[[exceptions.CommandInvocationFailedException], utils.MaybeAwaitable[bool]]
ErrorHandlerT = t.TypeVar("ErrorHandlerT", bound=ErrorHandler)

LOGGER = logging.getLogger(__name__)


@t.runtime_checkable
class GatewayAppT(hikari.EventManagerAware, hikari.RESTAware, t.Protocol):
    """Protocol indicating an application supports gateway events."""


class CommandRegistry:
    """
    Registry of top-level commands keyed by name. Creates the registered commands with discord, and
    dispatches each incoming slash command interaction to the command (or subcommand) that it is for.

    Args:
        app: The application to use. The registry subscribes to :obj:`~hikari.InteractionCreateEvent`
            on the application's event manager.
        default_enabled_guilds: The guilds that commands should be created in. If empty, commands
            are created globally. Defaults to an empty sequence.
        sync_commands: Whether to create the registered commands with discord when the registry is
            started. Defaults to :obj:`True`.

    Warning:
        The registry **will not** be started automatically (see: :meth:`~CommandRegistry.start`). It is
        recommended that you start it in a listener for :obj:`~hikari.StartedEvent`, after all of your
        commands have been registered.

        .. code-block:: python

            bot = hikari.GatewayBot(...)
            registry = slashkit.CommandRegistry(bot)
            registry.register(Ping(bot))

            bot.subscribe(hikari.StartedEvent, registry.start)
    """

    __slots__ = (
        "_app",
        "_application",
        "_commands",
        "_error_handlers",
        "_started",
        "default_enabled_guilds",
        "sync_commands",
    )

    def __init__(
        self,
        app: GatewayAppT,
        default_enabled_guilds: Sequence[hikari.Snowflakeish] = (),
        sync_commands: bool = True,
    ) -> None:
        self.default_enabled_guilds: Sequence[hikari.Snowflakeish] = default_enabled_guilds
        self.sync_commands: bool = sync_commands

        self._app = app
        self._commands: dict[str, commands_.CommandDefinition[t.Any]] = {}
        self._error_handlers: dict[int, list[ErrorHandler]] = {}
        self._application: hikari.Application | None = None
        self._started = False

        app.event_manager.subscribe(hikari.InteractionCreateEvent, self.handle_interaction_create_event)

    @property
    def app(self) -> GatewayAppT:
        """The application this registry is attached to."""
        return self._app

    @property
    def commands(self) -> Mapping[str, commands_.CommandDefinition[t.Any]]:
        """Mapping of command name to command for all commands registered to this registry, in registration order."""
        return dict(self._commands)

    def get(self, name: str) -> commands_.CommandDefinition[t.Any] | None:
        """
        Get the registered top-level command with the given name.

        Args:
            name: The name of the command.

        Returns:
            The command, or :obj:`None` if no command with that name is registered.
        """
        return self._commands.get(name)

    def register(self, *commands: commands_.CommandDefinition[t.Any]) -> None:
        """
        Register one or more top-level commands. Each command's structure is checked before any command
        is registered, so if one of the commands is invalid then none are registered.

        Args:
            *commands: The commands to register.

        Returns:
            :obj:`None`

        Raises:
            :obj:`~slashkit.exceptions.InvalidCommandStructureException`: If a command is a subcommand of another
                command, or if its structure is invalid (see :meth:`~slashkit.commands.CommandDefinition.validate`).
            :obj:`~slashkit.exceptions.CommandAlreadyExistsException`: If a command with the same name is already
                registered.
        """
        names: set[str] = set()
        for command in commands:
            if command.parent is not None:
                raise exceptions.InvalidCommandStructureException(
                    command, "subcommands cannot be registered as top-level commands"
                )
            if command.name in self._commands or command.name in names:
                raise exceptions.CommandAlreadyExistsException(command.name)
            command.validate()
            names.add(command.name)

        for command in commands:
            self._commands[command.name] = command
            LOGGER.debug("command %r registered successfully", command.name)

    def unregister(self, name: str) -> None:
        """
        Unregister the top-level command with the given name. Does nothing if no command with that
        name is registered.

        Args:
            name: The name of the command to unregister.

        Returns:
            :obj:`None`

        Note:
            The command is not deleted from discord until commands are next synced.
        """
        if self._commands.pop(name, None) is not None:
            LOGGER.debug("command %r unregistered successfully", name)

    @t.overload
    def error_handler(self, *, priority: int = 0) -> Callable[[ErrorHandlerT], ErrorHandlerT]: ...

    @t.overload
    def error_handler(self, func: ErrorHandlerT, *, priority: int = 0) -> ErrorHandlerT: ...

    def error_handler(
        self, func: ErrorHandlerT | None = None, *, priority: int = 0
    ) -> ErrorHandlerT | Callable[[ErrorHandlerT], ErrorHandlerT]:
        """
        Register an error handler function to call when a command handler raises an exception.

        The function must take the exception as its only argument, which will be an instance of
        :obj:`~slashkit.exceptions.CommandInvocationFailedException`. The function **must** return a boolean
        indicating whether the exception was successfully handled. Non-boolean return values will be cast to booleans.

        Args:
            func: The function to register as a command error handler.
            priority: The priority that this handler should be registered at. Higher priority handlers
                will be executed first.
        """
        if func is not None:
            handlers_with_same_priority = self._error_handlers.get(priority, [])
            handlers_with_same_priority.append(func)
            self._error_handlers[priority] = handlers_with_same_priority

            sorted_handlers = sorted(self._error_handlers.items(), key=lambda item: item[0], reverse=True)
            self._error_handlers = {k: v for k, v in sorted_handlers}

            return func

        def _inner(func_: ErrorHandlerT) -> ErrorHandlerT:
            return self.error_handler(func_, priority=priority)

        return _inner

    def remove_error_handler(self, func: ErrorHandler) -> None:
        """
        Unregister an error handler function. Does nothing if the function was not registered.

        Args:
            func: The function to unregister as a command error handler.

        Returns:
            :obj:`None`
        """
        for handlers in self._error_handlers.values():
            if func in handlers:
                handlers.remove(func)
                break

    async def start(self, *_: t.Any) -> None:
        """
        Starts the registry. Creates all the registered commands with discord if ``sync_commands``
        is enabled. Interactions received before the registry is started are ignored.

        Returns:
            :obj:`None`
        """
        if self._started:
            raise RuntimeError("cannot start already-started registry")

        if self.sync_commands:
            await self.sync_application_commands()

        self._started = True

    async def stop(self, *_: t.Any) -> None:
        """
        Stops the registry. Interactions received after the registry is stopped are ignored.

        Returns:
            :obj:`None`
        """
        if not self._started:
            raise RuntimeError("cannot stop a registry that is not started")

        self._started = False

    async def _ensure_application(self) -> hikari.Application:
        if self._application is not None:
            return self._application

        self._application = await self._app.rest.fetch_application()
        return self._application

    async def sync_application_commands(self) -> None:
        """
        Create all the registered commands with discord, replacing any existing commands, either
        globally or in each of the ``default_enabled_guilds``.

        Returns:
            :obj:`None`
        """
        application = await self._ensure_application()
        builders = [command.as_command_builder() for command in self._commands.values()]

        guilds: Sequence[hikari.UndefinedOr[hikari.Snowflakeish]] = self.default_enabled_guilds or [hikari.UNDEFINED]
        for guild in guilds:
            created = await self._app.rest.set_application_commands(application, builders, guild)
            LOGGER.info(
                "created %s command(s) %s",
                len(created),
                "globally" if guild is hikari.UNDEFINED else f"in guild {guild}",
            )

    def _resolve_command(self, interaction: hikari.CommandInteraction) -> commands_.CommandDefinition[t.Any] | None:
        command = self._commands.get(interaction.command_name)
        if command is None:
            LOGGER.debug("ignoring interaction received for unknown command - %r", interaction.command_name)
            return None

        if command.is_invokable:
            return command

        subcommand_option = next(
            (opt for opt in interaction.options or [] if opt.type is hikari.OptionType.SUB_COMMAND), None
        )
        subcommand = command.get_subcommand(subcommand_option.name) if subcommand_option is not None else None
        if subcommand is None:
            LOGGER.debug("ignoring interaction received for unknown subcommand of command - %r", command.name)
        return subcommand

    async def handle_command_interaction(self, interaction: hikari.CommandInteraction) -> None:
        """
        Dispatch a slash command interaction to the command that it is for. Interactions for unknown
        commands are ignored.

        Args:
            interaction: The interaction to dispatch.

        Returns:
            :obj:`None`
        """
        if not self._started:
            LOGGER.debug("ignoring command interaction received before the registry was started")
            return

        command = self._resolve_command(interaction)
        if command is None:
            return

        LOGGER.debug("invoking command - %r", command.qualified_name)
        try:
            await command.dispatch(interaction)
        except exceptions.CommandInvocationFailedException as ex:
            all_handlers = [handler for handlers in self._error_handlers.values() for handler in handlers]

            handled = False
            while all_handlers and not handled:
                handled = bool(await utils.maybe_await(all_handlers.pop(0)(ex)))

            if not handled:
                LOGGER.error(
                    "error encountered during invocation of command %r",
                    command.qualified_name,
                    exc_info=(type(ex), ex, ex.__traceback__),
                )

    async def handle_interaction_create_event(self, event: hikari.InteractionCreateEvent) -> None:
        """
        Listener for :obj:`~hikari.InteractionCreateEvent`. Dispatches slash command interactions, and
        ignores all other interaction types.

        Args:
            event: The event to handle.

        Returns:
            :obj:`None`
        """
        interaction = event.interaction
        if not isinstance(interaction, hikari.CommandInteraction):
            return
        if interaction.command_type is not hikari.CommandType.SLASH:
            return

        await self.handle_command_interaction(interaction)
