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

__all__ = ["Interaction"]

import asyncio
import types
import typing as t

import hikari

if t.TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Sequence

    from slashkit import commands

OwnerT = t.TypeVar("OwnerT")


class Interaction(t.Generic[OwnerT]):
    """
    A single invocation of a command by a user. Wraps the hikari interaction along with
    the owner of the command that was invoked.

    Args:
        owner: The owner of the command that was invoked.
        interaction: The hikari interaction for the command invocation.
        command: The command that was invoked.
    """

    __slots__ = (
        "_command",
        "_deferred",
        "_initial_response_sent",
        "_interaction",
        "_options",
        "_owner",
        "_response_lock",
    )

    def __init__(
        self,
        owner: OwnerT,
        interaction: hikari.CommandInteraction,
        command: commands.CommandDefinition[OwnerT],
    ) -> None:
        self._owner = owner
        self._interaction = interaction
        self._command = command

        self._initial_response_sent: bool = False
        self._deferred: bool = False
        self._response_lock: asyncio.Lock = asyncio.Lock()

        self._options: dict[str, t.Any] = {}
        self._parse_options()

    def _parse_options(self) -> None:
        raw_options: Sequence[hikari.CommandInteractionOption] = self._interaction.options or []
        # Options of an invoked subcommand are nested within the subcommand option
        while raw_options and raw_options[0].type in (
            hikari.OptionType.SUB_COMMAND,
            hikari.OptionType.SUB_COMMAND_GROUP,
        ):
            raw_options = raw_options[0].options or []

        resolved = self._interaction.resolved
        for opt in raw_options:
            if resolved is None or opt.type not in (
                hikari.OptionType.USER,
                hikari.OptionType.CHANNEL,
                hikari.OptionType.ROLE,
                hikari.OptionType.MENTIONABLE,
                hikari.OptionType.ATTACHMENT,
            ):
                self._options[opt.name] = opt.value
                continue

            snowflake = hikari.Snowflake(opt.value)
            if opt.type is hikari.OptionType.CHANNEL:
                self._options[opt.name] = resolved.channels.get(snowflake, opt.value)
            elif opt.type is hikari.OptionType.ATTACHMENT:
                self._options[opt.name] = resolved.attachments.get(snowflake, opt.value)
            else:
                self._options[opt.name] = (
                    resolved.members.get(snowflake)
                    or resolved.users.get(snowflake)
                    or resolved.roles.get(snowflake)
                    or opt.value
                )

        for option in self._command.options:
            self._options.setdefault(option.name, None)

    @property
    def owner(self) -> OwnerT:
        """The owner of the command that was invoked."""
        return self._owner

    @property
    def interaction(self) -> hikari.CommandInteraction:
        """The hikari interaction that this object wraps."""
        return self._interaction

    @property
    def command(self) -> commands.CommandDefinition[OwnerT]:
        """The command that was invoked. If a subcommand was invoked, this will be the subcommand."""
        return self._command

    @property
    def command_name(self) -> str:
        """The name of the top-level command that was invoked."""
        return self._interaction.command_name

    @property
    def subcommand_name(self) -> str | None:
        """The name of the subcommand that was invoked, or :obj:`None` if a top-level command was invoked."""
        if self._command.parent is None:
            return None
        return self._command.name

    @property
    def user(self) -> hikari.User:
        """The user that invoked the command."""
        return self._interaction.user

    @property
    def member(self) -> hikari.InteractionMember | None:
        """The member that invoked the command, or :obj:`None` if it was invoked outside a guild."""
        return self._interaction.member

    @property
    def guild_id(self) -> hikari.Snowflake | None:
        """The ID of the guild the command was invoked in, or :obj:`None` if it was invoked outside a guild."""
        return self._interaction.guild_id

    @property
    def channel_id(self) -> hikari.Snowflake:
        """The ID of the channel the command was invoked in."""
        return self._interaction.channel_id

    @property
    def options(self) -> Mapping[str, t.Any]:
        """
        Mapping of option name to the value the user gave for that option. Options that were not given
        by the user have a value of :obj:`None`. User, member, channel, role and attachment options are
        resolved to their objects where discord provides them.
        """
        return types.MappingProxyType(self._options)

    @property
    def responded(self) -> bool:
        """Whether an initial response, including a deferred response, has been sent for this interaction."""
        return self._initial_response_sent

    def get_option(self, name: str, default: t.Any = None) -> t.Any:
        """
        Get the value of the option with the given name.

        Args:
            name: The name of the option.
            default: The value to return if the option was not given. Defaults to :obj:`None`.

        Returns:
            The value of the option, or ``default``.
        """
        value = self._options.get(name)
        return default if value is None else value

    async def defer(self, ephemeral: bool = False) -> None:
        """
        Defer the response to this interaction. The next reply will edit the deferred response, later
        replies are sent as followups.

        Args:
            ephemeral: Whether the eventual response should be ephemeral. Defaults to :obj:`False`.

        Returns:
            :obj:`None`

        Raises:
            :obj:`RuntimeError`: If the interaction has already been responded to.
        """
        async with self._response_lock:
            if self._initial_response_sent:
                raise RuntimeError("cannot defer an interaction that has already been responded to")

            await self._interaction.create_initial_response(
                hikari.ResponseType.DEFERRED_MESSAGE_CREATE,
                flags=hikari.MessageFlag.EPHEMERAL if ephemeral else hikari.UNDEFINED,
            )
            self._initial_response_sent = True
            self._deferred = True

    async def reply(self, text: str) -> None:
        """
        Reply to the interaction with the given text. If a response has already been sent then
        the text will be sent as a followup message.

        Args:
            text: The content of the reply.

        Returns:
            :obj:`None`
        """
        await self.reply_custom(text)

    async def reply_custom(
        self,
        content: hikari.UndefinedOr[t.Any] = hikari.UNDEFINED,
        *,
        ephemeral: bool = False,
        flags: hikari.UndefinedOr[int | hikari.MessageFlag] = hikari.UNDEFINED,
        **kwargs: t.Any,
    ) -> None:
        """
        Reply to the interaction with a fully customised message. Any additional keyword arguments are passed to
        hikari - see :meth:`hikari.interactions.base_interactions.MessageResponseMixin.create_initial_response`.

        If the interaction was deferred, the first call edits the deferred response. If a response was
        already sent, the reply is sent as a followup message.

        Args:
            content: The message content.
            ephemeral: Whether the reply should be ephemeral. Ignored when editing a deferred response, pass
                ``ephemeral`` to :meth:`defer` instead. Defaults to :obj:`False`.
            flags: The message flags to send the reply with.
            **kwargs: Passed to hikari when sending the reply, for example ``embeds`` or ``components``.

        Returns:
            :obj:`None`
        """
        if ephemeral:
            flags = hikari.MessageFlag.EPHEMERAL if flags is hikari.UNDEFINED else flags | hikari.MessageFlag.EPHEMERAL

        async with self._response_lock:
            if not self._initial_response_sent:
                await self._interaction.create_initial_response(
                    hikari.ResponseType.MESSAGE_CREATE, content, flags=flags, **kwargs
                )
                self._initial_response_sent = True
                return

            if self._deferred:
                await self._interaction.edit_initial_response(content, **kwargs)
                self._deferred = False
                return

        await self._interaction.execute(content, flags=flags, **kwargs)

    async def edit_response(
        self, content: hikari.UndefinedNoneOr[t.Any] = hikari.UNDEFINED, **kwargs: t.Any
    ) -> hikari.Message:
        """
        Edit the initial response to this interaction.

        Args:
            content: The new message content.
            **kwargs: Passed to hikari, see
                :meth:`hikari.interactions.base_interactions.MessageResponseMixin.edit_initial_response`.

        Returns:
            :obj:`~hikari.messages.Message`: The edited message.
        """
        return await self._interaction.edit_initial_response(content, **kwargs)
