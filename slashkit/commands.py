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

__all__ = ["MAX_OPTIONS", "CommandCallback", "CommandDefinition", "OptionData"]

import dataclasses
import re
import typing as t

import hikari

from slashkit import exceptions
from slashkit import interaction as interaction_
from slashkit import utils

if t.TYPE_CHECKING:
    from collections.abc import Sequence

    import typing_extensions as t_ex

OwnerT = t.TypeVar("OwnerT")

CommandCallback: t.TypeAlias = t.Callable[
    [interaction_.Interaction[OwnerT]], utils.MaybeAwaitable[t.Optional[bool]]
]

MAX_OPTIONS: t.Final[int] = 25
"""The maximum number of options, or subcommands, that discord allows a single command to have."""

_NAME_REGEX = re.compile(r"[\w-]{1,32}")
_AUTOCOMPLETE_OPTION_TYPES = (hikari.OptionType.STRING, hikari.OptionType.INTEGER, hikari.OptionType.FLOAT)
_SUBCOMMAND_OPTION_TYPES = (hikari.OptionType.SUB_COMMAND, hikari.OptionType.SUB_COMMAND_GROUP)


def _check_name(argument: str, value: str) -> None:
    if not _NAME_REGEX.fullmatch(value):
        raise exceptions.InvalidArgumentException(
            argument, "must be 1-32 alphanumeric characters, words may only be separated with '-'"
        )
    if value.lower() != value:
        raise exceptions.InvalidArgumentException(argument, "must be lowercase")


def _check_description(argument: str, value: str) -> None:
    if len(value) < 1 or len(value) > 100:
        raise exceptions.InvalidArgumentException(argument, "must be 1-100 characters")


@dataclasses.dataclass(slots=True, frozen=True)
class OptionData:
    """
    Dataclass storing the information about a single command option that is required
    to create it with discord.

    This should generally not be instantiated manually. One will be created for each call to
    :meth:`CommandDefinition.add_option`.
    """

    type: hikari.OptionType
    """The type of the option."""
    name: str
    """The name of the option."""
    description: str
    """The description of the option."""
    required: bool = False
    """Whether the option must be given by the user invoking the command."""
    autocomplete: bool = False
    """Whether autocomplete is enabled for the option."""

    def __post_init__(self) -> None:
        if self.type is None:
            raise exceptions.MissingValueException("type")
        if self.name is None:
            raise exceptions.MissingValueException("name")
        if self.description is None:
            raise exceptions.MissingValueException("description")

        if self.type in _SUBCOMMAND_OPTION_TYPES:
            raise exceptions.InvalidArgumentException("type", "use 'add_subcommands' to add subcommands")
        _check_name("name", self.name)
        _check_description("description", self.description)

    def to_command_option(self) -> hikari.CommandOption:
        """
        Convert this option data into a hikari :obj:`~hikari.commands.CommandOption`.

        Returns:
            The created command option.
        """
        return hikari.CommandOption(
            type=self.type,
            name=self.name,
            description=self.description,
            is_required=self.required,
            autocomplete=self.autocomplete,
        )


class CommandDefinition(t.Generic[OwnerT]):
    """
    A single slash command, or a subcommand of another slash command.

    The command's behaviour is implemented either by subclassing and overriding :meth:`on_slash_command`, or
    by passing a ``callback`` (or using :meth:`handler`). The owner given at construction is passed through
    unchanged to every :obj:`~slashkit.interaction.Interaction` this command handles.

    Args:
        owner: The object that owns the command. Usually your bot, or some application state.
        name: The name of the command. Must be 1-32 lowercase alphanumeric characters long. Words may only
            be separated with dashes (``-``), not spaces.
        description: The description of the command, 1-100 characters long.
        callback: The function to call when the command is invoked. May be synchronous or asynchronous.

    Raises:
        :obj:`~slashkit.exceptions.MissingValueException`: If ``owner``, ``name`` or ``description`` is :obj:`None`.
        :obj:`~slashkit.exceptions.InvalidArgumentException`: If ``name`` or ``description`` is not valid.

    Example:

        .. code-block:: python

            class Ping(slashkit.CommandDefinition[MyBot]):
                def __init__(self, bot: MyBot) -> None:
                    super().__init__(bot, "ping", "Replies with pong")

                async def on_slash_command(self, interaction: slashkit.Interaction[MyBot]) -> bool:
                    await interaction.reply("pong")
                    return True
    """

    __slots__ = ("_callback", "_description", "_name", "_options", "_owner", "_parent", "_subcommands")

    def __init__(
        self,
        owner: OwnerT,
        name: str,
        description: str,
        callback: CommandCallback[OwnerT] | None = None,
    ) -> None:
        if owner is None:
            raise exceptions.MissingValueException("owner")
        if name is None:
            raise exceptions.MissingValueException("name")
        if description is None:
            raise exceptions.MissingValueException("description")

        _check_name("name", name)
        _check_description("description", description)

        self._owner: OwnerT = owner
        self._name: str = name
        self._description: str = description
        self._callback: CommandCallback[OwnerT] | None = callback

        self._options: list[OptionData] = []
        self._subcommands: list[CommandDefinition[OwnerT]] = []
        self._parent: CommandDefinition[OwnerT] | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, description={self._description!r})"

    @property
    def owner(self) -> OwnerT:
        """The object that owns this command."""
        return self._owner

    @property
    def name(self) -> str:
        """The name of this command."""
        return self._name

    @property
    def description(self) -> str:
        """The description of this command."""
        return self._description

    @property
    def options(self) -> Sequence[OptionData]:
        """The options of this command, in the order they were added."""
        return tuple(self._options)

    @property
    def subcommands(self) -> Sequence[CommandDefinition[OwnerT]]:
        """The subcommands of this command, in the order they were added."""
        return tuple(self._subcommands)

    @property
    def parent(self) -> CommandDefinition[OwnerT] | None:
        """The command this command was added to as a subcommand, or :obj:`None` if not applicable."""
        return self._parent

    @property
    def qualified_name(self) -> str:
        """The fully qualified name of the command, including the name of the parent command if it has one."""
        if self._parent is None:
            return self._name
        return f"{self._parent.qualified_name} {self._name}"

    @property
    def is_invokable(self) -> bool:
        """
        Whether users can invoke this command directly. Discord does not allow a command that has subcommands
        to be invoked, only its subcommands can be.
        """
        return not self._subcommands

    def add_option(
        self,
        type: hikari.OptionType,
        name: str,
        description: str,
        required: bool = False,
        autocomplete: bool = False,
    ) -> t_ex.Self:
        """
        Add an option to this command. Options are sent to discord in the order they were added.

        Args:
            type: The type of the option.
            name: The name of the option, following the same rules as the command name.
            description: The description of the option, 1-100 characters long.
            required: Whether the option must be given when invoking the command. Defaults to :obj:`False`.
            autocomplete: Whether the option supports autocomplete. Defaults to :obj:`False`.

        Returns:
            This command, to allow chaining.

        Note:
            Option names are not checked for uniqueness when they are added. Duplicates are rejected
            when the command is registered.
        """
        self._options.append(OptionData(type, name, description, required, autocomplete))
        return self

    def add_subcommands(self, *subcommands: CommandDefinition[OwnerT]) -> t_ex.Self:
        """
        Add one or more commands as subcommands of this command, in the given order.

        Adding subcommands makes this command no longer invokable - only its subcommands can be invoked
        by users. Because of this, a command cannot have both options and subcommands.

        The subcommands are held by reference, not copied. Options added to a subcommand after it has been
        added here will still be sent to discord as part of this command.

        Args:
            *subcommands: The commands to add as subcommands.

        Returns:
            This command (the parent), to allow chaining.

        Raises:
            :obj:`~slashkit.exceptions.MissingValueException`: If any of the subcommands is :obj:`None`.
            :obj:`~slashkit.exceptions.InvalidArgumentException`: If this command is itself a subcommand, or
                any of the subcommands is this command, already belongs to another command, or has
                subcommands of its own.
        """
        if self._parent is not None:
            raise exceptions.InvalidArgumentException(
                "subcommands", f"cannot add subcommands to subcommand {self.qualified_name!r}"
            )

        for i, subcommand in enumerate(subcommands):
            if subcommand is None:
                raise exceptions.MissingValueException("subcommands")
            if subcommand is self:
                raise exceptions.InvalidArgumentException("subcommands", "a command cannot be its own subcommand")
            if any(subcommand is other for other in subcommands[:i]):
                raise exceptions.InvalidArgumentException(
                    "subcommands", f"{subcommand._name!r} was given more than once"
                )
            if subcommand._parent is not None:
                raise exceptions.InvalidArgumentException(
                    "subcommands",
                    f"{subcommand._name!r} is already a subcommand of {subcommand._parent.qualified_name!r}",
                )
            if subcommand._subcommands:
                raise exceptions.InvalidArgumentException(
                    "subcommands", f"{subcommand._name!r} cannot have subcommands of its own"
                )

        for subcommand in subcommands:
            subcommand._parent = self
            self._subcommands.append(subcommand)

        return self

    def get_subcommand(self, name: str) -> CommandDefinition[OwnerT] | None:
        """
        Get the subcommand with the given name.

        Args:
            name: The name of the subcommand to get.

        Returns:
            The subcommand, or :obj:`None` if this command has no subcommand with that name.
        """
        for subcommand in self._subcommands:
            if subcommand._name == name:
                return subcommand
        return None

    def handler(self, func: CommandCallback[OwnerT]) -> CommandCallback[OwnerT]:
        """
        Decorator to set the function called when this command is invoked. Replaces any callback
        that was already set.

        Example:

            .. code-block:: python

                ping = slashkit.CommandDefinition(bot, "ping", "Replies with pong")

                @ping.handler
                async def _(interaction: slashkit.Interaction[MyBot]) -> bool:
                    await interaction.reply("pong")
                    return True
        """
        self._callback = func
        return func

    def validate(self) -> None:
        """
        Check that the command's structure would be accepted by discord. Called when the command is
        registered.

        Raises:
            :obj:`~slashkit.exceptions.InvalidCommandStructureException`: If the command mixes options with
                subcommands, has too many options or subcommands, has options or subcommands with duplicate names,
                has required options after optional options, or enables autocomplete for an option
                type that does not support it.
        """
        if self._options and self._subcommands:
            raise exceptions.InvalidCommandStructureException(self, "cannot have both options and subcommands")
        if len(self._options) > MAX_OPTIONS:
            raise exceptions.InvalidCommandStructureException(self, f"cannot have more than {MAX_OPTIONS} options")
        if len(self._subcommands) > MAX_OPTIONS:
            raise exceptions.InvalidCommandStructureException(
                self, f"cannot have more than {MAX_OPTIONS} subcommands"
            )

        seen: set[str] = set()
        optional_seen = False
        for option in self._options:
            if option.name in seen:
                raise exceptions.InvalidCommandStructureException(self, f"duplicate option name {option.name!r}")
            seen.add(option.name)

            if option.required and optional_seen:
                raise exceptions.InvalidCommandStructureException(
                    self, f"required option {option.name!r} cannot come after optional options"
                )
            optional_seen = optional_seen or not option.required

            if option.autocomplete and option.type not in _AUTOCOMPLETE_OPTION_TYPES:
                raise exceptions.InvalidCommandStructureException(
                    self, f"option {option.name!r} of type {option.type.name} does not support autocomplete"
                )

        for subcommand in self._subcommands:
            if subcommand._name in seen:
                raise exceptions.InvalidCommandStructureException(
                    self, f"duplicate subcommand name {subcommand._name!r}"
                )
            seen.add(subcommand._name)
            subcommand.validate()

    def as_command_builder(self) -> hikari.api.SlashCommandBuilder:
        """
        Convert the command into a hikari command builder object.

        Returns:
            :obj:`hikari.api.special_endpoints.SlashCommandBuilder`: The builder object for this command.
        """
        bld = hikari.impl.SlashCommandBuilder(name=self._name, description=self._description)
        for option in self._options:
            bld.add_option(option.to_command_option())
        for subcommand in self._subcommands:
            bld.add_option(subcommand.to_command_option())
        return bld

    def to_command_option(self) -> hikari.CommandOption:
        """
        Convert the command into a sub-command command option.

        Returns:
            :obj:`hikari.commands.CommandOption`: The sub-command option for this command.
        """
        return hikari.CommandOption(
            type=hikari.OptionType.SUB_COMMAND,
            name=self._name,
            description=self._description,
            options=[option.to_command_option() for option in self._options],
        )

    async def dispatch(self, interaction: hikari.CommandInteraction) -> None:
        """
        Invoke this command for the given interaction. The interaction is wrapped, along with
        the command's owner, and passed to :meth:`on_slash_command` exactly once.

        Args:
            interaction: The interaction that triggered the command.

        Returns:
            :obj:`None`

        Raises:
            :obj:`~slashkit.exceptions.CommandInvocationFailedException`: If :meth:`on_slash_command` raised
                an exception.
        """
        wrapped = interaction_.Interaction(self._owner, interaction, self)
        try:
            await utils.maybe_await(self.on_slash_command(wrapped))
        except Exception as e:
            raise exceptions.CommandInvocationFailedException(self, wrapped, e) from e

    def on_slash_command(self, interaction: interaction_.Interaction[OwnerT]) -> utils.MaybeAwaitable[bool | None]:
        """
        Called whenever a user invokes this command. Override this to implement the command, or
        pass a callback when creating the command instead.

        The default implementation calls the callback the command was created with.

        Args:
            interaction: The interaction that invoked this command.

        Returns:
            Doesn't matter - the return value is discarded. It only exists so that you can
            reply to the interaction and return in a single line.
        """
        if self._callback is None:
            raise NotImplementedError(
                f"command {self.qualified_name!r} has no callback - override 'on_slash_command' or pass 'callback'"
            )
        return self._callback(interaction)
