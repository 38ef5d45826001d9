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
from unittest import mock

import hikari
import pytest

import slashkit

OWNER = object()


def make_option(
    name: str, type_: hikari.OptionType, value: object = None, options: list[object] | None = None
) -> hikari.CommandInteractionOption:
    option = mock.Mock(spec=hikari.CommandInteractionOption)
    # 'name' is reserved by the mock constructor
    option.name = name
    option.type = type_
    option.value = value
    option.options = options
    return option


def make_interaction(options: list[object] | None = None) -> hikari.CommandInteraction:
    interaction = mock.Mock(spec=hikari.CommandInteraction)
    interaction.command_name = "echo"
    interaction.command_type = hikari.CommandType.SLASH
    interaction.options = options
    interaction.resolved = None
    interaction.create_initial_response = mock.AsyncMock()
    interaction.edit_initial_response = mock.AsyncMock()
    interaction.execute = mock.AsyncMock()
    return interaction


@pytest.fixture
def command() -> slashkit.CommandDefinition[object]:
    return (
        slashkit.CommandDefinition(OWNER, "echo", "description")
        .add_option(hikari.OptionType.STRING, "text", "description", required=True)
        .add_option(hikari.OptionType.INTEGER, "times", "description")
    )


class TestProperties:
    def test_properties_delegate_to_interaction(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction()
        raw.guild_id = hikari.Snowflake(123)
        raw.channel_id = hikari.Snowflake(456)

        interaction = slashkit.Interaction(OWNER, raw, command)

        assert interaction.owner is OWNER
        assert interaction.interaction is raw
        assert interaction.command is command
        assert interaction.command_name == "echo"
        assert interaction.subcommand_name is None
        assert interaction.user is raw.user
        assert interaction.member is raw.member
        assert interaction.guild_id == 123
        assert interaction.channel_id == 456
        assert interaction.responded is False

    def test_subcommand_name(self) -> None:
        child = slashkit.CommandDefinition(OWNER, "child", "description")
        slashkit.CommandDefinition(OWNER, "parent", "description").add_subcommands(child)

        interaction = slashkit.Interaction(OWNER, make_interaction(), child)

        assert interaction.subcommand_name == "child"


class TestOptions:
    def test_given_options_are_available(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction(
            [make_option("text", hikari.OptionType.STRING, "hello"), make_option("times", hikari.OptionType.INTEGER, 3)]
        )

        interaction = slashkit.Interaction(OWNER, raw, command)

        assert interaction.options == {"text": "hello", "times": 3}
        assert interaction.get_option("times") == 3

    def test_missing_options_default_to_None(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction([make_option("text", hikari.OptionType.STRING, "hello")])

        interaction = slashkit.Interaction(OWNER, raw, command)

        assert interaction.options["times"] is None
        assert interaction.get_option("times", 1) == 1

    def test_options_cannot_be_modified(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction([make_option("text", hikari.OptionType.STRING, "hello")])
        interaction = slashkit.Interaction(OWNER, raw, command)

        with pytest.raises(TypeError):
            interaction.options["text"] = "changed"  # type: ignore[reportIndexIssue]

        assert interaction.get_option("text") == "hello"

    def test_subcommand_options_are_flattened(self) -> None:
        child = slashkit.CommandDefinition(OWNER, "child", "description").add_option(
            hikari.OptionType.STRING, "text", "description"
        )
        slashkit.CommandDefinition(OWNER, "parent", "description").add_subcommands(child)
        text = make_option("text", hikari.OptionType.STRING, "hi")
        raw = make_interaction([make_option("child", hikari.OptionType.SUB_COMMAND, options=[text])])

        interaction = slashkit.Interaction(OWNER, raw, child)

        assert interaction.options == {"text": "hi"}

    def test_user_option_resolved_to_member(self) -> None:
        command = slashkit.CommandDefinition(OWNER, "whois", "description").add_option(
            hikari.OptionType.USER, "user", "description"
        )
        member = mock.Mock()
        raw = make_interaction([make_option("user", hikari.OptionType.USER, hikari.Snowflake(789))])
        raw.resolved = mock.Mock(members={hikari.Snowflake(789): member}, users={}, roles={})

        interaction = slashkit.Interaction(OWNER, raw, command)

        assert interaction.options["user"] is member

    def test_channel_option_resolved(self) -> None:
        command = slashkit.CommandDefinition(OWNER, "where", "description").add_option(
            hikari.OptionType.CHANNEL, "channel", "description"
        )
        channel = mock.Mock()
        raw = make_interaction([make_option("channel", hikari.OptionType.CHANNEL, hikari.Snowflake(42))])
        raw.resolved = mock.Mock(channels={hikari.Snowflake(42): channel})

        interaction = slashkit.Interaction(OWNER, raw, command)

        assert interaction.options["channel"] is channel


class TestReply:
    @pytest.mark.asyncio
    async def test_reply_creates_initial_response(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction()
        interaction = slashkit.Interaction(OWNER, raw, command)

        await interaction.reply("pong")

        raw.create_initial_response.assert_awaited_once_with(
            hikari.ResponseType.MESSAGE_CREATE, "pong", flags=hikari.UNDEFINED
        )
        assert interaction.responded is True

    @pytest.mark.asyncio
    async def test_second_reply_is_sent_as_followup(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction()
        interaction = slashkit.Interaction(OWNER, raw, command)

        await interaction.reply("first")
        await interaction.reply("second")

        raw.create_initial_response.assert_awaited_once()
        raw.execute.assert_awaited_once_with("second", flags=hikari.UNDEFINED)

    @pytest.mark.asyncio
    async def test_reply_custom_passes_kwargs_and_ephemeral_flag(
        self, command: slashkit.CommandDefinition[object]
    ) -> None:
        raw = make_interaction()
        interaction = slashkit.Interaction(OWNER, raw, command)
        embed = hikari.Embed(title="title")

        await interaction.reply_custom(embed=embed, ephemeral=True)

        raw.create_initial_response.assert_awaited_once_with(
            hikari.ResponseType.MESSAGE_CREATE, hikari.UNDEFINED, flags=hikari.MessageFlag.EPHEMERAL, embed=embed
        )

    @pytest.mark.asyncio
    async def test_reply_custom_ephemeral_combines_with_flags(
        self, command: slashkit.CommandDefinition[object]
    ) -> None:
        raw = make_interaction()
        interaction = slashkit.Interaction(OWNER, raw, command)

        await interaction.reply_custom("hi", ephemeral=True, flags=hikari.MessageFlag.SUPPRESS_EMBEDS)

        raw.create_initial_response.assert_awaited_once_with(
            hikari.ResponseType.MESSAGE_CREATE,
            "hi",
            flags=hikari.MessageFlag.SUPPRESS_EMBEDS | hikari.MessageFlag.EPHEMERAL,
        )

    @pytest.mark.asyncio
    async def test_reply_after_defer_edits_initial_response(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction()
        interaction = slashkit.Interaction(OWNER, raw, command)

        await interaction.defer(ephemeral=True)
        await interaction.reply("done")
        await interaction.reply("again")

        raw.create_initial_response.assert_awaited_once_with(
            hikari.ResponseType.DEFERRED_MESSAGE_CREATE, flags=hikari.MessageFlag.EPHEMERAL
        )
        raw.edit_initial_response.assert_awaited_once_with("done")
        raw.execute.assert_awaited_once_with("again", flags=hikari.UNDEFINED)

    @pytest.mark.asyncio
    async def test_defer_after_response_raises(self, command: slashkit.CommandDefinition[object]) -> None:
        interaction = slashkit.Interaction(OWNER, make_interaction(), command)
        await interaction.reply("pong")

        with pytest.raises(RuntimeError):
            await interaction.defer()

    @pytest.mark.asyncio
    async def test_edit_response(self, command: slashkit.CommandDefinition[object]) -> None:
        raw = make_interaction()
        interaction = slashkit.Interaction(OWNER, raw, command)

        out = await interaction.edit_response("edited")

        raw.edit_initial_response.assert_awaited_once_with("edited")
        assert out is raw.edit_initial_response.return_value
