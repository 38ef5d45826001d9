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
import hikari

import slashkit

cfg = slashkit.config.load("config.json", cls=slashkit.config.BotConfig)

bot = hikari.GatewayBot(cfg.token, logs=cfg.log_level)
registry = slashkit.CommandRegistry(bot, cfg.guilds, cfg.sync_commands)


class Ping(slashkit.CommandDefinition[hikari.GatewayBot]):
    def __init__(self, owner: hikari.GatewayBot) -> None:
        super().__init__(owner, "ping", "Checks that the bot is alive")

    async def on_slash_command(self, interaction: slashkit.Interaction[hikari.GatewayBot]) -> bool:
        await interaction.reply(f"Pong! Latency: {interaction.owner.heartbeat_latency * 1000:.0f}ms")
        return True


echo = slashkit.CommandDefinition(bot, "echo", "Repeats the user's input").add_option(
    hikari.OptionType.STRING, "text", "Text to repeat", required=True
)


@echo.handler
async def _(interaction: slashkit.Interaction[hikari.GatewayBot]) -> None:
    await interaction.reply(interaction.options["text"])


async def add(interaction: slashkit.Interaction[hikari.GatewayBot]) -> None:
    await interaction.reply(str(interaction.options["a"] + interaction.options["b"]))


async def negate(interaction: slashkit.Interaction[hikari.GatewayBot]) -> None:
    await interaction.reply_custom(str(-interaction.options["n"]), ephemeral=True)


maths = slashkit.CommandDefinition(bot, "maths", "Does some maths").add_subcommands(
    slashkit.CommandDefinition(bot, "add", "Adds two numbers together", add)
    .add_option(hikari.OptionType.INTEGER, "a", "The first number", required=True)
    .add_option(hikari.OptionType.INTEGER, "b", "The second number", required=True),
    slashkit.CommandDefinition(bot, "negate", "Negates a number", negate).add_option(
        hikari.OptionType.INTEGER, "n", "The number to negate", required=True
    ),
)


@registry.error_handler
async def handler(exc: slashkit.CommandInvocationFailedException) -> bool:
    await exc.interaction.reply_custom(f"Something went wrong: {exc.__cause__}", ephemeral=True)
    return True


registry.register(Ping(bot), echo, maths)
bot.subscribe(hikari.StartedEvent, registry.start)
bot.subscribe(hikari.StoppingEvent, registry.stop)

bot.run()
