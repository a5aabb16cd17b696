"""Main CLI application using Cyclopts.

Unlike the HTTP webhook, search and stats run in-process against the same
DI container, so results match what the chat bot would return.
"""

import cyclopts

from pkgsearch.cli.commands import commands, search, server, stats

app = cyclopts.App(
    name="pkgsearch",
    help="Package Control search bot - CLI",
)

app.command(server.app, name="server")
app.command(search.app, name="search")
app.command(stats.app, name="stats")
app.command(commands.app, name="commands")
