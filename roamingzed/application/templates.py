"""
Markdown bodies for the RoamingZed slash commands.

The commands do not query anything themselves; they point the user at the
assistant, which reaches the link index through the ``@roamingzed`` context
server.
"""

WORKSPACE_PLACEHOLDER = "current workspace"


def render_backlinks(workspace: str) -> str:
    return (
        "# Backlinks\n\n"
        f"*Querying backlinks for current file in: {workspace}*\n\n"
        "> **Tip**: Use the AI assistant with `@roamingzed` context for rich "
        "backlink queries.\n\n"
        "Example prompts:\n"
        '- "What pages link to this file?"\n'
        '- "Show me all backlinks to [[topic]]"\n'
        '- "Find notes that reference this concept"'
    )


def render_graph(workspace: str) -> str:
    return (
        "# Link Graph\n\n"
        f"*Generating link graph for: {workspace}*\n\n"
        "> **Tip**: Use the AI assistant with `@roamingzed` context to explore "
        "the graph.\n\n"
        "Example prompts:\n"
        '- "Show me the link graph around this file"\n'
        '- "What notes are connected to [[topic]]?"\n'
        '- "Visualize connections within 2 hops"'
    )


def render_related(query: str, workspace: str) -> str:
    return (
        "# Related Notes\n\n"
        f'*Searching for notes related to: "{query}"*\n'
        f"*Workspace: {workspace}*\n\n"
        "> **Tip**: Use the AI assistant with `@roamingzed` context for "
        "semantic search.\n\n"
        "Example prompts:\n"
        f'- "Find notes related to {query}"\n'
        f'- "What topics connect to {query}?"\n'
        f'- "Show notes that might be relevant to {query}"'
    )
