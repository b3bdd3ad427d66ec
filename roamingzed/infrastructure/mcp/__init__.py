# MCP (Model Context Protocol) Infrastructure
#
# The extension only names the context server process; this package holds
# the client a host uses to open a stdio session with it.
