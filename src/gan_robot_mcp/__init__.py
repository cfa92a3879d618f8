"""Move protocol and MCP server for the GAN cube-solving robot."""
