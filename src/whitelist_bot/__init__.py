"""Discord bot that manages a whitelist stored as JSON in a GitHub repository."""
