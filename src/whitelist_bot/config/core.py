import os


def _optional_id(value) -> int | None:
    if value in (None, ""):
        return None
    return int(value)


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = config or {}
        discord_cfg = cfg.get("discord", {})

        token_env = str(discord_cfg.get("token_env", "DISCORD_TOKEN"))

        self.DISCORD_TOKEN: str | None = os.getenv(token_env)
        self.CLIENT_ID: int | None = _optional_id(discord_cfg.get("client_id") or os.getenv("CLIENT_ID"))
        self.GUILD_ID: int | None = _optional_id(discord_cfg.get("guild_id") or os.getenv("GUILD_ID"))
        self.ADMIN_ROLE_ID: int | None = _optional_id(discord_cfg.get("admin_role_id") or os.getenv("ADMIN_ROLE_ID"))
        self.LOG_CHANNEL_ID: int | None = _optional_id(discord_cfg.get("log_channel_id") or os.getenv("LOG_CHANNEL_ID"))

        self.CONFIRM_TIMEOUT: float = float(discord_cfg.get("confirm_timeout", os.getenv("CONFIRM_TIMEOUT", "30")))
        self.PAGE_SIZE: int = int(discord_cfg.get("page_size", os.getenv("PAGE_SIZE", "20")))
        self.LIST_NAME: str = str(discord_cfg.get("list_name", os.getenv("LIST_NAME", "MeshLab")))

        required = [
            ("DISCORD_TOKEN", self.DISCORD_TOKEN),
            ("CLIENT_ID", self.CLIENT_ID),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")
