import os


class Store:
    def __init__(self, config: dict | None = None) -> None:
        store_cfg = (config or {}).get("store", {})

        token_env = str(store_cfg.get("token_env", "GITHUB_TOKEN"))
        self.GITHUB_TOKEN: str | None = os.getenv(token_env)

        self.GITHUB_OWNER: str = str(store_cfg.get("owner", os.getenv("GITHUB_OWNER", "ZenixWRK")))
        self.GITHUB_REPO: str = str(store_cfg.get("repo", os.getenv("GITHUB_REPO", "Zenix-Plugin-Whitelists")))
        self.WHITELIST_FILE: str = str(store_cfg.get("path", os.getenv("WHITELIST_FILE", "MeshLab.json")))
        self.GITHUB_BRANCH: str | None = store_cfg.get("branch") or os.getenv("GITHUB_BRANCH") or None
        self.GITHUB_API_URL: str = str(store_cfg.get("api_url", os.getenv("GITHUB_API_URL", "https://api.github.com")))

        self.CACHE_TTL: float = float(store_cfg.get("cache_ttl", os.getenv("CACHE_TTL", "60")))
        self.REQUEST_TIMEOUT: float = float(store_cfg.get("request_timeout", os.getenv("REQUEST_TIMEOUT", "15")))

        if not self.GITHUB_TOKEN:
            raise ValueError("Missing environment variables: GITHUB_TOKEN")
