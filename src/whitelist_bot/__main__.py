from whitelist_bot.clients.disc import run


if __name__ == "__main__":
    run()
