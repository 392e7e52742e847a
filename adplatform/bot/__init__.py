"""Telegram bot for advertisers: dialogue state, Bot API client, handlers and polling loop."""