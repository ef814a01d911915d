"""Relay TradingView / MT5 / generic alert webhooks to a Telegram chat."""
