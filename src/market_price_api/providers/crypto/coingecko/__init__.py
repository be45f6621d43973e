"""CoinGecko provider package."""
