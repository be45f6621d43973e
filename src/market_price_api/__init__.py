"""Stock and crypto price API over CoinGecko and Yahoo Finance."""
