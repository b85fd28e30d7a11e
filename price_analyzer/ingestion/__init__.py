"""
Local price history ingestion.

Modules:
  price_csv — parse_price_csv(): CSV file → validated MarketPriceRow list.
"""
