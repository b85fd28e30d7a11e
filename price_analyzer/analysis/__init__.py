"""
Price analysis engine: turns an item's price history into a technical-analysis
report with a buy/hold/sell recommendation.

Modules
-------
series     : prepare_series() — newest-first ordering.
statistics : average / median / min / max, moving_average(), volatility(),
             windowed_std_dev() — pure functions over price lists.
trend      : trend_slope() OLS estimator + classify_trend().
indicators : price_level(), rsi(), bollinger_bands(), seasonality_score().
signals    : market_sentiment(), forecast_price(), identify_risk_factors().
scorer     : ScoreComponents dataclass + compute_score() +
             determine_recommendation().
engine     : analyze_price_history() orchestration + build_report().
batch      : group_rows_by_item() + analyze_market() for whole markets.

Nothing in this package performs I/O.
"""
