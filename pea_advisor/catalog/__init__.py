"""
Asset catalog: bundled sample data, simulated price history and detail facts.

Modules
-------
sample  : sample_catalog(): the eight-asset fixture catalog.
history : generate_price_history() + months_before(): random-walk series.
detail  : AssetDetail + asset_detail() + find_asset().
"""
