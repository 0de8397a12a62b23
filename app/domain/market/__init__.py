"""
Market bounded context, domain layer.

Coin and global market snapshots, the tier-fallback price service
and display formatting for the price table.
"""
