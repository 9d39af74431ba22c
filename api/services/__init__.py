"""
Leaderboard computation services.
"""
