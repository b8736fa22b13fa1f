"""
Reputation Gateway - BNPL quotes backed by on-chain reputation

A FastAPI-based microservice that serves wallet reputation through a
hot/warm cache in front of the scoring oracle, and prices instalment
loan quotes from the borrower's tier.
"""

__version__ = "0.1.0"
