"""Dashboard API for creating, monitoring and bidding on auctions."""

from dutch_auction.dashboard.app import create_dashboard_app

__all__ = ["create_dashboard_app"]
