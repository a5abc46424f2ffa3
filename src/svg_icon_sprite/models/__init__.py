"""Data models for configuration, icon records and sprite layout."""
