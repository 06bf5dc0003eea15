"""Utility rates service: weather-adjusted electricity, gas, water and solar buyback rates."""
