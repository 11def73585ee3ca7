"""Shared infrastructure for the price query service: config, database, logging, metrics, health."""
