"""
society_health.ingestion — loading metric snapshots from JSON / CSV files.
"""
