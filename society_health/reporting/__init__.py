"""
society_health.reporting — terminal formatting and file export of results.

It does NOT compute scores — it renders ``HealthResult`` / ``SocietyScore``
objects produced by the scoring package.
"""
