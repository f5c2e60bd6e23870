"""
Scoring pipeline: snapshot → breakdown → overall → status / trend.

Modules
-------
normalizer : per-dimension sub-scores in [0, 100] from raw metrics.
aggregator : DEFAULT_WEIGHTS + aggregate() — weighted overall score.
classifier : StatusThresholds + classify_status() — status band.
trend      : analyze_trend() — direction and % change vs. previous score.
engine     : compute_health_score() — the single entry point.
batch      : SocietySnapshot + score_batch() — many societies in one pass.
"""
