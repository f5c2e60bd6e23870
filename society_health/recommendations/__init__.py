"""
Recommendation engine: converts a dimension breakdown into ranked,
human-readable guidance for society managers.

Modules
-------
generator : RECOMMENDATION_TEXT + generate_recommendations() — pure
            functions, no I/O.
"""
