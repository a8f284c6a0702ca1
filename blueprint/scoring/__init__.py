"""
scoring/ — Readiness Scoring Engine

Modules:
    utils.py              - Half-up rounding helpers
    section_scorer.py     - Per-section results and total percentage
    tier_classifier.py    - Readiness tier bands and CTA copy
    score_bands.py        - Colour/priority annotation bands
    ranking.py            - Weakest sections and primary gap
    engine.py             - ScoringEngine assembling an AssessmentReport
"""
