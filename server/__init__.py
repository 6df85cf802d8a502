"""HTTP front end for the scoring engine."""
