"""Shared constants for quizextract."""

DIFFICULTIES = ("easy", "medium", "hard")

# Provenance tags for extracted questions
SOURCE_STRUCTURED = "PDF Extract"
SOURCE_HEURISTIC = "PDF Heuristic"
