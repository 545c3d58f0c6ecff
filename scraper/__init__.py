"""Listing-Ingestion: Plattform erkennen, Seite laden, Felder normalisieren."""
