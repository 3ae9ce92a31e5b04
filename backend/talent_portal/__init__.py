"""Talent Portal search and contact-request API."""
