"""Roster API: CRUD over players and users backed by SQLAlchemy."""
