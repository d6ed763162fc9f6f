"""Employees module — the employee master record."""
